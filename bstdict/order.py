"""Read lines from a file and write them sorted, with their line numbers."""

from __future__ import annotations

import sys
from typing import Iterable, Optional, Sequence

from bstdict.dictionary import Dictionary


def order_lines(lines: Iterable[str]) -> str:
    """Return the report for the given lines.

    Each line becomes a key whose value is its (last) 1-based line number.
    The report holds the in-order listing, a newline, the pre-order key
    listing and a final newline.
    """
    table = Dictionary()
    for number, line in enumerate(lines, 1):
        table[line] = number
    return f"{table}\n{table.pre_string()}\n"


def _split_lines(text: str) -> list:
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 2:
        print(f"Usage: {sys.argv[0]} <input file> <output file>", file=sys.stderr)
        return 1
    in_path, out_path = args
    try:
        with open(in_path, encoding="utf-8", newline="") as source:
            text = source.read()
    except OSError:
        print(f"Unable to open file {in_path} for reading", file=sys.stderr)
        return 1
    try:
        with open(out_path, "w", encoding="utf-8", newline="") as target:
            target.write(order_lines(_split_lines(text)))
    except OSError:
        print(f"Unable to open file {out_path} for writing", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())