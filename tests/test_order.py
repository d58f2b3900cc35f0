from bstdict.order import main, order_lines


def test_order_lines_example():
    assert order_lines(["c", "a", "b"]) == "a : 2\nb : 3\nc : 1\n\nc\na\nb\n\n"


def test_duplicate_line_keeps_last_number():
    assert order_lines(["x", "x"]) == "x : 2\n\nx\n\n"


def test_empty_input():
    assert order_lines([]) == "\n\n"


def test_main_writes_report(tmp_path):
    lines = ["pear", "apple", "fig", "apple"]
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    src.write_text("\n".join(lines) + "\n", encoding="utf-8")
    assert main([str(src), str(dst)]) == 0
    assert dst.read_text(encoding="utf-8") == order_lines(lines)


def test_main_trailing_newline_optional(tmp_path):
    with_nl = tmp_path / "a.txt"
    without_nl = tmp_path / "b.txt"
    with_nl.write_text("one\ntwo\n", encoding="utf-8")
    without_nl.write_text("one\ntwo", encoding="utf-8")
    out_a = tmp_path / "oa.txt"
    out_b = tmp_path / "ob.txt"
    assert main([str(with_nl), str(out_a)]) == 0
    assert main([str(without_nl), str(out_b)]) == 0
    assert out_a.read_text(encoding="utf-8") == out_b.read_text(encoding="utf-8")
    assert out_a.read_text(encoding="utf-8") == order_lines(["one", "two"])


def test_main_keeps_blank_lines_as_keys(tmp_path):
    src = tmp_path / "in.txt"
    dst = tmp_path / "out.txt"
    src.write_text("b\n\na\n", encoding="utf-8")
    assert main([str(src), str(dst)]) == 0
    assert dst.read_text(encoding="utf-8") == order_lines(["b", "", "a"])


def test_main_wrong_argument_count(capsys):
    assert main(["only-one"]) == 1
    assert "Usage:" in capsys.readouterr().err


def test_main_missing_input(tmp_path, capsys):
    missing = tmp_path / "nope.txt"
    assert main([str(missing), str(tmp_path / "out.txt")]) == 1
    err = capsys.readouterr().err
    assert f"Unable to open file {missing} for reading" in err


def test_main_unwritable_output(tmp_path, capsys):
    src = tmp_path / "in.txt"
    src.write_text("a\n", encoding="utf-8")
    bad = tmp_path / "no-such-dir" / "out.txt"
    assert main([str(src), str(bad)]) == 1
    assert "for writing" in capsys.readouterr().err