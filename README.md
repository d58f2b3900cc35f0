# bstdict

`bstdict` provides `Dictionary`, an ordered mapping kept in an unbalanced
binary search tree. Keys must be comparable with `<` and `==`, and they are
always visited in sorted order. The dictionary also has a cursor that can walk
the keys forward or backward.

The package also has a small command, `bstdict-order`. It reads a text file and
writes its lines in sorted order.

## Installation

```
pip install .
```

To install the test requirements as well:

```
pip install .[test]
```

## Using the dictionary

```python
from bstdict.dictionary import Dictionary

d = Dictionary()
d["pear"] = 1
d["apple"] = 2
d["plum"] = 3

len(d)              # 3
"apple" in d        # True
d["apple"]          # 2
list(d)             # ['apple', 'pear', 'plum']
list(reversed(d))   # ['plum', 'pear', 'apple']
list(d.items())     # [('apple', 2), ('pear', 1), ('plum', 3)]

print(d, end="")
# apple : 2
# pear : 1
# plum : 3

print(d.pre_string(), end="")   # keys in pre-order tree walk
# pear
# apple
# plum

del d["pear"]
d.clear()           # remove every pair
```

- Assigning to a key that is already present replaces its value. The tree shape
  stays the same.
- Looking up or deleting a missing key raises `KeyError`.
- `str(d)` gives one `key : value` line per pair, in key order, and each line
  ends with a newline.
- `d.pre_string()` gives the keys in pre-order, each followed by a newline.

To copy a dictionary, use `Dictionary(other)` or `copy.copy(d)`. The copy has the
same tree shape, so its `pre_string()` matches the original's. Two dictionaries
are equal when they hold the same key–value pairs in the same key order. Their
tree shapes may differ. Dictionaries cannot be hashed.

### The cursor

```python
d.begin()                     # move to the smallest key
while d.has_current():
    print(d.current_key(), d.current_value())
    d.next()

d.end()                       # move to the largest key
d.set_current_value(10)       # change the value under the cursor
d.prev()
```

The cursor becomes undefined in these cases:

- `next()` moves past the last key.
- `prev()` moves before the first key.
- The key under the cursor is deleted.
- `clear()` is called.

Calling `begin()` or `end()` on an empty dictionary does nothing. Calling
`next()` or `prev()` while the cursor is undefined also does nothing. Calling
`current_key()`, `current_value()` or `set_current_value()` while the cursor is
undefined raises `LookupError`.

## The `bstdict-order` command

```
bstdict-order <input file> <output file>
```

Each line of the input file becomes a key, and its line number becomes the
value. Numbering starts at 1. If a line appears more than once, it keeps the
number of its last appearance.

Lines are split on `\n` only. A trailing newline at the end of the file does not
add an empty line.

The output file holds two blocks, each followed by an empty line:

1. every `line : number` pair, in sorted order;
2. the keys, in the order of a pre-order tree walk.

The command exits with status 1 and a message on standard error in these cases:

- it gets the wrong number of arguments;
- the input file cannot be read;
- the output file cannot be written.

Otherwise it exits with status 0.

From Python, `bstdict.order.order_lines(lines)` returns the same text for any
iterable of lines. `bstdict.order.main(argv)` runs the command with the given
argument list.