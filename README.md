# wordhash

A small library of hashing and lookup building blocks:

- `wordhash.fnv`: the 32-bit and 64-bit FNV-1a hashes, plus XOR folding
  of a hash down to a narrower bit width.
- `wordhash.table`: `HashTable`, an open-addressing table that uses FNV-1a
  and linear probing, with helpers to split text into words and build a
  table that maps each word to its length.
- `wordhash.search`: linear and binary search over a sequence of `Item`
  key/value pairs.

## Installation

```
pip install .
```

Install with the `test` extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Hashing

```python
from wordhash.fnv import fnv1a_32, fnv1a_64, xor_fold

h = fnv1a_32(b"Hello, World!")
print(hex(h))
print(hex(xor_fold(h, 24)))   # (h >> 24) ^ (h & 0xffffff)
print(hex(fnv1a_64("Hello, World!")))
```

`fnv1a_32` and `fnv1a_64` take bytes-like data or a string; a string is
hashed as its UTF-8 bytes. `xor_fold(value, bits)` raises `ValueError` if
`bits` is not positive or `value` is negative.

## Word table

```python
from wordhash.table import HashTable, build_word_table, words

table = HashTable(256)
table.insert("water", 5)
print(table.get("water"))     # 5
print(table.get("fire"))      # None
print("fire" in table)        # False
print(len(table), table.capacity, table.load())

table.insert("water", 99)     # key already present: the first value stays
print(table.get("water"))     # 5

print(list(words("to be\tor\nnot")))   # ['to', 'be', 'or', 'not']
counts = build_word_table("to be or not to be")
print(counts.get("not"))      # 3
```

`HashTable(capacity=256)` raises `ValueError` for a capacity that is not
positive. `insert` does not grow the table by itself: `needs_to_expand()`
reports when the load is above 0.7, and `expand()` doubles the capacity and
rehashes every entry. Inserting a new key into a table with no free slot
raises `OverflowError`.

`words` splits text on spaces, tabs and newlines only. `build_word_table`
expands the table whenever it needs to before each insertion, and stores
each distinct word with its length in UTF-8 bytes as its value.

The table has no way to remove or replace an entry.

## Searching

```python
from wordhash.search import Item, binary_search, linear_search

items = [Item("bar", 42), Item("foo", 10), Item("x", 200)]
print(linear_search(items, "foo"))   # Item(key='foo', value=10)
print(binary_search(items, "x"))     # items must be sorted by key
print(binary_search(items, "y"))     # None
```

## Commands

```
wordhash [PATH [KEY]]
wordhash-bsearch KEY
wordhash-lsearch KEY
```

`wordhash` reads the text file `PATH` (default `share/shakespeare.txt`),
builds a word table from it and reports the value stored for `KEY`
(default `water`), or that the key does not exist in the table. It exits
with status 1 if the file cannot be read.

`wordhash-bsearch` looks up `KEY` in a small built-in table sorted by key,
once with the standard library's bisection and once with `binary_search`,
printing a line for each. `wordhash-lsearch` looks up `KEY` in an unsorted
built-in table with `linear_search`. Both exit with status 1 when the key
is missing or when they are not given exactly one argument.