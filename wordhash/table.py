"""Open-addressing hash table keyed by words, with a word-length counter."""

from __future__ import annotations

import re
import sys
from typing import Iterator, Sequence

from wordhash.fnv import fnv1a_32

LOAD_FACTOR = 0.7
SCALE_FACTOR = 2
DEFAULT_CAPACITY = 256
DEFAULT_PATH = "share/shakespeare.txt"
DEFAULT_KEY = "water"

_WORD = re.compile(r"[^ \t\n]+")


def _hash(key: str) -> int:
    return fnv1a_32(key)


class HashTable:
    """Hash table using FNV-1a and linear probing; the first value for a key wins."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._slots: list[tuple[str, int] | None] = [None] * capacity
        self._count = 0

    @property
    def capacity(self) -> int:
        """Number of slots in the table."""
        return len(self._slots)

    def __len__(self) -> int:
        return self._count

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self._find(key) is not None

    def load(self) -> float:
        """Return the fraction of slots in use."""
        return self._count / self.capacity

    def needs_to_expand(self) -> bool:
        """Return True when the load exceeds the load factor."""
        return self.load() > LOAD_FACTOR

    def _probe(self, key: str, slots: list[tuple[str, int] | None]) -> Iterator[int]:
        size = len(slots)
        start = _hash(key) % size
        return ((start + step) % size for step in range(size))

    def _find(self, key: str) -> int | None:
        for index in self._probe(key, self._slots):
            slot = self._slots[index]
            if slot is None:
                return None
            if slot[0] == key:
                return index
        return None

    def insert(self, key: str, value: int) -> None:
        """Store ``value`` under ``key`` unless the key is already present."""
        if self._place(self._slots, key, value):
            self._count += 1

    def _place(self, slots: list[tuple[str, int] | None], key: str, value: int) -> bool:
        for index in self._probe(key, slots):
            slot = slots[index]
            if slot is None:
                slots[index] = (key, value)
                return True
            if slot[0] == key:
                return False
        raise OverflowError("hash table is full")

    def get(self, key: str) -> int | None:
        """Return the value stored under ``key``, or None if absent."""
        index = self._find(key)
        if index is None:
            return None
        slot = self._slots[index]
        assert slot is not None
        return slot[1]

    def expand(self) -> None:
        """Grow the table by the scale factor and rehash every entry."""
        new_slots: list[tuple[str, int] | None] = [None] * (self.capacity * SCALE_FACTOR)
        for slot in self._slots:
            if slot is not None:
                self._place(new_slots, *slot)
        self._slots = new_slots


def words(text: str) -> Iterator[str]:
    """Yield the runs of text separated by spaces, tabs and newlines."""
    return (match.group() for match in _WORD.finditer(text))


def build_word_table(text: str) -> HashTable:
    """Map each distinct word of ``text`` to its length in bytes."""
    table = HashTable()
    for word in words(text):
        if table.needs_to_expand():
            table.expand()
        table.insert(word, len(word.encode("utf-8", "surrogateescape")))
    return table


def main(argv: Sequence[str] | None = None) -> int:
    """Build a word table from a file and look up one key: [path [key]]."""
    args = list(sys.argv[1:] if argv is None else argv)
    path = args[0] if args else DEFAULT_PATH
    key = args[1] if len(args) > 1 else DEFAULT_KEY
    try:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as fin:
            text = fin.read()
    except OSError:
        print(f"Failed to read {path}", file=sys.stderr)
        return 1

    table = build_word_table(text)
    value = table.get(key)
    if value is None:
        print(f'The key "{key}" does not exist in the table')
    else:
        print(f'The key "{key}" is associated with the value {value}')
    return 0


if __name__ == "__main__":
    sys.exit(main())