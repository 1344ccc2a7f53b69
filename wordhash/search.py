"""Linear and binary search over a list of key/value items."""

from __future__ import annotations

import bisect
import sys
from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Item:
    """A string key paired with an integer value."""

    key: str
    value: int


SORTED_ITEMS: tuple[Item, ...] = (
    Item("bar", 42), Item("bazz", 36),
    Item("bob", 11), Item("buzz", 7),
    Item("foo", 10), Item("jane", 100),
    Item("x", 200),
)

UNSORTED_ITEMS: tuple[Item, ...] = (
    Item("foo", 10), Item("bar", 42),
    Item("bazz", 36), Item("buzz", 7),
    Item("bob", 11), Item("jane", 100),
    Item("x", 200),
)


def linear_search(items: Sequence[Item], key: str) -> Item | None:
    """Return the first item whose key equals ``key``, or None."""
    return next((item for item in items if item.key == key), None)


def binary_search(items: Sequence[Item], key: str) -> Item | None:
    """Return the item with ``key`` from ``items`` sorted by key, or None."""
    low, high = 0, len(items)
    while low < high:
        mid = low + (high - low) // 2
        probe = items[mid].key
        if probe == key:
            return items[mid]
        if probe < key:
            low = mid + 1
        else:
            high = mid
    return None


def _library_search(items: Sequence[Item], key: str) -> Item | None:
    index = bisect.bisect_left(items, key, key=lambda item: item.key)
    if index < len(items) and items[index].key == key:
        return items[index]
    return None


def main(argv: Sequence[str] | None = None) -> int:
    """Look up one key in the sorted table with both binary searches."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return 1
    key = args[0]

    found = _library_search(SORTED_ITEMS, key)
    if found is None:
        return 1
    print(f"bsearch: value of '{found.key}' is {found.value}")

    found = binary_search(SORTED_ITEMS, key)
    if found is None:
        return 1
    print(f"binary_search: value of '{found.key}' is {found.value}")
    return 0


def linear_main(argv: Sequence[str] | None = None) -> int:
    """Look up one key in the unsorted table with a linear search."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        return 1
    found = linear_search(UNSORTED_ITEMS, args[0])
    if found is None:
        return 1
    print(f"linear_search: value of '{found.key}' is {found.value}")
    return 0


if __name__ == "__main__":
    sys.exit(main())