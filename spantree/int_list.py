"""An integer list with sorting, search and removal operations."""

from __future__ import annotations

import argparse
import operator
from collections.abc import Iterable, Iterator


class IntList:
    """A sequence of integers with insertion at either end."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._items: list[int] = list(values)

    def append(self, value: int) -> None:
        self._items.append(value)

    def prepend(self, value: int) -> None:
        self._items.insert(0, value)

    def remove(self, value: int) -> bool:
        """Remove the first occurrence of ``value``; return whether one was found."""
        try:
            self._items.remove(value)
        except ValueError:
            return False
        return True

    def __getitem__(self, index: int) -> int:
        position = operator.index(index)
        if not 0 <= position < len(self._items):
            raise IndexError(f"index {position} out of range for list of size {len(self._items)}")
        return self._items[position]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[int]:
        return iter(self._items)

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()

    def sort_ascending(self) -> None:
        self._items.sort()

    def sort_descending(self) -> None:
        self._items.sort(reverse=True)

    def max(self) -> int:
        """Return the largest value; raise ValueError if the list is empty."""
        if not self._items:
            raise ValueError("list is empty")
        return max(self._items)

    def __str__(self) -> str:
        values = "".join(f"{value} " for value in self._items)
        return f"List (size {len(self._items)}): {values}"


def main(argv: list[str] | None = None) -> int:
    argparse.ArgumentParser(
        description="Demonstrate the integer list operations."
    ).parse_args(argv)

    numbers = IntList()
    for value in (5, 3, 9, 1):
        numbers.append(value)
    numbers.prepend(7)
    print(numbers)

    print(f"Value at index 2: {numbers[2]}")
    print(f"List size: {len(numbers)}")

    print("Removing value 3...")
    numbers.remove(3)
    print(numbers)

    print("Sorting ascending...")
    numbers.sort_ascending()
    print(numbers)

    print("Sorting descending...")
    numbers.sort_descending()
    print(numbers)

    print(f"Max value in list: {numbers.max()}")

    print("Clearing list...")
    numbers.clear()
    print(numbers)

    print("List is empty." if numbers.is_empty() else "List is not empty.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())