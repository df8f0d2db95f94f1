"""
ItemList: a small list of strings with add-if-absent, prefix transform and
bounds-checked lookup.
"""

import logging
import sys
from typing import Iterable, Optional, TextIO

logger = logging.getLogger(__name__)


class ItemList:
    """
    List of strings seeded from an optional iterable.

    Examples:
        items = ItemList(["apple", "banana", "cherry"])
        items.add_if_not_exists("date")   # (3, True)
        items.add_if_not_exists("date")   # (3, False)
        items.transform_all("fruit: ")
        items.get_at(1)                   # "fruit: banana"
        items.get_at(10)                  # None
    """

    def __init__(self, items: Optional[Iterable[str]] = None):
        self._data: list[str] = list(items) if items is not None else []

    def size(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def transform_all(self, prefix: str) -> None:
        """Prepend ``prefix`` to every item, in place."""
        self._data[:] = [prefix + item for item in self._data]

    def add_if_not_exists(self, item: str) -> tuple[int, bool]:
        """
        Append ``item`` unless it is already present.

        Returns:
            (index, added): the new index and True if appended, otherwise
            the index of the existing item and False.
        """
        try:
            return self._data.index(item), False
        except ValueError:
            self._data.append(item)
            logger.debug("Added %r at index %d", item, len(self._data) - 1)
            return len(self._data) - 1, True

    def get_at(self, index: int) -> Optional[str]:
        """Return the item at ``index``, or None if it is out of range."""
        if 0 <= index < len(self._data):
            return self._data[index]
        return None

    def lines(self) -> list[str]:
        return list(self._data)

    def print(self, file: Optional[TextIO] = None) -> None:
        out = file if file is not None else sys.stdout
        for item in self._data:
            print(item, file=out)

    def __repr__(self) -> str:
        return f"ItemList({self._data!r})"
