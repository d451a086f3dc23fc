"""A growable list of strings with lookup and deletion by value."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

__all__ = ["StringList"]


class StringList:
    """An ordered list of strings."""

    def __init__(self, items: Iterable[str] = ()) -> None:
        self._items: list[str] = list(items)

    def add(self, name: str) -> None:
        """Append *name* to the list."""
        self._items.append(name)

    def find(self, name: str) -> str | None:
        """Return the first stored string equal to *name*, or ``None``."""
        for item in self._items:
            if item == name:
                return item
        return None

    def delete(self, name: str) -> None:
        """Remove the first string equal to *name*.

        Raises :class:`KeyError` when it is not in the list.
        """
        try:
            self._items.remove(name)
        except ValueError:
            raise KeyError(name) from None

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __contains__(self, name: object) -> bool:
        return name in self._items

    def __getitem__(self, index: int) -> str:
        return self._items[index]

    def __repr__(self) -> str:
        return f"StringList({self._items!r})"