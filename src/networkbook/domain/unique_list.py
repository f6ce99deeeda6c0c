"""Ordered collection that rejects duplicate elements."""

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class DuplicateElementError(ValueError):
    """Raised when an element equal to an existing one is added."""

    def __init__(self, element: object) -> None:
        super().__init__(f"Duplicate value: {element}")
        self.element = element


class UniqueList(Generic[T]):
    """
    List of distinct elements kept in insertion order.
    Used for every multi-valued Person field. Elements are compared with `==`,
    so uniqueness follows each field type's own normalization.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        self._items: list[T] = []
        for item in items:
            self.add(item)

    def add(self, item: T) -> None:
        """Append item. Raises DuplicateElementError if an equal element is present."""
        if item in self._items:
            raise DuplicateElementError(item)
        self._items.append(item)

    def set_items(self, items: Iterable[T]) -> None:
        """Replace all elements. Leaves the list unchanged if items contains duplicates."""
        replacement = UniqueList(items)
        self._items = replacement._items

    def contains(self, item: T) -> bool:
        return item in self._items

    def is_empty(self) -> bool:
        return not self._items

    def copy(self) -> "UniqueList[T]":
        return UniqueList(self._items)

    def as_list(self) -> list[T]:
        return list(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UniqueList):
            return NotImplemented
        return self._items == other._items

    def __repr__(self) -> str:
        return f"UniqueList({self._items!r})"
