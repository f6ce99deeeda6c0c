"""Application ports (interfaces). Implemented by infrastructure adapters."""

from collections.abc import Callable
from typing import Any, Protocol

from networkbook.domain import Person


class Model(Protocol):
    """
    In-memory state the commands act on: the full person list plus the
    displayed view (filter predicate and sort order applied on read).
    """

    def get_person_list(self) -> list[Person]:
        """Return every person in insertion order."""
        ...

    def get_filtered_person_list(self) -> list[Person]:
        """Return the displayed persons. Indices in commands refer to this list."""
        ...

    def has_person(self, person: Person) -> bool:
        """Return True if a person with the same identity is in the book."""
        ...

    def add_person(self, person: Person) -> None:
        ...

    def set_person(self, target: Person, edited: Person) -> None:
        """Replace target with edited at the same position. Raises ValueError if target is absent."""
        ...

    def delete_person(self, target: Person) -> None:
        """Raises ValueError if target is absent."""
        ...

    def set_persons(self, persons: list[Person]) -> None:
        """Replace the whole book."""
        ...

    def update_filtered_person_list(self, predicate: Callable[[Person], bool]) -> None:
        ...

    def sort_filtered_person_list(
        self, key: Callable[[Person], Any] | None, reverse: bool = False
    ) -> None:
        """Sort the displayed list by key. Persons whose key is None always go last."""
        ...


class NetworkBookStorage(Protocol):
    """Persists the person list."""

    def load(self) -> list[Person]:
        """Return the stored persons, or an empty list if nothing is stored yet."""
        ...

    def save(self, persons: list[Person]) -> None:
        ...
