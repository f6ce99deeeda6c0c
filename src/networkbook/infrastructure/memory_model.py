"""In-memory implementation of Model (no DB)."""

from collections.abc import Callable
from typing import Any

from networkbook.domain import Person


def _show_all(_person: Person) -> bool:
    return True


class InMemoryModel:
    """
    Stores persons in memory. Order preserved by insertion.
    The displayed list is recomputed on every read from the current predicate
    and sort key, so edits show up in an active find or sort immediately.
    """

    def __init__(self, persons: list[Person] | None = None) -> None:
        self._persons: list[Person] = []
        self._predicate: Callable[[Person], bool] = _show_all
        self._sort_key: Callable[[Person], Any] | None = None
        self._reverse = False
        self.set_persons(persons or [])

    def _position_of(self, target: Person) -> int:
        for i, person in enumerate(self._persons):
            if person is target:
                return i
        for i, person in enumerate(self._persons):
            if person == target:
                return i
        raise ValueError(f"Person not found: {target.name}")

    def get_person_list(self) -> list[Person]:
        return list(self._persons)

    def get_filtered_person_list(self) -> list[Person]:
        shown = [p for p in self._persons if self._predicate(p)]
        if self._sort_key is None:
            return shown
        key = self._sort_key
        with_key = [p for p in shown if key(p) is not None]
        without_key = [p for p in shown if key(p) is None]
        return sorted(with_key, key=key, reverse=self._reverse) + without_key

    def has_person(self, person: Person) -> bool:
        return any(p.is_same_person(person) for p in self._persons)

    def add_person(self, person: Person) -> None:
        self._persons.append(person)

    def set_person(self, target: Person, edited: Person) -> None:
        self._persons[self._position_of(target)] = edited

    def delete_person(self, target: Person) -> None:
        del self._persons[self._position_of(target)]

    def set_persons(self, persons: list[Person]) -> None:
        self._persons = list(persons)

    def update_filtered_person_list(self, predicate: Callable[[Person], bool]) -> None:
        self._predicate = predicate

    def sort_filtered_person_list(
        self, key: Callable[[Person], Any] | None, reverse: bool = False
    ) -> None:
        self._sort_key = key
        self._reverse = reverse
