"""Partial updates to a Person.

Each field of an EditPersonDescriptor says what to do with the matching
Person field: leave it (`Untouched`), empty it (`Cleared`), or replace it
(`SetTo`). Keeping the three cases apart means "prefix not given" and
"prefix given with nothing after it" never get confused.
"""

from dataclasses import dataclass, fields, replace
from typing import Any, Generic, TypeVar

from networkbook.domain import (
    Course,
    Email,
    Graduation,
    Link,
    Name,
    Person,
    Phone,
    Priority,
    Specialisation,
    Tag,
    UniqueList,
)

T = TypeVar("T")


@dataclass(frozen=True)
class Untouched:
    """Keep the existing value."""


@dataclass(frozen=True)
class Cleared:
    """Remove the existing value: empty collection, or no value for an optional field."""


@dataclass(frozen=True)
class SetTo(Generic[T]):
    """Use this value."""

    value: T


FieldEdit = Untouched | Cleared | SetTo

UNTOUCHED = Untouched()
CLEARED = Cleared()


def _replaced(edit: FieldEdit, current: Any) -> Any:
    if isinstance(edit, SetTo):
        return edit.value.copy() if isinstance(edit.value, UniqueList) else edit.value
    if isinstance(edit, Cleared):
        return UniqueList() if isinstance(current, UniqueList) else None
    return current.copy() if isinstance(current, UniqueList) else current


def _appended(edit: FieldEdit, current: Any) -> Any:
    if isinstance(edit, SetTo) and isinstance(current, UniqueList):
        combined = current.copy()
        for item in edit.value:
            combined.add(item)
        return combined
    return _replaced(edit, current)


@dataclass
class EditPersonDescriptor:
    """Per-field edits to apply to a Person. Every field defaults to Untouched."""

    name: Untouched | SetTo[Name] = UNTOUCHED
    phones: Untouched | Cleared | SetTo[UniqueList[Phone]] = UNTOUCHED
    emails: Untouched | Cleared | SetTo[UniqueList[Email]] = UNTOUCHED
    links: Untouched | Cleared | SetTo[UniqueList[Link]] = UNTOUCHED
    graduation: Untouched | Cleared | SetTo[Graduation] = UNTOUCHED
    courses: Untouched | Cleared | SetTo[UniqueList[Course]] = UNTOUCHED
    specialisations: Untouched | Cleared | SetTo[UniqueList[Specialisation]] = UNTOUCHED
    tags: Untouched | Cleared | SetTo[UniqueList[Tag]] = UNTOUCHED
    priority: Untouched | Cleared | SetTo[Priority] = UNTOUCHED

    def edits(self) -> dict[str, FieldEdit]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def is_any_field_edited(self) -> bool:
        return any(not isinstance(edit, Untouched) for edit in self.edits().values())

    def edited_fields(self) -> list[str]:
        return [name for name, edit in self.edits().items() if not isinstance(edit, Untouched)]

    def apply_to(self, person: Person) -> Person:
        """
        Return a new Person with every edited field replaced.
        Untouched fields are carried over; collections on the result are fresh
        copies, so the new Person never shares a list with `person`.
        Raises ValueError if the edits leave the Person without a name.
        """
        changes = {
            name: _replaced(edit, getattr(person, name)) for name, edit in self.edits().items()
        }
        return replace(person, **changes)

    def add_to(self, person: Person) -> Person:
        """
        Return a new Person with collection values appended and single values replaced.
        Raises DuplicateElementError if an appended value is already on the Person.
        """
        changes = {
            name: _appended(edit, getattr(person, name)) for name, edit in self.edits().items()
        }
        return replace(person, **changes)
