"""Domain entity: Person, the aggregate stored in the network book."""

from dataclasses import dataclass, field

from networkbook.domain.fields import (
    Course,
    Email,
    Graduation,
    Link,
    Name,
    Phone,
    Priority,
    Specialisation,
    Tag,
)
from networkbook.domain.unique_list import UniqueList


@dataclass(frozen=True)
class Person:
    """
    Represents a contact in the network book.
    A Person cannot exist without a Name; every other field may be empty.
    Persons are replaced, never mutated: an edit builds a new Person.
    """

    name: Name
    phones: UniqueList[Phone] = field(default_factory=UniqueList)
    emails: UniqueList[Email] = field(default_factory=UniqueList)
    links: UniqueList[Link] = field(default_factory=UniqueList)
    graduation: Graduation | None = None
    courses: UniqueList[Course] = field(default_factory=UniqueList)
    specialisations: UniqueList[Specialisation] = field(default_factory=UniqueList)
    tags: UniqueList[Tag] = field(default_factory=UniqueList)
    priority: Priority | None = None

    def __post_init__(self):
        if not isinstance(self.name, Name):
            raise ValueError("Person must have a name.")

    def is_same_person(self, other: "Person | None") -> bool:
        """Two persons are the same contact when their names match, ignoring case."""
        if other is None:
            return False
        return self.name == other.name
