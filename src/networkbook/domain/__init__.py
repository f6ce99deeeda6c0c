"""Domain layer: entities and value objects. No dependencies on outer layers."""

from networkbook.domain.entities import Person
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
from networkbook.domain.unique_list import DuplicateElementError, UniqueList

__all__ = [
    "Course",
    "DuplicateElementError",
    "Email",
    "Graduation",
    "Link",
    "Name",
    "Person",
    "Phone",
    "Priority",
    "Specialisation",
    "Tag",
    "UniqueList",
]
