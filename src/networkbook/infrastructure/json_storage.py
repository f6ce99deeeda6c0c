"""JSON file implementation of NetworkBookStorage."""

import json
import logging
from pathlib import Path
from typing import Any

from networkbook.application.errors import DataLoadingError
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

logger = logging.getLogger(__name__)


def person_to_dict(person: Person) -> dict[str, Any]:
    return {
        "name": person.name.value,
        "phones": [p.value for p in person.phones],
        "emails": [e.value for e in person.emails],
        "links": [link.value for link in person.links],
        "graduation": person.graduation.value if person.graduation else None,
        "courses": [c.value for c in person.courses],
        "specialisations": [s.value for s in person.specialisations],
        "tags": [t.value for t in person.tags],
        "priority": person.priority.value if person.priority else None,
    }


def person_from_dict(data: dict[str, Any]) -> Person:
    """Build a Person from stored data. Raises ValueError on invalid or duplicate values."""
    graduation = data.get("graduation")
    priority = data.get("priority")
    return Person(
        name=Name(data.get("name") or ""),
        phones=UniqueList(Phone(v) for v in data.get("phones") or []),
        emails=UniqueList(Email(v) for v in data.get("emails") or []),
        links=UniqueList(Link(v) for v in data.get("links") or []),
        graduation=Graduation(graduation) if graduation else None,
        courses=UniqueList(Course(v) for v in data.get("courses") or []),
        specialisations=UniqueList(Specialisation(v) for v in data.get("specialisations") or []),
        tags=UniqueList(Tag(v) for v in data.get("tags") or []),
        priority=Priority(priority) if priority else None,
    )


class JsonNetworkBookStorage:
    """Stores the person list as {"persons": [...]} in one UTF-8 JSON file."""

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Person]:
        if not self._path.exists():
            logger.info("No data file at %s, starting with an empty network book", self._path)
            return []
        try:
            obj = json.loads(self._path.read_text(encoding="utf-8"))
            persons = [person_from_dict(item) for item in obj.get("persons") or []]
        except (OSError, ValueError, TypeError, AttributeError) as e:
            raise DataLoadingError(f"Data file {self._path} could not be loaded: {e}") from e

        seen: list[Person] = []
        for person in persons:
            if any(p.is_same_person(person) for p in seen):
                raise DataLoadingError(
                    f"Data file {self._path} contains duplicate person: {person.name}"
                )
            seen.append(person)
        logger.info("Loaded %d persons from %s", len(persons), self._path)
        return persons

    def save(self, persons: list[Person]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        obj = {"persons": [person_to_dict(p) for p in persons]}
        self._path.write_text(json.dumps(obj, indent=2), encoding="utf-8")
        logger.debug("Saved %d persons to %s", len(persons), self._path)
