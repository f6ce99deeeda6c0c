"""User-facing messages and plain-text rendering of persons."""

from collections.abc import Iterable, Sequence

from networkbook.domain import Person

MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{}"
MESSAGE_INVALID_PERSON_DISPLAYED_INDEX = "The person index provided is invalid"
MESSAGE_PERSONS_LISTED_OVERVIEW = "{} persons listed!"
MESSAGE_DUPLICATE_PERSON = "This person already exists in the network book"

EMPTY_FIELD = "-"

PHONES_HEADER = "Phones: "
EMAILS_HEADER = "Emails: "
LINKS_HEADER = "Links: "
GRADUATION_HEADER = "Graduation: "
COURSES_HEADER = "Courses: "
SPECIALISATIONS_HEADER = "Specialisations: "
TAGS_HEADER = "Tags: "
PRIORITY_HEADER = "Priority: "


def _joined(values: Iterable[object]) -> str:
    text = ", ".join(str(v) for v in values)
    return text or EMPTY_FIELD


def _field_lines(person: Person) -> list[str]:
    graduation = person.graduation.full_string() if person.graduation else EMPTY_FIELD
    priority = str(person.priority) if person.priority else EMPTY_FIELD
    return [
        PHONES_HEADER + _joined(person.phones),
        EMAILS_HEADER + _joined(person.emails),
        LINKS_HEADER + _joined(person.links),
        GRADUATION_HEADER + graduation,
        COURSES_HEADER + _joined(person.courses),
        SPECIALISATIONS_HEADER + _joined(person.specialisations),
        TAGS_HEADER + _joined(person.tags),
        PRIORITY_HEADER + priority,
    ]


def format_person(person: Person) -> str:
    """One-line summary used in command feedback."""
    return "; ".join([str(person.name), *_field_lines(person)])


def format_person_card(person: Person, displayed_index: int) -> str:
    """Multi-line card: numbered name, then one header line per field."""
    return "\n".join([f"{displayed_index}. {person.name}", *_field_lines(person)])


def format_person_list(persons: Sequence[Person]) -> str:
    if not persons:
        return "No persons to show."
    return "\n\n".join(format_person_card(p, i) for i, p in enumerate(persons, start=1))
