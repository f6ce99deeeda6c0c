"""Convert raw argument strings into validated values. All functions are pure."""

import re
from collections.abc import Callable, Sequence
from enum import Enum
from typing import TypeVar

from networkbook.application.cli_syntax import FilterField, SortField, SortOrder
from networkbook.application.errors import DuplicateValue, InvalidFieldFormat
from networkbook.domain import (
    Course,
    DuplicateElementError,
    Email,
    Graduation,
    Link,
    Name,
    Phone,
    Priority,
    Specialisation,
    Tag,
    UniqueList,
)
from networkbook.domain.fields import PRIORITY_MESSAGE_CONSTRAINTS

T = TypeVar("T")
E = TypeVar("E", bound=Enum)

MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."
MESSAGE_INVALID_BOOLEAN = "Value should be either true or false."

_INDEX_PATTERN = re.compile(r"[0-9]+")


def parse_index(text: str) -> int:
    """Parse a 1-based index. Leading and trailing whitespace is ignored."""
    trimmed = (text or "").strip()
    if not _INDEX_PATTERN.fullmatch(trimmed) or int(trimmed) == 0:
        raise InvalidFieldFormat(MESSAGE_INVALID_INDEX)
    return int(trimmed)


def _parse_value(raw: str, field_type: Callable[[str], T]) -> T:
    try:
        return field_type(raw)
    except ValueError as e:
        raise InvalidFieldFormat(str(e)) from e


def parse_name(raw: str) -> Name:
    return _parse_value(raw, Name)


def parse_phone(raw: str) -> Phone:
    return _parse_value(raw, Phone)


def parse_email(raw: str) -> Email:
    return _parse_value(raw, Email)


def parse_link(raw: str) -> Link:
    return _parse_value(raw, Link)


def parse_graduation(raw: str) -> Graduation:
    return _parse_value(raw, Graduation)


def parse_course(raw: str) -> Course:
    return _parse_value(raw, Course)


def parse_specialisation(raw: str) -> Specialisation:
    return _parse_value(raw, Specialisation)


def parse_tag(raw: str) -> Tag:
    return _parse_value(raw, Tag)


def parse_priority(raw: str) -> Priority:
    try:
        return Priority(raw)
    except ValueError as e:
        raise InvalidFieldFormat(PRIORITY_MESSAGE_CONSTRAINTS) from e


def is_clear_request(raws: Sequence[str]) -> bool:
    """True when raws is exactly one empty value, i.e. the prefix was given with nothing after it."""
    return len(raws) == 1 and raws[0].strip() == ""


def _parse_all(
    raws: Sequence[str], parse_one: Callable[[str], T], label: str
) -> UniqueList[T]:
    values: UniqueList[T] = UniqueList()
    if is_clear_request(raws):
        return values
    for raw in raws:
        value = parse_one(raw)
        try:
            values.add(value)
        except DuplicateElementError as e:
            raise DuplicateValue(f"Duplicate {label} given: {value}") from e
    return values


def parse_phones(raws: Sequence[str]) -> UniqueList[Phone]:
    return _parse_all(raws, parse_phone, "phone")


def parse_emails(raws: Sequence[str]) -> UniqueList[Email]:
    return _parse_all(raws, parse_email, "email")


def parse_links(raws: Sequence[str]) -> UniqueList[Link]:
    return _parse_all(raws, parse_link, "link")


def parse_courses(raws: Sequence[str]) -> UniqueList[Course]:
    return _parse_all(raws, parse_course, "course")


def parse_specialisations(raws: Sequence[str]) -> UniqueList[Specialisation]:
    return _parse_all(raws, parse_specialisation, "specialisation")


def parse_tags(raws: Sequence[str]) -> UniqueList[Tag]:
    return _parse_all(raws, parse_tag, "tag")


def _parse_choice(raw: str, choices: type[E], label: str) -> E:
    try:
        return choices((raw or "").strip().lower())
    except ValueError as e:
        allowed = ", ".join(c.value for c in choices)
        raise InvalidFieldFormat(f"{label} should be one of: {allowed}.") from e


def parse_sort_field(raw: str) -> SortField:
    return _parse_choice(raw, SortField, "Sort field")


def parse_sort_order(raw: str) -> SortOrder:
    return _parse_choice(raw, SortOrder, "Sort order")


def parse_filter_field(raw: str) -> FilterField:
    return _parse_choice(raw, FilterField, "Filter field")


def parse_boolean(raw: str) -> bool:
    text = (raw or "").strip().lower()
    if text == "true":
        return True
    if text == "false":
        return False
    raise InvalidFieldFormat(MESSAGE_INVALID_BOOLEAN)
