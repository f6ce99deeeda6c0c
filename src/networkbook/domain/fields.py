"""Field value types carried by a Person. Each type validates its own text on construction."""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar

_NAME_PATTERN = re.compile(r"[^\W_](?:[^\W_]|[ .'\-])*")
_PHONE_PATTERN = re.compile(r"[0-9]{3,}")
_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9-]*[A-Za-z0-9])?"
_EMAIL_PATTERN = re.compile(
    rf"[A-Za-z0-9]+(?:[+_.-][A-Za-z0-9]+)*@(?:{_LABEL}\.)+[A-Za-z0-9]{{2,}}"
)
_LINK_PATTERN = re.compile(
    rf"(?:https?://)?(?:{_LABEL}\.)+[A-Za-z]{{2,}}(?::[0-9]+)?(?:/\S*)?",
    re.IGNORECASE,
)
_TAG_PATTERN = re.compile(r"\S+")
_ACADEMIC_YEAR_PATTERN = re.compile(r"AY(\d{2})(\d{2})-S([12])", re.IGNORECASE)
_YEAR_PATTERN = re.compile(r"(?:19|20|21)\d{2}")


def _collapse_whitespace(text: str) -> str:
    return " ".join(text.split())


@dataclass(frozen=True)
class _TextValue:
    """
    Validated text wrapper.
    `value` is the cleaned display text; `key` is the normalized form used for
    equality and hashing, so two values that differ only in case compare equal.
    """

    value: str = field(compare=False)
    key: str = field(init=False, repr=False)

    MESSAGE_CONSTRAINTS: ClassVar[str] = "Value must be non-empty."

    def __post_init__(self):
        raw = self.value if isinstance(self.value, str) else ""
        value = self._clean(raw)
        if not self._is_valid(value):
            raise ValueError(self.MESSAGE_CONSTRAINTS)
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "key", self._normalize(value))

    @staticmethod
    def _clean(text: str) -> str:
        return text.strip()

    @classmethod
    def _is_valid(cls, value: str) -> bool:
        return bool(value)

    @staticmethod
    def _normalize(value: str) -> str:
        return value.casefold()

    def __str__(self) -> str:
        return self.value


class Name(_TextValue):
    MESSAGE_CONSTRAINTS = (
        "Names should start with a letter or digit, and may only contain letters, "
        "digits, spaces, apostrophes, hyphens and periods."
    )

    @staticmethod
    def _clean(text: str) -> str:
        return _collapse_whitespace(text)

    @classmethod
    def _is_valid(cls, value: str) -> bool:
        return _NAME_PATTERN.fullmatch(value) is not None


class Phone(_TextValue):
    MESSAGE_CONSTRAINTS = "Phone numbers should only contain digits, and be at least 3 digits long."

    @classmethod
    def _is_valid(cls, value: str) -> bool:
        return _PHONE_PATTERN.fullmatch(value) is not None

    @staticmethod
    def _normalize(value: str) -> str:
        return value


class Email(_TextValue):
    MESSAGE_CONSTRAINTS = (
        "Emails should be of the format local-part@domain. The local part may contain "
        "letters, digits and the characters +_.- (not at the start or end); the domain "
        "is made of labels separated by periods, the last one at least 2 characters long."
    )

    @classmethod
    def _is_valid(cls, value: str) -> bool:
        return _EMAIL_PATTERN.fullmatch(value) is not None


class Link(_TextValue):
    MESSAGE_CONSTRAINTS = (
        "Links should be web addresses such as github.com/alice or "
        "https://www.linkedin.com/in/alice, without spaces."
    )

    @classmethod
    def _is_valid(cls, value: str) -> bool:
        return _LINK_PATTERN.fullmatch(value) is not None


class Course(_TextValue):
    MESSAGE_CONSTRAINTS = "Course names should not be blank."

    @staticmethod
    def _clean(text: str) -> str:
        return _collapse_whitespace(text)


class Specialisation(_TextValue):
    MESSAGE_CONSTRAINTS = "Specialisations should not be blank."

    @staticmethod
    def _clean(text: str) -> str:
        return _collapse_whitespace(text)


class Tag(_TextValue):
    MESSAGE_CONSTRAINTS = "Tags should be a single word without spaces."

    @classmethod
    def _is_valid(cls, value: str) -> bool:
        return _TAG_PATTERN.fullmatch(value) is not None


@dataclass(frozen=True)
class Graduation:
    """
    Graduation semester, either `AYxxyy-Sn` (academic year xx/yy, semester n)
    or a plain four-digit calendar year.
    `year` is the calendar year the graduation falls in; for the academic-year
    form that is the year the academic year ends.
    """

    value: str = field(compare=False)
    year: int = field(init=False)
    semester: int | None = field(init=False)

    MESSAGE_CONSTRAINTS: ClassVar[str] = (
        "Graduation should be an academic year and semester such as AY2324-S1 "
        "(the second year must follow the first), or a year such as 2025."
    )

    def __post_init__(self):
        raw = (self.value if isinstance(self.value, str) else "").strip()
        academic = _ACADEMIC_YEAR_PATTERN.fullmatch(raw)
        if academic:
            start, end, semester = (int(g) for g in academic.groups())
            if (start + 1) % 100 != end:
                raise ValueError(self.MESSAGE_CONSTRAINTS)
            object.__setattr__(self, "value", raw.upper())
            object.__setattr__(self, "year", 2000 + start + 1)
            object.__setattr__(self, "semester", semester)
            return
        if _YEAR_PATTERN.fullmatch(raw):
            object.__setattr__(self, "value", raw)
            object.__setattr__(self, "year", int(raw))
            object.__setattr__(self, "semester", None)
            return
        raise ValueError(self.MESSAGE_CONSTRAINTS)

    @property
    def sort_key(self) -> tuple[int, int]:
        # A bare year sorts after both semesters of that year.
        return (self.year, self.semester if self.semester is not None else 3)

    def full_string(self) -> str:
        if self.semester is None:
            return str(self.year)
        return f"AY{self.year - 1}/{self.year} Semester {self.semester}"

    def __str__(self) -> str:
        return self.value


class Priority(Enum):
    """Contact priority. Accepts the full level name or its first letter, in any case."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            text = value.strip().lower()
            for member in cls:
                if text and text in (member.value, member.value[0]):
                    return member
        return None

    @property
    def rank(self) -> int:
        return list(Priority).index(self)

    def __str__(self) -> str:
        return self.value


PRIORITY_MESSAGE_CONSTRAINTS = "Priority should be one of high, medium or low (or h, m, l)."
