"""Command-line syntax: argument prefixes and the keyword arguments some commands accept."""

from enum import Enum


class Prefix(Enum):
    """Marker that introduces an argument value, e.g. `p/` in `p/91234567`."""

    NAME = "n/"
    PHONE = "p/"
    EMAIL = "e/"
    LINK = "l/"
    GRADUATION = "g/"
    COURSE = "c/"
    SPECIALISATION = "s/"
    TAG = "t/"
    PRIORITY = "pr/"
    FIELD = "by/"
    ORDER = "order/"
    FINISHED = "fin/"

    def __str__(self) -> str:
        return self.value


# Prefixes that describe a Person, in display order.
PERSON_PREFIXES = (
    Prefix.NAME,
    Prefix.PHONE,
    Prefix.EMAIL,
    Prefix.LINK,
    Prefix.GRADUATION,
    Prefix.COURSE,
    Prefix.SPECIALISATION,
    Prefix.TAG,
    Prefix.PRIORITY,
)

# Person prefixes that hold a single value and may appear at most once.
SINGLE_VALUED_PREFIXES = (Prefix.NAME, Prefix.GRADUATION, Prefix.PRIORITY)


class SortField(Enum):
    NAME = "name"
    GRADUATION = "grad"
    PRIORITY = "priority"


class SortOrder(Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


class FilterField(Enum):
    COURSE = "course"
    SPECIALISATION = "spec"
    GRADUATION = "grad"
