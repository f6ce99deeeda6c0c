"""Tests for Person field value types: validation and normalized equality."""

import pytest

from networkbook.domain import (
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


def test_name_collapses_whitespace_and_ignores_case() -> None:
    assert Name("  Alice   Tan ").value == "Alice Tan"
    assert Name("alice tan") == Name("ALICE TAN")
    assert hash(Name("alice tan")) == hash(Name("Alice Tan"))
    assert str(Name("O'Brien-Smith Jr.")) == "O'Brien-Smith Jr."


@pytest.mark.parametrize("raw", ["", "   ", "@lice", "Alice*", "-Alice"])
def test_name_rejects_invalid(raw: str) -> None:
    with pytest.raises(ValueError, match="Names should"):
        Name(raw)


def test_phone_digits_only_at_least_three() -> None:
    assert Phone(" 91234567 ").value == "91234567"
    assert Phone("999") == Phone("999")
    for raw in ("", "12", "12a45", "+6591234567", "9123 4567"):
        with pytest.raises(ValueError, match="Phone numbers"):
            Phone(raw)


def test_email_format_and_case_insensitive_equality() -> None:
    assert Email("alice@x.com").value == "alice@x.com"
    assert Email("Alice@X.com") == Email("alice@x.com")
    assert Email("Alice@X.com").value == "Alice@X.com"
    assert Email("john.doe+work@mail.example.org")
    for raw in ("alice", "alice@", "@x.com", "alice@x.c", ".alice@x.com", "alice@@x.com"):
        with pytest.raises(ValueError, match="Emails"):
            Email(raw)


def test_link_accepts_web_addresses() -> None:
    assert Link("github.com/alice").value == "github.com/alice"
    assert Link("https://www.linkedin.com/in/alice-tan")
    assert Link("HTTPS://GitHub.com/Alice") == Link("https://github.com/alice")
    for raw in ("not a link", "http://", "alice", ""):
        with pytest.raises(ValueError, match="Links"):
            Link(raw)


def test_course_and_specialisation_collapse_whitespace() -> None:
    assert Course("CS2103T   Software  Engineering").value == "CS2103T Software Engineering"
    assert Specialisation("machine learning") == Specialisation("Machine Learning")
    with pytest.raises(ValueError):
        Course("   ")
    with pytest.raises(ValueError):
        Specialisation("")


def test_values_of_different_types_are_not_equal() -> None:
    assert Course("AI") != Specialisation("AI")
    assert Tag("123") != Phone("123")


def test_tag_is_single_word() -> None:
    assert Tag("Friends") == Tag("friends")
    with pytest.raises(ValueError, match="Tags"):
        Tag("best friends")
    with pytest.raises(ValueError):
        Tag("")


def test_graduation_academic_year_form() -> None:
    graduation = Graduation("ay2324-s1")
    assert graduation.value == "AY2324-S1"
    assert graduation.year == 2024
    assert graduation.semester == 1
    assert graduation.full_string() == "AY2023/2024 Semester 1"
    assert Graduation("AY2324-S1") == graduation


def test_graduation_year_form() -> None:
    graduation = Graduation("2025")
    assert graduation.year == 2025
    assert graduation.semester is None
    assert graduation.full_string() == "2025"


@pytest.mark.parametrize("raw", ["AY2325-S1", "AY2324-S3", "AY2324", "twenty", "", "1800"])
def test_graduation_rejects_invalid(raw: str) -> None:
    with pytest.raises(ValueError, match="Graduation"):
        Graduation(raw)


def test_graduation_sort_key_orders_semesters_then_bare_year() -> None:
    s1 = Graduation("AY2324-S1")
    s2 = Graduation("AY2324-S2")
    bare = Graduation("2024")
    later = Graduation("AY2425-S1")
    assert sorted([later, bare, s2, s1], key=lambda g: g.sort_key) == [s1, s2, bare, later]


def test_priority_accepts_names_and_initials_in_any_case() -> None:
    assert Priority("high") is Priority.HIGH
    assert Priority("HIGH") is Priority.HIGH
    assert Priority("m") is Priority.MEDIUM
    assert Priority(" low ") is Priority.LOW
    assert str(Priority.MEDIUM) == "medium"
    for raw in ("urgent", "", "x"):
        with pytest.raises(ValueError):
            Priority(raw)


def test_priority_rank_orders_low_to_high() -> None:
    assert Priority.LOW.rank < Priority.MEDIUM.rank < Priority.HIGH.rank
