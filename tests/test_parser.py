"""Tests for parse_command: command words, argument formats, and rejected input."""

import pytest

from networkbook.application import (
    CLEARED,
    UNTOUCHED,
    AddCommand,
    ClearCommand,
    CreateCommand,
    DeleteCommand,
    DuplicateValue,
    EditCommand,
    ExitCommand,
    FilterCommand,
    FindCommand,
    HelpCommand,
    InvalidFieldFormat,
    ListCommand,
    NothingToEdit,
    ParseError,
    SetTo,
    SortCommand,
    TokenizeFormatError,
    parse_command,
)
from networkbook.application.cli_syntax import FilterField, SortField, SortOrder
from networkbook.application.commands import NameContainsKeywordsPredicate
from networkbook.domain import Name, Phone, Priority, Tag, UniqueList


def test_edit_collects_repeated_phones() -> None:
    command = parse_command("edit 1 p/12345678 p/87654321")
    assert isinstance(command, EditCommand)
    assert command.index == 1
    assert command.descriptor.phones == SetTo(UniqueList([Phone("12345678"), Phone("87654321")]))
    assert command.descriptor.name == UNTOUCHED


def test_edit_without_fields_is_nothing_to_edit() -> None:
    with pytest.raises(NothingToEdit, match="At least one field"):
        parse_command("edit 1")
    with pytest.raises(NothingToEdit):
        parse_command("edit 2   ")


@pytest.mark.parametrize("text", ["edit x n/Bob", "edit 0 n/Bob", "edit n/Bob", "edit -1 n/Bob"])
def test_edit_with_bad_index_is_invalid_format(text: str) -> None:
    with pytest.raises(ParseError, match="Invalid command format") as exc_info:
        parse_command(text)
    assert exc_info.type is ParseError


def test_edit_repeated_single_valued_prefix() -> None:
    with pytest.raises(TokenizeFormatError):
        parse_command("edit 1 n/Bob n/Carl")
    with pytest.raises(TokenizeFormatError):
        parse_command("edit 1 pr/high pr/low")


def test_edit_empty_tag_clears_tags() -> None:
    command = parse_command("edit 1 t/")
    assert command.descriptor.tags == CLEARED
    assert command.descriptor.is_any_field_edited()


def test_edit_empty_name_is_invalid() -> None:
    with pytest.raises(InvalidFieldFormat):
        parse_command("edit 1 n/")


def test_edit_duplicate_values_rejected() -> None:
    with pytest.raises(DuplicateValue):
        parse_command("edit 1 p/999 p/999")


def test_create_builds_person() -> None:
    command = parse_command("create n/Alice Tan p/123 t/friends t/cs pr/h g/2025")
    assert isinstance(command, CreateCommand)
    person = command.person
    assert person.name == Name("Alice Tan")
    assert person.phones.as_list() == [Phone("123")]
    assert person.tags.as_list() == [Tag("friends"), Tag("cs")]
    assert person.priority is Priority.HIGH
    assert person.graduation.year == 2025
    assert person.emails.is_empty()


@pytest.mark.parametrize("text", ["create p/123", "create junk n/Alice", "create"])
def test_create_invalid_format(text: str) -> None:
    with pytest.raises(ParseError, match="Invalid command format"):
        parse_command(text)


def test_create_empty_graduation_is_invalid() -> None:
    with pytest.raises(InvalidFieldFormat, match="Graduation"):
        parse_command("create n/Alice g/")


def test_add_parses_without_clearing() -> None:
    command = parse_command("add 2 p/999 c/CS2103T")
    assert isinstance(command, AddCommand)
    assert command.index == 2
    assert command.descriptor.phones == SetTo(UniqueList([Phone("999")]))

    with pytest.raises(NothingToEdit):
        parse_command("add 1")
    with pytest.raises(InvalidFieldFormat):
        parse_command("add 1 t/")
    with pytest.raises(ParseError, match="Invalid command format"):
        parse_command("add 1 n/Bob")


def test_delete() -> None:
    assert parse_command("delete 2") == DeleteCommand(2)
    with pytest.raises(ParseError, match="Invalid command format"):
        parse_command("delete")
    with pytest.raises(ParseError):
        parse_command("delete two")


def test_find() -> None:
    command = parse_command("find alice  bob")
    assert command == FindCommand(NameContainsKeywordsPredicate(("alice", "bob")))
    with pytest.raises(ParseError):
        parse_command("find   ")


def test_sort() -> None:
    assert parse_command("sort by/grad order/desc") == SortCommand(
        SortField.GRADUATION, SortOrder.DESCENDING
    )
    assert parse_command("sort by/name") == SortCommand(SortField.NAME, SortOrder.ASCENDING)
    with pytest.raises(ParseError):
        parse_command("sort")
    with pytest.raises(InvalidFieldFormat):
        parse_command("sort by/age")
    with pytest.raises(TokenizeFormatError):
        parse_command("sort by/name by/grad")


def test_filter_parses_field_and_finished_flag() -> None:
    assert parse_command("filter by/course fin/true") == FilterCommand(FilterField.COURSE, True)
    assert parse_command("filter by/spec") == FilterCommand(FilterField.SPECIALISATION, False)
    with pytest.raises(ParseError, match="Invalid command format"):
        parse_command("filter fin/true")
    with pytest.raises(InvalidFieldFormat):
        parse_command("filter by/course fin/maybe")


def test_commands_without_arguments() -> None:
    assert isinstance(parse_command("list"), ListCommand)
    assert isinstance(parse_command("clear"), ClearCommand)
    assert isinstance(parse_command("help"), HelpCommand)
    assert isinstance(parse_command("  exit  "), ExitCommand)


def test_unknown_and_empty_input() -> None:
    with pytest.raises(ParseError, match="Unknown command"):
        parse_command("jump 1")
    with pytest.raises(ParseError, match="Invalid command format"):
        parse_command("   ")
