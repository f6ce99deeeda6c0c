"""Executable commands. Each is built by the parser and run once against a Model."""

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from networkbook.application.cli_syntax import FilterField, Prefix, SortField, SortOrder
from networkbook.application.descriptor import EditPersonDescriptor
from networkbook.application.errors import CommandError, InvalidIndex
from networkbook.application.messages import (
    MESSAGE_DUPLICATE_PERSON,
    MESSAGE_INVALID_PERSON_DISPLAYED_INDEX,
    MESSAGE_PERSONS_LISTED_OVERVIEW,
    format_person,
)
from networkbook.application.ports import Model
from networkbook.domain import DuplicateElementError, Person

_PERSON_FIELDS_USAGE = (
    f"[{Prefix.PHONE}PHONE]... [{Prefix.EMAIL}EMAIL]... [{Prefix.LINK}LINK]... "
    f"[{Prefix.GRADUATION}GRADUATION] [{Prefix.COURSE}COURSE]... "
    f"[{Prefix.SPECIALISATION}SPECIALISATION]... [{Prefix.TAG}TAG]... "
    f"[{Prefix.PRIORITY}PRIORITY]"
)


class UiAction(Enum):
    """What the front end should do besides showing the feedback."""

    NONE = "none"
    HELP = "help"
    EXIT = "exit"


@dataclass(frozen=True)
class CommandResult:
    feedback: str
    ui_action: UiAction = UiAction.NONE


class Command:
    """Base class for all commands."""

    COMMAND_WORD: ClassVar[str] = ""
    MESSAGE_USAGE: ClassVar[str] = ""

    def execute(self, model: Model) -> CommandResult:
        raise NotImplementedError


def _displayed_person(model: Model, index: int) -> Person:
    """Return the person at 1-based index in the displayed list."""
    persons = model.get_filtered_person_list()
    if index < 1 or index > len(persons):
        raise InvalidIndex(MESSAGE_INVALID_PERSON_DISPLAYED_INDEX)
    return persons[index - 1]


def _show_all(_person: Person) -> bool:
    return True


@dataclass(frozen=True)
class CreateCommand(Command):
    """Adds a new person to the network book."""

    COMMAND_WORD: ClassVar[str] = "create"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Creates a new contact. "
        f"Parameters: {Prefix.NAME}NAME {_PERSON_FIELDS_USAGE}\n"
        f"Example: {COMMAND_WORD} {Prefix.NAME}John Doe {Prefix.PHONE}98765432 "
        f"{Prefix.EMAIL}johnd@example.com {Prefix.TAG}friends"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "New person added: {}"

    person: Person

    def execute(self, model: Model) -> CommandResult:
        if model.has_person(self.person):
            raise CommandError(MESSAGE_DUPLICATE_PERSON)
        model.add_person(self.person)
        return CommandResult(self.MESSAGE_SUCCESS.format(format_person(self.person)))


@dataclass(frozen=True)
class AddCommand(Command):
    """Appends details to an existing person without touching what is already there."""

    COMMAND_WORD: ClassVar[str] = "add"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Adds details to the person identified by the index number "
        "used in the displayed person list. New values are added after existing ones.\n"
        f"Parameters: INDEX (must be a positive integer) {_PERSON_FIELDS_USAGE}\n"
        f"Example: {COMMAND_WORD} 1 {Prefix.PHONE}91234567 {Prefix.COURSE}CS2103T"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Added details to person: {}"
    MESSAGE_NOT_ADDED: ClassVar[str] = "At least one field to add must be provided."
    MESSAGE_ALREADY_PRESENT: ClassVar[str] = "{} already has {}"

    index: int
    descriptor: EditPersonDescriptor

    def execute(self, model: Model) -> CommandResult:
        target = _displayed_person(model, self.index)
        try:
            updated = self.descriptor.add_to(target)
        except DuplicateElementError as e:
            raise CommandError(self.MESSAGE_ALREADY_PRESENT.format(target.name, e.element)) from e
        model.set_person(target, updated)
        return CommandResult(self.MESSAGE_SUCCESS.format(format_person(updated)))


@dataclass(frozen=True)
class EditCommand(Command):
    """Replaces fields of an existing person."""

    COMMAND_WORD: ClassVar[str] = "edit"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Edits the details of the person identified by the index number "
        "used in the displayed person list. Existing values of each given field will be "
        "overwritten; a field given with no value is cleared.\n"
        f"Parameters: INDEX (must be a positive integer) [{Prefix.NAME}NAME] "
        f"{_PERSON_FIELDS_USAGE}\n"
        f"Example: {COMMAND_WORD} 1 {Prefix.PHONE}91234567 {Prefix.EMAIL}johndoe@example.com"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Edited Person: {}"
    MESSAGE_NOT_EDITED: ClassVar[str] = "At least one field to edit must be provided."

    index: int
    descriptor: EditPersonDescriptor

    def execute(self, model: Model) -> CommandResult:
        target = _displayed_person(model, self.index)
        edited = self.descriptor.apply_to(target)
        if not target.is_same_person(edited) and model.has_person(edited):
            raise CommandError(MESSAGE_DUPLICATE_PERSON)
        model.set_person(target, edited)
        return CommandResult(self.MESSAGE_SUCCESS.format(format_person(edited)))


@dataclass(frozen=True)
class DeleteCommand(Command):
    COMMAND_WORD: ClassVar[str] = "delete"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Deletes the person identified by the index number used in the "
        "displayed person list.\n"
        "Parameters: INDEX (must be a positive integer)\n"
        f"Example: {COMMAND_WORD} 1"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Deleted Person: {}"

    index: int

    def execute(self, model: Model) -> CommandResult:
        target = _displayed_person(model, self.index)
        model.delete_person(target)
        return CommandResult(self.MESSAGE_SUCCESS.format(format_person(target)))


@dataclass(frozen=True)
class ListCommand(Command):
    COMMAND_WORD: ClassVar[str] = "list"
    MESSAGE_USAGE: ClassVar[str] = f"{COMMAND_WORD}: Lists all persons."
    MESSAGE_SUCCESS: ClassVar[str] = "Listed all persons"

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_person_list(_show_all)
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class NameContainsKeywordsPredicate:
    """Matches persons whose name contains any of the keywords as a whole word, ignoring case."""

    keywords: tuple[str, ...]

    def __call__(self, person: Person) -> bool:
        words = {w.casefold() for w in str(person.name).split()}
        return any(k.casefold() in words for k in self.keywords)


@dataclass(frozen=True)
class FindCommand(Command):
    COMMAND_WORD: ClassVar[str] = "find"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Finds all persons whose names contain any of the specified "
        "keywords (case-insensitive) and displays them as a list with index numbers.\n"
        "Parameters: KEYWORD [MORE_KEYWORDS]...\n"
        f"Example: {COMMAND_WORD} alice bob charlie"
    )

    predicate: NameContainsKeywordsPredicate

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_person_list(self.predicate)
        shown = len(model.get_filtered_person_list())
        return CommandResult(MESSAGE_PERSONS_LISTED_OVERVIEW.format(shown))


_SORT_KEYS: dict[SortField, Callable[[Person], Any]] = {
    SortField.NAME: lambda p: p.name.key,
    SortField.GRADUATION: lambda p: p.graduation.sort_key if p.graduation else None,
    SortField.PRIORITY: lambda p: p.priority.rank if p.priority else None,
}


@dataclass(frozen=True)
class SortCommand(Command):
    COMMAND_WORD: ClassVar[str] = "sort"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Sorts the displayed persons by a field. Persons without a value "
        "for the field are placed last.\n"
        f"Parameters: {Prefix.FIELD}name|grad|priority [{Prefix.ORDER}asc|desc]\n"
        f"Example: {COMMAND_WORD} {Prefix.FIELD}grad {Prefix.ORDER}desc"
    )
    MESSAGE_SUCCESS: ClassVar[str] = "Sorted persons by {} in {} order"

    field: SortField
    order: SortOrder = SortOrder.ASCENDING

    def execute(self, model: Model) -> CommandResult:
        model.sort_filtered_person_list(
            _SORT_KEYS[self.field], reverse=self.order is SortOrder.DESCENDING
        )
        order = "ascending" if self.order is SortOrder.ASCENDING else "descending"
        return CommandResult(self.MESSAGE_SUCCESS.format(self.field.value, order))


@dataclass(frozen=True)
class FilterCommand(Command):
    """
    Filters persons by course, specialisation or graduation, optionally leaving
    out those who have finished the course or graduated.
    Only the command syntax exists so far; executing it changes nothing.
    """

    COMMAND_WORD: ClassVar[str] = "filter"
    MESSAGE_USAGE: ClassVar[str] = (
        f"{COMMAND_WORD}: Filters all persons by a specified field (course, specialisation, "
        "or grad year) and returns a list of contacts that contain the specified keywords.\n"
        "Course and grad year can be additionally filtered to exclude contacts who have "
        "finished the course or graduated.\n"
        f"Parameters: {Prefix.FIELD}FIELD [{Prefix.FINISHED}true/false (false by default)]\n"
        f"Example: {COMMAND_WORD} {Prefix.FIELD}course {Prefix.FINISHED}true"
    )
    MESSAGE_NOT_IMPLEMENTED: ClassVar[str] = "To be implemented"

    field: FilterField
    exclude_finished: bool = False

    def execute(self, model: Model) -> CommandResult:
        return CommandResult(self.MESSAGE_NOT_IMPLEMENTED)


@dataclass(frozen=True)
class ClearCommand(Command):
    COMMAND_WORD: ClassVar[str] = "clear"
    MESSAGE_USAGE: ClassVar[str] = f"{COMMAND_WORD}: Deletes all persons."
    MESSAGE_SUCCESS: ClassVar[str] = "Network book has been cleared!"

    def execute(self, model: Model) -> CommandResult:
        model.set_persons([])
        return CommandResult(self.MESSAGE_SUCCESS)


@dataclass(frozen=True)
class HelpCommand(Command):
    COMMAND_WORD: ClassVar[str] = "help"
    MESSAGE_USAGE: ClassVar[str] = f"{COMMAND_WORD}: Shows program usage instructions."

    def execute(self, model: Model) -> CommandResult:
        return CommandResult(help_text(), UiAction.HELP)


@dataclass(frozen=True)
class ExitCommand(Command):
    COMMAND_WORD: ClassVar[str] = "exit"
    MESSAGE_USAGE: ClassVar[str] = f"{COMMAND_WORD}: Exits the program."
    MESSAGE_EXIT_ACKNOWLEDGEMENT: ClassVar[str] = "Exiting Network Book as requested ..."

    def execute(self, model: Model) -> CommandResult:
        return CommandResult(self.MESSAGE_EXIT_ACKNOWLEDGEMENT, UiAction.EXIT)


ALL_COMMANDS: tuple[type[Command], ...] = (
    CreateCommand,
    AddCommand,
    EditCommand,
    DeleteCommand,
    ListCommand,
    FindCommand,
    SortCommand,
    FilterCommand,
    ClearCommand,
    HelpCommand,
    ExitCommand,
)


def help_text() -> str:
    return "\n\n".join(command.MESSAGE_USAGE for command in ALL_COMMANDS)
