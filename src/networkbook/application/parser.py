"""Turn raw user input into Command objects."""

import re
from collections.abc import Callable, Sequence
from typing import TypeVar

from networkbook.application.cli_syntax import (
    PERSON_PREFIXES,
    SINGLE_VALUED_PREFIXES,
    Prefix,
)
from networkbook.application.commands import (
    AddCommand,
    ClearCommand,
    Command,
    CreateCommand,
    DeleteCommand,
    EditCommand,
    ExitCommand,
    FilterCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    NameContainsKeywordsPredicate,
    SortCommand,
)
from networkbook.application.descriptor import (
    CLEARED,
    UNTOUCHED,
    EditPersonDescriptor,
    FieldEdit,
    SetTo,
)
from networkbook.application.errors import (
    InvalidFieldFormat,
    NothingToEdit,
    ParseError,
)
from networkbook.application.messages import (
    MESSAGE_INVALID_COMMAND_FORMAT,
    MESSAGE_UNKNOWN_COMMAND,
)
from networkbook.application.parser_util import (
    is_clear_request,
    parse_boolean,
    parse_courses,
    parse_emails,
    parse_filter_field,
    parse_graduation,
    parse_index,
    parse_links,
    parse_name,
    parse_phones,
    parse_priority,
    parse_sort_field,
    parse_sort_order,
    parse_specialisations,
    parse_tags,
)
from networkbook.application.tokenizer import ArgumentMultimap, tokenize
from networkbook.domain import Person, UniqueList

T = TypeVar("T")

BASIC_COMMAND_FORMAT = re.compile(r"(?P<command_word>\S+)(?P<arguments>.*)", re.DOTALL)


def _invalid_format(usage: str) -> ParseError:
    return ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(usage))


def _index_from_preamble(multimap: ArgumentMultimap, usage: str) -> int:
    try:
        return parse_index(multimap.preamble)
    except InvalidFieldFormat as e:
        raise _invalid_format(usage) from e


def _single_edit(
    multimap: ArgumentMultimap,
    prefix: Prefix,
    parse_one: Callable[[str], T],
    allow_clear: bool,
) -> FieldEdit:
    value = multimap.get_value(prefix)
    if value is None:
        return UNTOUCHED
    if allow_clear and value == "":
        return CLEARED
    return SetTo(parse_one(value))


def _collection_edit(
    multimap: ArgumentMultimap,
    prefix: Prefix,
    parse_many: Callable[[Sequence[str]], UniqueList[T]],
    allow_clear: bool,
) -> FieldEdit:
    raws = multimap.get_all_values(prefix)
    if not raws:
        return UNTOUCHED
    if is_clear_request(raws):
        if allow_clear:
            return CLEARED
        raise InvalidFieldFormat(f"No value given after {prefix}")
    return SetTo(parse_many(raws))


def generate_edit_descriptor(
    multimap: ArgumentMultimap, *, allow_clear: bool = True
) -> EditPersonDescriptor:
    """
    Build a descriptor from the person prefixes in multimap.
    A prefix that was not given leaves its field Untouched. With allow_clear,
    a prefix given once with an empty value clears the field; the name can
    never be cleared.
    """
    return EditPersonDescriptor(
        name=_single_edit(multimap, Prefix.NAME, parse_name, allow_clear=False),
        phones=_collection_edit(multimap, Prefix.PHONE, parse_phones, allow_clear),
        emails=_collection_edit(multimap, Prefix.EMAIL, parse_emails, allow_clear),
        links=_collection_edit(multimap, Prefix.LINK, parse_links, allow_clear),
        graduation=_single_edit(multimap, Prefix.GRADUATION, parse_graduation, allow_clear),
        courses=_collection_edit(multimap, Prefix.COURSE, parse_courses, allow_clear),
        specialisations=_collection_edit(
            multimap, Prefix.SPECIALISATION, parse_specialisations, allow_clear
        ),
        tags=_collection_edit(multimap, Prefix.TAG, parse_tags, allow_clear),
        priority=_single_edit(multimap, Prefix.PRIORITY, parse_priority, allow_clear),
    )


def parse_create(args: str) -> CreateCommand:
    multimap = tokenize(args, *PERSON_PREFIXES)
    if multimap.preamble or not multimap.is_present(Prefix.NAME):
        raise _invalid_format(CreateCommand.MESSAGE_USAGE)
    multimap.verify_no_duplicate_prefixes_for(*SINGLE_VALUED_PREFIXES)

    graduation = multimap.get_value(Prefix.GRADUATION)
    priority = multimap.get_value(Prefix.PRIORITY)
    person = Person(
        name=parse_name(multimap.get_value(Prefix.NAME)),
        phones=parse_phones(multimap.get_all_values(Prefix.PHONE)),
        emails=parse_emails(multimap.get_all_values(Prefix.EMAIL)),
        links=parse_links(multimap.get_all_values(Prefix.LINK)),
        graduation=parse_graduation(graduation) if graduation is not None else None,
        courses=parse_courses(multimap.get_all_values(Prefix.COURSE)),
        specialisations=parse_specialisations(multimap.get_all_values(Prefix.SPECIALISATION)),
        tags=parse_tags(multimap.get_all_values(Prefix.TAG)),
        priority=parse_priority(priority) if priority is not None else None,
    )
    return CreateCommand(person)


def parse_add(args: str) -> AddCommand:
    prefixes = [p for p in PERSON_PREFIXES if p is not Prefix.NAME]
    multimap = tokenize(args, *prefixes)
    index = _index_from_preamble(multimap, AddCommand.MESSAGE_USAGE)
    multimap.verify_no_duplicate_prefixes_for(*SINGLE_VALUED_PREFIXES)

    descriptor = generate_edit_descriptor(multimap, allow_clear=False)
    if not descriptor.is_any_field_edited():
        raise NothingToEdit(AddCommand.MESSAGE_NOT_ADDED)
    return AddCommand(index, descriptor)


def parse_edit(args: str) -> EditCommand:
    multimap = tokenize(args, *PERSON_PREFIXES)
    index = _index_from_preamble(multimap, EditCommand.MESSAGE_USAGE)
    multimap.verify_no_duplicate_prefixes_for(*SINGLE_VALUED_PREFIXES)

    descriptor = generate_edit_descriptor(multimap)
    if not descriptor.is_any_field_edited():
        raise NothingToEdit(EditCommand.MESSAGE_NOT_EDITED)
    return EditCommand(index, descriptor)


def parse_delete(args: str) -> DeleteCommand:
    try:
        return DeleteCommand(parse_index(args))
    except InvalidFieldFormat as e:
        raise _invalid_format(DeleteCommand.MESSAGE_USAGE) from e


def parse_find(args: str) -> FindCommand:
    keywords = args.split()
    if not keywords:
        raise _invalid_format(FindCommand.MESSAGE_USAGE)
    return FindCommand(NameContainsKeywordsPredicate(tuple(keywords)))


def parse_sort(args: str) -> SortCommand:
    multimap = tokenize(args, Prefix.FIELD, Prefix.ORDER)
    if multimap.preamble or not multimap.is_present(Prefix.FIELD):
        raise _invalid_format(SortCommand.MESSAGE_USAGE)
    multimap.verify_no_duplicate_prefixes_for(Prefix.FIELD, Prefix.ORDER)

    field = parse_sort_field(multimap.get_value(Prefix.FIELD))
    order = multimap.get_value(Prefix.ORDER)
    if order is None:
        return SortCommand(field)
    return SortCommand(field, parse_sort_order(order))


def parse_filter(args: str) -> FilterCommand:
    multimap = tokenize(args, Prefix.FIELD, Prefix.FINISHED)
    if multimap.preamble or not multimap.is_present(Prefix.FIELD):
        raise _invalid_format(FilterCommand.MESSAGE_USAGE)
    multimap.verify_no_duplicate_prefixes_for(Prefix.FIELD, Prefix.FINISHED)

    field = parse_filter_field(multimap.get_value(Prefix.FIELD))
    finished = multimap.get_value(Prefix.FINISHED)
    return FilterCommand(field, parse_boolean(finished) if finished is not None else False)


_PARSERS: dict[str, Callable[[str], Command]] = {
    CreateCommand.COMMAND_WORD: parse_create,
    AddCommand.COMMAND_WORD: parse_add,
    EditCommand.COMMAND_WORD: parse_edit,
    DeleteCommand.COMMAND_WORD: parse_delete,
    ListCommand.COMMAND_WORD: lambda _args: ListCommand(),
    FindCommand.COMMAND_WORD: parse_find,
    SortCommand.COMMAND_WORD: parse_sort,
    FilterCommand.COMMAND_WORD: parse_filter,
    ClearCommand.COMMAND_WORD: lambda _args: ClearCommand(),
    HelpCommand.COMMAND_WORD: lambda _args: HelpCommand(),
    ExitCommand.COMMAND_WORD: lambda _args: ExitCommand(),
}


def parse_command(user_input: str) -> Command:
    """Parse one line of user input. Raises ParseError subclasses on bad input."""
    match = BASIC_COMMAND_FORMAT.fullmatch((user_input or "").strip())
    if not match:
        raise _invalid_format(HelpCommand.MESSAGE_USAGE)
    parser = _PARSERS.get(match.group("command_word"))
    if parser is None:
        raise ParseError(MESSAGE_UNKNOWN_COMMAND)
    return parser(match.group("arguments"))
