"""Application layer: command parsing, commands, ports. Depends only on domain."""

from networkbook.application.commands import (
    AddCommand,
    ClearCommand,
    Command,
    CommandResult,
    CreateCommand,
    DeleteCommand,
    EditCommand,
    ExitCommand,
    FilterCommand,
    FindCommand,
    HelpCommand,
    ListCommand,
    SortCommand,
    UiAction,
)
from networkbook.application.descriptor import (
    CLEARED,
    UNTOUCHED,
    Cleared,
    EditPersonDescriptor,
    SetTo,
    Untouched,
)
from networkbook.application.errors import (
    CommandError,
    DataLoadingError,
    DuplicateValue,
    InvalidFieldFormat,
    InvalidIndex,
    NetworkBookError,
    NothingToEdit,
    ParseError,
    TokenizeFormatError,
)
from networkbook.application.logic import Logic
from networkbook.application.parser import generate_edit_descriptor, parse_command
from networkbook.application.ports import Model, NetworkBookStorage
from networkbook.application.tokenizer import ArgumentMultimap, tokenize

__all__ = [
    "AddCommand",
    "ArgumentMultimap",
    "CLEARED",
    "ClearCommand",
    "Cleared",
    "Command",
    "CommandError",
    "CommandResult",
    "CreateCommand",
    "DataLoadingError",
    "DeleteCommand",
    "DuplicateValue",
    "EditCommand",
    "EditPersonDescriptor",
    "ExitCommand",
    "FilterCommand",
    "FindCommand",
    "HelpCommand",
    "InvalidFieldFormat",
    "InvalidIndex",
    "ListCommand",
    "Logic",
    "Model",
    "NetworkBookError",
    "NetworkBookStorage",
    "NothingToEdit",
    "ParseError",
    "SetTo",
    "SortCommand",
    "TokenizeFormatError",
    "UNTOUCHED",
    "UiAction",
    "Untouched",
    "generate_edit_descriptor",
    "parse_command",
    "tokenize",
]
