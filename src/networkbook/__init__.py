"""
NetworkBook core: clean-architecture layout.

- domain: Person and its field value types, UniqueList. No outer dependencies.
- application: tokenizer, field parsers, edit descriptor, commands, Logic, ports.
- infrastructure: adapters (InMemoryModel, JsonNetworkBookStorage).
"""

from networkbook.application import (
    CommandResult,
    EditPersonDescriptor,
    Logic,
    NetworkBookError,
    UiAction,
    parse_command,
)
from networkbook.domain import Person, UniqueList
from networkbook.infrastructure import InMemoryModel, JsonNetworkBookStorage

__all__ = [
    "CommandResult",
    "EditPersonDescriptor",
    "InMemoryModel",
    "JsonNetworkBookStorage",
    "Logic",
    "NetworkBookError",
    "Person",
    "UiAction",
    "UniqueList",
    "parse_command",
]
