"""Infrastructure layer: concrete implementations of application ports."""

from networkbook.infrastructure.json_storage import JsonNetworkBookStorage
from networkbook.infrastructure.memory_model import InMemoryModel

__all__ = [
    "InMemoryModel",
    "JsonNetworkBookStorage",
]
