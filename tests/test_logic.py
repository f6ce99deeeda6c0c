"""Tests for Logic: parse, execute, and save after successful commands."""

import pytest

from networkbook.application import CommandError, InvalidIndex, Logic, ParseError
from networkbook.domain import Person
from networkbook.infrastructure import InMemoryModel, JsonNetworkBookStorage


class _RecordingStorage:
    def __init__(self) -> None:
        self.saved: list[list[Person]] = []

    def load(self) -> list[Person]:
        return []

    def save(self, persons: list[Person]) -> None:
        self.saved.append(list(persons))


class _FailingStorage(_RecordingStorage):
    def save(self, persons: list[Person]) -> None:
        raise PermissionError("read-only file system")


def test_successful_command_is_saved() -> None:
    storage = _RecordingStorage()
    logic = Logic(InMemoryModel(), storage)

    result = logic.execute("create n/Alice Tan p/999")

    assert "Alice Tan" in result.feedback
    assert len(storage.saved) == 1
    assert [str(p.name) for p in storage.saved[0]] == ["Alice Tan"]


def test_rejected_command_is_not_saved() -> None:
    storage = _RecordingStorage()
    logic = Logic(InMemoryModel(), storage)

    with pytest.raises(ParseError):
        logic.execute("create p/999")
    with pytest.raises(InvalidIndex):
        logic.execute("delete 1")

    assert storage.saved == []


def test_save_failure_becomes_command_error() -> None:
    logic = Logic(InMemoryModel(), _FailingStorage())
    with pytest.raises(CommandError, match="Could not save data"):
        logic.execute("create n/Alice")


def test_without_storage_nothing_is_saved() -> None:
    logic = Logic(InMemoryModel())
    logic.execute("create n/Alice")
    assert [str(p.name) for p in logic.get_filtered_person_list()] == ["Alice"]


def test_json_storage_round_trip_through_logic(tmp_path) -> None:
    storage = JsonNetworkBookStorage(tmp_path / "book.json")
    logic = Logic(InMemoryModel(storage.load()), storage)
    logic.execute("create n/Alice Tan t/friends")
    logic.execute("edit 1 t/ pr/high")

    reloaded = storage.load()
    assert len(reloaded) == 1
    assert reloaded[0].tags.is_empty()
    assert str(reloaded[0].priority) == "high"
