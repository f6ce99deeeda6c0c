"""Console loop tests with scripted input."""

from networkbook.__main__ import run
from networkbook.application import Logic
from networkbook.infrastructure import InMemoryModel


def _script(*lines: str):
    pending = list(lines)

    def read(_prompt: str) -> str:
        if not pending:
            raise EOFError
        return pending.pop(0)

    return read


def test_run_until_exit() -> None:
    output: list[str] = []
    logic = Logic(InMemoryModel())

    run(logic, read=_script("create n/Alice", "", "list", "exit", "create n/Bob"), write=output.append)

    assert output[0].startswith("New person added: Alice")
    assert output[1] == "Listed all persons"
    assert output[2].startswith("1. Alice")
    assert output[3].startswith("Exiting")
    assert len(logic.model.get_person_list()) == 1


def test_errors_are_printed_and_loop_continues() -> None:
    output: list[str] = []
    logic = Logic(InMemoryModel())

    run(logic, read=_script("delete 1", "find nobody"), write=output.append)

    assert output[0] == "The person index provided is invalid"
    assert output[1] == "0 persons listed!"
    assert output[2] == "No persons to show."
