"""Entry point for front ends: parse a line of input, run it, and persist the result."""

import logging

from networkbook.application.commands import CommandResult
from networkbook.application.errors import CommandError, NetworkBookError
from networkbook.application.parser import parse_command
from networkbook.application.ports import Model, NetworkBookStorage
from networkbook.domain import Person

logger = logging.getLogger(__name__)

FILE_OPS_ERROR_FORMAT = "Could not save data due to the following error: {}"


class Logic:
    """Runs commands against one model. Single-threaded: one caller at a time."""

    def __init__(self, model: Model, storage: NetworkBookStorage | None = None) -> None:
        self._model = model
        self._storage = storage

    @property
    def model(self) -> Model:
        return self._model

    def execute(self, command_text: str) -> CommandResult:
        """
        Parse and execute command_text. On success the person list is saved.
        Raises NetworkBookError subclasses for bad input; the model is unchanged then.
        """
        logger.info("User command: %s", command_text)
        try:
            command = parse_command(command_text)
            result = command.execute(self._model)
        except NetworkBookError as e:
            logger.info("Command rejected (%s): %s", type(e).__name__, e)
            raise

        if self._storage is not None:
            try:
                self._storage.save(self._model.get_person_list())
            except OSError as e:
                logger.warning("Saving network book failed: %s", e)
                raise CommandError(FILE_OPS_ERROR_FORMAT.format(e)) from e
        return result

    def get_filtered_person_list(self) -> list[Person]:
        return self._model.get_filtered_person_list()
