"""
Console front end: type commands at the prompt, read feedback below.
Run: python -m networkbook (from repo root, with .env or env vars set).
"""

import logging

from networkbook.application import Logic, NetworkBookError, UiAction
from networkbook.application.messages import format_person_list
from networkbook.config import configure_logging, create_logic, get_settings, load_env

logger = logging.getLogger(__name__)

PROMPT = "networkbook> "
# Commands whose result is best followed by the displayed list.
LISTING_COMMANDS = ("list", "find", "sort")


def run(logic: Logic, read=input, write=print) -> None:
    """Read-eval-print loop. Ends on exit or end of input."""
    while True:
        try:
            text = read(PROMPT)
        except EOFError:
            break
        if not text.strip():
            continue
        try:
            result = logic.execute(text)
        except NetworkBookError as e:
            write(str(e))
            continue
        write(result.feedback)
        if text.split()[0] in LISTING_COMMANDS:
            write(format_person_list(logic.get_filtered_person_list()))
        if result.ui_action is UiAction.EXIT:
            break


def main() -> None:
    load_env()
    settings = get_settings()
    configure_logging(settings)
    try:
        logic = create_logic(settings)
    except NetworkBookError as e:
        raise SystemExit(str(e)) from e
    logger.info("Network book ready (data file: %s)", settings.data_path)
    run(logic)


if __name__ == "__main__":
    main()
