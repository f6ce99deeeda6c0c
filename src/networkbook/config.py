"""Settings from environment (.env supported), logging setup, and Logic wiring."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from networkbook.application import Logic
from networkbook.infrastructure import InMemoryModel, JsonNetworkBookStorage

# Repo root: from src/networkbook/config.py go up to repo root
REPO_ROOT = Path(__file__).resolve().parent.parent.parent

DEFAULT_DATA_PATH = "data/networkbook.json"
DEFAULT_LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def load_env() -> None:
    """Load .env from repo root or current dir. Existing environment variables win."""
    for path in (REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            break


@dataclass(frozen=True)
class Settings:
    data_path: Path
    log_level: str = DEFAULT_LOG_LEVEL
    telegram_bot_token: str | None = None


def get_settings() -> Settings:
    data_path = os.environ.get("NETWORKBOOK_DATA_PATH", "").strip() or DEFAULT_DATA_PATH
    log_level = os.environ.get("NETWORKBOOK_LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL
    token = os.environ.get("TELEGRAM_BOT_TOKEN", "").strip() or None
    return Settings(data_path=Path(data_path), log_level=log_level, telegram_bot_token=token)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(format=LOG_FORMAT, level=settings.log_level)


def create_logic(settings: Settings) -> Logic:
    """Load the stored network book into a fresh in-memory model."""
    storage = JsonNetworkBookStorage(settings.data_path)
    model = InMemoryModel(storage.load())
    return Logic(model, storage)
