"""
Telegram bot: every text message is a network book command.
Run: python -m bot (from repo root, with .env or env vars set).
"""
import logging

from telegram import BotCommand, Update
from telegram.ext import (
    Application,
    CommandHandler,
    ContextTypes,
    MessageHandler,
    filters,
)

from networkbook.application import Logic, NetworkBookError
from networkbook.application.commands import help_text
from networkbook.application.messages import format_person_list
from networkbook.config import configure_logging, create_logic, get_settings, load_env

logger = logging.getLogger(__name__)

LOGIC_KEY = "logic"
# Telegram rejects messages longer than 4096 characters.
MESSAGE_LIMIT = 4000
LISTING_COMMANDS = ("list", "find", "sort")
# Shown when the user taps '/'. Network book commands themselves are plain text.
MENU_COMMANDS = (
    BotCommand("start", "Show how to use the network book"),
    BotCommand("help", "List every command and its parameters"),
)


def _get_logic(context: ContextTypes.DEFAULT_TYPE) -> Logic:
    return context.bot_data[LOGIC_KEY]


def split_message(text: str, limit: int = MESSAGE_LIMIT) -> list[str]:
    """Split text on blank lines into chunks no longer than limit (a single long block is cut)."""
    chunks: list[str] = []
    current = ""
    for block in text.split("\n\n"):
        candidate = f"{current}\n\n{block}" if current else block
        if len(candidate) <= limit:
            current = candidate
            continue
        if current:
            chunks.append(current)
        while len(block) > limit:
            chunks.append(block[:limit])
            block = block[limit:]
        current = block
    if current:
        chunks.append(current)
    return chunks


async def _reply(update: Update, text: str) -> None:
    for chunk in split_message(text):
        await update.message.reply_text(chunk)


async def start(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    await _reply(
        update,
        "Send a command such as `create n/Alice Tan p/91234567` or `list`.\n\n" + help_text(),
    )


async def handle_text(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    text = (update.message.text or "").strip()
    if not text:
        return
    logic = _get_logic(context)
    try:
        result = logic.execute(text)
    except NetworkBookError as e:
        await _reply(update, str(e))
        return
    reply = result.feedback
    if text.split()[0] in LISTING_COMMANDS:
        reply = f"{reply}\n\n{format_person_list(logic.get_filtered_person_list())}"
    await _reply(update, reply)


async def other_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    await update.message.reply_text("I only understand text commands. Send `help` to see them.")


async def set_menu(application: Application) -> None:
    await application.bot.set_my_commands(MENU_COMMANDS)
    logger.info("Command menu set: %s", ", ".join(c.command for c in MENU_COMMANDS))


def main() -> None:
    load_env()
    settings = get_settings()
    configure_logging(settings)
    if not settings.telegram_bot_token:
        raise SystemExit(
            "Set TELEGRAM_BOT_TOKEN (e.g. in .env). Get a token from @BotFather."
        )
    try:
        logic = create_logic(settings)
    except NetworkBookError as e:
        raise SystemExit(str(e)) from e
    app = (
        Application.builder()
        .token(settings.telegram_bot_token)
        .post_init(set_menu)
        .build()
    )
    app.bot_data[LOGIC_KEY] = logic
    app.add_handler(CommandHandler(["start", "help"], start))
    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, handle_text))
    app.add_handler(
        MessageHandler(filters.ALL & ~filters.COMMAND & ~filters.TEXT, other_message)
    )
    logger.info("Bot running (polling). Data file: %s", settings.data_path)
    app.run_polling(allowed_updates=Update.ALL_TYPES)


if __name__ == "__main__":
    main()
