import argparse
import asyncio
import math
import sys
from typing import Optional, Sequence

from aiogram import Bot, Dispatcher
from aiogram.types import BotCommand

from .config import NEXT_QUESTION_DELAY, TELEGRAM_BOT_TOKEN, logger, validate_settings
from .engine import SessionEngine
from .errors import CatalogError
from .handlers import router
from .repository import load_repository
from .storage import QuizStore

BOT_COMMANDS = [
    BotCommand(command="start", description="Главное меню"),
    BotCommand(command="stop", description="Остановить тест"),
    BotCommand(command="stats", description="Показать статистику"),
    BotCommand(command="help", description="Справка"),
]


def build_engine() -> SessionEngine:
    repository = load_repository()
    logger.info("Загружено %s вопросов в %s категориях", len(repository), len(repository.get_categories()))
    return SessionEngine(repository, QuizStore())


async def run_bot(engine: SessionEngine, question_delay: float = NEXT_QUESTION_DELAY) -> None:
    bot = Bot(TELEGRAM_BOT_TOKEN)
    dispatcher = Dispatcher(engine=engine, question_delay=question_delay)
    dispatcher.include_router(router)
    await bot.set_my_commands(BOT_COMMANDS)
    logger.info("Bot is starting…")
    await dispatcher.start_polling(bot)


def _delay_arg(raw: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a number: {raw!r}") from None
    if not math.isfinite(value) or value < 0:
        raise argparse.ArgumentTypeError(f"expected a finite non-negative number, got {raw!r}")
    return value


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Interview quiz bot entrypoint")
    parser.add_argument(
        "--delay",
        type=_delay_arg,
        default=NEXT_QUESTION_DELAY,
        help="Pause in seconds before the next question is sent",
    )
    args = parser.parse_args(argv)

    try:
        validate_settings()
        engine = build_engine()
    except (CatalogError, RuntimeError) as exc:
        logger.error("Запуск невозможен: %s", exc)
        sys.exit(1)

    try:
        asyncio.run(run_bot(engine, question_delay=args.delay))
    except (KeyboardInterrupt, SystemExit):
        logger.info("Bot stopped")


if __name__ == "__main__":
    main()
