import logging
import math
import os
from pathlib import Path

logger = logging.getLogger("quizbot")

DEFAULT_QUESTION_DELAY = 1.5


def _parse_env_line(line: str) -> tuple[str, str] | None:
    line = line.strip()
    if not line or line.startswith("#") or "=" not in line:
        return None
    key, value = line.split("=", 1)
    key = key.removeprefix("export ").strip()
    if not key:
        return None
    return key, value.strip().strip('"').strip("'")


def load_env(path: str = ".env") -> int:
    """Copy ``KEY=value`` pairs from ``path`` into the environment.

    Variables that are already set win. Returns how many values were applied.
    """
    env_path = Path(path)
    if not env_path.is_file():
        return 0
    try:
        lines = env_path.read_text(encoding="utf-8").splitlines()
    except OSError as exc:  # noqa: BLE001
        logger.warning("Не удалось прочитать .env: %s", exc)
        return 0
    applied = 0
    for parsed in filter(None, map(_parse_env_line, lines)):
        key, value = parsed
        if key not in os.environ:
            os.environ[key] = value
            applied += 1
    return applied


def parse_delay(raw: str | None, default: float = DEFAULT_QUESTION_DELAY) -> float:
    """Pause before the next question, in seconds.

    Empty values give ``default``; garbage, ``inf``, ``nan`` and negative
    numbers also give ``default``, with a warning.
    """
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        value = None
    if value is None or not math.isfinite(value) or value < 0:
        logger.warning("Некорректное значение задержки %r, используем %s", raw, default)
        return default
    return value


load_env()

TELEGRAM_BOT_TOKEN = os.getenv("BOT_TOKEN", "")
LOG_LEVEL = (os.getenv("LOG_LEVEL", "INFO") or "INFO").upper()
NEXT_QUESTION_DELAY = parse_delay(os.getenv("NEXT_QUESTION_DELAY"))

logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.INFO))


def validate_settings() -> None:
    if not TELEGRAM_BOT_TOKEN:
        raise RuntimeError(
            "Не указан BOT_TOKEN. Получите токен у @BotFather и добавьте его в файл .env"
        )
