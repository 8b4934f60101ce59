import os
import sys

from loguru import logger


class ConfigurationError(Exception):
    """Raised when an environment setting cannot be parsed."""


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {raw!r}")


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError as e:
        raise ConfigurationError(f"{name} must be an integer, got {raw!r}") from e


LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


def _env_log_level(name: str, default: str) -> str:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return default
    value = raw.strip().upper()
    if value not in LOG_LEVELS:
        raise ConfigurationError(f"{name} must be one of {', '.join(LOG_LEVELS)}, got {raw!r}")
    return value


APP_TITLE = os.getenv("SAVINGS_APP_TITLE", "Savings Calculator")
CURRENCY_LABEL = os.getenv("SAVINGS_CURRENCY_LABEL", "RM")
DEFAULT_DARK = _env_bool("SAVINGS_DEFAULT_DARK", True)
LOG_LEVEL = _env_log_level("SAVINGS_LOG_LEVEL", "INFO")
API_HOST = os.getenv("SAVINGS_API_HOST", "127.0.0.1")
API_PORT = _env_int("SAVINGS_API_PORT", 8000)

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


def configure_logging(level: str | None = None) -> None:
    logger.remove()
    logger.add(sys.stderr, format=LOG_FORMAT, level=level or LOG_LEVEL, colorize=True)
