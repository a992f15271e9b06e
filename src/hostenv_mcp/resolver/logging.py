"""Logging for the resolver.

Every lookup step reports what it found (or why it fell through) at
DEBUG on a child of the ``hostenv`` logger, e.g. ``hostenv.shell``.
Nothing is written anywhere unless ``HOSTENV_LOG_FILE`` is set.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Optional

from ..config import Settings, get_settings

LOGGER_NAME = "hostenv"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_FLAGS = ("1", "true", "yes", "on")

# Global package logger (singleton)
_logger: Optional[logging.Logger] = None


def get_logger(component: Optional[str] = None) -> logging.Logger:
    """Get the package logger, or the child logger for one component.

    The package logger is configured from the settings on first use.
    """
    global _logger
    if _logger is None:
        _logger = configure_logging()
    if component is None:
        return _logger
    return _logger.getChild(component)


def log_file_path(value: Optional[str]) -> Optional[Path]:
    """Translate the HOSTENV_LOG_FILE setting into a file path.

    A true-ish flag selects ./logs/hostenv_<date>.log, anything else is
    taken as a path (``~`` allowed). Unset means no file logging.
    """
    if not value:
        return None
    if value.lower() in LOG_FILE_FLAGS:
        return Path.cwd() / "logs" / f"hostenv_{datetime.now().strftime('%Y-%m-%d')}.log"
    return Path(value).expanduser()


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """Apply level and handler settings to the package logger.

    Handlers are attached only once. A log file that cannot be opened
    is reported through a stderr handler instead.
    """
    settings_error = None
    if settings is None:
        try:
            settings = get_settings()
        except ValueError as e:
            settings_error = e
            settings = Settings()

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.log_level)

    if not logger.handlers:
        log_path = log_file_path(settings.log_file)
        if log_path is not None:
            logger.addHandler(_file_handler(log_path))

    if settings_error is not None:
        logger.warning(f"Ignoring invalid settings for logging: {settings_error}")
    return logger


def _file_handler(log_path: Path) -> logging.Handler:
    try:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
    except OSError as e:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(
            f"Failed to open log file {log_path}: {e} | %(name)s | %(message)s"
        ))
    return handler
