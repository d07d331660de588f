"""Logging setup: console output plus one log file per day."""

import logging
import sys
from datetime import date
from pathlib import Path
from typing import Optional, Union

from jax_mrr import config

LOG_FORMAT = "%(asctime)s [%(levelname)s]: %(message)s"
DATE_FORMAT = "%H:%M:%S"

_HANDLER_MARK = "_jax_mrr_handler"


def log_file_name(day: date) -> str:
    """Daily log file name, ``<day>-<month>-<year>.txt``."""
    return f"{day.day}-{day.month}-{day.year}.txt"


def configure_logging(
    log_dir: Optional[Union[str, Path]] = None,
    level: Union[int, str] = config.LOG_LEVEL,
) -> Optional[Path]:
    """Attach console and file handlers to the ``jax_mrr`` logger.

    Calling this again replaces the handlers installed by the previous call.

    Args:
        log_dir: Directory for the daily log file. ``None`` logs to the
                 console only.
        level: Logging level name or number.

    Returns:
        Path of the log file, or ``None`` when no file handler was installed.
    """
    logger = logging.getLogger("jax_mrr")
    logger.setLevel(level)
    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            logger.removeHandler(handler)
            handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    setattr(console, _HANDLER_MARK, True)
    logger.addHandler(console)

    if log_dir is None:
        return None

    log_dir = Path(log_dir)
    try:
        log_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        print(f"Could not create log directory '{log_dir}': {exc}", file=sys.stderr)
        return None

    log_path = log_dir / log_file_name(date.today())
    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setFormatter(formatter)
    setattr(file_handler, _HANDLER_MARK, True)
    logger.addHandler(file_handler)
    return log_path
