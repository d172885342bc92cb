"""Logging configuration"""

import logging
import sys
from logging.config import dictConfig

from namesmith.config import settings


def configure_logging(level: str | None = None, log_format: str | None = None) -> None:
    """Configure the ``namesmith`` logger.

    Args:
        level: Log level name. Defaults to ``settings.logging.level``.
        log_format: "pretty" (rich) or "plain". Defaults to ``settings.logging.format``.
    """
    level = (level or settings.logging.level).upper()
    log_format = log_format or settings.logging.format

    match log_format:
        case "pretty":
            handler = "console-pretty"
        case "plain":
            handler = "console-plain"
        case _:
            raise ValueError(
                f"Invalid log format: {log_format}. Should either be 'pretty' or 'plain'."
            )

    dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "text": {"format": "%(message)s"},
                "plain": {"format": "%(levelname)s %(name)s: %(message)s"},
            },
            "handlers": {
                "console-pretty": {
                    "level": level,
                    "class": "rich.logging.RichHandler",
                    "formatter": "text",
                    "show_path": False,
                },
                "console-plain": {
                    "level": level,
                    "class": "logging.StreamHandler",
                    "formatter": "plain",
                    "stream": sys.stderr,
                },
            },
            "loggers": {
                "namesmith": {
                    "handlers": [handler],
                    "level": level,
                    "propagate": False,
                },
            },
        }
    )
    logging.getLogger("namesmith").debug("Logging configured at %s (%s)", level, log_format)
