"""Logging configuration for the code-generation tool."""

import logging
from logging.config import dictConfig

from crdgen.settings import get_settings


LOGGING_CONFIG = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "default": {
            "format": "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        }
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
        }
    },
    "root": {
        "level": "INFO",
        "handlers": ["console"],
    },
}


def configure_logging(level: str | None = None) -> None:
    """Configure logging based on settings."""

    settings = get_settings()
    config = {**LOGGING_CONFIG, "root": {**LOGGING_CONFIG["root"]}}
    config["root"]["level"] = (level or settings.log_level).upper()
    dictConfig(config)
    logging.getLogger(__name__).debug("Logging configured at %s", config["root"]["level"])
