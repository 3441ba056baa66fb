"""
Logging configuration for the StarkEx client.

All package loggers live under "starkex_client"; setup_logging() routes them
to stdout (and optionally a rotating file) with credential redaction on every
handler.
"""

import copy
import logging
import logging.config
from typing import Any, Dict, Optional

PACKAGE_LOGGER = "starkex_client"
REDACTION_FILTER = "starkex_client.utils.structured_logging.CredentialRedactionFilter"

FORMATTERS = {
    "standard": {
        "format": "%(asctime)s %(levelname)-8s %(name)s | %(message)s",
        "datefmt": "%Y-%m-%dT%H:%M:%S"
    },
    "detailed": {
        "format": "%(asctime)s %(levelname)-8s %(name)s:%(funcName)s:%(lineno)d | %(message)s",
        "datefmt": "%Y-%m-%dT%H:%M:%S"
    },
    "json": {
        "()": "pythonjsonlogger.json.JsonFormatter",
        "format": "%(asctime)s %(name)s %(levelname)s %(message)s"
    }
}

DEFAULT_LOGGING_CONFIG: Dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "filters": {"redact": {"()": REDACTION_FILTER}},
    "formatters": FORMATTERS,
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "level": "DEBUG",
            "formatter": "standard",
            "filters": ["redact"],
            "stream": "ext://sys.stdout"
        }
    },
    "loggers": {
        PACKAGE_LOGGER: {"level": "INFO", "handlers": ["console"], "propagate": False}
    },
    "root": {"level": "WARNING", "handlers": ["console"]}
}

LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5


def _file_handler(path: str) -> Dict[str, Any]:
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "level": "DEBUG",
        "formatter": "detailed",
        "filters": ["redact"],
        "filename": path,
        "maxBytes": LOG_FILE_MAX_BYTES,
        "backupCount": LOG_FILE_BACKUPS
    }


def setup_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    json_format: bool = False
) -> Dict[str, Any]:
    """
    Configure package logging.

    Args:
        level: Package log level (DEBUG, INFO, WARNING, ERROR)
        log_file: Also write to this rotating file
        json_format: Emit JSON lines on every handler

    Returns:
        The dictConfig that was applied
    """
    config = copy.deepcopy(DEFAULT_LOGGING_CONFIG)
    package = config["loggers"][PACKAGE_LOGGER]

    if level:
        package["level"] = level.upper()

    if log_file:
        config["handlers"]["file"] = _file_handler(log_file)
        package["handlers"].append("file")

    if json_format:
        for handler in config["handlers"].values():
            handler["formatter"] = "json"

    logging.config.dictConfig(config)
    return config


def setup_logging_from_settings(settings) -> Dict[str, Any]:
    """Apply log_level / log_json from StarkexSettings."""
    return setup_logging(level=settings.log_level, json_format=settings.log_json)
