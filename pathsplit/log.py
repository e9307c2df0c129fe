# Copyright © 2024 Norman Fomferra and contributors
# Permissions are hereby granted under the terms of the MIT License:
# https://opensource.org/licenses/MIT.

import logging
import logging.config
from typing import Any

logger = logging.getLogger("pathsplit")


_nameToLevel = {
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.FATAL,
    "ERROR": logging.ERROR,
    "WARN": logging.WARNING,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "NOTSET": logging.NOTSET,
}

LOG_LEVELS = list(_nameToLevel.keys())


def get_log_level(level_name: str) -> int:
    return _nameToLevel.get(level_name, logging.NOTSET)


def configure_logging(logging_config: dict[str, Any] | str | bool | None):
    """Configure the `pathsplit` logger.

    Args:
        logging_config: `None` or `False` to leave logging untouched,
            `True` to log to the console using level `"INFO"`,
            a level name to log to the console using that level,
            or a dictionary passed to `logging.config.dictConfig()`.
    """
    if not logging_config:
        return
    if isinstance(logging_config, (str, bool)):
        logging_config = {
            "version": 1,
            "formatters": {
                "normal": {
                    "format": "%(asctime)s %(levelname)s %(message)s",
                    "style": "%",
                }
            },
            "handlers": {
                "console": {"class": "logging.StreamHandler", "formatter": "normal"}
            },
            "loggers": {
                "pathsplit": {
                    "level": (
                        get_log_level(logging_config)
                        if isinstance(logging_config, str)
                        else logging.INFO
                    ),
                    "handlers": ["console"],
                }
            },
        }
    logging.config.dictConfig(logging_config)
