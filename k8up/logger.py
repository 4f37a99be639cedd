"""The application-wide logger stored in the command's metadata."""

from __future__ import annotations

import logging
from typing import Any, MutableMapping

LOGGER_METADATA_KEY = "logger"


def set_app_logger(metadata: MutableMapping[str, Any], logger: logging.Logger) -> None:
    """Store the application logger so that app_logger can retrieve it."""
    metadata[LOGGER_METADATA_KEY] = logger


def app_logger(metadata: MutableMapping[str, Any]) -> logging.Logger:
    """Return the stored application logger; KeyError if none was set."""
    return metadata[LOGGER_METADATA_KEY]


def new_logger(name: str, debug: bool) -> logging.Logger:
    """Return a named logger at debug or info level, writing to stderr."""
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s\t%(levelname)s\t%(name)s\t%(message)s")
        )
        logger.addHandler(handler)
    return logger