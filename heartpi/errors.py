# -*- coding: utf-8 -*-
"""Error taxonomy and the error log file."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from .config import settings

logger = logging.getLogger(__name__)

_ERROR_LOG_FORMAT = "[ERROR!] %(asctime)s: %(message)s"


class HeartPiError(Exception):
    """Base class for runtime failures raised by HeartPi collaborators."""


class StorageError(HeartPiError):
    """A reading or history file could not be written."""


class AlertDeliveryError(HeartPiError):
    """A caregiver alert could not be delivered."""


class PreconditionViolation(ValueError):
    """A caller broke a documented precondition (a programming error)."""


def configure_logging(error_log_path: Optional[Path] = None, level: Optional[str] = None) -> logging.Handler:
    """Set the package log level and mirror ERROR records into the error log file.

    Calling it again with the same path reuses the existing handler.
    """
    path = error_log_path or settings.error_log_path
    root = logging.getLogger("heartpi")
    root.setLevel(level or settings.log_level)

    for handler in root.handlers:
        if isinstance(handler, logging.FileHandler) and handler.baseFilename == os.path.abspath(path):
            return handler

    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path, encoding="utf-8", delay=True)
    handler.setLevel(logging.ERROR)
    handler.setFormatter(logging.Formatter(_ERROR_LOG_FORMAT))
    root.addHandler(handler)
    return handler


def log_exception(exc: BaseException) -> None:
    logger.error("Exception caught: %s", exc)
