"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the shared logger, setup helper and Rich handler.
Why: Provide a single canonical import path for every module that logs.
"""

from __future__ import annotations

from .config import LOGGER_NAME, logger, setup_logger
from .handlers import EventRichHandler

__all__ = [
    "EventRichHandler",
    "LOGGER_NAME",
    "logger",
    "setup_logger",
]
