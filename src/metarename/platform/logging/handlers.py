"""Rich console handler decorating structured events.

Where: platform/logging/handlers.py
What: Prefix log lines carrying an ``event`` extra with an icon and colour.
Why: Keep per-file progress readable without formatting in business code.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, override

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.text import Text


class EventRichHandler(RichHandler):
    """Rich handler that styles records by their structured event name."""

    _EVENT_STYLES: ClassVar[dict[str, tuple[str, str]]] = {
        "rename.directory.start": ("🚀", "cyan"),
        "rename.directory.complete": ("✅", "green"),
        "rename.directory.no_files": ("ℹ️", "yellow"),
        "rename.file.start": ("🎧", "blue"),
        "rename.file.success": ("🎉", "green"),
        "rename.file.unchanged": ("↪️", "yellow"),
        "rename.file.diagnostic": ("⚠️", "yellow"),
        "rename.file.error": ("⛔", "red"),
        "rename.file.move": ("📦", "magenta"),
        "rename.file.copy": ("📄", "magenta"),
        "rename.file.plan": ("📝", "cyan"),
    }
    _LEVEL_STYLES: ClassVar[dict[int, str]] = {
        logging.DEBUG: "dim",
        logging.WARNING: "yellow",
        logging.ERROR: "bold red",
        logging.CRITICAL: "bold red",
    }

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        kwargs["show_time"] = False
        kwargs["show_path"] = False
        kwargs["show_level"] = False
        kwargs["rich_tracebacks"] = True
        kwargs["markup"] = False
        super().__init__(*args, **kwargs)

    @override
    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        event = getattr(record, "event", None)
        text = Text()
        if isinstance(event, str) and event in self._EVENT_STYLES:
            icon, style = self._EVENT_STYLES[event]
            _ = text.append(f"{icon} ", style=style)
            _ = text.append(message, style=style)
            return text

        style = self._LEVEL_STYLES.get(record.levelno, "")
        if record.levelno >= logging.WARNING:
            _ = text.append(f"{record.levelname}: ", style=style)
        _ = text.append(message, style=style)
        return text


__all__ = ["EventRichHandler"]
