"""Tests for the ``EventRichHandler`` and logger setup."""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import Any

from rich.console import Console

from metarename.platform.logging import EventRichHandler, setup_logger


def _make_handler() -> EventRichHandler:
    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    return EventRichHandler(console=console)


def _build_record(level: int = logging.INFO, **extras: Any) -> logging.LogRecord:
    record = logging.LogRecord(
        name="metarename",
        level=level,
        pathname="test",
        lineno=0,
        msg="",
        args=(),
        exc_info=None,
    )
    for key, value in extras.items():
        setattr(record, key, value)
    return record


def test_known_event_is_prefixed_with_icon() -> None:
    handler = _make_handler()

    text = handler.render_message(_build_record(event="rename.file.move"), "Moved a -> b")

    assert text.plain == "📦 Moved a -> b"


def test_warning_without_event_shows_level() -> None:
    handler = _make_handler()

    text = handler.render_message(_build_record(level=logging.WARNING), "careful")

    assert text.plain == "WARNING: careful"


def test_unknown_event_falls_back_to_plain_message() -> None:
    handler = _make_handler()

    text = handler.render_message(_build_record(event="something.else"), "hello")

    assert text.plain == "hello"


def test_setup_logger_adds_rotating_file_handler(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "metarename.log"

    logger = setup_logger(log_file=log_file, console_level=logging.ERROR)
    try:
        logger.debug("written to file")
        for handler in logger.handlers:
            handler.flush()

        assert log_file.exists()
        assert "written to file" in log_file.read_text(encoding="utf-8")
        assert any(isinstance(h, EventRichHandler) for h in logger.handlers)
    finally:
        _ = setup_logger(console_level=logging.ERROR)


def test_setup_logger_replaces_previous_handlers() -> None:
    _ = setup_logger()
    logger = setup_logger()

    assert len(logger.handlers) == 1
