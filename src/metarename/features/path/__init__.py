"""
Summary: Public API for pattern parsing, escaping and path rendering.
Why: Offer a single import path for the renaming engine.
"""

from .domain import (
    EXTENSION_TOKEN,
    PATTERN_DEFAULT,
    PATTERN_DELIMITER,
    Pattern,
    escape,
    parse_pattern,
)
from .usecases import render, render_components, render_path

__all__ = [
    "EXTENSION_TOKEN",
    "PATTERN_DEFAULT",
    "PATTERN_DELIMITER",
    "Pattern",
    "escape",
    "parse_pattern",
    "render",
    "render_components",
    "render_path",
]
