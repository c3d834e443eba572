"""Path domain: pattern parsing and filesystem-safe escaping."""

from .escaper import ESCAPE_TABLE, escape
from .pattern import (
    EXTENSION_TOKEN,
    PATTERN_DEFAULT,
    PATTERN_DELIMITER,
    Pattern,
    PatternToken,
    TokenKind,
    parse_pattern,
)

__all__ = [
    "ESCAPE_TABLE",
    "EXTENSION_TOKEN",
    "PATTERN_DEFAULT",
    "PATTERN_DELIMITER",
    "Pattern",
    "PatternToken",
    "TokenKind",
    "escape",
    "parse_pattern",
]
