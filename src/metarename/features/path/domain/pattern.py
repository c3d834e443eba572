"""
Summary: Parse slash-delimited naming patterns into field and literal tokens.
Why: Separate pattern syntax from value substitution so both stay testable.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum
from typing import Final, final

PATTERN_DELIMITER: Final[str] = "/"
EXTENSION_TOKEN: Final[str] = "extension"
PATTERN_DEFAULT: Final[str] = (
    "albumArtist/releaseYear - album/"
    "artist - releaseYear - album - trackNumber - title.extension"
)

# Field names may carry a namespace prefix such as "xmpDM:album".
_WORD: Final[re.Pattern[str]] = re.compile(r"[A-Za-z_][A-Za-z0-9_]*(?::[A-Za-z_][A-Za-z0-9_]*)?")


class TokenKind(StrEnum):
    FIELD = "field"
    LITERAL = "literal"


@final
@dataclass(frozen=True, slots=True)
class PatternToken:
    kind: TokenKind
    text: str


@final
@dataclass(frozen=True, slots=True)
class Pattern:
    """Parsed pattern: one tuple of tokens per path component."""

    source: str
    segments: tuple[tuple[PatternToken, ...], ...]

    @property
    def field_names(self) -> list[str]:
        """Return the field-candidate words in order of appearance."""

        return [
            token.text
            for segment in self.segments
            for token in segment
            if token.kind is TokenKind.FIELD
        ]

    def is_final_token(self, segment_index: int, token_index: int) -> bool:
        return (
            segment_index == len(self.segments) - 1
            and token_index == len(self.segments[segment_index]) - 1
        )


def split_pattern(pattern: str, delimiters: str = PATTERN_DELIMITER) -> list[str]:
    """Split ``pattern`` on any character of ``delimiters``.

    Runs of delimiters collapse and empty segments are discarded, so leading
    and trailing delimiters vanish.

    Raises:
        ValueError: If ``delimiters`` is empty.
    """
    if not delimiters:
        raise ValueError("Pattern delimiters must not be empty.")

    splitter = re.compile("[" + re.escape(delimiters) + "]+")
    return [segment for segment in splitter.split(pattern) if segment]


def tokenize_segment(segment: str) -> tuple[PatternToken, ...]:
    """Scan one path component into alternating literal and field tokens."""

    tokens: list[PatternToken] = []
    position = 0
    for match in _WORD.finditer(segment):
        if match.start() > position:
            tokens.append(PatternToken(TokenKind.LITERAL, segment[position : match.start()]))
        tokens.append(PatternToken(TokenKind.FIELD, match.group()))
        position = match.end()
    if position < len(segment):
        tokens.append(PatternToken(TokenKind.LITERAL, segment[position:]))
    return tuple(tokens)


def parse_pattern(pattern: str, delimiters: str = PATTERN_DELIMITER) -> Pattern:
    """Parse a naming pattern.

    Args:
        pattern: Raw pattern such as ``PATTERN_DEFAULT``.
        delimiters: Characters separating path components.

    Returns:
        Pattern: Immutable token structure.
    """
    segments = tuple(tokenize_segment(segment) for segment in split_pattern(pattern, delimiters))
    return Pattern(source=pattern, segments=segments)


__all__ = [
    "EXTENSION_TOKEN",
    "PATTERN_DEFAULT",
    "PATTERN_DELIMITER",
    "Pattern",
    "PatternToken",
    "TokenKind",
    "parse_pattern",
    "split_pattern",
    "tokenize_segment",
]
