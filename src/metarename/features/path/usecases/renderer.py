"""
Summary: Render a naming pattern and a normalized record into a relative path.
Why: Produce the destination name that relocation moves or copies a file to.
"""

from __future__ import annotations

from pathlib import PurePosixPath

from metarename.shared.metadata_record import KNOWN_FIELD_NAMES, MetadataRecord

from ..domain.escaper import escape
from ..domain.pattern import (
    EXTENSION_TOKEN,
    PATTERN_DELIMITER,
    Pattern,
    PatternToken,
    TokenKind,
    parse_pattern,
)


def resolve_token(token: PatternToken, record: MetadataRecord) -> str:
    """Resolve one token against ``record``.

    A field word present in the record yields its first assigned value. A
    well-known field name that is absent yields an empty string. A
    ``prefix:name`` word that is not a record key resolves each half when both
    are field names. Any other word is a pattern literal and is returned
    unchanged.
    """
    if token.kind is TokenKind.LITERAL:
        return token.text
    if token.text in record:
        return record.get(token.text) or ""
    if token.text in KNOWN_FIELD_NAMES:
        return ""
    names = token.text.split(":")
    if len(names) > 1 and all(name in record or name in KNOWN_FIELD_NAMES for name in names):
        return ":".join(
            resolve_token(PatternToken(TokenKind.FIELD, name), record) for name in names
        )
    return token.text


def render_components(
    pattern: str | Pattern, record: MetadataRecord, extension: str = ""
) -> list[str]:
    """Render each pattern segment into an escaped path component.

    Components that resolve to an empty string are dropped.
    """
    parsed = pattern if isinstance(pattern, Pattern) else parse_pattern(pattern)
    suffix = extension.lstrip(".")

    components: list[str] = []
    for segment_index, segment in enumerate(parsed.segments):
        parts: list[str] = []
        for token_index, token in enumerate(segment):
            if (
                token.kind is TokenKind.FIELD
                and token.text == EXTENSION_TOKEN
                and parsed.is_final_token(segment_index, token_index)
            ):
                if suffix:
                    parts.append(suffix)
                elif parts and parts[-1].endswith("."):
                    # no extension: drop the dot that introduced it
                    parts[-1] = parts[-1][:-1]
                continue
            parts.append(resolve_token(token, record))

        component = escape("".join(parts))
        if component:
            components.append(component)
    return components


def render(pattern: str | Pattern, record: MetadataRecord, extension: str = "") -> str:
    """Render ``record`` through ``pattern``.

    Args:
        pattern: Pattern string or a pre-parsed ``Pattern``.
        record: Normalized metadata. When a field holds several values the
            first assigned value is used.
        extension: Source file extension, with or without the leading dot.
            It replaces a trailing ``extension`` token.

    Returns:
        str: Relative path joined with ``/``. Each component is escaped once
        after assembly, so the pattern's own delimiters survive while a ``/``
        inside a metadata value becomes ``!``.
    """
    return PATTERN_DELIMITER.join(render_components(pattern, record, extension))


def render_path(
    pattern: str | Pattern, record: MetadataRecord, extension: str = ""
) -> PurePosixPath:
    return PurePosixPath(*render_components(pattern, record, extension))


__all__ = ["render", "render_components", "render_path", "resolve_token"]
