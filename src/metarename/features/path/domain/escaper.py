"""
Summary: Replace characters forbidden in Windows file names with look-alikes.
Why: Rendered names must be valid on the strictest filesystem we write to.
"""

from __future__ import annotations

from typing import Final

# < and > are not substituted.
ESCAPE_TABLE: Final[dict[str, str]] = {
    ":": ",",
    '"': "'",
    "/": "!",
    "\\": "!",
    "|": "!",
    "?": "!",
    "*": "+",
}

_TRANSLATION: Final[dict[int, str]] = str.maketrans(ESCAPE_TABLE)


def escape(text: str) -> str:
    """Substitute every forbidden character in one pass.

    Substitutions never cascade: output characters are not re-scanned.

    Args:
        text: Candidate file or directory name.

    Returns:
        str: ``text`` with each character from ``ESCAPE_TABLE`` replaced.
    """
    return text.translate(_TRANSLATION)


__all__ = ["ESCAPE_TABLE", "escape"]
