"""
Summary: Structured diagnostics produced while normalizing metadata.
Why: Let callers choose to log, collect or ignore anomalies instead of printing them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import final


class DiagnosticKind(StrEnum):
    """Categories of advisory findings raised during normalization."""

    ALBUM_ARTIST_ANOMALY = "album_artist_anomaly"
    DUPLICATE_RELEASE_YEAR = "duplicate_release_year"


@final
@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A single non-blocking finding about one metadata field."""

    kind: DiagnosticKind
    field: str
    value: str
    message: str

    def __str__(self) -> str:
        return f'{self.message} [{self.field}="{self.value}"]'


__all__ = ["Diagnostic", "DiagnosticKind"]
