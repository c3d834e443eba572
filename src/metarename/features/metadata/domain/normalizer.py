"""
Summary: Derive and clean year, track and album-artist fields before rendering.
Why: Rendering assumes normalized input and performs no cleanup of its own.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Final, final

from metarename.shared.metadata_record import KnownField, MetadataRecord

from .diagnostics import Diagnostic, DiagnosticKind

VARIOUS_ARTISTS: Final[str] = "Various"
_VARIOUS_ALIASES: Final[frozenset[str]] = frozenset({"Various Artists", "Various artists"})
_ANOMALY_MARKER: Final[str] = "rtist"


@final
@dataclass(frozen=True, slots=True)
class NormalizationResult:
    """Normalized record plus the diagnostics collected on the way."""

    record: MetadataRecord
    diagnostics: tuple[Diagnostic, ...] = field(default_factory=tuple)


def extract_year(release_date: str) -> str:
    """Return the leading year portion of a release date.

    A ``-`` separator takes precedence over ``/``; without either the whole
    value is returned.
    """
    for separator in ("-", "/"):
        head, found, _ = release_date.partition(separator)
        if found:
            return head
    return release_date


def clean_track(track_number: str) -> str:
    """Drop a ``/total`` suffix and pad single characters to two ("1/6" -> "01")."""

    track, _, _ = track_number.partition("/")
    if len(track) == 1:
        return "0" + track
    return track


def derive_release_year(
    record: MetadataRecord, diagnostics: list[Diagnostic]
) -> MetadataRecord:
    """Append the year of ``releaseDate`` to ``releaseYear``.

    Existing ``releaseYear`` values are kept ahead of the new one, so a record
    normalized twice carries the year twice. That case is reported as a
    ``DUPLICATE_RELEASE_YEAR`` diagnostic.
    """
    release_date = record.get(KnownField.RELEASE_DATE)
    if release_date is None:
        return record

    year = extract_year(release_date)
    if year in record.values(KnownField.RELEASE_YEAR):
        diagnostics.append(
            Diagnostic(
                kind=DiagnosticKind.DUPLICATE_RELEASE_YEAR,
                field=KnownField.RELEASE_YEAR,
                value=year,
                message="releaseYear already holds the derived year",
            )
        )
    return record.with_added(KnownField.RELEASE_YEAR, year)


def clean_track_number(record: MetadataRecord) -> MetadataRecord:
    track_number = record.get(KnownField.TRACK_NUMBER)
    if not track_number:
        return record
    return record.with_value(KnownField.TRACK_NUMBER, clean_track(track_number))


def fill_album_artist(record: MetadataRecord) -> MetadataRecord:
    """Fall back to ``artist`` when ``albumArtist`` is absent or empty."""

    if record.get(KnownField.ALBUM_ARTIST):
        return record
    artist = record.get(KnownField.ARTIST)
    if artist is None:
        return record
    return record.with_value(KnownField.ALBUM_ARTIST, artist)


def canonicalize_album_artist(
    record: MetadataRecord, diagnostics: list[Diagnostic]
) -> MetadataRecord:
    """Map compilation spellings to ``Various`` and flag suspicious leftovers."""

    album_artist = record.get(KnownField.ALBUM_ARTIST)
    if album_artist is None:
        return record

    if album_artist in _VARIOUS_ALIASES:
        return record.with_value(KnownField.ALBUM_ARTIST, VARIOUS_ARTISTS)

    if _ANOMALY_MARKER in album_artist:
        diagnostics.append(
            Diagnostic(
                kind=DiagnosticKind.ALBUM_ARTIST_ANOMALY,
                field=KnownField.ALBUM_ARTIST,
                value=album_artist,
                message="albumArtist looks like an uncanonical compilation name",
            )
        )
    return record


def normalize(record: MetadataRecord) -> NormalizationResult:
    """Normalize a freshly extracted record.

    Args:
        record: Raw metadata. It is not modified.

    Returns:
        NormalizationResult: A new record with ``releaseYear`` derived,
        ``trackNumber`` cleaned and ``albumArtist`` filled and canonicalized,
        together with any advisory diagnostics.
    """
    diagnostics: list[Diagnostic] = []

    normalized = derive_release_year(record, diagnostics)
    normalized = clean_track_number(normalized)
    normalized = fill_album_artist(normalized)
    normalized = canonicalize_album_artist(normalized, diagnostics)

    return NormalizationResult(record=normalized, diagnostics=tuple(diagnostics))


__all__ = [
    "NormalizationResult",
    "VARIOUS_ARTISTS",
    "canonicalize_album_artist",
    "clean_track",
    "clean_track_number",
    "derive_release_year",
    "extract_year",
    "fill_album_artist",
    "normalize",
]
