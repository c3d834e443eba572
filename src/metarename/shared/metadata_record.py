"""
Summary: Immutable multi-valued metadata record shared across features.
Why: Give extraction, normalization and rendering one canonical field container.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import final


class KnownField(StrEnum):
    """Field names the normalizer and renderer understand."""

    TITLE = "title"
    ARTIST = "artist"
    ALBUM = "album"
    ALBUM_ARTIST = "albumArtist"
    TRACK_NUMBER = "trackNumber"
    RELEASE_DATE = "releaseDate"
    RELEASE_YEAR = "releaseYear"
    DISC_NUMBER = "discNumber"
    GENRE = "genre"
    COMPOSER = "composer"


KNOWN_FIELD_NAMES: frozenset[str] = frozenset(member.value for member in KnownField)


@final
@dataclass(frozen=True, slots=True)
class MetadataRecord:
    """Mapping of field name to an ordered tuple of string values.

    A key that is absent is distinct from a key holding an empty string. When a
    key carries several values, readers that need a single value always get the
    first assigned one (see ``get``).
    """

    _fields: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        frozen = {str(key): tuple(values) for key, values in self._fields.items()}
        object.__setattr__(self, "_fields", MappingProxyType(frozen))

    @classmethod
    def from_mapping(
        cls, mapping: Mapping[str, str | Sequence[str] | None]
    ) -> MetadataRecord:
        """Build a record from plain or multi-valued mappings.

        Args:
            mapping: Field values as strings or sequences of strings. ``None``
                values are treated as absent fields.

        Returns:
            MetadataRecord: New record holding the given values.
        """
        fields: dict[str, tuple[str, ...]] = {}
        for key, value in mapping.items():
            if value is None:
                continue
            if isinstance(value, str):
                fields[key] = (value,)
            else:
                fields[key] = tuple(str(item) for item in value)
        return cls(fields)

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the first assigned value for ``key`` or ``default`` if absent."""

        values = self._fields.get(key)
        if not values:
            return default
        return values[0]

    def values(self, key: str) -> tuple[str, ...]:
        """Return every value assigned to ``key`` in assignment order."""

        return self._fields.get(key, ())

    def names(self) -> list[str]:
        return list(self._fields)

    def with_value(self, key: str, value: str) -> MetadataRecord:
        """Return a copy where ``key`` holds only ``value``."""

        fields = dict(self._fields)
        fields[key] = (value,)
        return MetadataRecord(fields)

    def with_added(self, key: str, value: str) -> MetadataRecord:
        """Return a copy where ``value`` is appended to the values of ``key``."""

        fields = dict(self._fields)
        fields[key] = (*fields.get(key, ()), value)
        return MetadataRecord(fields)

    def as_dict(self) -> dict[str, str]:
        """Flatten the record to first values only."""

        return {key: values[0] for key, values in self._fields.items() if values}

    def __contains__(self, key: object) -> bool:
        return key in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)


__all__ = ["KNOWN_FIELD_NAMES", "KnownField", "MetadataRecord"]
