"""Audio tag extraction into metadata records.

Where: src/metarename/features/metadata/usecases/extraction.py
What: Read easy tags with mutagen and map them onto record field names.
Why: Feed the normalizer with raw values without parsing media formats ourselves.
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any, ClassVar, final

import mutagen
from mutagen import MutagenError

from metarename.platform.logging import logger
from metarename.shared.errors import MetadataExtractionError
from metarename.shared.metadata_record import KnownField, MetadataRecord


@final
class MetadataExtractor:
    """Extract metadata from audio files supported by mutagen's easy interface."""

    SUPPORTED_FORMATS: ClassVar[frozenset[str]] = frozenset(
        {".mp3", ".flac", ".m4a", ".mp4", ".ogg", ".opus"}
    )

    # mutagen easy tag name -> record field name
    TAG_MAPPING: ClassVar[dict[str, str]] = {
        "title": KnownField.TITLE,
        "artist": KnownField.ARTIST,
        "album": KnownField.ALBUM,
        "albumartist": KnownField.ALBUM_ARTIST,
        "tracknumber": KnownField.TRACK_NUMBER,
        "discnumber": KnownField.DISC_NUMBER,
        "date": KnownField.RELEASE_DATE,
        "genre": KnownField.GENRE,
        "composer": KnownField.COMPOSER,
    }

    @classmethod
    def is_supported(cls, file_path: Path) -> bool:
        return file_path.suffix.lower() in cls.SUPPORTED_FORMATS

    @classmethod
    def extract(cls, file_path: Path) -> MetadataRecord:
        """Extract the raw metadata of an audio file.

        Args:
            file_path: Path to the audio file.

        Returns:
            MetadataRecord: Mapped tag values. Multi-valued tags keep every value.

        Raises:
            MetadataExtractionError: If the format is unsupported or the tags
                cannot be read.
        """
        if not cls.is_supported(file_path):
            raise MetadataExtractionError(
                file_path, f"unsupported file format: {file_path.suffix.lower()}"
            )

        try:
            audio = mutagen.File(file_path, easy=True)
        except (MutagenError, OSError) as exc:
            raise MetadataExtractionError(file_path, str(exc)) from exc

        if audio is None:
            raise MetadataExtractionError(file_path, "unrecognized audio data")

        tags: Any = audio.tags if audio.tags is not None else {}
        record = cls.map_tags(tags)
        logger.debug("Extracted %d fields from %s", len(record), file_path)
        return record

    @classmethod
    def map_tags(cls, tags: Any) -> MetadataRecord:
        """Map an easy-tag mapping (tag -> list of values) to a record."""

        fields: dict[str, list[str]] = {}
        for tag_name, field_name in cls.TAG_MAPPING.items():
            if tag_name not in tags:
                continue
            values = cls._as_strings(tags[tag_name])
            if values:
                fields[field_name] = values
        return MetadataRecord.from_mapping(fields)

    @staticmethod
    def _as_strings(raw: Any) -> list[str]:
        if raw is None:
            return []
        if isinstance(raw, str):
            return [raw]
        if isinstance(raw, Iterable):
            return [str(item) for item in raw]
        return [str(raw)]


__all__ = ["MetadataExtractor"]
