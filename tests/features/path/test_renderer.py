"""
Summary: Validate rendering of normalized metadata through naming patterns.
Why: The rendered path decides where every file ends up.
"""

from __future__ import annotations

from pathlib import PurePosixPath

import pytest

from metarename.features.metadata import normalize
from metarename.features.path import PATTERN_DEFAULT, parse_pattern, render, render_path
from metarename.shared.metadata_record import MetadataRecord


@pytest.fixture
def queen_record() -> MetadataRecord:
    """Raw metadata of the first track of A Night at the Opera."""

    return MetadataRecord.from_mapping(
        {
            "albumArtist": "",
            "artist": "Queen",
            "album": "A Night at the Opera",
            "releaseDate": "1975-11-21",
            "trackNumber": "1/9",
            "title": "Death on Two Legs",
        }
    )


def test_default_pattern_end_to_end(queen_record: MetadataRecord) -> None:
    normalized = normalize(queen_record).record

    assert render(PATTERN_DEFAULT, normalized, "mp3") == (
        "Queen/1975 - A Night at the Opera/"
        "Queen - 1975 - A Night at the Opera - 01 - Death on Two Legs.mp3"
    )


def test_extension_with_leading_dot(queen_record: MetadataRecord) -> None:
    normalized = normalize(queen_record).record

    assert render("artist/title.extension", normalized, ".flac") == "Queen/Death on Two Legs.flac"


def test_missing_extension_drops_trailing_dot(queen_record: MetadataRecord) -> None:
    normalized = normalize(queen_record).record

    assert render("title.extension", normalized, "") == "Death on Two Legs"


def test_extension_word_inside_pattern_is_not_special() -> None:
    record = MetadataRecord.from_mapping({"title": "Song"})

    assert render("extension/title.extension", record, "ogg") == "extension/Song.ogg"


def test_first_assigned_value_is_rendered() -> None:
    record = MetadataRecord.from_mapping({"releaseYear": ["1975", "1976"], "album": "Opera"})

    assert render("releaseYear - album", record) == "1975 - Opera"


def test_absent_known_field_renders_empty() -> None:
    record = MetadataRecord.from_mapping({"title": "Song"})

    assert render("[genre] title", record) == "[] Song"


def test_unknown_words_pass_through_as_literals() -> None:
    record = MetadataRecord.from_mapping({"album": "Opera", "discNumber": "2"})

    assert render("album/Disc discNumber", record) == "Opera/Disc 2"


def test_record_keys_outside_known_fields_resolve() -> None:
    record = MetadataRecord.from_mapping({"xmpDM:album": "Opera", "label": "EMI"})

    assert render("label/xmpDM:album", record) == "EMI/Opera"


def test_metadata_slashes_are_escaped_but_delimiters_kept() -> None:
    record = MetadataRecord.from_mapping({"albumArtist": "AC/DC", "album": "Who Made Who?"})

    assert render("albumArtist/album", record) == "AC!DC/Who Made Who!"


def test_literal_segments_are_escaped_after_assembly() -> None:
    record = MetadataRecord.from_mapping({"title": "Song"})

    assert render("Live: title", record) == "Live, Song"


def test_empty_components_are_dropped() -> None:
    record = MetadataRecord.from_mapping({"title": "Song"})

    assert render("albumArtist/title.extension", record, "mp3") == "Song.mp3"


def test_render_accepts_parsed_pattern() -> None:
    pattern = parse_pattern("artist/title.extension")
    record = MetadataRecord.from_mapping({"artist": "Queen", "title": "Seaside Rendezvous"})

    assert render(pattern, record, "mp3") == render(pattern.source, record, "mp3")


def test_render_path_returns_posix_path() -> None:
    record = MetadataRecord.from_mapping({"artist": "Queen", "title": "Bohemian Rhapsody"})

    path = render_path("artist/title.extension", record, "mp3")

    assert path == PurePosixPath("Queen", "Bohemian Rhapsody.mp3")
    assert path.suffix == ".mp3"


def test_colon_joined_field_names_resolve_each_half() -> None:
    record = MetadataRecord.from_mapping({"artist": "Queen", "title": "Love of My Life"})

    assert render("artist:title", record) == "Queen,Love of My Life"


def test_unknown_namespaced_word_stays_literal() -> None:
    record = MetadataRecord.from_mapping({"title": "Song"})

    assert render("xmpDM:album title", record) == "xmpDM,album Song"


@pytest.mark.parametrize(
    ("album_artist", "expected"),
    [
        ("..", "../Song.mp3"),
        (".", "./Song.mp3"),
        ("...", ".../Song.mp3"),
    ],
)
def test_dot_only_values_are_not_escaped(album_artist: str, expected: str) -> None:
    record = MetadataRecord.from_mapping({"albumArtist": album_artist, "title": "Song"})

    assert render("albumArtist/title.extension", record, "mp3") == expected
