"""Shared types used by more than one feature.

Where: src/metarename/shared/__init__.py
What: Re-export the metadata record and the error hierarchy.
Why: Keep feature packages independent of each other's internals.
"""

from .errors import ConfigError, MetadataExtractionError, MetarenameError, RelocationError
from .metadata_record import KNOWN_FIELD_NAMES, KnownField, MetadataRecord

__all__ = [
    "ConfigError",
    "KNOWN_FIELD_NAMES",
    "KnownField",
    "MetadataExtractionError",
    "MetadataRecord",
    "MetarenameError",
    "RelocationError",
]
