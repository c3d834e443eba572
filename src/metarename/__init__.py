"""metarename: rename media files from normalized metadata."""

from metarename.features.metadata import Diagnostic, DiagnosticKind, NormalizationResult, normalize
from metarename.features.path import PATTERN_DEFAULT, escape, parse_pattern, render
from metarename.shared import MetadataRecord

__version__ = "0.1.0"

__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "MetadataRecord",
    "NormalizationResult",
    "PATTERN_DEFAULT",
    "escape",
    "normalize",
    "parse_pattern",
    "render",
]
