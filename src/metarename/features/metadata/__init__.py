"""Metadata feature: extraction and normalization."""

from .domain import Diagnostic, DiagnosticKind, NormalizationResult, normalize
from .usecases import MetadataExtractor

__all__ = [
    "Diagnostic",
    "DiagnosticKind",
    "MetadataExtractor",
    "NormalizationResult",
    "normalize",
]
