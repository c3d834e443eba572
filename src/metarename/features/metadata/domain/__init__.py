"""Metadata domain: normalization rules and their diagnostics."""

from .diagnostics import Diagnostic, DiagnosticKind
from .normalizer import NormalizationResult, normalize

__all__ = ["Diagnostic", "DiagnosticKind", "NormalizationResult", "normalize"]
