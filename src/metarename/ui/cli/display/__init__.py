"""Console displays for the CLI."""

from .metadata import MetadataDisplay
from .result import ResultDisplay

__all__ = ["MetadataDisplay", "ResultDisplay"]
