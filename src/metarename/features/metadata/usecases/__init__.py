"""Metadata use cases."""

from .extraction import MetadataExtractor

__all__ = ["MetadataExtractor"]
