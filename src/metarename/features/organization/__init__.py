"""Organization feature: relocating files onto rendered paths."""

from .usecases import RelocationMode, relocate_file

__all__ = ["RelocationMode", "relocate_file"]
