"""Organization use cases."""

from .relocation import RelocationMode, relocate_file

__all__ = ["RelocationMode", "relocate_file"]
