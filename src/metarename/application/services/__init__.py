"""Application services."""

from .rename_service import RenameEvent, RenameResult, RenameService

__all__ = ["RenameEvent", "RenameResult", "RenameService"]
