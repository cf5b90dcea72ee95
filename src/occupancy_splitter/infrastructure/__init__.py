"""Infrastructure layer for file access."""

from .repositories.structure_repository import StructureRepository

__all__ = ["StructureRepository"]
