"""Domain interfaces."""

from .subset_search import SubsetSearch

__all__ = ["SubsetSearch"]
