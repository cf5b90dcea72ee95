"""Implementations of domain interfaces."""

from .exhaustive_subset_search import ExhaustiveSubsetSearch
from .spatial_clash_detector import SpatialClashDetector

__all__ = ["ExhaustiveSubsetSearch", "SpatialClashDetector"]
