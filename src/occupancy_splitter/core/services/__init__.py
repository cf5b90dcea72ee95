"""Core business logic services."""

from .clash_resolution_service import ClashResolutionService
from .maximal_set_filter import filter_maximal
from .solution_composer import build_solutions, compose

__all__ = [
    "ClashResolutionService",
    "filter_maximal",
    "build_solutions",
    "compose",
]
