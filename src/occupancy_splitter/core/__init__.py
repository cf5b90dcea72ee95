"""Core domain models, interfaces and services for clash resolution."""

from .domain.models.atom import Atom
from .domain.models.clash_free_chains import ClashFreeChains
from .domain.models.clash_graph import ClashGraph
from .domain.models.resolver_config import ResolverConfig
from .domain.models.solution import Solution, ResolutionResult
from .domain.interfaces.subset_search import SubsetSearch
from .domain.implementations.exhaustive_subset_search import ExhaustiveSubsetSearch
from .domain.implementations.spatial_clash_detector import SpatialClashDetector
from .exceptions import (
    ClashResolutionError,
    ComponentTooLargeError,
    UnresolvableClashError,
)
from .services.clash_resolution_service import ClashResolutionService

__all__ = [
    "Atom",
    "ClashFreeChains",
    "ClashGraph",
    "ResolverConfig",
    "Solution",
    "ResolutionResult",
    "SubsetSearch",
    "ExhaustiveSubsetSearch",
    "SpatialClashDetector",
    "ClashResolutionError",
    "ComponentTooLargeError",
    "UnresolvableClashError",
    "ClashResolutionService",
]
