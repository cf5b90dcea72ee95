"""Domain model classes."""

from .atom import Atom
from .clash_result import ClashResult
from .clash_free_chains import ClashFreeChains
from .clash_graph import ClashGraph
from .solution import Solution, ResolutionResult
from .resolver_config import ResolverConfig

__all__ = [
    "Atom",
    "ClashResult",
    "ClashFreeChains",
    "ClashGraph",
    "Solution",
    "ResolutionResult",
    "ResolverConfig",
]
