"""Core domain models and interfaces."""

from .models.atom import Atom
from .models.clash_free_chains import ClashFreeChains
from .models.clash_graph import ClashGraph
from .models.solution import Solution, ResolutionResult
from .interfaces.subset_search import SubsetSearch

__all__ = [
    "Atom",
    "ClashFreeChains",
    "ClashGraph",
    "Solution",
    "ResolutionResult",
    "SubsetSearch",
]
