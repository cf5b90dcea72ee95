#!/usr/bin/env python3
# src/occupancy_splitter/core/domain/models/solution.py

"""
Domain models for whole-structure chain selections.
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List

from .clash_free_chains import ClashFreeChains
from .clash_graph import ClashGraph


@dataclass(frozen=True)
class Solution:
    """One clash-free interpretation of the whole structure.

    Attributes:
        accepted: Clash-free chains chosen from every connected component
        retained: Chains to keep in the output, i.e. the accepted chains
            plus every chain that was never branched
    """

    accepted: ClashFreeChains
    retained: FrozenSet[str]

    @property
    def name(self) -> str:
        """Deterministic name used to derive output file names."""
        return self.accepted.name


@dataclass
class ResolutionResult:
    """Everything computed while resolving clashes of one structure."""

    graph: ClashGraph
    fractional_chains: FrozenSet[str]
    components: List[FrozenSet[str]] = field(default_factory=list)
    component_solutions: Dict[FrozenSet[str], List[ClashFreeChains]] = field(
        default_factory=dict
    )
    solutions: List[Solution] = field(default_factory=list)

    @property
    def is_clash_free(self) -> bool:
        """True when the structure needs no action."""
        return self.graph.is_clash_free()
