"""Combination of per-component selections into whole-structure solutions."""

from functools import reduce
from itertools import product
from typing import AbstractSet, Iterable, List, Sequence

from ..domain.models.clash_free_chains import ClashFreeChains
from ..domain.models.solution import Solution


def compose(
    per_component: Sequence[Sequence[ClashFreeChains]],
) -> List[ClashFreeChains]:
    """
    Take one selection from every component and merge them.

    Components share no clash edges, so every combination is clash-free.
    With no components the result is a single empty selection.

    Args:
        per_component: Maximal selections of each connected component

    Returns:
        Union of every combination, one per element of the Cartesian product
    """
    return [
        reduce(ClashFreeChains.union, choice, ClashFreeChains())
        for choice in product(*per_component)
    ]


def build_solutions(
    selections: Iterable[ClashFreeChains],
    all_chains: AbstractSet[str],
    fractional_chains: AbstractSet[str],
) -> List[Solution]:
    """
    Attach the always-retained chains to every selection.

    Args:
        selections: Clash-free selections from compose
        all_chains: Every chain of the structure
        fractional_chains: Chains with occupancy below 1.0

    Returns:
        Solutions sorted by name
    """
    always_kept = frozenset(all_chains) - frozenset(fractional_chains)
    solutions = []
    for selection in selections:
        accepted = ClashFreeChains(selection.chains & frozenset(fractional_chains))
        solutions.append(
            Solution(accepted=accepted, retained=accepted.chains | always_kept)
        )
    solutions.sort(key=lambda s: s.accepted.sort_key)
    return solutions
