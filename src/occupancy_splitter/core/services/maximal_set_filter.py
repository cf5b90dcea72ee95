"""Reduction of clash-free subsets to the maximal ones."""

from typing import Iterable, List

from ..domain.models.clash_free_chains import ClashFreeChains


def filter_maximal(subsets: Iterable[ClashFreeChains]) -> List[ClashFreeChains]:
    """
    Drop subsets already contained in a larger accepted subset.

    Candidates are visited from largest to smallest, ties in lexicographic
    order of their sorted chain ids, so the result is deterministic.

    Args:
        subsets: Clash-free subsets of one component

    Returns:
        Accepted subsets, none of which contains another
    """
    accepted: List[ClashFreeChains] = []
    for candidate in sorted(set(subsets), key=lambda s: s.sort_key):
        if not any(kept.contains_all(candidate) for kept in accepted):
            accepted.append(candidate)
    return accepted
