"""Exhaustive enumeration of clash-free chain subsets."""

from itertools import chain, combinations
from typing import Iterable, Iterator, List, Tuple

from ..interfaces.subset_search import SubsetSearch
from ..models.clash_free_chains import ClashFreeChains
from ..models.clash_graph import ClashGraph
from ...exceptions import ComponentTooLargeError, UnresolvableClashError


def power_set(items: Iterable[str]) -> Iterator[Tuple[str, ...]]:
    """All subsets of items, smallest first, each in sorted order."""
    ordered = sorted(items)
    return chain.from_iterable(
        combinations(ordered, size) for size in range(len(ordered) + 1)
    )


class ExhaustiveSubsetSearch(SubsetSearch):
    """Check every subset of a component for clashes.

    The search is exponential in the number of branched chains, so components
    larger than max_component_size are rejected instead of enumerated.
    """

    def __init__(self, max_component_size: int = 20, pinned: Iterable[str] = ()):
        """
        Initialize search.

        Args:
            max_component_size: Largest number of branched chains accepted
            pinned: Chains present in every subset; they are never branched
        """
        self.max_component_size = max_component_size
        self.pinned = frozenset(pinned)

    def search(self, component: ClashGraph) -> List[ClashFreeChains]:
        """
        Find every clash-free subset of the component.

        Args:
            component: Clash graph of one connected component

        Returns:
            Clash-free subsets, largest first, ties in lexicographic order

        Raises:
            ComponentTooLargeError: Too many chains to enumerate
            UnresolvableClashError: Pinned chains clash with each other
        """
        if component.is_clash_free():
            return [ClashFreeChains(component.vertices)]

        pinned = component.vertices & self.pinned
        free = component.vertices - pinned

        if len(free) > self.max_component_size:
            raise ComponentTooLargeError(component.vertices, self.max_component_size)
        if pinned and not component.induce_subgraph(pinned).is_clash_free():
            raise UnresolvableClashError(pinned)

        solutions = []
        for subset in power_set(free):
            candidate = pinned.union(subset)
            if component.induce_subgraph(candidate).is_clash_free():
                solutions.append(ClashFreeChains(candidate))

        solutions.sort(key=lambda s: s.sort_key)
        return solutions
