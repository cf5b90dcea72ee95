"""Interface for clash-free subset search strategies."""

from abc import ABC, abstractmethod
from typing import List

from ..models.clash_free_chains import ClashFreeChains
from ..models.clash_graph import ClashGraph


class SubsetSearch(ABC):
    """Abstract base class for clash-free subset search strategies."""

    @abstractmethod
    def search(self, component: ClashGraph) -> List[ClashFreeChains]:
        """
        Find clash-free chain subsets of one connected component.

        Args:
            component: Clash graph restricted to a single connected component

        Returns:
            Clash-free subsets of the component's vertices
        """
        pass
