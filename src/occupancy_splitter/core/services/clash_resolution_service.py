# src/occupancy_splitter/core/services/clash_resolution_service.py
"""Service resolving clashes between alternate-conformation chains."""

import logging
from concurrent.futures import ProcessPoolExecutor, as_completed
from typing import AbstractSet, Callable, Dict, FrozenSet, List, Mapping, Optional, Sequence, Set

from ..domain.implementations.exhaustive_subset_search import ExhaustiveSubsetSearch
from ..domain.implementations.spatial_clash_detector import SpatialClashDetector
from ..domain.interfaces.subset_search import SubsetSearch
from ..domain.models.atom import Atom
from ..domain.models.clash_free_chains import ClashFreeChains
from ..domain.models.clash_graph import ClashGraph
from ..domain.models.resolver_config import FRACTIONAL_MODE, ResolverConfig
from ..domain.models.solution import ResolutionResult
from .maximal_set_filter import filter_maximal
from .solution_composer import build_solutions, compose

SearchFactory = Callable[[FrozenSet[str]], SubsetSearch]


def _search_component(
    search: SubsetSearch, component: ClashGraph
) -> List[ClashFreeChains]:
    """Search one component and keep only its maximal selections."""
    return filter_maximal(search.search(component))


class ClashResolutionService:
    """Find every maximal clash-free selection of chains in a structure."""

    def __init__(
        self,
        config: Optional[ResolverConfig] = None,
        detector: Optional[SpatialClashDetector] = None,
        search_factory: Optional[SearchFactory] = None,
        logger: Optional[logging.Logger] = None,
    ):
        """
        Initialize service.

        Args:
            config: Resolution parameters
            detector: Clash predicate between two chains
            search_factory: Builds the subset search given the chains that
                must be present in every selection
            logger: Receives diagnostic messages
        """
        self.config = config or ResolverConfig()
        self.detector = detector or SpatialClashDetector(self.config.vdw_radius)
        self.search_factory = search_factory or self._default_search
        self.logger = logger or logging.getLogger(__name__)

    def _default_search(self, pinned: FrozenSet[str]) -> SubsetSearch:
        return ExhaustiveSubsetSearch(
            max_component_size=self.config.max_component_size, pinned=pinned
        )

    @staticmethod
    def fractional_chains(occupancy: Mapping[str, float]) -> FrozenSet[str]:
        """Chains with at least one atom of occupancy below 1.0."""
        return frozenset(chain for chain, value in occupancy.items() if value < 1.0)

    def graph_vertices(self, occupancy: Mapping[str, float]) -> FrozenSet[str]:
        """Chains taking part in the clash graph for the configured mode."""
        if self.config.mode == FRACTIONAL_MODE:
            return self.fractional_chains(occupancy)
        return frozenset(occupancy)

    def build_graph(
        self,
        vertices: AbstractSet[str],
        chain_atoms: Mapping[str, Sequence[Atom]],
        pinned: AbstractSet[str] = frozenset(),
    ) -> ClashGraph:
        """
        Test every pair of chains for clashes.

        Clashes between two pinned chains are reported but left out of the
        graph, since both chains are kept in every solution anyway.

        Args:
            vertices: Chains to include
            chain_atoms: Representative atoms per chain; missing chains have none
            pinned: Chains that are never branched

        Returns:
            Clash graph over vertices
        """

        def predicate(chain_a: str, chain_b: str) -> bool:
            atoms_a = chain_atoms.get(chain_a, [])
            atoms_b = chain_atoms.get(chain_b, [])
            if not self.detector.clashes(atoms_a, atoms_b):
                return False

            if self.logger.isEnabledFor(logging.DEBUG):
                detail = self.detector.detect(atoms_a, atoms_b)
                self.logger.debug(
                    f"Chains {chain_a} and {chain_b} clash: {detail.num_clashes} "
                    f"atom pairs, minimum distance {detail.min_distance:.2f}, "
                    f"residues {detail.residue_pairs}"
                )
            if chain_a in pinned and chain_b in pinned:
                self.logger.warning(
                    f"Fully occupied chains {chain_a} and {chain_b} clash; both are kept"
                )
                return False
            return True

        return ClashGraph.build(vertices, predicate)

    def _search_components(
        self, graph: ClashGraph, components: List[FrozenSet[str]], search: SubsetSearch
    ) -> Dict[FrozenSet[str], List[ClashFreeChains]]:
        subgraphs = [graph.induce_subgraph(component) for component in components]

        if self.config.n_workers == 1 or len(components) < 2:
            return {
                component: _search_component(search, subgraph)
                for component, subgraph in zip(components, subgraphs)
            }

        results: Dict[FrozenSet[str], List[ClashFreeChains]] = {}
        with ProcessPoolExecutor(max_workers=self.config.n_workers) as executor:
            futures = {
                executor.submit(_search_component, search, subgraph): component
                for component, subgraph in zip(components, subgraphs)
            }
            for future in as_completed(futures):
                results[futures[future]] = future.result()

        # Keep component order independent of completion order
        return {component: results[component] for component in components}

    def resolve(
        self,
        occupancy: Mapping[str, float],
        chain_atoms: Mapping[str, Sequence[Atom]],
    ) -> ResolutionResult:
        """
        Enumerate the maximal clash-free interpretations of a structure.

        Args:
            occupancy: Minimum occupancy per chain
            chain_atoms: Representative atoms per chain

        Returns:
            ResolutionResult; when the structure is already clash-free it
            carries no solutions

        Raises:
            ComponentTooLargeError: A component is too large to enumerate
        """
        fractional = self.fractional_chains(occupancy)
        vertices = self.graph_vertices(occupancy)
        pinned = vertices - fractional
        self.logger.info(
            f"{len(fractional)} of {len(occupancy)} chains have fractional occupancy"
        )

        graph = self.build_graph(vertices, chain_atoms, pinned)
        result = ResolutionResult(graph=graph, fractional_chains=fractional)
        if graph.is_clash_free():
            self.logger.info("No clashes detected")
            return result

        result.components = graph.connected_components()
        self.logger.info(
            f"{graph.graph.number_of_edges()} clashes in "
            f"{len(result.components)} connected components"
        )

        search = self.search_factory(frozenset(pinned))
        result.component_solutions = self._search_components(
            graph, result.components, search
        )
        for component, selections in result.component_solutions.items():
            self.logger.debug(
                f"Component {sorted(component)}: "
                f"{[selection.name for selection in selections]}"
            )

        selections = compose(list(result.component_solutions.values()))
        all_chains: Set[str] = set(occupancy)
        result.solutions = build_solutions(selections, all_chains, fractional)
        self.logger.info(f"Found {len(result.solutions)} clash-free solutions")
        return result
