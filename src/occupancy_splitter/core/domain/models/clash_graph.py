#!/usr/bin/env python3
# src/occupancy_splitter/core/domain/models/clash_graph.py

"""
Domain model representing the clash relation between chains as a graph.
"""

from itertools import combinations
from typing import Callable, Dict, FrozenSet, Iterable, List, Optional, Set, Tuple

import networkx as nx


class ClashGraph:
    """Undirected graph over chain ids whose edges are clashes.

    The wrapped networkx graph is frozen, so a ClashGraph never changes after
    it is built. Operations that restrict the graph return a new instance.
    """

    def __init__(self, graph: Optional[nx.Graph] = None):
        """
        Initialize a ClashGraph.

        Args:
            graph: Undirected graph with chain ids as nodes. Copied and frozen.
        """
        graph = nx.Graph() if graph is None else nx.Graph(graph)
        graph.remove_edges_from(list(nx.selfloop_edges(graph)))
        self.graph = nx.freeze(graph)

    @classmethod
    def build(
        cls, vertices: Iterable[str], predicate: Callable[[str, str], bool]
    ) -> "ClashGraph":
        """Create a graph by testing every unordered pair of vertices once.

        Args:
            vertices: Chain ids
            predicate: Returns True when the two chains clash

        Returns:
            ClashGraph with an edge for each clashing pair
        """
        G = nx.Graph()
        ordered = sorted(set(vertices))
        G.add_nodes_from(ordered)
        for chain_a, chain_b in combinations(ordered, 2):
            if predicate(chain_a, chain_b):
                G.add_edge(chain_a, chain_b)
        return cls(G)

    @property
    def vertices(self) -> FrozenSet[str]:
        return frozenset(self.graph.nodes)

    @property
    def edges(self) -> Set[Tuple[str, str]]:
        """Both directions of every clash."""
        return {(a, b) for a, b in self.graph.edges} | {
            (b, a) for a, b in self.graph.edges
        }

    def neighbors(self, vertex: str) -> FrozenSet[str]:
        if vertex not in self.graph:
            return frozenset()
        return frozenset(self.graph.neighbors(vertex))

    def is_empty(self) -> bool:
        return self.graph.number_of_nodes() == 0

    def is_clash_free(self) -> bool:
        return self.graph.number_of_edges() == 0

    def connected_components(self) -> List[FrozenSet[str]]:
        """Split the vertices into groups linked by clashes.

        Uses an explicit stack rather than recursion. Isolated vertices form
        singleton components.

        Returns:
            Components in order of discovery from the sorted vertex list
        """
        component_of: Dict[str, int] = {}
        n_components = 0

        for start in sorted(self.graph.nodes):
            if start in component_of:
                continue
            component_of[start] = n_components
            stack = [start]
            while stack:
                vertex = stack.pop()
                for neighbor in self.graph.adj[vertex]:
                    if neighbor not in component_of:
                        component_of[neighbor] = n_components
                        stack.append(neighbor)
            n_components += 1

        members: List[Set[str]] = [set() for _ in range(n_components)]
        for vertex, component_id in component_of.items():
            members[component_id].add(vertex)
        return [frozenset(component) for component in members]

    def induce_subgraph(self, vertex_subset: Iterable[str]) -> "ClashGraph":
        """Restrict the graph to the given vertices.

        Vertices not in this graph are ignored.
        """
        keep = [v for v in vertex_subset if v in self.graph]
        return ClashGraph(self.graph.subgraph(keep))

    def __contains__(self, vertex: str) -> bool:
        return vertex in self.graph

    def __len__(self) -> int:
        return self.graph.number_of_nodes()

    def __repr__(self) -> str:
        return (
            f"ClashGraph(vertices={sorted(self.graph.nodes)}, "
            f"edges={sorted(tuple(sorted(e)) for e in self.graph.edges)})"
        )
