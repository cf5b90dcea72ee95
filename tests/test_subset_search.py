import pytest

from occupancy_splitter.core.domain.implementations.exhaustive_subset_search import (
    ExhaustiveSubsetSearch,
    power_set,
)
from occupancy_splitter.core.domain.models.clash_free_chains import ClashFreeChains
from occupancy_splitter.core.domain.models.clash_graph import ClashGraph
from occupancy_splitter.core.exceptions import (
    ComponentTooLargeError,
    UnresolvableClashError,
)
from conftest import graph_from_edges


def chain_sets(solutions):
    return [set(s.chains) for s in solutions]


def test_power_set_enumerates_every_subset():
    subsets = list(power_set("BAC"))

    assert len(subsets) == 8
    assert subsets[0] == ()
    assert subsets[-1] == ("A", "B", "C")
    assert len(set(subsets)) == 8


def test_clashing_pair_yields_empty_and_singletons():
    search = ExhaustiveSubsetSearch()

    solutions = search.search(graph_from_edges("BC", [("B", "C")]))

    assert chain_sets(solutions) == [{"B"}, {"C"}, set()]


def test_triangle_allows_at_most_one_chain():
    graph = graph_from_edges("ABC", [("A", "B"), ("B", "C"), ("A", "C")])

    solutions = ExhaustiveSubsetSearch().search(graph)

    assert all(s.size <= 1 for s in solutions)
    assert chain_sets(solutions) == [{"A"}, {"B"}, {"C"}, set()]


def test_path_graph_finds_independent_sets():
    graph = graph_from_edges("ABC", [("A", "B"), ("B", "C")])

    solutions = ExhaustiveSubsetSearch().search(graph)

    assert {"A", "C"} in chain_sets(solutions)
    assert {"A", "B"} not in chain_sets(solutions)
    for solution in solutions:
        assert graph.induce_subgraph(solution.chains).is_clash_free()


def test_empty_component_yields_empty_selection():
    solutions = ExhaustiveSubsetSearch().search(ClashGraph())

    assert solutions == [ClashFreeChains()]


def test_clash_free_component_yields_everything():
    solutions = ExhaustiveSubsetSearch().search(graph_from_edges("XYZ", []))

    assert chain_sets(solutions) == [{"X", "Y", "Z"}]


def test_large_component_fails_closed():
    vertices = [f"C{i}" for i in range(6)]
    edges = list(zip(vertices, vertices[1:]))

    with pytest.raises(ComponentTooLargeError) as excinfo:
        ExhaustiveSubsetSearch(max_component_size=5).search(
            graph_from_edges(vertices, edges)
        )

    assert excinfo.value.limit == 5
    assert excinfo.value.component == frozenset(vertices)
    assert "reduce the input" in str(excinfo.value)


def test_pinned_chains_are_in_every_selection():
    graph = graph_from_edges("ABX", [("A", "X"), ("A", "B")])

    solutions = ExhaustiveSubsetSearch(pinned={"X"}).search(graph)

    assert chain_sets(solutions) == [{"B", "X"}, {"X"}]


def test_pinned_chains_do_not_count_towards_limit():
    graph = graph_from_edges("ABXY", [("A", "B"), ("X", "A")])

    solutions = ExhaustiveSubsetSearch(max_component_size=2, pinned={"X", "Y"}).search(
        graph
    )

    assert {"B", "X", "Y"} in chain_sets(solutions)


def test_clashing_pinned_chains_cannot_be_resolved():
    graph = graph_from_edges("AXY", [("X", "Y"), ("A", "X")])

    with pytest.raises(UnresolvableClashError) as excinfo:
        ExhaustiveSubsetSearch(pinned={"X", "Y"}).search(graph)

    assert excinfo.value.chains == {"X", "Y"}
