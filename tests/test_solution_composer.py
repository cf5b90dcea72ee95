import pytest

from occupancy_splitter.core.domain.models.clash_free_chains import ClashFreeChains
from occupancy_splitter.core.services.solution_composer import build_solutions, compose


def sets(*names):
    """Selections from hyphen-joined chain ids, e.g. "A-B"; "" is empty."""
    return [ClashFreeChains.of(name.split("-") if name else []) for name in names]


def test_no_components_yield_single_empty_selection():
    assert compose([]) == [ClashFreeChains()]


def test_single_component_passes_through():
    assert compose([sets("B", "C")]) == sets("B", "C")


def test_product_of_two_components():
    result = compose([sets("D", "E"), sets("F", "G")])

    assert len(result) == 4
    assert {s.name for s in result} == {"D-F", "D-G", "E-F", "E-G"}


def test_product_is_not_limited_in_arity():
    per_component = [sets(f"A{i}", f"B{i}") for i in range(5)]

    result = compose(per_component)

    assert len(result) == 2**5
    assert len(set(result)) == 2**5
    assert all(s.size == 5 for s in result)
    assert ClashFreeChains.of(["A0", "B1", "A2", "B3", "A4"]) in result


def test_product_size_is_product_of_list_sizes():
    per_component = [sets("A", "B", "C"), sets("D"), sets("E-F", "G")]

    result = compose(per_component)

    assert len(result) == 3 * 1 * 2
    assert ClashFreeChains.of(["A", "D", "E", "F"]) in result


def test_multi_character_chain_ids_stay_whole():
    assert sets("AA-B10")[0].chains == {"AA", "B10"}


def test_bare_string_is_rejected():
    with pytest.raises(TypeError):
        ClashFreeChains.of("AB")


def test_build_solutions_retains_full_occupancy_chains():
    solutions = build_solutions(sets("B", "C"), {"A", "B", "C"}, {"B", "C"})

    assert [s.name for s in solutions] == ["B", "C"]
    assert [set(s.retained) for s in solutions] == [{"A", "B"}, {"A", "C"}]


def test_build_solutions_names_only_fractional_chains():
    solutions = build_solutions(sets("B-X", "X"), {"B", "X"}, {"B"})

    assert [s.name for s in solutions] == ["B", ""]
    assert [set(s.retained) for s in solutions] == [{"B", "X"}, {"X"}]
