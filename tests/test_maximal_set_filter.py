from occupancy_splitter.core.domain.models.clash_free_chains import ClashFreeChains
from occupancy_splitter.core.services.maximal_set_filter import filter_maximal


def sets(*names):
    """Selections from hyphen-joined chain ids, e.g. "A-B"; "" is empty."""
    return [ClashFreeChains.of(name.split("-") if name else []) for name in names]


def test_keeps_only_maximal_sets():
    result = filter_maximal(sets("", "B", "C"))

    assert result == sets("B", "C")


def test_no_output_element_contains_another():
    candidates = sets("", "A", "C", "D", "A-C", "A-D", "B", "B-D")

    result = filter_maximal(candidates)

    assert result == sets("A-C", "A-D", "B-D")
    for a in result:
        for b in result:
            if a is not b:
                assert not a.contains_all(b)


def test_removing_an_element_loses_maximality():
    result = filter_maximal(sets("A-C", "B", "A", "C", ""))

    for dropped in result:
        remaining = [s for s in result if s is not dropped]
        assert not any(s.contains_all(dropped) for s in remaining)


def test_order_of_input_does_not_matter():
    forward = filter_maximal(sets("A", "B", "A-B", "C"))
    backward = filter_maximal(sets("C", "A-B", "B", "A"))

    assert forward == backward == sets("A-B", "C")


def test_multi_character_ids_are_not_split():
    result = filter_maximal(sets("AB", "A", "B"))

    assert result == sets("A", "AB", "B")


def test_duplicates_collapse():
    assert filter_maximal(sets("A-B", "B-A", "A")) == sets("A-B")


def test_empty_input():
    assert filter_maximal([]) == []
