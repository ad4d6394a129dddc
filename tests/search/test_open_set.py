import pytest

from route_planner.search.open_set import (
    FrontierNode,
    HeapOpenSet,
    SortedOpenSet,
    make_open_set,
)


IMPLEMENTATIONS = [HeapOpenSet, SortedOpenSet]


def test_frontier_node_f():
    node = FrontierNode(1, 2, 3, 4)
    assert node.f == 7
    assert node.position == (1, 2)


@pytest.mark.parametrize("impl", IMPLEMENTATIONS)
def test_extracts_lowest_f(impl):
    open_set = impl()
    open_set.insert(FrontierNode(0, 0, 5, 5))
    open_set.insert(FrontierNode(1, 1, 1, 1))
    open_set.insert(FrontierNode(2, 2, 3, 3))
    assert [open_set.extract_best().position for _ in range(3)] == [(1, 1), (2, 2), (0, 0)]
    assert not open_set


@pytest.mark.parametrize("impl", IMPLEMENTATIONS)
def test_ties_are_last_in_first_out(impl):
    open_set = impl()
    a = FrontierNode(0, 0, 2, 3)  # f=5
    b = FrontierNode(1, 1, 1, 2)  # f=3
    c = FrontierNode(2, 2, 2, 1)  # f=3
    for node in (a, b, c):
        open_set.insert(node)

    assert open_set.extract_best() == c
    assert open_set.extract_best() == b
    assert open_set.extract_best() == a


@pytest.mark.parametrize("impl", IMPLEMENTATIONS)
def test_tie_break_with_interleaved_inserts(impl):
    open_set = impl()
    b = FrontierNode(1, 1, 1, 2)
    c = FrontierNode(2, 2, 2, 1)
    d = FrontierNode(3, 3, 0, 3)
    open_set.insert(b)
    open_set.insert(c)
    assert open_set.extract_best() == c
    open_set.insert(d)
    assert open_set.extract_best() == d
    assert open_set.extract_best() == b


@pytest.mark.parametrize("impl", IMPLEMENTATIONS)
def test_does_not_deduplicate(impl):
    open_set = impl()
    node = FrontierNode(0, 0, 0, 0)
    open_set.insert(node)
    open_set.insert(node)
    assert len(open_set) == 2


@pytest.mark.parametrize("impl", IMPLEMENTATIONS)
def test_extract_from_empty_raises(impl):
    with pytest.raises(IndexError):
        impl().extract_best()


@pytest.mark.parametrize("impl", IMPLEMENTATIONS)
def test_clear(impl):
    open_set = impl()
    open_set.insert(FrontierNode(0, 0, 0, 0))
    open_set.clear()
    assert len(open_set) == 0


def test_make_open_set():
    assert isinstance(make_open_set("heap"), HeapOpenSet)
    assert isinstance(make_open_set("sorted"), SortedOpenSet)
    with pytest.raises(ValueError):
        make_open_set("fibonacci")
