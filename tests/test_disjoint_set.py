import pytest

from structkit.disjoint_set import DisjointSet, main


def _example():
    sets = DisjointSet(7)
    for x, y in ((0, 1), (1, 2), (3, 4), (5, 6), (4, 5)):
        sets.union(x, y)
    return sets


def test_each_element_starts_alone():
    sets = DisjointSet(4)
    assert [sets.find(i) for i in range(4)] == [0, 1, 2, 3]
    assert not sets.connected(0, 1)


def test_source_scenario():
    sets = _example()
    assert sets.connected(0, 2)
    assert sets.connected(3, 6)
    assert not sets.connected(0, 4)
    sets.union(2, 4)
    assert sets.connected(0, 4)


def test_group_shares_one_root():
    sets = _example()
    assert len({sets.find(i) for i in (3, 4, 5, 6)}) == 1
    assert len({sets.find(i) for i in range(7)}) == 2


def test_union_is_idempotent():
    sets = DisjointSet(3)
    sets.union(0, 1)
    root = sets.find(0)
    sets.union(1, 0)
    assert sets.find(1) == root
    assert not sets.connected(2, 0)


def test_root_is_member_of_its_set():
    sets = _example()
    for element in range(7):
        root = sets.find(element)
        assert sets.find(root) == root
        assert sets.connected(root, element)


@pytest.mark.parametrize("element", [7, -1])
def test_out_of_range_raises(element):
    with pytest.raises(IndexError):
        _example().find(element)


def test_negative_size_raises():
    with pytest.raises(ValueError):
        DisjointSet(-3)


def test_main_output(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "0 connected to 4? false\n" in out
    assert "Now 0 connected to 4? true\n" in out