from maze.disjoint_set import DisjointSet


def test_every_element_starts_as_its_own_root() -> None:
    ds = DisjointSet(6)

    assert len(ds) == 6
    for x in range(6):
        assert ds.find(x) == x


def test_union_merges_once_then_reports_cycle() -> None:
    ds = DisjointSet(4)

    assert ds.union(0, 1) is True
    assert ds.union(1, 2) is True
    assert ds.find(0) == ds.find(2)

    # Already joined through 1
    assert ds.union(2, 0) is False
    assert ds.find(3) == 3


def test_union_attaches_second_root_under_first() -> None:
    ds = DisjointSet(3)
    ds.union(1, 2)

    assert ds.parent[2] == 1
    assert ds.find(2) == 1


def test_find_compresses_path() -> None:
    ds = DisjointSet(5)
    # Chain 4 -> 3 -> 2 -> 1 -> 0
    ds.parent = [0, 0, 1, 2, 3]

    assert ds.find(4) == 0
    assert ds.parent == [0, 0, 0, 0, 0]


def test_long_chain_does_not_recurse() -> None:
    n = 50000
    ds = DisjointSet(n)
    ds.parent = [0] + list(range(n - 1))

    assert ds.find(n - 1) == 0
