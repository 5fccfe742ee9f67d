from algorithms.union_find import DisjointSet


def test_starts_as_singletons():
    dsu = DisjointSet([5, 12, 40])

    assert len(dsu) == 3
    assert dsu.component_count == 3
    assert not dsu.connected(5, 12)


def test_union_merges_once():
    dsu = DisjointSet([1, 2, 3])

    assert dsu.union(1, 2)
    assert not dsu.union(2, 1)
    assert dsu.connected(1, 2)
    assert dsu.component_count == 2


def test_transitive_connection():
    dsu = DisjointSet([1, 2, 3, 4])
    dsu.union(1, 2)
    dsu.union(3, 4)
    dsu.union(2, 3)

    assert dsu.connected(1, 4)
    assert dsu.component_count == 1


def test_duplicate_ids_share_one_slot():
    dsu = DisjointSet([7, 7, 8])
    assert len(dsu) == 2


def test_long_chain_find_is_iterative():
    ids = list(range(1, 5001))
    dsu = DisjointSet(ids)
    for a, b in zip(ids, ids[1:]):
        dsu.union(b, a)

    assert dsu.connected(1, 5000)
    root = dsu.find(5000)
    # path compression points every visited index straight at the root
    assert dsu.parent[dsu.index[5000]] == root
