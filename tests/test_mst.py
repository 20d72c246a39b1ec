import itertools

import pytest

from algokit.mst import DisjointSet, kruskal_cost, prim_mst

SAMPLE_EDGES = [(0, 1, 10), (0, 2, 6), (0, 3, 5), (1, 3, 15), (2, 3, 4)]

SAMPLE_MATRIX = [
    [0, 2, 0, 6, 0],
    [2, 0, 3, 8, 5],
    [0, 3, 0, 0, 7],
    [6, 8, 0, 0, 9],
    [0, 5, 7, 9, 0],
]


def _matrix_edges(matrix):
    return [
        (u, v, matrix[u][v])
        for u in range(len(matrix))
        for v in range(u + 1, len(matrix))
        if matrix[u][v]
    ]


def test_disjoint_set_union_joins_sets():
    sets = DisjointSet(range(4))
    assert sets.find(0) != sets.find(1)
    assert sets.union(0, 1) is True
    assert sets.find(0) == sets.find(1)
    assert sets.find(2) != sets.find(0)


def test_disjoint_set_union_of_joined_items_returns_false():
    sets = DisjointSet()
    assert sets.union("a", "b") is True
    assert sets.union("b", "c") is True
    assert sets.union("a", "c") is False
    assert len(sets) == 3


def test_disjoint_set_find_adds_unknown_item():
    sets = DisjointSet()
    assert sets.find("x") == "x"
    assert "x" in sets


def test_kruskal_sample():
    assert kruskal_cost(SAMPLE_EDGES) == 19


def test_kruskal_independent_of_edge_order():
    expected = kruskal_cost(SAMPLE_EDGES)
    for order in itertools.permutations(SAMPLE_EDGES):
        assert kruskal_cost(order) == expected


def test_kruskal_on_tree_takes_every_edge():
    tree = [(0, 1, 3), (1, 2, 7), (1, 3, 2)]
    assert kruskal_cost(tree) == sum(w for _, _, w in tree)


def test_kruskal_skips_cycle_edge():
    tree = [(0, 1, 3), (1, 2, 7), (1, 3, 2)]
    assert kruskal_cost(tree + [(0, 2, 50)]) == kruskal_cost(tree)


def test_kruskal_empty():
    assert kruskal_cost([]) == 0


def test_prim_sample():
    assert prim_mst(SAMPLE_MATRIX) == [(0, 1, 2), (1, 2, 3), (0, 3, 6), (1, 4, 5)]


def test_prim_and_kruskal_agree_on_total():
    tree = prim_mst(SAMPLE_MATRIX)
    assert sum(w for _, _, w in tree) == kruskal_cost(_matrix_edges(SAMPLE_MATRIX))


def test_prim_edges_exist_in_graph():
    for parent, vertex, weight in prim_mst(SAMPLE_MATRIX):
        assert SAMPLE_MATRIX[parent][vertex] == weight
        assert weight > 0


def test_prim_empty_graph():
    assert prim_mst([]) == []


def test_prim_disconnected_raises():
    matrix = [[0, 1, 0], [1, 0, 0], [0, 0, 0]]
    with pytest.raises(ValueError):
        prim_mst(matrix)


def test_prim_non_square_raises():
    with pytest.raises(ValueError):
        prim_mst([[0, 1], [1, 0, 2]])