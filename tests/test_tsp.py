import pytest

from algokit.tsp import tsp_min_cost

DIST = [
    [0, 10, 15, 20],
    [10, 0, 35, 25],
    [15, 35, 0, 30],
    [20, 25, 30, 0],
]


def test_source_example():
    assert tsp_min_cost(DIST) == 80


def test_single_city():
    assert tsp_min_cost([[7]]) == 7


def test_two_cities():
    assert tsp_min_cost([[0, 4], [9, 0]]) == 4 + 9


def test_scaling_scales_cost():
    scaled = [[3 * d for d in row] for row in DIST]
    assert tsp_min_cost(scaled) == 3 * tsp_min_cost(DIST)


def test_relabeling_keeps_cost():
    perm = [2, 0, 3, 1]
    relabeled = [[DIST[perm[i]][perm[j]] for j in range(4)] for i in range(4)]
    assert tsp_min_cost(relabeled) == tsp_min_cost(DIST)


def test_adding_constant_to_every_edge():
    shifted = [[d + (5 if i != j else 0) for j, d in enumerate(row)] for i, row in enumerate(DIST)]
    assert tsp_min_cost(shifted) == tsp_min_cost(DIST) + 4 * 5


def test_empty_matrix_raises():
    with pytest.raises(ValueError):
        tsp_min_cost([])


def test_non_square_raises():
    with pytest.raises(ValueError):
        tsp_min_cost([[0, 1], [1, 0, 2]])