import numpy as np
import pytest

from simplexopt.core.errors import InvalidInput
from simplexopt.core.vector_ops import line_point, reflect_point, simplex_diameter, unit_vector


@pytest.mark.parametrize(
    "v",
    [
        [3.0, 4.0],
        [1e-12, 0.0, 2e-12],
        [-5.0],
        [1e8, -3e7, 4.5, 0.0],
    ],
)
def test_unit_vector_has_unit_norm(v):
    u = unit_vector(v)
    assert np.linalg.norm(u) == pytest.approx(1.0)
    assert u.shape == (len(v),)


def test_unit_vector_values():
    assert unit_vector([3.0, 4.0]) == pytest.approx([0.6, 0.8])


@pytest.mark.parametrize("v", [[0.0, 0.0], [], [np.nan, 1.0], [np.inf, 1.0]])
def test_unit_vector_rejects_degenerate_input(v):
    with pytest.raises(InvalidInput):
        unit_vector(v)


def test_reflect_point_moves_away_from_point():
    assert reflect_point([0.0, 1.0], [1.0, 1.0], 1.0).tolist() == [-1.0, 1.0]


def test_line_point_moves_towards_point():
    assert line_point([0.0, 1.0], [1.0, 1.0], 2.0).tolist() == [2.0, 1.0]
    assert line_point([0.0, 1.0], [1.0, 1.0], 0.5).tolist() == [0.5, 1.0]


def test_simplex_diameter():
    simplex = np.array([[0.0, 0.0], [3.0, 4.0], [1.0, 0.0]])
    assert simplex_diameter(simplex) == pytest.approx(5.0)
