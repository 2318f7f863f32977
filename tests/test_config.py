import numpy as np
import pytest

from simplexopt.core.config import Bounds, NelderMeadConfig
from simplexopt.core.errors import InvalidInput


def test_defaults_match_reference_constants():
    config = NelderMeadConfig()
    assert config.reflection == 1.0
    assert config.expansion == 2.0
    assert config.contraction == 0.5
    assert config.shrinkage == 0.5
    assert config.initial_simplex_scale == 0.05
    assert config.cost_threshold == 1.0e-9
    assert config.max_iter == 5000
    assert config.time_limit is None


def test_from_options_accepts_aliases_and_ignores_unknown_keys():
    config = NelderMeadConfig.from_options(
        {"alpha": 1.5, "gamma": 3.0, "rho": 0.25, "max_iter": 10, "grad_tol": 1e-3}
    )
    assert config.reflection == 1.5
    assert config.expansion == 3.0
    assert config.contraction == 0.25
    assert config.max_iter == 10


@pytest.mark.parametrize(
    "kwargs",
    [
        {"reflection": 0.0},
        {"expansion": 1.0},
        {"contraction": 0.0},
        {"shrinkage": 1.0},
        {"initial_simplex_scale": -0.1},
        {"cost_threshold": -1.0},
        {"max_iter": -1},
        {"max_iter": 2.5},
        {"time_limit": 0.0},
    ],
)
def test_invalid_values_are_rejected(kwargs):
    with pytest.raises(InvalidInput):
        NelderMeadConfig(**kwargs).validate()


def test_bounds_clip_and_contains():
    bounds = Bounds([0.0, -1.0], [1.0, 1.0]).validate(2)

    assert bounds.contains([0.5, 0.0])
    assert not bounds.contains([1.5, 0.0])
    assert bounds.clip([1.5, -3.0]).tolist() == [1.0, -1.0]
    clipped = bounds.clip(np.array([[2.0, 2.0], [-2.0, 0.5]]))
    assert clipped.tolist() == [[1.0, 1.0], [0.0, 0.5]]
