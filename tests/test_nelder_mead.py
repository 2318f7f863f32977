import numpy as np
import pytest

from simplexopt.core.config import NelderMeadConfig
from simplexopt.core.nelder_mead import NelderMeadMethod


def sphere(x):
    return float(np.sum(np.asarray(x) ** 2))


def _method_with_simplex(func, simplex, **kwargs):
    method = NelderMeadMethod(func, **kwargs)
    method.reset()
    method.initialize([1.0, 1.0])
    method.state["simplex"] = np.array(simplex, dtype=float)
    return method


def test_expansion_replaces_worst_vertex():
    method = _method_with_simplex(sphere, [[2.0, 2.0], [3.0, 2.0], [3.0, 3.0]])

    res = method.step()

    assert res.step_type == "expansion"
    assert res.x_best.tolist() == [2.0, 2.0]
    assert res.f_best == 8.0
    assert method.state["simplex"][-1].tolist() == [1.5, 0.0]


def test_reflection_kept_when_expansion_is_worse():
    method = _method_with_simplex(sphere, [[1.0, 1.0], [2.0, 1.0], [2.0, 2.0]])

    res = method.step()

    assert res.step_type == "reflection"
    assert method.state["simplex"][-1].tolist() == [1.0, 0.0]


def test_reflection_accepted_between_best_and_second_worst():
    method = _method_with_simplex(sphere, [[1.0, 0.0], [0.0, 2.0], [2.0, 2.0]])

    res = method.step()

    assert res.step_type == "reflection"
    assert res.meta["f_reflect"] == 1.0
    assert method.state["simplex"][-1].tolist() == [-1.0, 0.0]
    # 3 вершини + відбита точка
    assert method.func_evals == 4


def test_inside_contraction_accepted():
    method = _method_with_simplex(sphere, [[1.0, 0.0], [0.0, 1.2], [2.0, 2.0]])

    res = method.step()

    assert res.step_type == "contraction"
    assert method.state["simplex"][-1] == pytest.approx([1.25, 1.3])
    assert method.func_evals == 5


def test_failed_contraction_shrinks_simplex():
    def bumpy(x):
        bump = 50.0 if np.allclose(x, [1.25, 1.3]) else 0.0
        return sphere(x) + bump

    method = _method_with_simplex(bumpy, [[1.0, 0.0], [0.0, 1.2], [2.0, 2.0]])

    res = method.step()

    assert res.step_type == "shrink"
    assert method.state["simplex"] == pytest.approx(
        np.array([[1.0, 0.0], [0.5, 0.6], [1.5, 1.0]])
    )


def test_reflection_worse_than_worst_shrinks_simplex():
    method = _method_with_simplex(sphere, [[1.0, 0.0], [0.0, -1.5], [-1.0, 2.0]])

    res = method.step()

    assert res.step_type == "shrink"
    assert method.state["simplex"] == pytest.approx(
        np.array([[1.0, 0.0], [0.5, -0.75], [0.0, 1.0]])
    )


def test_step_reports_convergence_without_transform():
    simplex = [[0.0, 0.0], [0.1, 0.0], [0.0, 0.1]]
    method = _method_with_simplex(sphere, simplex)

    res = method.step()

    assert res.step_type == "converged"
    assert res.meta["stopped_by"] == "converged"
    assert method.state["simplex"].tolist() == simplex
    assert method.state["iteration"] == 0


def test_options_aliases_configure_coefficients():
    method = NelderMeadMethod(sphere, options={"alpha": 2.0, "sigma": 0.25})
    assert method.config.reflection == 2.0
    assert method.config.shrinkage == 0.25
    assert method.config.expansion == 2.0


def test_explicit_config_wins_over_options():
    config = NelderMeadConfig(reflection=1.5)
    method = NelderMeadMethod(sphere, options={"alpha": 3.0}, config=config)
    assert method.config.reflection == 1.5


def test_step_before_initialize_fails():
    method = NelderMeadMethod(sphere)
    with pytest.raises(RuntimeError):
        method.step()


def test_best_ranks_current_simplex():
    method = _method_with_simplex(sphere, [[3.0, 3.0], [0.5, 0.0], [1.0, 1.0]])

    x, f = method.best()

    assert x.tolist() == [0.5, 0.0]
    assert f == 0.25
