import numpy as np
import pytest

from simplexopt.core.config import NelderMeadConfig
from simplexopt.core.engine import OptimizationEngine
from simplexopt.core.errors import EvaluationError
from simplexopt.core.functions import shifted_rosenbrock, sum_of_squares
from simplexopt.core.nelder_mead import NelderMeadMethod


def test_run_converges_on_sum_of_squares():
    engine = OptimizationEngine()
    result = engine.run(NelderMeadMethod(sum_of_squares), [3.0, 4.0])

    assert result.converged
    assert result.stopped_by == "converged"
    assert abs(result.f_star) < 1e-9
    assert result.x_star == pytest.approx([0.0, 0.0], abs=1e-3)
    assert result.n_iter == len(result.iterations) - 1
    assert result.iterations[-1].step_type == "converged"
    assert result.method_name == "Nelder–Mead simplex"


def test_budget_exhaustion_is_flagged_not_raised():
    engine = OptimizationEngine(max_iter=10)
    result = engine.run(NelderMeadMethod(sum_of_squares), [3.0, 4.0])

    assert not result.converged
    assert result.stopped_by == "max_iter"
    # лічильник перевищує max_iter після max_iter + 1 кроків
    assert result.n_iter == 11
    assert len(result.iterations) == 11
    assert result.f_star <= min(it.f for it in result.iterations)


def test_zero_budget_still_runs_one_round():
    result = OptimizationEngine(max_iter=0).run(NelderMeadMethod(sum_of_squares), [3.0, 4.0])
    assert result.n_iter == 1
    assert result.stopped_by == "max_iter"


def test_run_arguments_override_defaults():
    engine = OptimizationEngine(max_iter=1000)
    result = engine.run(NelderMeadMethod(shifted_rosenbrock), [3.0, 4.0], max_iter=4)
    assert result.n_iter == 5


def test_callback_sees_every_iteration():
    seen = []
    result = OptimizationEngine().run(
        NelderMeadMethod(sum_of_squares), [3.0, 4.0], callback=seen.append
    )
    assert [rec.index for rec in seen] == list(range(len(result.iterations)))
    assert seen[0].x.tolist() == [3.0, 4.0]
    assert seen[0].f == 25.0


def test_should_stop_cancels_run():
    calls = {"n": 0}

    def should_stop():
        calls["n"] += 1
        return calls["n"] >= 3

    result = OptimizationEngine().run(
        NelderMeadMethod(shifted_rosenbrock), [3.0, 4.0], should_stop=should_stop
    )

    assert result.stopped_by == "cancelled"
    assert not result.converged
    assert result.n_iter == 3


def test_time_limit_stops_run():
    result = OptimizationEngine(time_limit=1e-9).run(
        NelderMeadMethod(shifted_rosenbrock), [3.0, 4.0]
    )
    assert result.stopped_by == "time_limit"
    assert result.n_iter == 1


def test_func_evals_are_counted():
    calls = {"n": 0}

    def f(x):
        calls["n"] += 1
        return sum_of_squares(x)

    result = OptimizationEngine(max_iter=20).run(NelderMeadMethod(f), [3.0, 4.0])
    assert result.func_evals == calls["n"]


def test_engine_runs_are_independent():
    method = NelderMeadMethod(sum_of_squares, config=NelderMeadConfig(max_iter=50))
    engine = OptimizationEngine(max_iter=50)
    first = engine.run(method, [3.0, 4.0])
    second = engine.run(method, [3.0, 4.0])

    assert np.array_equal(first.x_star, second.x_star)
    assert first.func_evals == second.func_evals


def test_method_config_budget_is_used_by_default_engine():
    method = NelderMeadMethod(shifted_rosenbrock, config=NelderMeadConfig(max_iter=10))
    result = OptimizationEngine().run(method, [3.0, 4.0])

    assert result.stopped_by == "max_iter"
    assert result.n_iter == 11


def test_method_options_budget_is_used_by_default_engine():
    method = NelderMeadMethod(shifted_rosenbrock, options={"max_iter": 10})
    assert OptimizationEngine().run(method, [3.0, 4.0]).n_iter == 11


def test_method_config_time_limit_is_used_by_default_engine():
    method = NelderMeadMethod(shifted_rosenbrock, config=NelderMeadConfig(time_limit=1e-9))
    result = OptimizationEngine().run(method, [3.0, 4.0])
    assert result.stopped_by == "time_limit"
    assert result.n_iter == 1


def test_engine_limits_override_method_config():
    method = NelderMeadMethod(shifted_rosenbrock, config=NelderMeadConfig(max_iter=10))
    assert OptimizationEngine(max_iter=3).run(method, [3.0, 4.0]).n_iter == 4
    assert OptimizationEngine(max_iter=3).run(method, [3.0, 4.0], max_iter=1).n_iter == 2


def test_failed_evaluation_is_not_counted():
    method = NelderMeadMethod(lambda x: float("nan"))
    method.reset()
    method.initialize([1.0, 2.0])

    with pytest.raises(EvaluationError):
        method.step()
    assert method.func_evals == 0


def test_objective_exception_is_not_counted():
    def broken(x):
        raise ZeroDivisionError("boom")

    method = NelderMeadMethod(broken)
    method.reset()
    method.initialize([1.0, 2.0])

    with pytest.raises(ZeroDivisionError):
        method.eval_f([1.0, 2.0])
    with pytest.raises(ZeroDivisionError):
        method.eval_many([[1.0, 2.0], [3.0, 4.0]])
    assert method.func_evals == 0
