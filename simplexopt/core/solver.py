"""
solver.py

Публічні функції мінімізації:

    solve(f, x0)                             -> x*
    solve_constrained(f, x0, lower, upper)   -> x*
    minimize(f, x0, ...)                     -> OptimizationRunResult

solve / solve_constrained повертають лише найкращу знайдену точку;
minimize повертає повний підсумок запуску, включно з converged та
причиною зупинки.
"""

from __future__ import annotations

from concurrent.futures import Executor
from typing import Optional

import numpy as np

from .config import Bounds, NelderMeadConfig
from .engine import IterationCallback, OptimizationEngine, OptimizationRunResult, StopHook
from .functions import ArrayLike, CostFunction
from .nelder_mead import NelderMeadMethod


def minimize(
    cost_function: CostFunction,
    initial_guess: ArrayLike,
    config: Optional[NelderMeadConfig] = None,
    bounds: Optional[Bounds] = None,
    callback: Optional[IterationCallback] = None,
    should_stop: Optional[StopHook] = None,
    executor: Optional[Executor] = None,
) -> OptimizationRunResult:
    """
    Мінімізувати cost_function методом Нелдера–Міда з точки initial_guess.

    Parameters
    ----------
    cost_function : CostFunction
        callable x -> float або об'єкт з методом evaluate(x).
    initial_guess : ArrayLike
        Непорожній вектор з ненульовою нормою.
    config : Optional[NelderMeadConfig]
        Коефіцієнти та ліміти; за замовчуванням - стандартні значення.
    bounds : Optional[Bounds]
        Прямокутні обмеження (проєкція вершин на межі).
    callback : Optional[IterationCallback]
        Викликається з IterationResult після кожної ітерації.
    should_stop : Optional[StopHook]
        Опитується після кожної ітерації; True - зупинити запуск.
    executor : Optional[Executor]
        Пул для паралельного обчислення f у вершинах симплекса.

    Raises
    ------
    InvalidInput
        Порожня, нульова або нескінченна початкова точка, некоректні межі
        чи налаштування.
    EvaluationError
        Цільова функція повернула NaN / ±inf.
    """
    config = (config or NelderMeadConfig()).validate()
    optimizer = NelderMeadMethod(
        cost_function,
        config=config,
        bounds=bounds,
        executor=executor,
    )
    # Ліміти движок бере з optimizer.config
    engine = OptimizationEngine()
    return engine.run(optimizer, initial_guess, callback=callback, should_stop=should_stop)


def solve(
    cost_function: CostFunction,
    initial_guess: ArrayLike,
    config: Optional[NelderMeadConfig] = None,
    **kwargs,
) -> np.ndarray:
    """Найкраща знайдена точка (тієї ж розмірності, що й initial_guess)."""
    return minimize(cost_function, initial_guess, config=config, **kwargs).x_star


def solve_constrained(
    cost_function: CostFunction,
    initial_guess: ArrayLike,
    lower_bounds: ArrayLike,
    upper_bounds: ArrayLike,
    config: Optional[NelderMeadConfig] = None,
    **kwargs,
) -> np.ndarray:
    """
    Як solve(), але всі вершини симплекса лишаються в
    [lower_bounds, upper_bounds].
    """
    bounds = Bounds(lower_bounds, upper_bounds)
    return minimize(
        cost_function, initial_guess, config=config, bounds=bounds, **kwargs
    ).x_star


__all__ = [
    "minimize",
    "solve",
    "solve_constrained",
]
