"""
engine.py

Ітераційний двигун для запуску методів прямого пошуку (Optimizer).

Функціонал:
    - виконує step() поки метод не повідомить про збіжність
      або не спрацює один із лімітів;
    - формує трасу ітерацій (для таблиць і графіків);
    - рахує кількість викликів цільової функції;
    - фіксує причину зупинки:
          "converged"   - |f_best| менше порогу,
          "max_iter"    - лічильник ітерацій перевищив max_iter,
          "cancelled"   - should_stop() повернув True,
          "time_limit"  - вичерпано ліміт часу;
    - підтримує callback для логів / прогресу на кожній ітерації.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

import numpy as np

from .functions import ArrayLike
from .iteration_result import IterationResult
from .optimizer_base import Optimizer, StepResult

logger = logging.getLogger(__name__)

DEFAULT_MAX_ITER = 5000


@dataclass
class OptimizationRunResult:
    """
    Підсумок одного запуску оптимізації.

    Атрибути:
        method_name   - назва методу (Optimizer.name).
        iterations    - список IterationResult (траса процесу).
        x_star        - найкраща знайдена точка.
        f_star        - значення f(x_star).
        n_iter        - кількість виконаних перетворень симплекса.
        func_evals    - кількість викликів цільової функції.
        stopped_by    - причина зупинки ("converged", "max_iter", "cancelled", "time_limit").
        converged     - True лише якщо досягнуто порогу збіжності.
        elapsed       - час роботи, секунди.

    Результат - "найкраще знайдене", а не гарантований мінімум:
    converged = False означає зупинку по ліміту.
    """
    method_name: str
    iterations: List[IterationResult]
    x_star: np.ndarray
    f_star: float
    n_iter: int
    func_evals: int
    stopped_by: str
    converged: bool
    elapsed: float = 0.0


# Тип callback'а для логів / прогресу
IterationCallback = Callable[[IterationResult], None]
StopHook = Callable[[], bool]


class OptimizationEngine:
    """
    Движок, який керує ітераційним процесом для заданого Optimizer.

    Ліміти запуску (max_iter, time_limit) беруться в такому порядку:
        1. аргументи run();
        2. значення, задані в конструкторі движка;
        3. optimizer.config (наприклад, NelderMeadConfig методу);
        4. max_iter = 5000, time_limit = None (без ліміту).
    """

    def __init__(
        self,
        max_iter: Optional[int] = None,
        time_limit: Optional[float] = None,
    ) -> None:
        self.max_iter_default = max_iter
        self.time_limit_default = time_limit

    def run(
        self,
        optimizer: Optimizer,
        x0: ArrayLike,
        max_iter: Optional[int] = None,
        time_limit: Optional[float] = None,
        callback: Optional[IterationCallback] = None,
        should_stop: Optional[StopHook] = None,
    ) -> OptimizationRunResult:
        """
        Запустити процес оптимізації.

        Лічильник ітерацій збільшується після кожного кроку; коли він
        перевищує max_iter, процес зупиняється (тобто виконується
        не більше max_iter + 1 кроків).
        """
        config = getattr(optimizer, "config", None)
        if max_iter is None:
            max_iter = self.max_iter_default
        if max_iter is None:
            max_iter = getattr(config, "max_iter", DEFAULT_MAX_ITER)
        if time_limit is None:
            time_limit = self.time_limit_default
        if time_limit is None:
            time_limit = getattr(config, "time_limit", None)

        # Скидаємо стан методу та ініціалізуємо
        optimizer.reset()
        optimizer.initialize(x0)

        logger.info(
            "%s: старт з x0=%s, max_iter=%d", optimizer.name, np.asarray(x0).tolist(), max_iter
        )

        iterations: List[IterationResult] = []
        stopped_by: str = "max_iter"
        started = time.perf_counter()
        k = 0

        # Основний ітераційний цикл
        while True:
            step_res: StepResult = optimizer.step()

            rec = IterationResult(
                index=k,
                x=step_res.x_best.copy(),
                f=float(step_res.f_best),
                step_type=step_res.step_type,
                meta=dict(step_res.meta or {}),
            )
            iterations.append(rec)

            if callback is not None:
                callback(rec)

            # Чи метод сам попросив зупинити процес?
            method_stopped = rec.meta.get("stopped_by")
            if method_stopped is not None:
                stopped_by = str(method_stopped)
                break

            k += 1
            if k > max_iter:
                stopped_by = "max_iter"
                break

            if should_stop is not None and should_stop():
                stopped_by = "cancelled"
                break

            if time_limit is not None and time.perf_counter() - started >= time_limit:
                stopped_by = "time_limit"
                break

        converged = stopped_by == "converged"
        if converged:
            x_star, f_star = iterations[-1].x.copy(), iterations[-1].f
        else:
            # Після останнього перетворення симплекс ще не впорядковано
            x_star, f_star = optimizer.best()

        result = OptimizationRunResult(
            method_name=optimizer.name,
            iterations=iterations,
            x_star=x_star,
            f_star=float(f_star),
            n_iter=k,
            func_evals=optimizer.func_evals,
            stopped_by=stopped_by,
            converged=converged,
            elapsed=time.perf_counter() - started,
        )

        logger.info(
            "%s: зупинка (%s) після %d ітерацій, %d обчислень f, f*=%.6g",
            optimizer.name, stopped_by, result.n_iter, result.func_evals, result.f_star,
        )

        return result


__all__ = [
    "IterationCallback",
    "StopHook",
    "OptimizationRunResult",
    "OptimizationEngine",
]
