"""
optimizer_base.py

Базові класи та типи для методів прямого пошуку (Strategy).

Ідея:
    - Є абстрактний клас Optimizer, від якого наслідуються конкретні методи
      (NelderMeadMethod).
    - Кожен метод реалізує _step_impl() та best(), а движок викликає step()
      поки метод не повідомить про збіжність або не вичерпається ліміт.

Формат:
    step() -> StepResult
    best() -> (x, f)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from concurrent.futures import Executor
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence, Tuple

import numpy as np

from .functions import ArrayLike, CostFunction, as_scalar_function
from .simplex import as_finite_cost, evaluate_costs


# ---------------------------------------------------------------------------
# Результат одного кроку методу
# ---------------------------------------------------------------------------

@dataclass
class StepResult:
    """
    Результат одного кроку оптимізації.

    Атрибути:
        x_best    - найкраща точка на початку кроку
        f_best    - значення функції в x_best
        step_type - тип виконаного перетворення
        meta      - додаткова інформація (stopped_by, діаметр, ...)
    """
    x_best: np.ndarray
    f_best: float
    step_type: str
    meta: Dict[str, Any] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Базовий клас Optimizer (Strategy)
# ---------------------------------------------------------------------------

class Optimizer(ABC):
    """
    Абстрактний базовий клас для методів оптимізації без похідних.

    Використання:
        opt = NelderMeadMethod(func=..., options={...})
        opt.reset()
        opt.initialize(x0)
        res = opt.step()  # StepResult
    """

    def __init__(
        self,
        func: CostFunction,
        options: Optional[Dict[str, Any]] = None,
        name: Optional[str] = None,
        executor: Optional[Executor] = None,
    ) -> None:
        """
        Parameters
        ----------
        func : CostFunction
            Цільова функція f(x): callable або об'єкт з методом evaluate(x).
        options : Optional[dict]
            Додаткові параметри методу.
        name : Optional[str]
            Людяна назва методу (для логів/таблиць).
        executor : Optional[Executor]
            Пул для паралельного обчислення f у кількох точках.
        """
        self.func = as_scalar_function(func)
        self.options: Dict[str, Any] = options or {}
        self.name: str = name or self.__class__.__name__
        self.executor = executor

        # Лічильник викликів цільової функції
        self.func_evals: int = 0

        # Місце для внутрішнього стану (симплекс, номер ітерації)
        self.state: Dict[str, Any] = {}

    # ------------------------------------------------------------------
    # Обчислення f із підрахунком викликів
    # ------------------------------------------------------------------

    def eval_f(self, x: ArrayLike) -> float:
        """Обчислити f(x) та збільшити лічильник викликів функції."""
        x_arr = np.asarray(x, dtype=float)
        value = as_finite_cost(self.func(x_arr), x_arr)
        self.func_evals += 1
        return value

    def eval_many(self, points: Sequence[ArrayLike]) -> np.ndarray:
        """
        Обчислити f у кожній точці; порядок результатів = порядок точок.

        Лічильник збільшується лише після успішного обчислення всіх точок.
        """
        costs = evaluate_costs(points, self.func, executor=self.executor)
        self.func_evals += len(costs)
        return costs

    # ------------------------------------------------------------------
    # Життєвий цикл методу
    # ------------------------------------------------------------------

    def reset(self) -> None:
        """
        Скинути внутрішній стан та лічильники перед новим запуском.
        Викликається движком перед першою ітерацією.
        """
        self.func_evals = 0
        self.state.clear()

    def initialize(self, x0: ArrayLike) -> None:
        """Ініціалізувати внутрішній стан для початкової точки x0."""
        self.state["x0"] = np.asarray(x0, dtype=float)

    def step(self) -> StepResult:
        """
        Виконати один крок методу.

        Повертає:
            StepResult(x_best, f_best, step_type, meta)
        """
        if "x0" not in self.state:
            raise RuntimeError(f"{self.name}: виклик step() до initialize()")

        result = self._step_impl()

        if not isinstance(result, StepResult):
            raise TypeError(
                f"{self.__class__.__name__}._step_impl() "
                f"повинен повертати StepResult, отримано: {type(result)}"
            )

        return result

    # ------------------------------------------------------------------
    # Абстрактні методи, які реалізують конкретні стратегії
    # ------------------------------------------------------------------

    @abstractmethod
    def _step_impl(self) -> StepResult:
        """Реалізація одного кроку методу."""
        raise NotImplementedError

    @abstractmethod
    def best(self) -> Tuple[np.ndarray, float]:
        """Найкраща точка поточного стану та значення f у ній."""
        raise NotImplementedError


__all__ = [
    "StepResult",
    "Optimizer",
]
