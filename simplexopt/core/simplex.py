"""
simplex.py

Побудова початкового симплекса, обчислення значень функції у вершинах
та впорядкування вершин.

Симплекс зберігається як масив форми (n + 1, n): рядок - вершина.
Після reorder():
    0        – найкраща вершина
    1 .. n-1 – проміжні
    n        – найгірша вершина
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor
from typing import Any, Optional, Tuple

import numpy as np

from .errors import EvaluationError, InvalidInput
from .functions import ArrayLike, ScalarFunction
from .vector_ops import unit_vector

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Побудова симплекса
# ---------------------------------------------------------------------------

def initial_simplex(x0: ArrayLike, scale: float = 0.05) -> np.ndarray:
    """
    Початковий симплекс навколо x0.

    Вершина 0 - сама x0; вершина i + 1 - x0, у якої координата i
    зміщена на unit_vector(x0)[i] * scale. Розмір симплекса, таким
    чином, не потребує знання масштабу задачі.
    """
    x0 = np.asarray(x0, dtype=float)
    if x0.ndim != 1 or x0.size == 0:
        raise InvalidInput(f"Початкова точка має бути непорожнім вектором, отримано форму {x0.shape}")

    direction = unit_vector(x0)
    n = x0.size

    simplex = np.tile(x0, (n + 1, 1))
    for i in range(n):
        simplex[i + 1, i] += direction[i] * scale

    # Нульова компонента x0 дає нульове зміщення - вершина збігається з x0
    flat = np.flatnonzero(direction * scale == 0.0)
    if flat.size:
        logger.warning(
            "Вироджений початковий симплекс: нульове зміщення по осях %s", flat.tolist()
        )

    return simplex


# ---------------------------------------------------------------------------
# Значення функції у вершинах
# ---------------------------------------------------------------------------

def as_finite_cost(value: Any, x: Optional[ArrayLike] = None) -> float:
    """
    Перетворити результат цільової функції на float.

    NaN, ±inf або значення, яке не зводиться до числа, - EvaluationError.
    """
    try:
        cost = float(value)
    except (TypeError, ValueError) as exc:
        raise EvaluationError(
            f"Цільова функція повернула нечислове значення {value!r} у точці {x}"
        ) from exc

    if not np.isfinite(cost):
        raise EvaluationError(f"Цільова функція повернула {cost} у точці {x}")
    return cost


def evaluate_costs(
    simplex: ArrayLike,
    cost_function: ScalarFunction,
    executor: Optional[Executor] = None,
) -> np.ndarray:
    """
    Значення функції у кожній вершині симплекса (порядок зберігається).

    Функція викликається рівно один раз на вершину. Якщо передано
    executor, виклики виконуються через executor.map, а результати
    збираються до повернення.
    """
    points = [np.array(row, dtype=float) for row in np.asarray(simplex, dtype=float)]

    if executor is not None:
        values = list(executor.map(cost_function, points))
    else:
        values = [cost_function(p) for p in points]

    return np.array(
        [as_finite_cost(value, p) for value, p in zip(values, points)],
        dtype=float,
    )


# ---------------------------------------------------------------------------
# Впорядкування
# ---------------------------------------------------------------------------

def rank_costs(costs: ArrayLike) -> np.ndarray:
    """
    Перестановка індексів за зростанням значення (стабільне сортування:
    при рівних значеннях зберігається початковий порядок).
    """
    costs = np.asarray(costs, dtype=float)
    if np.any(np.isnan(costs)):
        raise EvaluationError(f"Неможливо впорядкувати значення з NaN: {costs}")
    return np.argsort(costs, kind="stable")


def reorder(simplex: ArrayLike, costs: ArrayLike) -> Tuple[np.ndarray, np.ndarray]:
    """Повернути симплекс і значення, переставлені за rank_costs()."""
    order = rank_costs(costs)
    return np.asarray(simplex, dtype=float)[order], np.asarray(costs, dtype=float)[order]


__all__ = [
    "initial_simplex",
    "as_finite_cost",
    "evaluate_costs",
    "rank_costs",
    "reorder",
]
