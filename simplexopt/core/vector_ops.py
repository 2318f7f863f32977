"""
vector_ops.py

Елементарні операції над векторами фіксованої розмірності.

    unit_vector(v)                 - v / ||v||₂
    reflect_point(a, b, factor)    - a + factor * (a - b)   (відбиття від b через a)
    line_point(a, b, factor)       - a + factor * (b - a)   (точка на прямій a → b)
    simplex_diameter(simplex)      - max ||x_i - x_0||
"""

from __future__ import annotations

import numpy as np

from .errors import InvalidInput
from .functions import ArrayLike


def unit_vector(v: ArrayLike) -> np.ndarray:
    """
    Нормований вектор v / ||v||₂.

    Нульовий, порожній або нескінченний вектор нормувати неможливо -
    InvalidInput замість ділення на нуль.
    """
    v = np.asarray(v, dtype=float)
    if v.size == 0:
        raise InvalidInput("Неможливо нормувати порожній вектор.")
    if not np.all(np.isfinite(v)):
        raise InvalidInput(f"Вектор містить нескінченні або NaN компоненти: {v}")

    norm = float(np.linalg.norm(v, ord=2))
    if norm == 0.0:
        raise InvalidInput("Неможливо нормувати нульовий вектор (||v|| = 0).")

    return v / norm


def reflect_point(pivot: ArrayLike, point: ArrayLike, factor: float) -> np.ndarray:
    """
    pivot + factor * (pivot - point): віддаляємось від point через pivot.
    """
    pivot = np.asarray(pivot, dtype=float)
    point = np.asarray(point, dtype=float)
    return pivot + factor * (pivot - point)


def line_point(pivot: ArrayLike, point: ArrayLike, factor: float) -> np.ndarray:
    """
    pivot + factor * (point - pivot): рухаємось від pivot у бік point.

    factor > 1 - розширення за point, 0 < factor < 1 - точка між ними.
    """
    pivot = np.asarray(pivot, dtype=float)
    point = np.asarray(point, dtype=float)
    return pivot + factor * (point - pivot)


def simplex_diameter(simplex: ArrayLike) -> float:
    """
    Оцінка "розміру" симплекса як максимальна відстань від кращої точки.
    """
    simplex = np.asarray(simplex, dtype=float)
    dists = np.linalg.norm(simplex - simplex[0], axis=1)
    return float(np.max(dists))


__all__ = [
    "unit_vector",
    "reflect_point",
    "line_point",
    "simplex_diameter",
]
