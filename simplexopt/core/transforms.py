"""
transforms.py

Геометричні перетворення симплекса відносно центроїда (або кращої вершини).

    centroid   - середнє всіх вершин, окрім найгіршої
    reflect    - c + alpha * (c - x_worst)
    expand     - c + gamma * (x_r - c)
    contract   - c + rho * (x_worst - c)     (внутрішнє стиснення)
    shrink     - x_best + sigma * (x_i - x_best) для всіх i != 0
"""

from __future__ import annotations

import numpy as np

from .functions import ArrayLike
from .vector_ops import line_point, reflect_point


def centroid(points: ArrayLike) -> np.ndarray:
    """
    Покоординатне середнє переданих вершин.

    Викликач передає впорядкований симплекс без останнього рядка.
    """
    return np.mean(np.asarray(points, dtype=float), axis=0)


def reflect(center: ArrayLike, worst: ArrayLike, factor: float = 1.0) -> np.ndarray:
    return reflect_point(center, worst, factor)


def expand(center: ArrayLike, reflected: ArrayLike, factor: float = 2.0) -> np.ndarray:
    return line_point(center, reflected, factor)


def contract(center: ArrayLike, worst: ArrayLike, factor: float = 0.5) -> np.ndarray:
    return line_point(center, worst, factor)


def shrink(simplex: ArrayLike, factor: float = 0.5) -> np.ndarray:
    """
    Стиснення всього симплекса до кращої вершини (рядок 0 не змінюється).

    Повертає новий масив; вхідний симплекс не модифікується.
    """
    simplex = np.array(simplex, dtype=float)
    best = simplex[0].copy()
    for i in range(1, simplex.shape[0]):
        simplex[i] = line_point(best, simplex[i], factor)
    return simplex


__all__ = [
    "centroid",
    "reflect",
    "expand",
    "contract",
    "shrink",
]
