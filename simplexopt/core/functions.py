"""
functions.py

Типи для цільових функцій та набір тестових функцій для симплекс-методу.

Формат:
    - цільова функція приймає вектор x: numpy.ndarray форми (n,)
      і повертає одне дійсне число;
    - її можна передати як звичайний callable або як об'єкт
      з методом evaluate(x) (протокол Objective);
    - є реєстр FUNCTIONS для вибору функції з командного рядка.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional, Protocol, Union, runtime_checkable

import numpy as np

ArrayLike = np.ndarray
ScalarFunction = Callable[[ArrayLike], float]


@runtime_checkable
class Objective(Protocol):
    """
    Мінімальний інтерфейс цільової функції: evaluate(x) -> float.

    Дозволяє підставити замість чистої функції об'єкт зі станом
    (наприклад, модель з даними для підгонки) або віддалений обчислювач.
    """

    def evaluate(self, x: ArrayLike) -> float:
        ...


CostFunction = Union[ScalarFunction, Objective]


def as_scalar_function(cost_function: CostFunction) -> ScalarFunction:
    """
    Звести Objective або callable до звичайного callable x -> f(x).
    """
    evaluate = getattr(cost_function, "evaluate", None)
    if callable(evaluate):
        return evaluate
    if callable(cost_function):
        return cost_function
    raise TypeError(
        "Цільова функція має бути callable або мати метод evaluate(x), "
        f"отримано: {type(cost_function)}"
    )


# ---------------------------------------------------------------------------
# Тестові цільові функції
# ---------------------------------------------------------------------------

def sum_of_squares(x: ArrayLike) -> float:
    """
    f(x) = sum(x_i^2), мінімум 0 у початку координат.
    """
    x = np.asarray(x, dtype=float)
    return float(np.sum(x ** 2))


def rosenbrock(x: ArrayLike) -> float:
    """
    f(x1, x2) = 100 * (x2 - x1^2)^2 + (1 - x1)^2
    (класична функція Розенброка, мінімум 0 у точці (1, 1))
    """
    x1, x2 = np.asarray(x, dtype=float)
    return float(100.0 * (x2 - x1 ** 2) ** 2 + (1.0 - x1) ** 2)


def shifted_rosenbrock(x: ArrayLike) -> float:
    """
    f(x1, x2) = (1 - x1)^2 + 100 + (x2 - x1^2)^2

    Зсунутий варіант "Розенброка": мінімум 100 у точці (1, 1).
    Значення ніколи не падає нижче порогу збіжності, тому запуск
    завжди закінчується по ліміту ітерацій.
    """
    x1, x2 = np.asarray(x, dtype=float)
    return float((1.0 - x1) ** 2 + 100.0 + (x2 - x1 ** 2) ** 2)


def shifted_quadratic(x: ArrayLike) -> float:
    """
    f(x1, x2) = (x1 - 4)^2 + (x2 - 4)^2
    """
    x1, x2 = np.asarray(x, dtype=float)
    return float((x1 - 4.0) ** 2 + (x2 - 4.0) ** 2)


# ---------------------------------------------------------------------------
# Реєстр функцій для командного рядка
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TargetFunction:
    key: str
    name: str
    func: ScalarFunction
    x0: tuple
    lower: Optional[tuple] = None
    upper: Optional[tuple] = None
    # None - функція визначена в R^n для будь-якого n
    dim: Optional[int] = 2


FUNCTIONS: Dict[str, TargetFunction] = {
    "sphere": TargetFunction(
        key="sphere",
        name="f(x) = x1^2 + x2^2",
        func=sum_of_squares,
        x0=(3.0, 4.0),
        dim=None,
    ),
    "sphere_bounded": TargetFunction(
        key="sphere_bounded",
        name="f(x) = x1^2 + x2^2,  1 <= x_i <= 100",
        func=sum_of_squares,
        x0=(3.0, 4.0),
        lower=(1.0, 1.0),
        upper=(100.0, 100.0),
        dim=None,
    ),
    "rosenbrock": TargetFunction(
        key="rosenbrock",
        name="f(x1, x2) = 100 * (x2 - x1^2)^2 + (1 - x1)^2",
        func=rosenbrock,
        x0=(3.0, 4.0),
    ),
    "shifted_rosenbrock": TargetFunction(
        key="shifted_rosenbrock",
        name="f(x1, x2) = (1 - x1)^2 + 100 + (x2 - x1^2)^2",
        func=shifted_rosenbrock,
        x0=(3.0, 4.0),
    ),
    "quadratic": TargetFunction(
        key="quadratic",
        name="f(x1, x2) = (x1 - 4)^2 + (x2 - 4)^2",
        func=shifted_quadratic,
        x0=(1.0, 2.0),
    ),
}

__all__ = [
    "ArrayLike",
    "ScalarFunction",
    "Objective",
    "CostFunction",
    "as_scalar_function",
    "sum_of_squares",
    "rosenbrock",
    "shifted_rosenbrock",
    "shifted_quadratic",
    "TargetFunction",
    "FUNCTIONS",
]
