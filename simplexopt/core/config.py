"""
config.py

Налаштування симплекс-методу та прямокутні обмеження на змінні.

NelderMeadConfig замінює "зашиті" константи алгоритму:
    reflection             : коефіцієнт відбиття (alpha), default: 1.0
    expansion              : коефіцієнт розширення (gamma), default: 2.0
    contraction            : коефіцієнт стиснення до центроїда (rho), default: 0.5
    shrinkage              : коефіцієнт стиснення симплекса (sigma), default: 0.5
    initial_simplex_scale  : масштаб збурення початкового симплекса, default: 0.05
    cost_threshold         : поріг |f_best| для зупинки, default: 1e-9
    max_iter               : ліміт ітерацій, default: 5000
    time_limit             : ліміт часу в секундах (None - без ліміту)
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Optional

import numpy as np

from .errors import InvalidInput
from .functions import ArrayLike


# Короткі назви коефіцієнтів, прийняті в літературі
_OPTION_ALIASES: Dict[str, str] = {
    "alpha": "reflection",
    "gamma": "expansion",
    "rho": "contraction",
    "sigma": "shrinkage",
}


@dataclass(frozen=True)
class NelderMeadConfig:
    reflection: float = 1.0
    expansion: float = 2.0
    contraction: float = 0.5
    shrinkage: float = 0.5
    initial_simplex_scale: float = 0.05
    cost_threshold: float = 1.0e-9
    max_iter: int = 5000
    time_limit: Optional[float] = None

    @classmethod
    def from_options(cls, options: Optional[Dict[str, Any]] = None) -> "NelderMeadConfig":
        """
        Побудувати конфігурацію зі словника options.

        Приймає як повні назви полів, так і alpha / gamma / rho / sigma.
        Невідомі ключі ігноруються.
        """
        known = {f.name for f in fields(cls)}
        values: Dict[str, Any] = {}
        for key, value in (options or {}).items():
            name = _OPTION_ALIASES.get(key, key)
            if name in known:
                values[name] = value
        return cls(**values).validate()

    def validate(self) -> "NelderMeadConfig":
        """Перевірити коефіцієнти; повертає self для ланцюжка викликів."""
        if not self.reflection > 0.0:
            raise InvalidInput(f"reflection має бути > 0, отримано {self.reflection}")
        if not self.expansion > 1.0:
            raise InvalidInput(f"expansion має бути > 1, отримано {self.expansion}")
        if not 0.0 < self.contraction < 1.0:
            raise InvalidInput(f"contraction має бути в (0, 1), отримано {self.contraction}")
        if not 0.0 < self.shrinkage < 1.0:
            raise InvalidInput(f"shrinkage має бути в (0, 1), отримано {self.shrinkage}")
        if not self.initial_simplex_scale > 0.0:
            raise InvalidInput(
                f"initial_simplex_scale має бути > 0, отримано {self.initial_simplex_scale}"
            )
        if not self.cost_threshold >= 0.0:
            raise InvalidInput(f"cost_threshold має бути >= 0, отримано {self.cost_threshold}")
        if int(self.max_iter) != self.max_iter or self.max_iter < 0:
            raise InvalidInput(f"max_iter має бути цілим >= 0, отримано {self.max_iter}")
        if self.time_limit is not None and not self.time_limit > 0.0:
            raise InvalidInput(f"time_limit має бути > 0, отримано {self.time_limit}")
        return self


@dataclass(frozen=True, eq=False)
class Bounds:
    """
    Прямокутні обмеження lower <= x <= upper.

    Стратегія - проєкція (clamping): кожна нова вершина симплекса
    обрізається до меж покоординатно.
    """
    lower: np.ndarray
    upper: np.ndarray

    def __init__(self, lower: ArrayLike, upper: ArrayLike) -> None:
        object.__setattr__(self, "lower", np.asarray(lower, dtype=float).ravel())
        object.__setattr__(self, "upper", np.asarray(upper, dtype=float).ravel())

    def validate(self, dim: int) -> "Bounds":
        if self.lower.size != dim or self.upper.size != dim:
            raise InvalidInput(
                f"Розмірність меж ({self.lower.size}, {self.upper.size}) "
                f"не збігається з розмірністю задачі {dim}."
            )
        if not (np.all(np.isfinite(self.lower)) and np.all(np.isfinite(self.upper))):
            raise InvalidInput("Межі мають бути скінченними числами.")
        if np.any(self.lower > self.upper):
            raise InvalidInput("Нижня межа не може перевищувати верхню.")
        return self

    def contains(self, x: ArrayLike) -> bool:
        x = np.asarray(x, dtype=float)
        return bool(np.all(x >= self.lower) and np.all(x <= self.upper))

    def clip(self, x: ArrayLike) -> np.ndarray:
        """Проєкція точки (або рядків масиву) на прямокутник."""
        return np.clip(np.asarray(x, dtype=float), self.lower, self.upper)


__all__ = [
    "NelderMeadConfig",
    "Bounds",
]
