"""
iteration_result.py

Структура даних для представлення результатів окремих ітерацій
симплекс-методу. Використовується движком, зведенням результатів
і графіками.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict

import numpy as np


@dataclass
class IterationResult:
    """
    Опис однієї ітерації.

    Атрибути:
        index      - номер ітерації (0, 1, 2, ...)
        x          - найкраща вершина симплекса на початку ітерації
        f          - значення функції у цій вершині
        step_type  - виконане перетворення (reflection, expansion, ...)
        meta       - довільна додаткова інформація (діаметр симплекса, ...)
    """
    index: int
    x: np.ndarray
    f: float
    step_type: str = ""
    meta: Dict[str, Any] = field(default_factory=dict)


__all__ = [
    "IterationResult",
]
