"""
errors.py

Ієрархія винятків симплекс-методу.

    SimplexError        - базовий клас;
    InvalidInput        - некоректні вхідні дані (нульова початкова точка,
                          межі, параметри конфігурації);
    EvaluationError     - цільова функція повернула NaN / ±inf або
                          значення, яке не зводиться до float.

Вичерпання ліміту ітерацій помилкою НЕ вважається: про це повідомляє
OptimizationRunResult.converged / stopped_by.
"""

from __future__ import annotations


class SimplexError(Exception):
    """Базовий виняток пакета simplexopt."""


class InvalidInput(SimplexError, ValueError):
    """Некоректна постановка задачі (точка, межі, налаштування)."""


class EvaluationError(SimplexError, ArithmeticError):
    """Значення цільової функції не є скінченним дійсним числом."""


__all__ = [
    "SimplexError",
    "InvalidInput",
    "EvaluationError",
]
