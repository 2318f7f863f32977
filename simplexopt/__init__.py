"""
simplexopt

Мінімізація функції багатьох змінних без похідних методом Нелдера–Міда.

    from simplexopt import solve
    x_star = solve(lambda x: (x ** 2).sum(), [3.0, 4.0])
"""

from .core.config import Bounds, NelderMeadConfig
from .core.engine import OptimizationEngine, OptimizationRunResult
from .core.errors import EvaluationError, InvalidInput, SimplexError
from .core.functions import Objective
from .core.iteration_result import IterationResult
from .core.nelder_mead import NelderMeadMethod
from .core.results_summary import ResultsSummary
from .core.solver import minimize, solve, solve_constrained

__version__ = "0.1.0"

__all__ = [
    "Bounds",
    "NelderMeadConfig",
    "OptimizationEngine",
    "OptimizationRunResult",
    "EvaluationError",
    "InvalidInput",
    "SimplexError",
    "Objective",
    "IterationResult",
    "NelderMeadMethod",
    "ResultsSummary",
    "minimize",
    "solve",
    "solve_constrained",
]
