"""
results_summary.py

Зведена таблиця результатів кількох запусків симплекс-методу
(наприклад, для різних цільових функцій чи початкових точок).

Працює поверх об'єктів з інтерфейсом OptimizationRunResult:
    - method_name
    - x_star
    - f_star
    - n_iter
    - func_evals
    - stopped_by
    - converged
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

import numpy as np


@dataclass
class ResultsSummary:
    """
    Зведення результатів кількох запусків.

    Приклад використання:
        summary = ResultsSummary()
        summary.add_run(run_sphere, label="sphere")
        summary.add_run(run_rosenbrock, label="rosenbrock")
        rows = summary.as_rows()  # для друку / pandas / CSV
    """
    runs: List[Any] = field(default_factory=list)
    labels: List[Optional[str]] = field(default_factory=list)

    def add_run(self, run: Any, label: Optional[str] = None) -> None:
        """Додати результат одного запуску до зведення."""
        self.runs.append(run)
        self.labels.append(label)

    # ------------------------------------------------------------------
    # Перетворення в "табличний" вигляд
    # ------------------------------------------------------------------

    def as_rows(self) -> List[Dict[str, Any]]:
        """
        Повернути список dict-рядків з полями:
            label, method, x_star, f_star, n_iter, func_evals,
            stopped_by, converged
        """
        rows: List[Dict[str, Any]] = []

        for run, label in zip(self.runs, self.labels):
            method_name = getattr(run, "method_name", "<unknown>")
            x_star = getattr(run, "x_star", None)
            f_star = getattr(run, "f_star", None)
            n_iter = getattr(run, "n_iter", None)
            func_evals = getattr(run, "func_evals", None)

            if isinstance(x_star, np.ndarray):
                x_star = x_star.tolist()

            rows.append(
                {
                    "label": label if label is not None else method_name,
                    "method": method_name,
                    "x_star": x_star,
                    "f_star": float(f_star) if f_star is not None else None,
                    "n_iter": int(n_iter) if n_iter is not None else None,
                    "func_evals": int(func_evals) if func_evals is not None else None,
                    "stopped_by": getattr(run, "stopped_by", None),
                    "converged": bool(getattr(run, "converged", False)),
                }
            )

        return rows

    def format_table(self, precision: int = 6) -> str:
        """Текстова таблиця для виводу в консоль."""
        header = f"{'label':<20} {'f*':>14} {'iter':>6} {'evals':>7} {'stop':<11} x*"
        lines = [header, "-" * len(header)]
        for row in self.as_rows():
            x_repr = ", ".join(f"{v:.{precision}g}" for v in (row["x_star"] or []))
            f_repr = f"{row['f_star']:.{precision}g}" if row["f_star"] is not None else "-"
            lines.append(
                f"{str(row['label']):<20} {f_repr:>14} {row['n_iter'] or 0:>6} "
                f"{row['func_evals'] or 0:>7} {str(row['stopped_by']):<11} [{x_repr}]"
            )
        return "\n".join(lines)

    # ------------------------------------------------------------------
    # Вибір "найкращого" запуску
    # ------------------------------------------------------------------

    def best_by_f(self) -> Optional[Any]:
        """
        Повернути run з найменшим значенням f_star.
        Якщо список порожній або f_star не визначені - повертає None.
        """
        best_run = None
        best_f = None

        for run in self.runs:
            f_star = getattr(run, "f_star", None)
            if f_star is None:
                continue
            f_val = float(f_star)
            if best_f is None or f_val < best_f:
                best_f = f_val
                best_run = run

        return best_run

    # ------------------------------------------------------------------
    # Опційно: повернути pandas.DataFrame
    # ------------------------------------------------------------------

    def to_dataframe(self):
        """
        Повернути pandas.DataFrame зі зведеною таблицею.

        Вимога: встановлений пакет pandas (extra "report").
        """
        try:
            import pandas as pd  # type: ignore
        except ImportError as exc:  # pragma: no cover
            raise RuntimeError(
                "Для використання ResultsSummary.to_dataframe() "
                "потрібно встановити пакет 'pandas'."
            ) from exc

        return pd.DataFrame(self.as_rows())


__all__ = ["ResultsSummary"]
