"""
Графіки процесу мінімізації в компактному темному стилі.

Будує matplotlib.figure.Figure без GUI-бекенду:
    - графік f(k) (логарифмічна шкала, точки розфарбовані за типом кроку);
    - контурні лінії + траєкторія кращої вершини (тільки для R²);
    - поверхня f(x1, x2) + траєкторія (тільки для R²).

Фігури можна зберегти у файл через save_figure().
"""

from __future__ import annotations

from pathlib import Path
from typing import Callable, List, Union

import numpy as np
from matplotlib.figure import Figure
from mpl_toolkits.mplot3d import Axes3D  # noqa: F401

from ..core.iteration_result import IterationResult
from .styles import PALETTE, STEP_COLORS

_CANVAS_BG = PALETTE.surface_alt
_ACCENT = PALETTE.accent
_TEXT = PALETTE.text_main
_MUTED = PALETTE.text_muted


class PlotView:
    """Фабрика фігур для однієї траси ітерацій."""

    def __init__(self, figsize=(7.0, 4.5)) -> None:
        self.figsize = figsize

    # ------------------------------------------------------------------
    # Стилізація
    # ------------------------------------------------------------------
    def _new_figure(self, figsize=None) -> Figure:
        return Figure(figsize=figsize or self.figsize, facecolor=_CANVAS_BG)

    def _style_2d_axes(self, ax) -> None:
        ax.set_facecolor(_CANVAS_BG)
        ax.tick_params(colors=_MUTED, labelsize=9)
        for spine in ax.spines.values():
            spine.set_color(PALETTE.border)
            spine.set_linewidth(0.8)
        ax.grid(True, color=PALETTE.border, linestyle="--", linewidth=0.5, alpha=0.6)
        ax.title.set_color(_TEXT)
        ax.xaxis.label.set_color(_TEXT)
        ax.yaxis.label.set_color(_TEXT)

    def _style_3d_axes(self, ax) -> None:
        ax.set_facecolor(_CANVAS_BG)
        ax.tick_params(colors=_MUTED, labelsize=8)
        ax.xaxis.label.set_color(_TEXT)
        ax.yaxis.label.set_color(_TEXT)
        ax.zaxis.label.set_color(_TEXT)
        ax.title.set_color(_TEXT)

    def _placeholder(self, fig: Figure, message: str) -> Figure:
        ax = fig.add_subplot(111)
        self._style_2d_axes(ax)
        ax.text(0.5, 0.5, message, ha="center", va="center", transform=ax.transAxes, color=_MUTED)
        return fig

    # ------------------------------------------------------------------
    # Публічні методи
    # ------------------------------------------------------------------
    def plot_fk(self, iterations: List[IterationResult]) -> Figure:
        fig = self._new_figure()
        if not iterations:
            return self._placeholder(fig, "Немає ітерацій для відображення")

        ax = fig.add_subplot(111)
        self._style_2d_axes(ax)

        ks = np.array([it.index for it in iterations])
        fs = np.array([float(it.f) for it in iterations])

        # Для логарифмічної шкали потрібні додатні значення
        positive = bool(np.all(fs > 0.0))

        ax.plot(ks, fs, linestyle="-", linewidth=1.2, color=_ACCENT)
        colors = [STEP_COLORS.get(it.step_type, _MUTED) for it in iterations]
        ax.scatter(ks, fs, c=colors, s=10, zorder=3)
        if positive:
            ax.set_yscale("log")

        ax.set_xlabel("k (номер ітерації)")
        ax.set_ylabel("f(x_best)")
        ax.set_title("Графік f(k)")
        fig.tight_layout()
        return fig

    def plot_contour_trajectory(
        self,
        func: Callable[[np.ndarray], float],
        iterations: List[IterationResult],
        levels: int = 18,
        padding: float = 0.5,
        grid_size: int = 80,
    ) -> Figure:
        fig = self._new_figure(figsize=(11.0, 4.8))
        if not iterations:
            return self._placeholder(fig, "Немає ітерацій для відображення")

        xs = np.array([it.x for it in iterations], dtype=float)
        if xs.ndim != 2 or xs.shape[1] != 2:
            return self._placeholder(fig, "Рівні та поверхню можна показати лише для задачі в R²")

        x1_min, x1_max = xs[:, 0].min(), xs[:, 0].max()
        x2_min, x2_max = xs[:, 1].min(), xs[:, 1].max()

        if abs(x1_max - x1_min) < 1e-9:
            x1_min -= 1.0
            x1_max += 1.0
        if abs(x2_max - x2_min) < 1e-9:
            x2_min -= 1.0
            x2_max += 1.0

        x1_vals = np.linspace(x1_min - padding, x1_max + padding, grid_size)
        x2_vals = np.linspace(x2_min - padding, x2_max + padding, grid_size)
        X1, X2 = np.meshgrid(x1_vals, x2_vals)

        Z = np.zeros_like(X1)
        for i in range(grid_size):
            for j in range(grid_size):
                Z[i, j] = func(np.array([X1[i, j], X2[i, j]], dtype=float))

        x1_traj, x2_traj = xs[:, 0], xs[:, 1]

        # Contour plot
        contour_ax = fig.add_subplot(1, 2, 1)
        self._style_2d_axes(contour_ax)
        contour_ax.contour(X1, X2, Z, levels=levels, colors=PALETTE.text_muted, linewidths=0.8)
        contour_ax.contourf(X1, X2, Z, levels=levels, cmap="magma", alpha=0.45)

        contour_ax.plot(x1_traj, x2_traj, marker="o", linestyle="-", linewidth=1.2, markersize=3, color=_ACCENT)
        contour_ax.scatter(x1_traj[0], x2_traj[0], color=PALETTE.accent_alt, marker="s", s=50, zorder=5)
        contour_ax.scatter(x1_traj[-1], x2_traj[-1], color=PALETTE.accent, marker="*", s=120, zorder=6)

        contour_ax.set_xlabel("x₁")
        contour_ax.set_ylabel("x₂")
        contour_ax.set_title("Рівні функції та траєкторія")

        # Surface plot
        surface_ax = fig.add_subplot(1, 2, 2, projection="3d")
        self._style_3d_axes(surface_ax)
        surface_ax.plot_surface(
            X1,
            X2,
            Z,
            rstride=2,
            cstride=2,
            cmap="magma",
            linewidth=0.2,
            antialiased=True,
            alpha=0.9,
        )

        z_traj = np.array([it.f for it in iterations], dtype=float)
        surface_ax.plot(x1_traj, x2_traj, z_traj, color=_ACCENT, marker="o", linewidth=2, markersize=3)
        surface_ax.set_xlabel("x₁")
        surface_ax.set_ylabel("x₂")
        surface_ax.set_zlabel("f(x₁, x₂)")
        surface_ax.set_title("Поверхня f(x₁, x₂) + траєкторія")

        fig.tight_layout()
        return fig


def save_figure(fig: Figure, path: Union[str, Path], dpi: int = 120) -> Path:
    """Зберегти фігуру у файл (формат - за розширенням)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=dpi, facecolor=fig.get_facecolor())
    return path


__all__ = [
    "PlotView",
    "save_figure",
]
