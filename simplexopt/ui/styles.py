"""
Лаконічна темна палітра для графіків процесу мінімізації.

Основні принципи:
    - темні фони, мінімум рамок;
    - один акцентний колір для траєкторії;
    - спокійні вторинні відтінки для тексту й обводок.
"""

from __future__ import annotations
from dataclasses import dataclass


@dataclass(frozen=True)
class PlotPalette:
    background: str = "#0f1115"
    surface_alt: str = "#1f242b"

    text_main: str = "#e7ebf2"
    text_muted: str = "#9aa4b5"

    accent: str = "#5fb3f7"  # спокійний блакитний акцент
    accent_alt: str = "#7dcfff"

    border: str = "#2a3039"

PALETTE = PlotPalette()

# Кольори вершин за типом кроку
STEP_COLORS = {
    "reflection": PALETTE.accent,
    "expansion": "#8bd48b",
    "contraction": "#f2c86b",
    "shrink": "#f27b7b",
    "converged": PALETTE.accent_alt,
}
