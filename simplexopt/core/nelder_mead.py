"""
nelder_mead.py

Реалізація методу Нелдера–Міда як стратегії Optimizer.

Метод працює тільки зі значеннями функції f(x) (без градієнтів і Гессіана)
і оперує симплексом з (n + 1) вершин у n-вимірному просторі.

Один крок (step):
    1. Обчислення f у всіх вершинах та сортування.
    2. Перевірка збіжності: |f_best| < cost_threshold.
    3. Центроїд усіх вершин, окрім найгіршої, і відбиття (reflection).
    4. Залежно від f_reflect:
         f_r < f_best                 → розширення (expansion)
         f_best <= f_r < f_second     → прийняти відбиту точку
         f_second <= f_r < f_worst    → внутрішнє стиснення (contraction),
                                        якщо не допомогло - shrink
         f_r >= f_worst               → shrink
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor
from typing import Any, Dict, Optional, Tuple

import numpy as np

from .config import Bounds, NelderMeadConfig
from .errors import InvalidInput
from .functions import ArrayLike, CostFunction
from .optimizer_base import Optimizer, StepResult
from .simplex import initial_simplex, reorder
from .transforms import centroid, contract, expand, reflect, shrink
from .vector_ops import simplex_diameter

logger = logging.getLogger(__name__)


class NelderMeadMethod(Optimizer):
    """
    Метод Нелдера–Міда.

    Особливості:
        - не використовує градієнт чи Гессіан;
        - тримає всередині поточний симплекс і є його єдиним власником;
        - значення f у вершинах не кешуються між кроками: кожен step()
          обчислює їх заново;
        - один виклик step() = одна ітерація алгоритму над симплексом.

    Налаштування:
        config   : NelderMeadConfig (має пріоритет над options)
        options  : dict з ключами NelderMeadConfig або alpha/gamma/rho/sigma
        bounds   : Bounds - якщо задано, кожна нова вершина обрізається до меж
    """

    def __init__(
        self,
        func: CostFunction,
        options: Optional[Dict[str, Any]] = None,
        name: Optional[str] = None,
        executor: Optional[Executor] = None,
        config: Optional[NelderMeadConfig] = None,
        bounds: Optional[Bounds] = None,
    ) -> None:
        super().__init__(
            func=func,
            options=options,
            name=name or "Nelder–Mead simplex",
            executor=executor,
        )
        if config is None:
            config = NelderMeadConfig.from_options(self.options)
        self.config: NelderMeadConfig = config.validate()
        self.bounds = bounds

    # ------------------------------------------------------------------
    # Ініціалізація симплекса
    # ------------------------------------------------------------------

    def initialize(self, x0: ArrayLike) -> None:
        """
        Побудова початкового симплекса навколо x0.
        """
        x0 = np.asarray(x0, dtype=float)
        if x0.ndim != 1 or x0.size == 0:
            raise InvalidInput(f"Початкова точка має бути непорожнім вектором, отримано форму {x0.shape}")
        if not np.all(np.isfinite(x0)):
            raise InvalidInput(f"Початкова точка містить нескінченні або NaN компоненти: {x0}")

        if self.bounds is not None:
            self.bounds.validate(x0.size)
            if not self.bounds.contains(x0):
                logger.warning("Початкова точка %s поза межами, обрізаємо до меж", x0)
                x0 = self.bounds.clip(x0)

        super().initialize(x0)

        simplex = initial_simplex(x0, self.config.initial_simplex_scale)
        self.state["simplex"] = self._project(simplex)
        self.state["iteration"] = 0

    # ------------------------------------------------------------------
    # Допоміжні функції
    # ------------------------------------------------------------------

    def _project(self, x: np.ndarray) -> np.ndarray:
        if self.bounds is None:
            return x
        return self.bounds.clip(x)

    def _ranked(self) -> Tuple[np.ndarray, np.ndarray]:
        """Обчислити f у всіх вершинах і впорядкувати симплекс."""
        simplex: np.ndarray = self.state["simplex"]
        costs = self.eval_many(simplex)
        return reorder(simplex, costs)

    def best(self) -> Tuple[np.ndarray, float]:
        simplex, costs = self._ranked()
        self.state["simplex"] = simplex
        return simplex[0].copy(), float(costs[0])

    # ------------------------------------------------------------------
    # Один крок методу Нелдера–Міда
    # ------------------------------------------------------------------

    def _step_impl(self) -> StepResult:
        cfg = self.config
        iteration: int = int(self.state.get("iteration", 0))

        simplex, costs = self._ranked()

        x_best = simplex[0].copy()
        f_best = float(costs[0])
        f_second_worst = float(costs[-2])
        f_worst = float(costs[-1])

        meta: Dict[str, Any] = {
            "iteration": iteration,
            "f_worst": f_worst,
            "simplex_diameter": simplex_diameter(simplex),
        }

        if abs(f_best) < cfg.cost_threshold:
            self.state["simplex"] = simplex
            meta["stopped_by"] = "converged"
            return StepResult(x_best=x_best, f_best=f_best, step_type="converged", meta=meta)

        # Центроїд усіх, окрім найгіршої точки
        center = centroid(simplex[:-1])

        # --------------------------------------------------------------
        # 1. Reflection (відбиття)
        # --------------------------------------------------------------
        x_reflect = self._project(reflect(center, simplex[-1], cfg.reflection))
        f_reflect = self.eval_f(x_reflect)
        meta["f_reflect"] = f_reflect

        if f_reflect < f_best:
            # ----------------------------------------------------------
            # 2. Expansion (розширення)
            # ----------------------------------------------------------
            x_expand = self._project(expand(center, x_reflect, cfg.expansion))
            f_expand = self.eval_f(x_expand)

            if f_expand < f_reflect:
                simplex[-1] = x_expand
                step_type = "expansion"
            else:
                simplex[-1] = x_reflect
                step_type = "reflection"

        elif f_reflect < f_second_worst:
            # Прийнятне відбиття
            simplex[-1] = x_reflect
            step_type = "reflection"

        elif f_reflect < f_worst:
            # ----------------------------------------------------------
            # 3. Contraction (внутрішнє стиснення до центроїда)
            # ----------------------------------------------------------
            x_contract = self._project(contract(center, simplex[-1], cfg.contraction))
            f_contract = self.eval_f(x_contract)

            if f_contract < f_worst:
                simplex[-1] = x_contract
                step_type = "contraction"
            else:
                simplex = self._project(shrink(simplex, cfg.shrinkage))
                step_type = "shrink"

        else:
            # ----------------------------------------------------------
            # 4. Shrink (стиснення симплекса до кращої вершини)
            # ----------------------------------------------------------
            simplex = self._project(shrink(simplex, cfg.shrinkage))
            step_type = "shrink"

        self.state["simplex"] = simplex
        self.state["iteration"] = iteration + 1

        logger.debug(
            "ітерація %d: %s, f_best=%.6g, f_reflect=%.6g",
            iteration, step_type, f_best, f_reflect,
        )

        return StepResult(x_best=x_best, f_best=f_best, step_type=step_type, meta=meta)


__all__ = [
    "NelderMeadMethod",
]
