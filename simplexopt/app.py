"""
app.py

Консольний застосунок для мінімізації тестових функцій симплекс-методом.

Зв'язує:
    - core.functions.FUNCTIONS (тестові цільові функції)
    - core.solver.minimize (NelderMeadMethod + OptimizationEngine)
    - core.results_summary.ResultsSummary
    - ui.plot_view (графіки f(k) та рівні + траєкторія)

Приклади:
    simplexopt --function rosenbrock --x0 3 4
    simplexopt --function sphere --x0 3 4 --lower 1 1 --upper 100 100
    simplexopt --all --plot out/run.png -v
"""

from __future__ import annotations

import argparse
import logging
import sys
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional

from .core.config import Bounds, NelderMeadConfig
from .core.engine import OptimizationRunResult
from .core.errors import InvalidInput, SimplexError
from .core.functions import FUNCTIONS, TargetFunction
from .core.results_summary import ResultsSummary
from .core.solver import minimize

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="simplexopt",
        description="Мінімізація функції методом Нелдера–Міда.",
    )
    parser.add_argument(
        "--function", "-f",
        choices=sorted(FUNCTIONS),
        default="sphere",
        help="ключ тестової функції (default: sphere)",
    )
    parser.add_argument("--x0", type=float, nargs="+", help="початкова точка")
    parser.add_argument("--lower", type=float, nargs="+", help="нижні межі змінних")
    parser.add_argument("--upper", type=float, nargs="+", help="верхні межі змінних")
    parser.add_argument("--max-iter", type=int, default=NelderMeadConfig.max_iter)
    parser.add_argument("--tol", type=float, default=NelderMeadConfig.cost_threshold,
                        help="поріг |f_best| для зупинки")
    parser.add_argument("--time-limit", type=float, default=None, help="ліміт часу, секунди")
    parser.add_argument("--workers", type=int, default=0,
                        help="кількість потоків для обчислення f (0 - послідовно)")
    parser.add_argument("--all", action="store_true", help="запустити всі тестові функції")
    parser.add_argument("--plot", type=Path, default=None,
                        help="зберегти графіки у файл (суфікси _fk / _contour)")
    parser.add_argument("-v", "--verbose", action="store_true", help="детальний лог")
    return parser


def _bounds_for(target: TargetFunction, args: argparse.Namespace) -> Optional[Bounds]:
    lower = args.lower if args.lower is not None else target.lower
    upper = args.upper if args.upper is not None else target.upper
    if lower is None and upper is None:
        return None
    if lower is None or upper is None:
        raise SimplexError("Потрібно задати обидві межі: --lower та --upper.")
    return Bounds(lower, upper)


def run_target(
    target: TargetFunction,
    args: argparse.Namespace,
    config: NelderMeadConfig,
) -> OptimizationRunResult:
    if args.all:
        # У режимі --all кожна функція стартує зі своєї точки та меж
        x0 = list(target.x0)
        bounds = Bounds(target.lower, target.upper) if target.lower is not None else None
    else:
        x0 = args.x0 if args.x0 is not None else list(target.x0)
        if target.dim is not None and len(x0) != target.dim:
            raise InvalidInput(
                f"Функція {target.key} визначена в R^{target.dim}, "
                f"а --x0 має {len(x0)} координат."
            )
        bounds = _bounds_for(target, args)

    if args.workers > 0:
        with ThreadPoolExecutor(max_workers=args.workers) as pool:
            return minimize(target.func, x0, config=config, bounds=bounds, executor=pool)
    return minimize(target.func, x0, config=config, bounds=bounds)


def _save_plots(target: TargetFunction, run: OptimizationRunResult, path: Path) -> None:
    from .ui.plot_view import PlotView, save_figure

    view = PlotView()
    stem = path.with_suffix("")
    suffix = path.suffix or ".png"
    fk_path = save_figure(view.plot_fk(run.iterations), f"{stem}_{target.key}_fk{suffix}")
    contour_path = save_figure(
        view.plot_contour_trajectory(target.func, run.iterations),
        f"{stem}_{target.key}_contour{suffix}",
    )
    logger.info("Графіки збережено: %s, %s", fk_path, contour_path)


def _print_run(target: TargetFunction, run: OptimizationRunResult) -> None:
    print(target.name)
    print(f"  x*         = {run.x_star.tolist()}")
    print(f"  f(x*)      = {run.f_star:.10g}")
    print(f"  зупинка    = {run.stopped_by} (converged={run.converged})")
    print(f"  ітерацій   = {run.n_iter}, обчислень f = {run.func_evals}")


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = NelderMeadConfig(
            max_iter=args.max_iter,
            cost_threshold=args.tol,
            time_limit=args.time_limit,
        ).validate()

        targets = list(FUNCTIONS.values()) if args.all else [FUNCTIONS[args.function]]
        summary = ResultsSummary()

        for target in targets:
            run = run_target(target, args, config)
            summary.add_run(run, label=target.key)
            if not args.all:
                _print_run(target, run)
            if args.plot is not None:
                _save_plots(target, run, args.plot)

        if args.all:
            print(summary.format_table())

    except SimplexError as exc:
        logger.error("%s", exc)
        print(f"Помилка: {exc}", file=sys.stderr)
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
