from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np

from sparsesolve.config.presets import small_benchmark_config
from sparsesolve.config.schemas import BenchmarkConfig, ProblemKind
from sparsesolve.linalg.matrix import (
    DenseMatrix,
    LinearOperator,
    SparseMatrix,
    residual_norm_sq,
)
from sparsesolve.linalg.vector import DenseVector
from sparsesolve.problems.generators import (
    convection_diffusion_1d,
    manufactured_rhs,
    poisson_1d,
    random_spd,
)
from sparsesolve.solvers.bicgstab import BicgstabSolver
from sparsesolve.utils.io import save_json
from sparsesolve.utils.logging import configure_logging

Row = dict[str, float | int | str | bool]


def build_operator(
    kind: ProblemKind, n: int, config: BenchmarkConfig, rng: np.random.Generator
) -> LinearOperator:
    if kind == "poisson_1d":
        return SparseMatrix(poisson_1d(n))
    if kind == "convection_diffusion_1d":
        return SparseMatrix(convection_diffusion_1d(n, peclet=config.peclet))
    return DenseMatrix(random_spd(n, rng=rng, shift=config.spd_shift))


def run_benchmark(config: BenchmarkConfig) -> tuple[list[Row], dict[str, list[float]]]:
    """Solve every (problem, size) pair; return metric rows and residual histories."""

    rng = np.random.default_rng(config.seed)
    solver = BicgstabSolver(config.solver)
    rows: list[Row] = []
    histories: dict[str, list[float]] = {}

    for kind in config.problems:
        for n in config.sizes:
            A = build_operator(kind, n, config, rng)
            x_true = rng.normal(size=n)
            b = DenseVector.from_array(manufactured_rhs(A, x_true))
            x = DenseVector.zeros(n)

            t0 = time.perf_counter()
            report = solver.solve_with_report(A, b, x)
            dt = time.perf_counter() - t0

            rows.append(
                {
                    "problem": kind,
                    "n": n,
                    "success": report.success,
                    "status": report.status.value,
                    "iterations": report.iterations,
                    "max_iterations": report.max_iterations,
                    "residual_sq": residual_norm_sq(A, b, x),
                    "target": report.target,
                    "error_inf": float(np.max(np.abs(x.values - x_true))),
                    "seconds": dt,
                }
            )
            histories[f"{kind}/n={n}"] = list(report.residual_history)

    return rows, histories


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run BiCGSTAB convergence benchmarks")
    parser.add_argument("--mode", choices=("small",), default="small")
    parser.add_argument("--output-dir", type=Path, default=Path("results/convergence"))
    parser.add_argument("--sizes", type=int, nargs="+", default=None)
    parser.add_argument("--epsilon", type=float, default=None)
    parser.add_argument("--seed", type=int, default=None)
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    configure_logging(logging.INFO)

    config = small_benchmark_config(seed=7 if args.seed is None else args.seed)
    update: dict[str, object] = {}
    if args.sizes is not None:
        update["sizes"] = args.sizes
    if args.epsilon is not None:
        update["solver"] = config.solver.model_copy(update={"epsilon": args.epsilon})
    config = BenchmarkConfig.model_validate({**config.model_dump(), **update})

    rows, histories = run_benchmark(config)

    output_dir: Path = args.output_dir
    output_dir.mkdir(parents=True, exist_ok=True)
    save_json(
        output_dir / "convergence_metrics.json",
        {"mode": args.mode, "config": config.model_dump(), "rows": rows},
    )

    fig, ax = plt.subplots(figsize=(6.0, 4.0))
    for label, history in histories.items():
        if not history:
            continue
        ax.semilogy(np.sqrt(np.maximum(history, 1.0e-300)), marker=".", label=label)

    ax.set_xlabel("Iteration")
    ax.set_ylabel("Residual norm")
    ax.set_title("BiCGSTAB convergence")
    ax.grid(alpha=0.3)
    ax.legend(fontsize="x-small")
    fig.tight_layout()
    fig.savefig(output_dir / "convergence_plot.png", dpi=150)
    plt.close(fig)


if __name__ == "__main__":
    main()
