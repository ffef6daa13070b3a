from __future__ import annotations

from sparsesolve.config.schemas import BenchmarkConfig, SolverConfig


def default_solver_config() -> SolverConfig:
    """Loose mesh-processing tolerance with the automatic ``10 n`` cap."""

    return SolverConfig(epsilon=1.0e-4, max_iterations=0)


def tight_solver_config() -> SolverConfig:
    return SolverConfig(epsilon=1.0e-10, max_iterations=0)


def small_benchmark_config(seed: int = 7) -> BenchmarkConfig:
    """Small CI/laptop sweep."""

    return BenchmarkConfig(
        sizes=[16, 64, 256],
        problems=["poisson_1d", "convection_diffusion_1d", "random_spd"],
        peclet=0.5,
        spd_shift=1.0,
        seed=seed,
        solver=tight_solver_config(),
    )
