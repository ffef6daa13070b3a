from sparsesolve.config.presets import (
    default_solver_config,
    small_benchmark_config,
    tight_solver_config,
)
from sparsesolve.config.schemas import BenchmarkConfig, SolverConfig

__all__ = [
    "BenchmarkConfig",
    "SolverConfig",
    "default_solver_config",
    "small_benchmark_config",
    "tight_solver_config",
]
