from sparsesolve.solvers.bicgstab import (
    BicgstabResult,
    BicgstabSolver,
    SolveReport,
    SolveStatus,
    solve_bicgstab,
)

__all__ = [
    "BicgstabResult",
    "BicgstabSolver",
    "SolveReport",
    "SolveStatus",
    "solve_bicgstab",
]
