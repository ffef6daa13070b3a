"""Unpreconditioned BiCGSTAB over abstract matrices and vectors."""

from sparsesolve.config.schemas import SolverConfig
from sparsesolve.linalg.matrix import DenseMatrix, FunctionMatrix, SparseMatrix
from sparsesolve.linalg.vector import DenseVector
from sparsesolve.solvers.bicgstab import BicgstabSolver, SolveStatus, solve_bicgstab

__all__ = [
    "BicgstabSolver",
    "DenseMatrix",
    "DenseVector",
    "FunctionMatrix",
    "SolveStatus",
    "SolverConfig",
    "SparseMatrix",
    "solve_bicgstab",
]
