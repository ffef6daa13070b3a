from __future__ import annotations

import numpy as np

from sparsesolve.config.presets import tight_solver_config
from sparsesolve.linalg.matrix import SparseMatrix, residual_norm_sq
from sparsesolve.linalg.vector import DenseVector
from sparsesolve.problems.generators import poisson_1d
from sparsesolve.solvers.bicgstab import BicgstabSolver
from sparsesolve.utils.logging import configure_logging

if __name__ == "__main__":
    configure_logging()

    n = 64
    A = SparseMatrix(poisson_1d(n))
    b = DenseVector.from_array(np.ones(n))
    x = DenseVector.zeros(n)

    solver = BicgstabSolver(tight_solver_config())
    report = solver.solve_with_report(A, b, x)

    print("Poisson 1D BiCGSTAB run complete")
    print(f"Converged: {report.success} ({report.status.value})")
    print(f"Iterations: {report.iterations} / {report.max_iterations}")
    print(f"Residual norm: {np.sqrt(residual_norm_sq(A, b, x)):.3e}")
