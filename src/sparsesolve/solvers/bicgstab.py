from __future__ import annotations

import enum
import logging
import math
from collections.abc import Callable
from dataclasses import dataclass

import numpy as np

from sparsesolve.config.schemas import SolverConfig
from sparsesolve.linalg.matrix import FunctionMatrix, LinearOperator, mult
from sparsesolve.linalg.vector import DenseVector, Vector, axpy, copy, dot, scal
from sparsesolve.types import FloatArray, is_near_zero
from sparsesolve.utils.checks import require_finite, require_rank1
from sparsesolve.utils.logging import log_event

logger = logging.getLogger(__name__)


class SolveStatus(str, enum.Enum):
    """Why a solve returned."""

    CONVERGED = "converged"
    MAX_ITERATIONS = "max_iterations"
    BREAKDOWN = "breakdown"
    INVALID_INPUT = "invalid_input"


@dataclass(frozen=True)
class SolveReport:
    """Diagnostics of one :meth:`BicgstabSolver.solve` call.

    ``residual_sq`` and ``target`` are squared norms. ``residual_history``
    holds ``(r|r)`` before the first pass and after every pass that
    reached the residual update.
    """

    success: bool
    status: SolveStatus
    iterations: int
    max_iterations: int
    residual_sq: float
    target: float
    omega: float
    rTh: float
    residual_history: tuple[float, ...]


@dataclass(frozen=True)
class BicgstabResult:
    """BiCGSTAB solution diagnostics for the array-level wrapper."""

    solution: FloatArray
    converged: bool
    iterations: int
    residual_norm: float
    residual_history: FloatArray
    status: SolveStatus


class BicgstabSolver:
    """Unpreconditioned BiCGSTAB for square real systems ``A x = b``.

    Ashby, Manteuffel, Saylor, "A taxonomy for conjugate gradient methods",
    SIAM J. Numer. Anal. 27 (1990). The operator only needs ``dimension``
    and ``mult``; vectors only the BLAS-1 surface of
    :class:`sparsesolve.linalg.vector.Vector`.

    ``solve`` refines ``x`` in place and reports the outcome as a bool.
    Dimension mismatches, the iteration cap and numerical breakdowns all
    return ``False``; details are kept in :attr:`last_report`.
    """

    def __init__(self, config: SolverConfig | None = None) -> None:
        self.config = config if config is not None else SolverConfig()
        self.last_report: SolveReport | None = None

    @property
    def epsilon(self) -> float:
        return self.config.epsilon

    @property
    def max_iterations(self) -> int:
        return self.config.max_iterations

    def set_epsilon(self, epsilon: float) -> None:
        self.config = SolverConfig(epsilon=epsilon, max_iterations=self.config.max_iterations)

    def set_max_iterations(self, max_iterations: int) -> None:
        """Set the iteration cap; 0 selects ``10 n`` at solve time."""

        self.config = SolverConfig(epsilon=self.config.epsilon, max_iterations=max_iterations)

    def solve(self, A: LinearOperator, b: Vector, x: Vector) -> bool:
        """Solve ``A x = b`` starting from the current content of ``x``."""

        return self.solve_with_report(A, b, x).success

    def solve_with_report(self, A: LinearOperator, b: Vector, x: Vector) -> SolveReport:
        """Same as :meth:`solve`, returning the full diagnostics."""

        n = A.dimension()
        if n <= 0 or b.dimension() != n or x.dimension() != n:
            return self._finish(
                SolveReport(
                    success=False,
                    status=SolveStatus.INVALID_INPUT,
                    iterations=0,
                    max_iterations=self.config.effective_max_iterations(max(n, 0)),
                    residual_sq=math.inf,
                    target=0.0,
                    omega=0.0,
                    rTh=0.0,
                    residual_history=(),
                )
            )

        max_iter = self.config.effective_max_iterations(n)
        dtype = x.dtype

        r = x.new_zeros(n)
        r_t = x.new_zeros(n)
        d = x.new_zeros(n)
        h = x.new_zeros(n)
        ad = x.new_zeros(n)
        t = x.new_zeros(n)
        s = h

        eps = self.config.epsilon
        err = eps * eps * dot(b, b)

        # r = A x - b
        mult(A, x, r)
        axpy(-1.0, b, r)

        copy(r, d)
        copy(d, h)
        copy(h, r_t)

        rth = dot(r_t, h)
        rtr = dot(r, r)
        omega = 0.0
        its = 0
        history = [rtr]
        broke_down = False

        while rtr > err and its < max_iter:
            mult(A, d, ad)
            rtad = dot(r_t, ad)
            if is_near_zero(rtad, dtype):
                broke_down = True
                break
            alpha = rth / rtad
            if not math.isfinite(alpha):
                broke_down = True
                break

            axpy(-alpha, ad, r)
            copy(h, s)
            axpy(-alpha, ad, s)
            mult(A, s, t)

            st = dot(s, t)
            tt = dot(t, t)
            if is_near_zero(st, dtype) or is_near_zero(tt, dtype):
                omega = 0.0
            else:
                omega = st / tt
            if not math.isfinite(omega):
                broke_down = True
                break

            axpy(-alpha, d, x)
            axpy(-omega, s, x)
            # no-op while s aliases h
            copy(s, h)
            axpy(-omega, t, r)
            rtr = dot(r, r)
            axpy(-omega, t, h)
            history.append(rtr)

            if is_near_zero(omega, dtype) or is_near_zero(rth, dtype):
                broke_down = True
                break

            beta = (alpha / omega) / rth
            rth = dot(r_t, h)
            beta *= rth
            # alpha / omega overflows when omega is tiny but above the guard
            if not math.isfinite(beta) or not math.isfinite(beta * omega):
                broke_down = True
                break

            # d = beta d + h - beta omega Ad
            scal(beta, d)
            axpy(1.0, h, d)
            axpy(-beta * omega, ad, d)
            its += 1

        success = rtr <= err
        if success:
            status = SolveStatus.CONVERGED
        elif broke_down:
            status = SolveStatus.BREAKDOWN
        else:
            status = SolveStatus.MAX_ITERATIONS

        return self._finish(
            SolveReport(
                success=success,
                status=status,
                iterations=its,
                max_iterations=max_iter,
                residual_sq=rtr,
                target=err,
                omega=omega,
                rTh=rth,
                residual_history=tuple(history),
            )
        )

    def _finish(self, report: SolveReport) -> SolveReport:
        self.last_report = report
        log_event(
            logger,
            "bicgstab.solve",
            success=report.success,
            status=report.status.value,
            its=report.iterations,
            max_iter=report.max_iterations,
            rTr=report.residual_sq,
            err=report.target,
            omega=report.omega,
            rTh=report.rTh,
        )
        return report


def solve_bicgstab(
    matvec: Callable[[FloatArray], FloatArray],
    rhs: FloatArray,
    rtol: float = 1.0e-4,
    max_iterations: int = 0,
    x0: FloatArray | None = None,
) -> BicgstabResult:
    """Matrix-free BiCGSTAB on NumPy arrays.

    ``rtol`` bounds ``||A x - b|| / ||b||``; ``max_iterations=0`` selects
    ``10 n``. ``x0`` is copied, never modified.
    """

    require_rank1("rhs", rhs)
    require_finite("rhs", rhs)
    if rtol <= 0.0:
        raise ValueError("rtol must be positive")
    if max_iterations < 0:
        raise ValueError("max_iterations must be >= 0")

    n = rhs.shape[0]
    x = DenseVector.zeros(n) if x0 is None else DenseVector.from_array(x0)
    b = DenseVector.from_array(rhs)

    solver = BicgstabSolver(SolverConfig(epsilon=rtol, max_iterations=max_iterations))
    report = solver.solve_with_report(FunctionMatrix(matvec, n), b, x)

    return BicgstabResult(
        solution=x.values,
        converged=report.success,
        iterations=report.iterations,
        residual_norm=float(np.sqrt(report.residual_sq)),
        residual_history=np.sqrt(np.asarray(report.residual_history, dtype=np.float64)),
        status=report.status,
    )
