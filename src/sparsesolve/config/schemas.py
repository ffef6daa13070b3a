from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

ProblemKind = Literal["poisson_1d", "convection_diffusion_1d", "random_spd"]


class SolverConfig(BaseModel):
    """BiCGSTAB stopping parameters."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    epsilon: float = Field(default=1.0e-4, gt=0.0)
    max_iterations: int = Field(default=0, ge=0)

    def effective_max_iterations(self, n: int) -> int:
        """Iteration cap for an ``n``-dimensional system; 0 means ``10 n``."""

        if self.max_iterations == 0:
            return 10 * n
        return self.max_iterations


class BenchmarkConfig(BaseModel):
    """Problem sweep for the convergence benchmark."""

    model_config = ConfigDict(extra="forbid")

    sizes: list[int] = Field(min_length=1)
    problems: list[ProblemKind] = Field(min_length=1)
    peclet: float = Field(default=0.5, ge=0.0)
    spd_shift: float = Field(default=1.0, gt=0.0)
    seed: int = Field(default=0, ge=0)
    solver: SolverConfig = Field(default_factory=SolverConfig)

    @field_validator("sizes")
    @classmethod
    def _check_sizes(cls, sizes: list[int]) -> list[int]:
        if any(n < 1 for n in sizes):
            raise ValueError("sizes must be >= 1")
        return sizes
