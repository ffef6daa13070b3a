from sparsesolve.problems.generators import (
    convection_diffusion_1d,
    manufactured_rhs,
    poisson_1d,
    random_spd,
)

__all__ = [
    "convection_diffusion_1d",
    "manufactured_rhs",
    "poisson_1d",
    "random_spd",
]
