from sparsesolve.utils.checks import (
    require_finite,
    require_floating,
    require_rank1,
    require_square,
)
from sparsesolve.utils.io import ensure_dir, save_json
from sparsesolve.utils.logging import configure_logging, log_event

__all__ = [
    "configure_logging",
    "ensure_dir",
    "log_event",
    "require_finite",
    "require_floating",
    "require_rank1",
    "require_square",
    "save_json",
]
