from __future__ import annotations

import json
import sys
from pathlib import Path

import matplotlib
import numpy as np
import pytest

matplotlib.use("Agg")

from sparsesolve.config.presets import small_benchmark_config  # noqa: E402
from sparsesolve.experiments import convergence_benchmark  # noqa: E402


def test_small_benchmark_runs() -> None:
    config = small_benchmark_config(seed=5).model_copy(update={"sizes": [8, 12]})

    rows, histories = convergence_benchmark.run_benchmark(config)

    assert len(rows) == len(config.problems) * len(config.sizes)
    assert len(histories) == len(rows)
    for row in rows:
        assert np.isfinite(float(row["residual_sq"]))
        if row["problem"] != "random_spd":
            assert row["success"]


def test_benchmark_cli_writes_outputs(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    argv = ["convergence_benchmark", "--output-dir", str(tmp_path), "--sizes", "4", "--seed", "1"]
    monkeypatch.setattr(sys, "argv", argv)

    convergence_benchmark.main()

    payload = json.loads((tmp_path / "convergence_metrics.json").read_text(encoding="utf-8"))
    assert payload["config"]["sizes"] == [4]
    assert len(payload["rows"]) == 3
    assert (tmp_path / "convergence_plot.png").exists()
