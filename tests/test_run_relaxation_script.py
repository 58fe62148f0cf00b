import os
import subprocess
import sys
from pathlib import Path

import pytest

torch = pytest.importorskip("torch")

REPO_ROOT = Path(__file__).resolve().parent.parent
SRC_PATH = REPO_ROOT / "src"


def _env_with_src() -> dict[str, str]:
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_PATH)
    env["MPLBACKEND"] = "Agg"
    return env


def _run(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, "scripts/run_relaxation.py", *args],
        cwd=REPO_ROOT,
        env=_env_with_src(),
        check=True,
        capture_output=True,
        text=True,
    )


def test_concurrent_run_with_plot(tmp_path) -> None:
    plot_path = tmp_path / "energy.png"
    result = _run(
        "--dimension",
        "8",
        "--domain",
        "bipolar",
        "--random-init",
        "--num-states",
        "5",
        "--workers",
        "2",
        "--runs",
        "2",
        "--max-iterations",
        "5",
        "--seed",
        "7",
        "--plot-path",
        str(plot_path),
    )
    assert "HopfieldNetwork" in result.stdout
    assert "run=01" in result.stdout
    assert "mean_time_ms" in result.stdout
    assert plot_path.exists()


def test_sequential_run_defaults() -> None:
    result = _run("--num-states", "3", "--max-iterations", "3")
    assert "Domain: BINARY" in result.stdout
    assert "states=3" in result.stdout
