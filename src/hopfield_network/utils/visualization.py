"""Plotting helpers for relaxation runs."""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Sequence

import matplotlib.pyplot as plt


def plot_energy_history(energies: Sequence[float], save_path: Optional[Path] = None) -> None:
    """Plot state energy after each relaxation sweep."""

    plt.figure()
    plt.plot(range(1, len(energies) + 1), energies, marker="o")
    plt.xlabel("Sweep")
    plt.ylabel("State energy")
    plt.title("Relaxation Energy Trajectory")
    plt.tight_layout()
    if save_path is not None:
        plt.savefig(save_path, dpi=150)
        plt.close()
