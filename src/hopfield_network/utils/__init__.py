"""Utility helpers for Hopfield network experiments."""

from __future__ import annotations

from importlib import import_module
from typing import TYPE_CHECKING

if TYPE_CHECKING:  # pragma: no cover - import-time hinting only
    from .visualization import plot_energy_history

__all__ = ["plot_energy_history"]


def __getattr__(name: str):  # pragma: no cover - small wrapper
    if name == "plot_energy_history":
        return getattr(import_module("hopfield_network.utils.visualization"), name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
