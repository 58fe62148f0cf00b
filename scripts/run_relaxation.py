#!/usr/bin/env python3
"""Relax batches of random states in a Hopfield network and time the runs."""
from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path

import numpy as np
from tqdm import tqdm

from hopfield_network import (
    HopfieldNetwork,
    NetworkConfig,
    NetworkDomain,
    StateGenerator,
    StateGeneratorConfig,
)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--dimension", type=int, default=10, help="Number of units in the network")
    parser.add_argument(
        "--domain",
        choices=[domain.value for domain in NetworkDomain.concrete()],
        default=NetworkDomain.BINARY.value,
    )
    parser.add_argument(
        "--random-init", action="store_true", help="Initialise weights with standard Gaussian values"
    )
    parser.add_argument(
        "--no-clean", action="store_true", help="Skip the symmetric/zero-diagonal cleaning pass"
    )
    parser.add_argument("--max-iterations", type=int, default=100, help="Sweep budget per relaxation")
    parser.add_argument(
        "--max-unstable-units", type=int, default=0, help="Stop once fewer units than this are unstable"
    )
    parser.add_argument("--num-states", type=int, default=10, help="States relaxed per run")
    parser.add_argument("--workers", type=int, default=1, help="Worker threads; 1 relaxes sequentially")
    parser.add_argument("--runs", type=int, default=1, help="Number of timed runs")
    parser.add_argument("--lower-bound", type=float, default=-1.0)
    parser.add_argument("--upper-bound", type=float, default=1.0)
    parser.add_argument("--seed", type=int, default=0, help="Network and generator seed; 0 picks one")
    parser.add_argument("--plot-path", type=Path, default=None, help="Save the energy trajectory of one relaxation")
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args()


def build(args: argparse.Namespace) -> tuple[HopfieldNetwork, StateGenerator]:
    domain = NetworkDomain(args.domain)
    network = HopfieldNetwork(
        NetworkConfig(
            dimension=args.dimension,
            domain=domain,
            random_init=args.random_init,
            max_iterations=args.max_iterations,
            max_unstable_units=args.max_unstable_units,
            seed=args.seed,
        )
    )
    if not args.no_clean:
        network.clean_matrix()
    generator = StateGenerator(
        StateGeneratorConfig(
            dimension=args.dimension,
            domain=domain,
            lower_bound=args.lower_bound,
            upper_bound=args.upper_bound,
            seed=args.seed,
        )
    )
    return network, generator


def run() -> None:
    args = parse_args()
    logging.basicConfig(level=args.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    network, generator = build(args)
    print(network)
    print(generator)

    durations: list[float] = []
    for run_index in tqdm(range(args.runs), desc="runs", disable=args.runs == 1):
        states = generator.create_state_collection(args.num_states)
        start = time.perf_counter()
        if args.workers > 1:
            relaxed = network.concurrent_relax_state_collection(states, args.workers)
        else:
            relaxed = [network.relax_state(state) for state in states]
        duration_ms = (time.perf_counter() - start) * 1_000
        durations.append(duration_ms)

        energies = np.array([network.state_energy(state) for state in relaxed])
        stable = sum(int((network.all_unit_energies(state) > 0).sum()) == 0 for state in relaxed)
        print(
            f"run={run_index:02d} time_ms={duration_ms:8.2f} states={len(relaxed)} stable={stable} "
            f"energy_mean={energies.mean() if energies.size else 0.0:.3f} "
            f"energy_min={energies.min() if energies.size else 0.0:.3f}"
        )

    timings = np.array(durations)
    print(f"\nmean_time_ms={timings.mean():8.2f} stdev_ms={timings.std():6.2f} runs={args.runs}")

    if args.plot_path is not None:
        from hopfield_network.utils import plot_energy_history

        result = network.relax_state_with_info(generator.next_state())
        plot_energy_history(result.energy_history, save_path=args.plot_path)
        print(f"saved energy trajectory ({result.iterations} sweeps) to {args.plot_path}")


if __name__ == "__main__":
    run()
