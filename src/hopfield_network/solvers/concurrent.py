"""Batch relaxation spread over a fixed set of worker threads.

Each call creates ``worker_count`` threads and joins all of them before
returning. Workers share nothing but the result queue: every worker gets its
own copy of the weight matrix and its own generator, seeded from the
caller's generator in worker-index order before any thread starts. For a
fixed caller seed and worker count the results are therefore reproducible,
whatever order the workers finish in.
"""
from __future__ import annotations

import logging
import queue
import threading
from typing import List, Optional, Sequence, Tuple, cast

import torch
from torch import Tensor

from ..core.activation import ActivationFunction
from ..core.errors import ConfigurationError
from .relaxation import relax

logger = logging.getLogger(__name__)

# Upper bound (exclusive) for derived worker seeds; keeps them in int64 range.
SEED_BOUND = 2**63 - 1

IndexedState = Tuple[int, Tensor]
WorkerMessage = Tuple[int, Optional[Tensor], Optional[BaseException]]


def draw_worker_seeds(generator: torch.Generator, worker_count: int) -> List[int]:
    """Draw one seed per worker from ``generator``, in worker-index order."""

    return [
        int(torch.randint(0, SEED_BOUND, (1,), generator=generator))
        for _ in range(worker_count)
    ]


def partition_round_robin(
    states: Sequence[Tensor], worker_count: int
) -> List[List[IndexedState]]:
    """Assign the state at position ``k`` to worker ``k % worker_count``."""

    partitions: List[List[IndexedState]] = [[] for _ in range(worker_count)]
    for index, state in enumerate(states):
        partitions[index % worker_count].append((index, state))
    return partitions


def _relax_worker(
    matrix: Tensor,
    activation: ActivationFunction,
    seed: int,
    assigned: List[IndexedState],
    results: "queue.Queue[WorkerMessage]",
    abort: threading.Event,
    max_iterations: int,
    max_unstable_units: int,
) -> None:
    generator = torch.Generator().manual_seed(seed)
    try:
        for index, state in assigned:
            if abort.is_set():
                return
            outcome = relax(
                matrix,
                state,
                activation,
                generator,
                max_iterations=max_iterations,
                max_unstable_units=max_unstable_units,
            )
            results.put((index, outcome.state, None))
    except BaseException as exc:  # handed to the collecting thread and re-raised there
        logger.error("Relaxation worker %s failed: %s", threading.current_thread().name, exc)
        results.put((-1, None, exc))


def relax_concurrently(
    matrix: Tensor,
    states: Sequence[Tensor],
    activation: ActivationFunction,
    generator: torch.Generator,
    worker_count: int,
    *,
    max_iterations: int,
    max_unstable_units: int,
) -> List[Tensor]:
    """Relax ``states`` on ``worker_count`` threads, preserving input order.

    ``states`` must already be private working copies; they are relaxed in
    place by the workers. The first worker failure aborts the batch: the
    remaining workers stop before their next state, every thread is joined,
    and the original exception is raised.
    """

    if worker_count <= 0:
        raise ConfigurationError(f"worker_count must be a positive integer, got {worker_count}")

    partitions = partition_round_robin(states, worker_count)
    seeds = draw_worker_seeds(generator, worker_count)
    logger.debug(
        "Relaxing %d states on %d workers (partition sizes %s, seeds %s)",
        len(states),
        worker_count,
        [len(part) for part in partitions],
        seeds,
    )

    results: "queue.Queue[WorkerMessage]" = queue.Queue()
    abort = threading.Event()
    threads = [
        threading.Thread(
            target=_relax_worker,
            args=(
                matrix.clone(),
                activation,
                seed,
                assigned,
                results,
                abort,
                max_iterations,
                max_unstable_units,
            ),
            name=f"hopfield-relax-{worker_index}",
        )
        for worker_index, (seed, assigned) in enumerate(zip(seeds, partitions))
    ]
    for thread in threads:
        thread.start()

    collected: List[IndexedState] = []
    failure: Optional[BaseException] = None
    try:
        while len(collected) < len(states):
            index, state, error = results.get()
            if error is not None:
                failure = error
                break
            collected.append((index, cast(Tensor, state)))
    finally:
        abort.set()
        for thread in threads:
            thread.join()

    if failure is not None:
        raise failure
    collected.sort(key=lambda item: item[0])
    return [state for _, state in collected]
