"""Main module for worker tasks in the parallel game finder."""

import random
from dataclasses import dataclass
from multiprocessing.sharedctypes import Synchronized
from typing import NamedTuple

from fourtiles.finder.config import FinderConfig
from fourtiles.finder.evaluator import find_game
from fourtiles.game import Game


@dataclass(kw_only=True)
class WorkerState:
    """Global state maintained by each worker process."""

    worker_idx: int
    """Index of the worker process."""

    words: frozenset[str]
    """All dictionary words, used to find buildable words."""

    config: FinderConfig
    """Finder configuration shared by all workers."""

    rng: random.Random
    """Random number generator for tile-size ordering, private to this worker."""

    n_batches_examined: int = 0
    """Number of batches evaluated by this worker."""

    n_games_found: int = 0
    """Number of games found by this worker."""


worker_state: WorkerState | None = None
"""Global state for each worker process."""


def init_worker_globals(
    worker_ctr: Synchronized,
    words: frozenset[str],
    config: FinderConfig,
) -> None:
    """Initialize global variables for worker processes.

    Args:
        worker_ctr (Synchronized[int]): Shared counter for workers.
        words (frozenset[str]): All dictionary words.
        config (FinderConfig): Finder configuration.  If `config.seed` is set, worker `i`
            seeds its generator with `seed + i`.
    """
    global worker_state  # noqa: PLW0603
    with worker_ctr.get_lock():
        # Get and set the shared worker counter atomically, using the obtained value
        # as the worker index
        worker_idx = worker_ctr.value
        worker_ctr.value += 1

    seed = None if config.seed is None else config.seed + worker_idx
    worker_state = WorkerState(
        worker_idx=worker_idx,
        words=words,
        config=config,
        rng=random.Random(seed),
    )


def worker_task(fourtiles: list[str]) -> Game | None:
    """Worker task to build a game from a batch of candidate fourtiles.

    Args:
        fourtiles (list[str]): The batch of candidate fourtiles.

    Returns:
        A Game if the batch forms a valid game on this attempt, else None.
    """
    # Ensure worker_state is initialized
    if not worker_state:
        raise RuntimeError("Worker state not initialized. Call init_worker_globals first.")

    worker_state.n_batches_examined += 1
    game = find_game(
        fourtiles,
        lexicon=worker_state.words,
        rng=worker_state.rng,
        config=worker_state.config,
    )
    if game is not None:
        worker_state.n_games_found += 1
    return game


class WorkerStats(NamedTuple):
    """Running totals reported by a worker along with each result."""

    worker_idx: int
    n_batches_examined: int
    n_games_found: int


def get_worker_stats() -> WorkerStats | None:
    """Return the running totals of this worker, or None if it is not initialized."""
    if not worker_state:
        return None
    return WorkerStats(
        worker_idx=worker_state.worker_idx,
        n_batches_examined=worker_state.n_batches_examined,
        n_games_found=worker_state.n_games_found,
    )
