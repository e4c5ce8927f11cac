"""Implementation of the parallel game finder: rounds of batch distribution to workers."""

import traceback
from concurrent.futures import Executor, Future, as_completed
from dataclasses import dataclass
from typing import Literal, TextIO

from fourtiles.finder.pool import CandidatePool
from fourtiles.finder.sink import GameSink
from fourtiles.finder.worker import WorkerStats, get_worker_stats, worker_task
from fourtiles.game import Game


class WorkerError(RuntimeError):
    """Raised when a worker task fails with an exception rather than a rejection."""


@dataclass
class Result:
    """Wrapper for worker task results."""

    fourtiles: list[str]
    status: Literal["success", "no_game", "error"]
    result: Game | None
    err_msg: str | None = None
    stats: WorkerStats | None = None


def _worker_task(fourtiles: list[str]) -> Result:
    """Worker task to evaluate one batch of candidate fourtiles.

    Args:
        fourtiles (list[str]): The batch received from `executor.submit`.

    Returns:
        A Result wrapper.
    """
    try:
        ret = worker_task(fourtiles)
        return Result(
            fourtiles=fourtiles,
            status="success" if ret is not None else "no_game",
            result=ret,
            stats=get_worker_stats(),
        )
    except Exception as e:
        return Result(
            fourtiles=fourtiles,
            status="error",
            result=None,
            err_msg=f"Worker encountered an error: {str(e)}\n{traceback.format_exc()}",
            stats=get_worker_stats(),
        )


def run_round(
    executor: Executor,
    pool: CandidatePool,
    sink: GameSink,
    logf: TextIO,
    *,
    batch_size: int,
    worker_stats: dict[int, WorkerStats] | None = None,
) -> tuple[int, int]:
    """Evaluate every full batch currently in the pool, and wait for all of them.

    Games found are committed and written to the sink; rejected batches go back into the
    pool, which reshuffles it.  Words left over after the last full batch stay in the pool.
    If `worker_stats` is given, it is updated with the latest totals reported by each worker.

    Returns:
        A tuple `(batches, games)` of the number of batches evaluated and games found.

    Raises:
        WorkerError: If any worker fails.  Pending batches are cancelled first.
    """
    futures: list[Future[Result]] = []
    while (batch := pool.take_batch(batch_size)) is not None:
        futures.append(executor.submit(_worker_task, batch))

    games = 0
    for future in as_completed(futures):
        result = future.result()
        if worker_stats is not None and result.stats is not None:
            _update_stats(worker_stats, result.stats)
        if result.status == "success" and result.result is not None:
            pool.commit_batch(result.fourtiles)
            sink.write(result.result)
            games += 1
            print(f"Found game: {result.result}", file=logf, flush=True)
        elif result.status == "no_game":
            pool.return_batch(result.fourtiles)
        else:
            print(result.err_msg, file=logf, flush=True)
            for pending in futures:
                pending.cancel()
            raise WorkerError(result.err_msg or f"Unexpected result for {result.fourtiles}")

    return len(futures), games


def _update_stats(worker_stats: dict[int, WorkerStats], stats: WorkerStats) -> None:
    """Keep the highest totals seen for a worker; results can arrive out of order."""
    previous = worker_stats.get(stats.worker_idx)
    if previous is None or stats.n_batches_examined > previous.n_batches_examined:
        worker_stats[stats.worker_idx] = stats


def find_games_in_rounds(
    executor: Executor,
    pool: CandidatePool,
    sink: GameSink,
    logf: TextIO,
    *,
    batch_size: int,
) -> int:
    """Find games in rounds until the pool no longer holds a full batch.

    Each round drains the pool into batches, evaluates them concurrently and waits for all
    of them before the pool size is checked again.  This will usually run until
    interrupted, since the last few candidates rarely form a game.

    Args:
        executor: Executor running the worker tasks.  Its workers must have been set up with
            `init_worker_globals`.
        pool: The shared candidate pool.
        sink: Where found games are written.  It must already be open, and is not closed.
        logf: File object to log the search process.
        batch_size: Number of fourtiles per game.

    Returns:
        The number of games found.
    """
    n_round = 0
    n_games = 0
    worker_stats: dict[int, WorkerStats] = {}
    while len(pool) >= batch_size:
        n_round += 1
        batches, games = run_round(
            executor, pool, sink, logf, batch_size=batch_size, worker_stats=worker_stats
        )
        n_games += games
        print(
            f"Round {n_round}: {batches} batches, {games} games, "
            f"{len(pool)} candidates left, {n_games} games total",
            file=logf,
            flush=True,
        )

    print(
        f"Fewer than {batch_size} candidates left after {n_round} rounds.",
        file=logf,
        flush=True,
    )
    for stats in sorted(worker_stats.values()):
        print(
            f"Worker {stats.worker_idx}: {stats.n_batches_examined} batches examined, "
            f"{stats.n_games_found} games found",
            file=logf,
            flush=True,
        )
    return n_games
