"""Main game finder module for Fourtiles."""

import os
import sys
from concurrent.futures import ProcessPoolExecutor
from contextlib import ExitStack
from datetime import datetime
from multiprocessing import Value
from multiprocessing.sharedctypes import Synchronized
from pathlib import Path
from pprint import pprint
from time import time
from typing import TextIO

from fourtiles.finder.config import FinderConfig
from fourtiles.finder.config import config as finder_config
from fourtiles.finder.parallel import find_games_in_rounds
from fourtiles.finder.pool import CandidatePool
from fourtiles.finder.sink import GameSink
from fourtiles.finder.task_args import TaskArgs
from fourtiles.finder.utils import TIMESTAMP_FMT, time_str
from fourtiles.finder.worker import init_worker_globals
from fourtiles.wordlist import load_word_list


def get_executor(
    *,
    n_workers: int | None = None,
    words: frozenset[str],
    config: FinderConfig,
) -> ProcessPoolExecutor:
    """Get a ProcessPoolExecutor whose workers hold the dictionary.

    Args:
        n_workers (int | None): Number of worker processes to create.  If None,
            defaults to number of CPU cores minus one.
        words (frozenset[str]): All dictionary words, passed once to each worker.
        config (FinderConfig): Finder configuration to pass to workers.

    Returns:
        A ProcessPoolExecutor instance for worker processes.
    """
    worker_ctr: Synchronized = Value("i", 0)

    cpus = os.cpu_count() or 1  # Fallback to 1 if os.cpu_count() is None
    if n_workers is None:
        n_workers = max(1, cpus - 1)  # Leave one core free
    if n_workers < 1:
        raise ValueError(f"Number of workers must be positive, got {n_workers}")
    if n_workers > cpus:
        raise ValueError(
            f"Requested number of workers ({n_workers}) exceeds CPU count ({cpus})",
        )
    return ProcessPoolExecutor(
        max_workers=n_workers,
        initializer=init_worker_globals,
        initargs=(worker_ctr, words, config),
    )


def run(
    dictionary: Path,
    *,
    output: Path | None = None,
    config: FinderConfig = finder_config,
) -> int:
    """Find games in the given dictionary and stream them to a file or stdout.

    The JSON array is always closed, including when the run is interrupted.

    Args:
        dictionary (Path): The text file containing dictionary words.
        output (Path | None): The JSON file to write games to.  If None, games go to stdout
            and no progress bar is shown.
        config (FinderConfig): The finder configuration.

    Returns:
        The number of games found.
    """
    task_args = TaskArgs(dictionary=dictionary, words=load_word_list(dictionary), config=config)

    start_str = datetime.fromtimestamp(task_args.start_time).strftime("%Y%m%d-%H%M%S")
    logfile = Path(config.log_dir) / dictionary.stem / f"{start_str}.log"
    logfile.parent.mkdir(parents=True, exist_ok=True)
    print(f"Log file: {logfile}", file=sys.stderr)

    n_games = 0
    with ExitStack() as stack:
        # The output is only truncated once the log file is open
        logf = stack.enter_context(open(logfile, "w", encoding="utf-8"))
        stream = (
            sys.stdout
            if output is None
            else stack.enter_context(open(output, "w", encoding="utf-8"))
        )
        sink = GameSink(
            stream,
            total=task_args.max_games,
            show_progress=output is not None,
            indent=config.json_indent,
        )
        try:
            n_games = find_games(task_args, sink, logf=logf)
        except KeyboardInterrupt:
            print("Game finder interrupted by user.", file=logf, flush=True)
            print("Game finder interrupted by user.", file=sys.stderr)
            n_games = sink.n_written
        finally:
            sink.close()
        print(
            f"Games found: {n_games} in {time_str(time() - task_args.start_time)}",
            file=logf,
            flush=True,
        )
    return n_games


def find_games(task_args: TaskArgs, sink: GameSink, *, logf: TextIO) -> int:
    """Find games for a prepared run, streaming them to a sink.

    Args:
        task_args (TaskArgs): The dictionary and configuration for this run.
        sink (GameSink): Where found games are streamed.  Opened here, but not closed.
        logf: File object to log the search process.

    Returns:
        The number of games found.
    """
    config = task_args.config
    print("Finder config:", file=logf, flush=True)
    pprint(config.model_dump(), stream=logf, width=120)
    print("Finder initialized with:", file=logf, flush=True)
    pprint(task_args.summary(), stream=logf, width=120)
    print("", file=logf, flush=True)
    print("#" * 80, file=logf, flush=True)
    print("", file=logf, flush=True)

    pool = CandidatePool(task_args.fourtiles, seed=config.seed)
    sink.open()

    with get_executor(
        n_workers=config.max_workers,
        words=task_args.words,
        config=config,
    ) as executor:
        try:
            n_games = find_games_in_rounds(
                executor,
                pool,
                sink,
                logf,
                batch_size=config.num_fourtiles_per_game,
            )
        except KeyboardInterrupt as e:
            executor.shutdown(wait=False, cancel_futures=True)
            raise e
        except Exception as e:
            executor.shutdown(wait=False, cancel_futures=True)
            raise e

    end_str = datetime.now().astimezone().strftime(TIMESTAMP_FMT)
    print(f"End time: {end_str}", file=logf, flush=True)
    print(f"Candidates left in pool: {len(pool)}", file=logf, flush=True)
    return n_games
