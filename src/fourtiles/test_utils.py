"""Shared word lists for the Fourtiles tests."""

import random
from concurrent.futures import ThreadPoolExecutor
from multiprocessing import Value

from fourtiles.finder.config import FinderConfig
from fourtiles.finder.worker import init_worker_globals

# Each fourtile splits into four 2-letter tiles, and all twenty tiles are distinct.
FOURTILES = ["abcdefgh", "ijklmnop", "qrstuvwx", "badcfehg", "jilknmpo"]

# Buildable from two or three of those tiles.
OTHER_WORDS = [
    "abcd",
    "cdab",
    "efgh",
    "ijkl",
    "qrst",
    "stuv",
    "badc",
    "jilk",
    "abij",
    "ghqr",
    "mnop",
    "abcdef",
]

# Not buildable from the tiles at all.
UNRELATED_WORDS = ["zz", "quiz", "zyzzyva"]

LEXICON = frozenset(FOURTILES + OTHER_WORDS + UNRELATED_WORDS)

# A second fourtile buildable from the same tiles: ab + cd + ij + kl.
EXTRA_FOURTILE = "abcdijkl"

# Every 2-letter tile of these words repeats, so they never form part of a game.
SELF_COLLIDING = ["abababab", "cdcdcdcd", "efefefef", "ghghghgh"]


def seeded_rng(seed: int = 0) -> random.Random:
    return random.Random(seed)


def thread_executor(
    words: frozenset[str], config: FinderConfig, n_workers: int = 2
) -> ThreadPoolExecutor:
    """An in-process executor whose workers are set up like the worker processes.

    All threads share the one module-level worker state: the last initializer wins, so
    the threads use a single generator and `seed + worker index` seeding does not apply.
    """
    return ThreadPoolExecutor(
        max_workers=n_workers,
        initializer=init_worker_globals,
        initargs=(Value("i", 0), words, config),
    )
