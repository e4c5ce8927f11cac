"""Module for word list management in Fourtiles."""

from collections.abc import Collection, Iterable
from os import PathLike
from pathlib import Path

from sortedcontainers import SortedSet

from fourtiles.finder.config import FinderConfig
from fourtiles.finder.config import config as finder_config
from fourtiles.finder.utils import valid_word_lengths


def load_word_list(word_list_path: str | PathLike) -> set[str]:
    """Load the dictionary words from a text file, one word per line.

    Blank lines are skipped and surrounding whitespace is stripped.  Words are otherwise
    kept exactly as written in the file.

    Args:
        word_list_path: Path to the dictionary file.

    Returns:
        A set of words.
    """
    path = Path(word_list_path)
    if not path.is_file():
        raise FileNotFoundError(f"Word list file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        return {word for line in f if (word := line.strip())}


def candidate_words(
    words: Iterable[str], config: FinderConfig = finder_config
) -> Collection[str]:
    """Return the words whose length allows them to be split into a fourtile.

    Args:
        words: The dictionary words.
        config: Finder configuration providing the tile bounds.

    Returns:
        The candidate fourtiles.  In deterministic mode this is a SortedSet, which keeps the
        order independent of string hashing so that a seeded shuffle is reproducible.
    """
    lengths = valid_word_lengths(config)
    candidates = {w for w in words if len(w) in lengths}
    return SortedSet(candidates) if config.deterministic else candidates
