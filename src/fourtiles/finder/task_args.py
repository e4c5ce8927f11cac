"""Arguments shared by the game finder and its workers."""

from collections.abc import Collection
from datetime import datetime
from pathlib import Path
from time import time

from fourtiles.finder.config import FinderConfig
from fourtiles.finder.utils import TIMESTAMP_FMT, valid_word_lengths
from fourtiles.wordlist import candidate_words


class TaskArgs:
    """Wrapper for the inputs of one game-finding run.

    Pickleable, so that it can be used with multiprocessing (passed to worker processes).
    """

    def __init__(self, *, dictionary: Path, words: Collection[str], config: FinderConfig) -> None:
        """Initialize the task arguments with the given word list and configuration.

        Args:
            dictionary (Path): Path the word list was loaded from.
            words (Collection[str]): All dictionary words.
            config (FinderConfig): The finder configuration for this run.
        """
        self.dictionary = dictionary
        """Path to the dictionary file."""

        self.words = frozenset(words)
        """Set of all dictionary words."""

        self.config = config
        """Finder configuration."""

        self.fourtiles = candidate_words(self.words, config)
        """Candidate fourtiles: words of a length that can be split into tiles."""

        self.start_time = time()
        """Timestamp when the run started, in seconds since the epoch."""

    @property
    def max_games(self) -> int:
        """Theoretical maximum number of games, if every candidate ended up in one."""
        return len(self.fourtiles) // self.config.num_fourtiles_per_game

    def summary(self) -> dict[str, object]:
        """Return a dictionary-based summary of the task arguments."""
        lengths = valid_word_lengths(self.config)
        return {
            "dictionary": str(self.dictionary),
            "words_count": len(self.words),
            "fourtile_lengths": f"{lengths.start}-{lengths.stop - 1}",
            "fourtiles_count": len(self.fourtiles),
            "max_games": self.max_games,
            "start_time": datetime.fromtimestamp(self.start_time)
            .astimezone()
            .strftime(TIMESTAMP_FMT),
        }
