"""Shared pool of candidate fourtiles awaiting evaluation."""

import random
import threading
from collections import Counter
from collections.abc import Iterable, Sequence


class PoolInvariantError(RuntimeError):
    """Raised when words are returned or committed without having been taken."""


class CandidatePool:
    """A shuffled pool of candidate fourtiles, drawn from and returned to in batches.

    All operations are serialized by a single lock, so concurrent callers always see a
    consistent sequence of takes and returns.  Every word taken is later either returned
    (and the pool reshuffled) or committed to an accepted game; none is lost or duplicated.
    """

    def __init__(self, words: Iterable[str], *, seed: int | None = None) -> None:
        self._rng = random.Random(seed)
        self._lock = threading.Lock()

        self._words: list[str] = list(words)
        """The words currently available, in shuffled order."""

        self._checked_out: Counter[str] = Counter()
        """Words taken by a batch and not yet returned or committed."""

        self._consumed = 0
        """Number of words committed to accepted games."""

        self.initial_size = len(self._words)
        """Number of words the pool started with; it never grows beyond this."""

        self._rng.shuffle(self._words)

    def __len__(self) -> int:
        with self._lock:
            return len(self._words)

    @property
    def checked_out(self) -> int:
        """Number of words currently out for evaluation."""
        with self._lock:
            return self._checked_out.total()

    @property
    def consumed(self) -> int:
        """Number of words used by accepted games."""
        with self._lock:
            return self._consumed

    def snapshot(self) -> list[str]:
        """Return a copy of the words currently in the pool, in pool order.

        For inspecting the pool; the finder only uses the batch operations.
        """
        with self._lock:
            return list(self._words)

    def take_batch(self, n: int) -> list[str] | None:
        """Remove and return the first `n` words, or None if fewer than `n` remain."""
        if n <= 0:
            raise ValueError(f"Batch size must be positive, got {n}")
        with self._lock:
            if len(self._words) < n:
                return None
            batch = self._words[:n]
            del self._words[:n]
            self._checked_out.update(batch)
            return batch

    def return_batch(self, words: Sequence[str]) -> None:
        """Put a batch of taken words back into the pool and reshuffle the whole pool."""
        with self._lock:
            self._check_in(words)
            self._words.extend(words)
            self._rng.shuffle(self._words)

    def commit_batch(self, words: Sequence[str]) -> None:
        """Mark a batch of taken words as used by an accepted game."""
        with self._lock:
            self._check_in(words)
            self._consumed += len(words)

    def _check_in(self, words: Sequence[str]) -> None:
        """Release `words` from the checked-out counter.  The lock must be held."""
        batch = Counter(words)
        missing = batch - self._checked_out
        if missing:
            raise PoolInvariantError(
                f"Words were never taken from the pool: {sorted(missing.elements())}"
            )
        self._checked_out -= batch
