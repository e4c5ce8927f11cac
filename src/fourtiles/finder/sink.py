"""Streaming output of found games as a JSON array."""

import json
import sys
import threading
from typing import TextIO

from tqdm import tqdm

from fourtiles.game import Game


class GameSink:
    """Writes games to a text stream as they are found.

    The stream receives `[`, then one JSON record followed by `,\\n` per game, then `]`
    when the sink is closed.  The separator after the last game is left in place, so the
    last record must be cleaned up by hand before the file is strict JSON.

    Writes are serialized by a lock, so records from concurrent callers never interleave.
    """

    def __init__(
        self,
        stream: TextIO,
        *,
        total: int,
        show_progress: bool = False,
        indent: int | None = 2,
    ) -> None:
        """Initialize the sink.

        Args:
            stream: The text stream to write games to.
            total: Theoretical maximum number of games, used to normalize progress.
            show_progress: Whether to show a progress bar on stdout.  Leave this off when
                `stream` is stdout.
            indent: JSON indentation of each record.
        """
        self.stream = stream
        self.indent = indent
        self.n_written = 0
        self._lock = threading.Lock()
        self._opened = False
        self._closed = False
        self._progress = tqdm(
            total=total,
            unit="game",
            file=sys.stdout,
            disable=not show_progress,
        )

    def open(self) -> None:
        """Write the opening bracket of the JSON array."""
        with self._lock:
            if self._opened:
                return
            self.stream.write("[")
            self.stream.flush()
            self._opened = True

    def write(self, game: Game) -> None:
        """Write one game record and advance the progress bar."""
        record = json.dumps(game.to_dict(), indent=self.indent)
        with self._lock:
            if not self._opened or self._closed:
                raise RuntimeError("GameSink must be open to write games.")
            self.stream.write(record)
            self.stream.write(",\n")
            self.stream.flush()
            self.n_written += 1
            self._progress.update(1)

    def close(self) -> None:
        """Write the closing bracket of the JSON array.  Safe to call more than once."""
        with self._lock:
            if self._closed:
                return
            if not self._opened:
                self.stream.write("[")
            self.stream.write("]")
            self.stream.flush()
            self._closed = True
            self._progress.close()
