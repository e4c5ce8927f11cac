"""Utility functions for the Fourtiles game finder."""

from functools import lru_cache

from fourtiles.finder.config import FinderConfig
from fourtiles.finder.config import config as finder_config

TIMESTAMP_FMT = "%Y-%m-%d %H:%M:%S.%f %Z%z"

TileSizes = tuple[int, ...]


class TileGeometryError(RuntimeError):
    """Raised when no tile-size pattern exists for an admissible word length.

    This indicates inconsistent tile bounds and is never recoverable.
    """


def valid_word_lengths(config: FinderConfig = finder_config) -> range:
    """Return the range of word lengths that can be split into a fourtile."""
    min_length = config.min_chars_per_tile * config.num_tiles_per_fourtile
    max_length = config.max_chars_per_tile * config.num_tiles_per_fourtile
    return range(min_length, max_length + 1)


@lru_cache(maxsize=None)
def tile_sizes(length: int, *, n_tiles: int, min_chars: int, max_chars: int) -> TileSizes:
    """Return the canonical tile sizes for a word of the given length.

    Every slot starts at `min_chars`; the first slot still below `max_chars` is then
    incremented until the sizes sum to `length`.  The result is cached per argument set
    and must be treated as immutable.

    Args:
        length: Length of the word to split.
        n_tiles: Number of tiles per word.
        min_chars: Minimum number of characters per tile.
        max_chars: Maximum number of characters per tile.

    Raises:
        ValueError: If `length` is outside `[n_tiles * min_chars, n_tiles * max_chars]`.
        TileGeometryError: If the sizes cannot be completed for an admissible length.
    """
    if not n_tiles * min_chars <= length <= n_tiles * max_chars:
        raise ValueError(
            f"Word length {length} cannot be split into {n_tiles} tiles of "
            f"{min_chars}-{max_chars} characters."
        )

    sizes = [min_chars] * n_tiles
    while sum(sizes) < length:
        index = next((i for i, size in enumerate(sizes) if size < max_chars), None)
        if index is None:
            raise TileGeometryError(f"Couldn't generate tile sizes for length {length}")
        sizes[index] += 1
    return tuple(sizes)


def tile_sizes_for(word: str, config: FinderConfig = finder_config) -> TileSizes:
    """Return the canonical tile sizes for `word` under the given configuration."""
    return tile_sizes(
        len(word),
        n_tiles=config.num_tiles_per_fourtile,
        min_chars=config.min_chars_per_tile,
        max_chars=config.max_chars_per_tile,
    )


def time_str(seconds: float) -> str:
    """Convert a time duration in seconds to a human-readable string.

    Args:
        seconds: Time duration in seconds.

    Returns:
        A string formatted as "HH:MM:SS.ss".
    """
    hours, rem = divmod(seconds, 3600)
    minutes, secs = divmod(rem, 60)
    return f"{int(hours):02}:{int(minutes):02}:{secs:05.2f}"
