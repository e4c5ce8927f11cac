"""Fourtiles game finder configuration."""

from dotenv import find_dotenv
from pydantic import model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Determine the environment file path, or None if not found
ENV_FILE = find_dotenv() or None


class FinderConfig(BaseSettings):
    """Configuration settings for the Fourtiles game finder."""

    min_chars_per_tile: int = 2
    """The minimum number of characters to use when splitting a word into tiles. Default: 2."""

    max_chars_per_tile: int = 4
    """The maximum number of characters to use when splitting a word into tiles. Default: 4."""

    min_tiles_per_word: int = 2
    """The minimum number of tiles that can be used to build a word. Default: 2."""

    num_tiles_per_fourtile: int = 4
    """The number of tiles used to build a fourtile (and the maximum for any word). Default: 4."""

    num_fourtiles_per_game: int = 5
    """The number of fourtiles used to make a game. Default: 5."""

    min_words_per_game: int = 10
    """A game must have strictly more than this many other (non-fourtile) words. Default: 10."""

    max_workers: int | None = None
    """Maximum number of worker processes to use. If None (default), uses os.cpu_count() - 1."""

    seed: int | None = None
    """Seed for the pool shuffle and the worker tile-order randomization. Default: None."""

    deterministic: bool = True
    """Whether to keep candidate words in sorted order before shuffling. Default: True.

    Together with `seed`, this makes the initial pool order independent of string hashing.
    """

    json_indent: int | None = 2
    """Indentation of each streamed game record. None writes compact JSON. Default: 2."""

    log_dir: str = "logs"
    """Directory under which per-run log files are written. Default: "logs"."""

    model_config = SettingsConfigDict(
        env_file=ENV_FILE,
        env_file_encoding="utf-8",
        env_prefix="FOURTILES_",
        extra="forbid",
    )

    @model_validator(mode="after")
    def _check_bounds(self) -> "FinderConfig":
        """Reject tile and word bounds that cannot produce any game."""
        if not 1 <= self.min_chars_per_tile <= self.max_chars_per_tile:
            raise ValueError(
                f"Invalid tile size bounds: [{self.min_chars_per_tile}, {self.max_chars_per_tile}]"
            )
        if not 1 <= self.min_tiles_per_word < self.num_tiles_per_fourtile:
            raise ValueError(
                f"min_tiles_per_word ({self.min_tiles_per_word}) must be at least 1 and less "
                f"than num_tiles_per_fourtile ({self.num_tiles_per_fourtile})"
            )
        if self.num_fourtiles_per_game < 1:
            raise ValueError("num_fourtiles_per_game must be positive")
        if self.min_words_per_game < 0:
            raise ValueError("min_words_per_game must not be negative")
        return self


config = FinderConfig()
