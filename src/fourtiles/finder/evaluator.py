"""Evaluation of a batch of candidate fourtiles as a Fourtiles game.

A batch of words becomes a game when:

- Each word can be split into tiles, and no tile is shared between (or within) words.
- Exactly the words of the batch are buildable with `num_tiles_per_fourtile` tiles.
- More than `min_words_per_game` other words are buildable with between
  `min_tiles_per_word` and `num_tiles_per_fourtile - 1` tiles, none of which is one of
  the fourtiles.

The tile sizes of each word are fixed by its length, but the order in which they are
applied is random, so the same batch may succeed on a later attempt.
"""

import random
from collections.abc import Collection, Iterable, Sequence
from itertools import permutations

from fourtiles.finder.config import FinderConfig
from fourtiles.finder.config import config as finder_config
from fourtiles.finder.utils import tile_sizes_for, valid_word_lengths
from fourtiles.game import Game


def split_into_tiles(word: str, sizes: Iterable[int]) -> list[str]:
    """Cut `word` left to right into consecutive tiles of the given sizes.

    Args:
        word: The word to split.
        sizes: Tile sizes, in the order they are applied.  Must sum to `len(word)`.

    Returns:
        The tiles, in order.  Joining them gives back `word`.
    """
    tiles: list[str] = []
    start = 0
    for size in sizes:
        tiles.append(word[start : start + size])
        start += size
    if start != len(word):
        raise ValueError(f"Tile sizes do not cover '{word}' exactly.")
    return tiles


def tiles_for(
    words: Sequence[str],
    rng: random.Random,
    config: FinderConfig = finder_config,
) -> frozenset[str] | None:
    """Split each word into tiles using a random ordering of its tile sizes.

    Returns:
        The set of all tiles, or None as soon as a tile is produced twice.
    """
    tiles: set[str] = set()
    for word in words:
        sizes = tile_sizes_for(word, config)
        for tile in split_into_tiles(word, rng.sample(sizes, len(sizes))):
            if tile in tiles:
                return None
            tiles.add(tile)
    return frozenset(tiles)


def words_with_tile_count(
    tiles: Collection[str], count: int, lexicon: Collection[str]
) -> set[str]:
    """Return the dictionary words made of exactly `count` distinct tiles, in any order."""
    return {
        word
        for arrangement in permutations(tiles, count)
        if (word := "".join(arrangement)) in lexicon
    }


def possible_fourtiles(
    tiles: Collection[str],
    lexicon: Collection[str],
    config: FinderConfig = finder_config,
) -> set[str]:
    """Return all dictionary words buildable with exactly `num_tiles_per_fourtile` tiles."""
    return words_with_tile_count(tiles, config.num_tiles_per_fourtile, lexicon)


def possible_other_words(
    tiles: Collection[str],
    lexicon: Collection[str],
    config: FinderConfig = finder_config,
) -> set[str]:
    """Return all dictionary words buildable with fewer tiles than a fourtile."""
    other_words: set[str] = set()
    for tile_count in range(config.min_tiles_per_word, config.num_tiles_per_fourtile):
        other_words |= words_with_tile_count(tiles, tile_count, lexicon)
    return other_words


def check_batch(words: Sequence[str], config: FinderConfig = finder_config) -> None:
    """Raise ValueError if `words` is not a valid batch of candidate fourtiles."""
    if len(words) != config.num_fourtiles_per_game:
        raise ValueError(
            f"Expected {config.num_fourtiles_per_game} words per batch, got {len(words)}: "
            f"{list(words)}"
        )
    if len(set(words)) != len(words):
        raise ValueError(f"Batch contains duplicate words: {list(words)}")
    lengths = valid_word_lengths(config)
    bad = [w for w in words if len(w) not in lengths]
    if bad:
        raise ValueError(f"Words cannot be split into fourtiles: {bad}")


def find_game(
    words: Sequence[str],
    *,
    lexicon: Collection[str],
    rng: random.Random,
    config: FinderConfig = finder_config,
) -> Game | None:
    """Attempt to build a game from a batch of candidate fourtiles.

    Args:
        words: Exactly `num_fourtiles_per_game` candidate fourtiles.
        lexicon: All dictionary words.  Should be a set (membership tests dominate).
        rng: Source of randomness for the tile-size ordering.
        config: Finder configuration.

    Returns:
        A Game, or None if this attempt does not meet the game requirements.

    Raises:
        ValueError: If the batch itself is malformed (wrong size, duplicates, bad lengths).
    """
    check_batch(words, config)

    tiles = tiles_for(words, rng, config)
    if tiles is None:
        return None
    if len(possible_fourtiles(tiles, lexicon, config)) != config.num_fourtiles_per_game:
        return None

    other_words = possible_other_words(tiles, lexicon, config)
    if len(other_words) <= config.min_words_per_game:
        return None
    if not other_words.isdisjoint(words):
        return None

    return Game(
        tiles=tiles,
        fourtiles=frozenset(words),
        other_words=frozenset(other_words),
    )
