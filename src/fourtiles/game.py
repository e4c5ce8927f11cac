"""Classes for representing a Fourtiles game."""

import random
from dataclasses import dataclass


@dataclass(frozen=True)
class Game:
    """A valid Fourtiles game.

    Immutable, and pickleable so that it can be returned from worker processes.
    """

    tiles: frozenset[str]
    """The distinct tiles on the board."""

    fourtiles: frozenset[str]
    """The words used to build the board, each made of exactly four tiles."""

    other_words: frozenset[str]
    """Other dictionary words buildable from fewer tiles."""

    @property
    def words(self) -> frozenset[str]:
        """All words buildable on this board."""
        return self.fourtiles | self.other_words

    def to_dict(self) -> dict:
        """Return a dictionary representation of the Game for serialization.

        Tiles are listed in random order so that the record does not reveal which tiles
        belong together; the word lists are sorted.
        """
        return {
            "tiles": random.sample(sorted(self.tiles), len(self.tiles)),
            "fourtiles": sorted(self.fourtiles),
            "otherWords": sorted(self.other_words),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Game":
        """Create a Game instance from a dictionary representation.

        Used to check written records; the finder itself only writes games.
        """
        return cls(
            tiles=frozenset(data["tiles"]),
            fourtiles=frozenset(data["fourtiles"]),
            other_words=frozenset(data["otherWords"]),
        )

    def __str__(self) -> str:
        """Return a string representation of the Game."""
        return (
            f"{', '.join(sorted(self.fourtiles))} "
            f"({len(self.tiles)} tiles, {len(self.other_words)} other words)"
        )
