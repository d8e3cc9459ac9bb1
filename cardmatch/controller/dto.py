"""Data transfer objects.

Defines the configuration and result formats exchanged between the
controller and the UI layer. Pydantic dataclasses validate the values.
"""

import random
from typing import Optional

from pydantic.dataclasses import dataclass as pydantic_dataclass
from pydantic import Field

from cardmatch.core import MIN_PACKS, MAX_PACKS, PlayerTurn

DEFAULT_HAND_SIZE = 8


@pydantic_dataclass
class GameConfiguration:
    """Game configuration.

    Holds the basic parameters needed to set up a game.
    """
    pack_count: int = Field(..., ge=MIN_PACKS, le=MAX_PACKS, description="Number of 52-card packs")
    hand_size: int = Field(DEFAULT_HAND_SIZE, ge=1, le=26, description="Cards dealt to each player")
    seed: Optional[int] = Field(None, description="Random seed for reproducible games")

    def create_rng(self) -> random.Random:
        """Build the random source used for every shuffle of the game."""
        return random.Random(self.seed)


@pydantic_dataclass
class GameResult:
    """Result of a finished game."""
    winner: PlayerTurn = Field(..., description="Player whose hand was emptied")
    turn_count: int = Field(..., ge=1, description="Completed turns")
    reshuffle_count: int = Field(0, ge=0, description="Times the discard pile was recycled")
    cards_set_aside: int = Field(0, ge=0, description="Reference cards taken out of play")
    loser_hand_size: int = Field(0, ge=0, description="Cards left in the losing hand")
