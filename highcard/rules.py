"""
Rules module for High Card game.
Contains game constants, setup validation, and the game configuration.
"""

from dataclasses import dataclass
from typing import Optional


# Game constants
CARDS_PER_DECK = 52

# Setup limits
MIN_DECKS = 1
MIN_PLAYERS = 4

# Points awarded to every player tied for the round's highest card
ROUND_WIN_POINTS = 1


class HighCardError(Exception):
    """Base class for High Card setup errors."""


class InvalidDeckCount(HighCardError, ValueError):
    """Raised when the number of decks is not a positive integer."""

    def __init__(self, count):
        self.count = count
        super().__init__(f"Minimum of {MIN_DECKS} deck required, got {count!r}.")


class InvalidPlayerCount(HighCardError, ValueError):
    """Raised when there are too few players to start a game."""

    def __init__(self, count, minimum: int = MIN_PLAYERS):
        self.count = count
        self.minimum = minimum
        super().__init__(f"Minimum of {minimum} players required, got {count!r}.")


def _is_integer(count) -> bool:
    # bool is an int subclass but never a sensible count
    return isinstance(count, int) and not isinstance(count, bool)


def validate_deck_count(num_decks) -> int:
    """
    Validate the number of decks used for a game.

    Args:
        num_decks: Proposed number of decks

    Returns:
        The deck count, unchanged

    Raises:
        InvalidDeckCount: If num_decks is not an integer >= MIN_DECKS
    """
    if not _is_integer(num_decks) or num_decks < MIN_DECKS:
        raise InvalidDeckCount(num_decks)
    return num_decks


def validate_player_count(num_players, minimum: int = MIN_PLAYERS) -> int:
    """
    Validate the number of players.

    Args:
        num_players: Proposed number of players
        minimum: Smallest acceptable count

    Returns:
        The player count, unchanged

    Raises:
        InvalidPlayerCount: If num_players is not an integer >= minimum
    """
    if not _is_integer(num_players) or num_players < minimum:
        raise InvalidPlayerCount(num_players, minimum)
    return num_players


@dataclass
class GameConfig:
    """Settings for a single game."""
    num_decks: int = MIN_DECKS
    num_players: int = MIN_PLAYERS
    is_skip_allowed: bool = False
    seed: Optional[int] = None

    def validate(self) -> 'GameConfig':
        """Check deck and player counts, deck count first."""
        validate_deck_count(self.num_decks)
        validate_player_count(self.num_players)
        return self

    @property
    def total_cards(self) -> int:
        return CARDS_PER_DECK * self.num_decks
