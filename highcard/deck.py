"""
Deck module for High Card game.
Handles multi-deck construction, shuffling, and dealing from the front.
"""

import logging
from collections import deque
from typing import Deque, List, Optional, Sequence, Union

import numpy as np

from highcard.card import Card, build_multi_deck

logger = logging.getLogger(__name__)

RandomSource = Union[np.random.Generator, int, None]


def make_rng(seed: RandomSource = None) -> np.random.Generator:
    """
    Build the random source used for shuffling and random skips.

    Args:
        seed: Existing generator (returned as is), an int seed, or None
              for fresh OS entropy

    Returns:
        numpy Generator
    """
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def shuffle(cards: Sequence[Card], rng: RandomSource = None) -> List[Card]:
    """
    Return a uniformly random permutation of cards.

    The input is left untouched; the caller gets a new list.

    Args:
        cards: Cards to shuffle
        rng: Generator or seed, see ``make_rng``

    Returns:
        Shuffled copy of cards
    """
    generator = make_rng(rng)
    order = generator.permutation(len(cards))
    return [cards[i] for i in order]


class Deck:
    """Ordered cards for one game. Cards are only ever removed from the front."""

    def __init__(self, cards: Optional[Sequence[Card]] = None):
        self.cards: Deque[Card] = deque(cards) if cards is not None else deque()
        self.total_count = len(self.cards)

    @classmethod
    def shuffled(cls, num_decks: int = 1, rng: RandomSource = None) -> 'Deck':
        """Build ``num_decks`` canonical decks and shuffle them together."""
        deck = cls(shuffle(build_multi_deck(num_decks), rng))
        logger.debug(f"Shuffled {num_decks} deck(s), {deck.total_count} cards")
        return deck

    def draw(self) -> Card:
        """
        Remove and return the front card.

        Raises:
            ValueError: If the deck is empty
        """
        if not self.cards:
            raise ValueError("Cannot draw from an empty deck")
        return self.cards.popleft()

    def can_deal_round(self, num_players: int) -> bool:
        """Check if every player can be dealt one card."""
        return len(self.cards) >= num_players

    def cards_remaining(self) -> int:
        """Return number of cards remaining in deck."""
        return len(self.cards)

    def is_empty(self) -> bool:
        """Check if deck is empty."""
        return len(self.cards) == 0

    def __len__(self):
        return len(self.cards)

    def __repr__(self):
        return f"Deck({len(self.cards)}/{self.total_count} cards)"
