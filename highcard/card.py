"""
Card module for High Card game.
Defines Card, Suit, and Rank with the rank-major card valuation.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List

from highcard.rules import validate_deck_count


class Suit(Enum):
    """Card suits in display order. Suits never decide a round."""
    DIAMONDS = "♦"
    CLUBS = "♣"
    HEARTS = "♥"
    SPADES = "♠"

    def __str__(self):
        return self.value


class Rank(Enum):
    """Card ranks from lowest (Ace) to highest (King)."""
    ACE = "A"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    TEN = "10"
    JACK = "J"
    QUEEN = "Q"
    KING = "K"

    def __str__(self):
        return self.value


@dataclass(frozen=True)
class Card:
    """A playing card. Only ``value`` is used to compare cards."""
    suit: Suit
    rank: Rank
    value: int

    def __str__(self):
        return f"{self.suit} {self.rank}"

    def __repr__(self):
        return f"Card({self.suit.name}, {self.rank.name}, {self.value})"

    def beats(self, other: 'Card') -> bool:
        """True if this card outranks ``other``."""
        return self.value > other.value

    def ties(self, other: 'Card') -> bool:
        return self.value == other.value


def card_value(suit: Suit, rank: Rank) -> int:
    """
    Value of a card in a canonical deck.

    Values run rank-major, suit-minor: A♦=1, A♣=2, A♥=3, A♠=4, 2♦=5 ... K♠=52.
    """
    rank_index = list(Rank).index(rank)
    suit_index = list(Suit).index(suit)
    return rank_index * len(Suit) + suit_index + 1


def generate_deck() -> List[Card]:
    """Create the canonical 52-card deck, ordered by value."""
    deck = []
    for rank in Rank:
        for suit in Suit:
            deck.append(Card(suit, rank, card_value(suit, rank)))
    return deck


def build_multi_deck(num_decks: int) -> List[Card]:
    """
    Concatenate several canonical decks.

    Args:
        num_decks: Number of 52-card decks to combine

    Returns:
        List of 52 * num_decks cards, unshuffled

    Raises:
        InvalidDeckCount: If num_decks is not a positive integer
    """
    validate_deck_count(num_decks)
    cards = []
    for _ in range(num_decks):
        cards.extend(generate_deck())
    return cards
