"""
High Card: players draw from a shared shuffled deck and the highest card scores.
"""

from highcard.card import Card, Rank, Suit, build_multi_deck, generate_deck
from highcard.deck import Deck, make_rng, shuffle
from highcard.game import HighCardGame, GamePhase, run_game, start_game
from highcard.round import RoundState, finalize_round, observe_draw
from highcard.rules import (
    GameConfig, HighCardError, InvalidDeckCount, InvalidPlayerCount
)

__version__ = "0.1.0"
