"""
Main game module for High Card game.
Runs the round-by-round state machine and keeps the score tally.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Sequence, Tuple, Union

from highcard.card import Card
from highcard.deck import Deck, RandomSource
from highcard.player import NeverSkip, SkipStrategy
from highcard.round import RoundState, finalize_round, observe_draw
from highcard.rules import (
    MIN_PLAYERS, ROUND_WIN_POINTS, GameConfig, validate_player_count
)

logger = logging.getLogger(__name__)


class GamePhase(Enum):
    """States of the game loop."""
    AWAITING_ROUND = "awaiting_round"
    DEALING_PLAYER = "dealing_player"
    ROUND_COMPLETE = "round_complete"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class RoundStarted:
    round_number: int
    cards_remaining: int


@dataclass(frozen=True)
class CardRevealed:
    round_number: int
    player_index: int
    card: Card


@dataclass(frozen=True)
class PlayerSkipped:
    round_number: int
    player_index: int


@dataclass(frozen=True)
class RoundCompleted:
    round_number: int
    winners: Tuple[int, ...]
    scores: Tuple[int, ...]


@dataclass(frozen=True)
class GameFinished:
    rounds_played: int
    scores: Tuple[int, ...]
    cards_remaining: int


GameEvent = Union[RoundStarted, CardRevealed, PlayerSkipped, RoundCompleted, GameFinished]
GameListener = Callable[[GameEvent], None]


@dataclass(frozen=True)
class RoundResult:
    """Record of a completed round."""
    round_number: int
    draws: Tuple[Tuple[int, Card], ...]
    skipped: Tuple[int, ...]
    winners: Tuple[int, ...]
    winning_card: Card


class HighCardGame:
    """
    Game controller for High Card.

    Each call to ``step`` performs one state transition:

        AWAITING_ROUND -> DEALING_PLAYER(0..n-1) -> ROUND_COMPLETE -> AWAITING_ROUND
        AWAITING_ROUND -> GAME_OVER  (fewer cards left than players)
    """

    def __init__(self, num_players: int, deck: Union[Deck, Sequence[Card]],
                 is_skip_allowed: bool = False,
                 skip_decider: Optional[SkipStrategy] = None,
                 listener: Optional[GameListener] = None,
                 min_players: int = 1):
        self.num_players = validate_player_count(num_players, min_players)
        self.deck = deck if isinstance(deck, Deck) else Deck(deck)
        self.is_skip_allowed = is_skip_allowed
        self.skip_decider = skip_decider if skip_decider is not None else NeverSkip()
        self.listeners: List[GameListener] = [listener] if listener is not None else []

        self.scores: List[int] = [0] * num_players
        self.phase = GamePhase.AWAITING_ROUND
        self.round_number = 0
        self.current_player = 0
        self.round_state = RoundState()
        self.history: List[RoundResult] = []

        self._round_draws: List[Tuple[int, Card]] = []
        self._round_skipped: List[int] = []

    @classmethod
    def from_config(cls, config: GameConfig,
                    skip_decider: Optional[SkipStrategy] = None,
                    listener: Optional[GameListener] = None,
                    rng: RandomSource = None) -> 'HighCardGame':
        """
        Validate a configuration and set up a game with a freshly shuffled deck.

        Raises:
            InvalidDeckCount: If config.num_decks < 1
            InvalidPlayerCount: If config.num_players < 4
        """
        config.validate()
        deck = Deck.shuffled(config.num_decks, rng if rng is not None else config.seed)
        return cls(config.num_players, deck, config.is_skip_allowed,
                   skip_decider, listener, min_players=MIN_PLAYERS)

    def add_listener(self, listener: GameListener):
        self.listeners.append(listener)

    def _emit(self, event: GameEvent):
        for listener in self.listeners:
            listener(event)

    @property
    def is_over(self) -> bool:
        return self.phase is GamePhase.GAME_OVER

    def step(self) -> GamePhase:
        """Advance the game by one transition and return the new phase."""
        if self.phase is GamePhase.AWAITING_ROUND:
            self._start_round()
        elif self.phase is GamePhase.DEALING_PLAYER:
            self._deal_current_player()
        elif self.phase is GamePhase.ROUND_COMPLETE:
            self._complete_round()
        return self.phase

    def play(self) -> List[int]:
        """
        Play until the deck cannot supply a full round.

        Returns:
            Final score for each player, by seat
        """
        while not self.is_over:
            self.step()
        return self.get_final_scores()

    def _start_round(self):
        if not self.deck.can_deal_round(self.num_players):
            logger.debug(f"{self.deck.cards_remaining()} card(s) left for "
                         f"{self.num_players} players, ending game")
            self.phase = GamePhase.GAME_OVER
            self._emit(GameFinished(self.round_number, tuple(self.scores),
                                    self.deck.cards_remaining()))
            return

        self.round_number += 1
        self.round_state = RoundState()
        self.current_player = 0
        self._round_draws = []
        self._round_skipped = []
        self.phase = GamePhase.DEALING_PLAYER
        self._emit(RoundStarted(self.round_number, self.deck.cards_remaining()))

    def _wants_skip(self, player_index: int) -> bool:
        # The first player always draws
        if player_index == 0 or not self.is_skip_allowed:
            return False
        return bool(self.skip_decider(player_index, self.round_number))

    def _deal_current_player(self):
        player_index = self.current_player

        if self._wants_skip(player_index):
            self._round_skipped.append(player_index)
            self._emit(PlayerSkipped(self.round_number, player_index))
        else:
            card = self.deck.draw()
            self._round_draws.append((player_index, card))
            self._emit(CardRevealed(self.round_number, player_index, card))
            self.round_state = observe_draw(self.round_state, player_index, card)

        self.current_player += 1
        if self.current_player == self.num_players:
            self.phase = GamePhase.ROUND_COMPLETE

    def _complete_round(self):
        winners = tuple(sorted(finalize_round(self.round_state)))
        for player_index in winners:
            self.scores[player_index] += ROUND_WIN_POINTS

        self.history.append(RoundResult(
            round_number=self.round_number,
            draws=tuple(self._round_draws),
            skipped=tuple(self._round_skipped),
            winners=winners,
            winning_card=self.round_state.highest_card,
        ))
        logger.debug(f"Round {self.round_number} won by {winners} "
                     f"with {self.round_state.highest_card}")

        self.round_state = RoundState()
        self.phase = GamePhase.AWAITING_ROUND
        self._emit(RoundCompleted(self.round_number, winners, tuple(self.scores)))

    def get_final_scores(self) -> List[int]:
        """Copy of the score tally, by seat."""
        return list(self.scores)

    def get_game_state(self) -> Dict:
        """Get current game state for logging/display."""
        return {
            'phase': self.phase.value,
            'round_number': self.round_number,
            'current_player': self.current_player,
            'cards_remaining': self.deck.cards_remaining(),
            'player_scores': list(self.scores),
            'rounds_played': len(self.history),
            'round_leaders': sorted(self.round_state.leaders),
        }


def run_game(num_players: int, deck: Union[Deck, Sequence[Card]],
             is_skip_allowed: bool = False,
             skip_decider: Optional[SkipStrategy] = None,
             listener: Optional[GameListener] = None) -> List[int]:
    """
    Play a game over an already prepared deck.

    Cards are dealt from the front of ``deck``. A plain list is copied,
    so the caller's list is not consumed; a ``Deck`` is dealt in place.

    Args:
        num_players: Number of players, at least 1
        deck: Cards in dealing order
        is_skip_allowed: Let every player but the first skip rounds
        skip_decider: Called as (player_index, round_number) -> bool
        listener: Receives game events in order

    Returns:
        Score for each player, by seat
    """
    game = HighCardGame(num_players, deck, is_skip_allowed, skip_decider, listener)
    return game.play()


def start_game(config: GameConfig,
               skip_decider: Optional[SkipStrategy] = None,
               listener: Optional[GameListener] = None,
               rng: RandomSource = None) -> List[int]:
    """
    Validate ``config``, shuffle a fresh deck, and play a full game.

    Raises:
        InvalidDeckCount: Before any round, if config.num_decks < 1
        InvalidPlayerCount: Before any round, if config.num_players < 4
    """
    game = HighCardGame.from_config(config, skip_decider, listener, rng)
    return game.play()
