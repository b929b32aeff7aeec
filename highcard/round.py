"""
Round module for High Card game.
Tracks the running leaders of a round as cards are revealed one at a time.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional, Tuple

from highcard.card import Card


@dataclass(frozen=True)
class RoundState:
    """Highest card seen so far in a round and the players holding it."""
    highest_card: Optional[Card] = None
    leaders: FrozenSet[int] = field(default_factory=frozenset)

    @property
    def max_value(self) -> Optional[int]:
        return self.highest_card.value if self.highest_card is not None else None

    @property
    def is_empty(self) -> bool:
        return self.highest_card is None


def observe_draw(state: RoundState, player_index: int, card: Card) -> RoundState:
    """
    Fold one revealed card into the round state.

    Ties join the leader set instead of replacing it. The first draw of a
    round always leads, whatever its value.

    Args:
        state: State before this draw
        player_index: Seat of the drawing player
        card: Card the player revealed

    Returns:
        New round state
    """
    if state.highest_card is None or card.ties(state.highest_card):
        highest = state.highest_card if state.highest_card is not None else card
        return RoundState(highest, state.leaders | {player_index})

    if card.beats(state.highest_card):
        return RoundState(card, frozenset([player_index]))

    return state


def observe_draws(draws: Iterable[Tuple[int, Card]],
                  state: Optional[RoundState] = None) -> RoundState:
    """Fold a sequence of (player_index, card) draws, starting from a fresh round."""
    state = state if state is not None else RoundState()
    for player_index, card in draws:
        state = observe_draw(state, player_index, card)
    return state


def finalize_round(state: RoundState) -> FrozenSet[int]:
    """Winners of the round: the current leader set, as is."""
    return state.leaders
