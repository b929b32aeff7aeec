"""
Player module for High Card game.
Defines the skip strategy interface and its implementations.
"""

from abc import ABC, abstractmethod
from typing import Callable, Dict, Iterable, Tuple, Union

from highcard.deck import RandomSource, make_rng


class SkipDecider(ABC):
    """Decides whether a player sits out a round's draw."""

    @abstractmethod
    def should_skip(self, player_index: int, round_number: int) -> bool:
        """
        Ask whether a player skips this round.

        Never called for the first player, who always draws.

        Args:
            player_index: Zero-based seat of the player
            round_number: One-based number of the current round

        Returns:
            True to skip the draw
        """
        pass

    def __call__(self, player_index: int, round_number: int) -> bool:
        return self.should_skip(player_index, round_number)


class NeverSkip(SkipDecider):
    """Every player always draws."""

    def should_skip(self, player_index: int, round_number: int) -> bool:
        return False


class RandomSkip(SkipDecider):
    """Skips with a fixed probability, independently for each query."""

    def __init__(self, probability: float = 0.25, rng: RandomSource = None):
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"Skip probability must be within [0, 1], got {probability}")
        self.probability = probability
        self.rng = make_rng(rng)

    def should_skip(self, player_index: int, round_number: int) -> bool:
        return bool(self.rng.random() < self.probability)


class ScriptedSkip(SkipDecider):
    """
    Pre-programmed answers keyed by (player_index, round_number).

    Pairs not in the script draw normally. Every query is recorded in
    ``calls`` so replays and tests can inspect the order of questions.
    """

    def __init__(self, skips: Union[Dict[Tuple[int, int], bool], Iterable[Tuple[int, int]]] = ()):
        if isinstance(skips, dict):
            self.skips = dict(skips)
        else:
            self.skips = {key: True for key in skips}
        self.calls = []

    def should_skip(self, player_index: int, round_number: int) -> bool:
        self.calls.append((player_index, round_number))
        return self.skips.get((player_index, round_number), False)


SkipStrategy = Union[SkipDecider, Callable[[int, int], bool]]

