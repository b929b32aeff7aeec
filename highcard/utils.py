"""
Utility module for High Card game.
Contains logging, formatting, and scoreboard helpers.
"""

import logging
from typing import List, Optional, Sequence, Tuple

from highcard.game import (
    CardRevealed, GameEvent, GameFinished, PlayerSkipped, RoundCompleted, RoundStarted
)


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None):
    """Set up logging configuration for the game."""
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def player_label(player_index: int) -> str:
    """Seats are zero-based internally and shown one-based."""
    return f"Player {player_index + 1}"


def format_winners(winners: Sequence[int]) -> str:
    return ', '.join(player_label(i) for i in winners)


def rank_scores(scores: Sequence[int]) -> List[Tuple[int, int]]:
    """
    Order players by points, highest first.

    Args:
        scores: Score per seat

    Returns:
        List of (player_index, score); tied players keep seat order
    """
    return sorted(enumerate(scores), key=lambda item: item[1], reverse=True)


def format_scoreboard(scores: Sequence[int]) -> str:
    """Format the final standings, one ranked line per player."""
    if not scores:
        return "No players"

    lines = []
    position = 0
    previous = None
    for place, (player_index, score) in enumerate(rank_scores(scores), 1):
        # Tied players share a position
        if score != previous:
            position = place
            previous = score
        points = "point" if score == 1 else "points"
        lines.append(f"{position}. {player_label(player_index)}: {score} {points}")
    return '\n'.join(lines)


def describe_event(event: GameEvent) -> str:
    """One line of narration for a game event."""
    if isinstance(event, RoundStarted):
        return f"Round: {event.round_number}"
    if isinstance(event, CardRevealed):
        return f"{player_label(event.player_index)} draws: {event.card}"
    if isinstance(event, PlayerSkipped):
        return f"{player_label(event.player_index)} skips"
    if isinstance(event, RoundCompleted):
        return f"Round winners: {format_winners(event.winners)}"
    if isinstance(event, GameFinished):
        return (f"Game over after {event.rounds_played} round(s), "
                f"{event.cards_remaining} card(s) left undealt")
    raise TypeError(f"Unknown game event: {event!r}")


class GameLogger:
    """Event listener that writes game narration to the log."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("HighCardGame")

    def __call__(self, event: GameEvent):
        if isinstance(event, (RoundStarted, RoundCompleted, GameFinished)):
            self.logger.info(describe_event(event))
        else:
            self.logger.debug(describe_event(event))

        if isinstance(event, GameFinished):
            self.log_game_end(event.scores)

    def log_game_start(self, num_players: int, num_cards: int, is_skip_allowed: bool):
        """Log the start of a new game."""
        self.logger.info("=== NEW GAME STARTED ===")
        self.logger.info(f"Players: {num_players}, cards: {num_cards}, "
                         f"skipping {'allowed' if is_skip_allowed else 'disabled'}")

    def log_game_end(self, scores: Sequence[int]):
        """Log final standings."""
        self.logger.info("=== GAME COMPLETE ===")
        for line in format_scoreboard(scores).splitlines():
            self.logger.info(line)
