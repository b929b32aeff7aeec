"""
Command-line interface for playing High Card interactively.
Handles terminal input and round-by-round display.
"""

from typing import Callable, Optional

from highcard.game import GameEvent, GameFinished, RoundCompleted, RoundStarted
from highcard.player import SkipDecider
from highcard.utils import describe_event, format_scoreboard, player_label

SEPARATOR = "======================"

Prompt = Callable[[str], str]


def read_count(question: str, prompt: Optional[Prompt] = None) -> int:
    """
    Read a whole number from the terminal.

    Raises:
        ValueError: If the answer is not an integer or input is closed
    """
    prompt = prompt or input
    try:
        answer = prompt(question).strip()
    except EOFError:
        raise ValueError(f"No input for: {question.strip()}")
    try:
        return int(answer)
    except ValueError:
        raise ValueError(f"Expected a whole number, got {answer!r}")


def read_deck_count(prompt: Optional[Prompt] = None) -> int:
    return read_count("Enter number of decks: ", prompt)


def read_player_count(prompt: Optional[Prompt] = None) -> int:
    return read_count("Enter number of players (min. 4): ", prompt)


def ask_skip(player_index: int, round_number: int, prompt: Optional[Prompt] = None) -> bool:
    """Ask a player whether to sit out this round's draw."""
    prompt = prompt or input

    while True:
        try:
            choice = prompt(f"{player_label(player_index)}, skip round {round_number}? (y/n): ")
        except EOFError:
            # No more input, keep drawing
            return False
        choice = choice.strip().lower()
        if choice in ['y', 'yes']:
            return True
        elif choice in ['n', 'no', '']:
            return False
        print("Please enter 'y' or 'n'")


class HumanSkip(SkipDecider):
    """Asks at the terminal whether each player wants to skip."""

    def __init__(self, prompt: Optional[Prompt] = None):
        self.prompt = prompt

    def should_skip(self, player_index: int, round_number: int) -> bool:
        return ask_skip(player_index, round_number, self.prompt)


def display_event(event: GameEvent, echo: Callable[[str], None] = print):
    """Print narration for one game event."""
    if isinstance(event, GameFinished):
        return
    echo(describe_event(event))
    if isinstance(event, (RoundStarted, RoundCompleted)):
        echo(SEPARATOR)


def display_prepped(num_cards: int, echo: Callable[[str], None] = print):
    echo(f"Game prepped with: {num_cards} cards!")
    echo(SEPARATOR)


def display_final_results(scores, echo: Callable[[str], None] = print):
    """Display the ranked scoreboard."""
    echo("\n" + "=" * 40)
    echo("FINAL SCOREBOARD")
    echo("=" * 40)
    echo(format_scoreboard(scores))
