"""
Tests for High Card display helpers, terminal prompts and the entry point.
"""

import logging

import pytest

from highcard.card import generate_deck
from highcard.game import (
    CardRevealed, GameFinished, PlayerSkipped, RoundCompleted, RoundStarted, run_game
)
from highcard.play import HumanSkip, ask_skip, display_event, read_deck_count, read_player_count
from highcard.player import NeverSkip, RandomSkip
from highcard.run import (
    EXIT_INTERRUPTED, EXIT_INVALID_SETUP, EXIT_OK, create_skip_decider, main
)
from highcard.utils import GameLogger, describe_event, format_scoreboard, rank_scores


def card(value: int):
    return generate_deck()[value - 1]


def answers(*replies):
    """Fake terminal returning the given replies in order."""
    replies = iter(replies)
    return lambda question: next(replies)


class TestFormatting:
    """Test narration and scoreboard formatting."""

    def test_describe_events(self):
        assert describe_event(RoundStarted(3, 40)) == "Round: 3"
        assert describe_event(CardRevealed(1, 0, card(52))) == "Player 1 draws: ♠ K"
        assert describe_event(PlayerSkipped(1, 2)) == "Player 3 skips"
        assert describe_event(RoundCompleted(1, (0, 3), (1, 0, 0, 1))) == \
            "Round winners: Player 1, Player 4"
        assert "2 card(s) left" in describe_event(GameFinished(5, (1, 2), 2))

    def test_describe_unknown_event(self):
        with pytest.raises(TypeError):
            describe_event("not an event")

    def test_rank_scores(self):
        assert rank_scores([1, 3, 3, 0]) == [(1, 3), (2, 3), (0, 1), (3, 0)]

    def test_scoreboard(self):
        assert format_scoreboard([1, 3, 3, 0]).splitlines() == [
            "1. Player 2: 3 points",
            "1. Player 3: 3 points",
            "3. Player 1: 1 point",
            "4. Player 4: 0 points",
        ]

    def test_empty_scoreboard(self):
        assert format_scoreboard([]) == "No players"

    def test_display_event(self):
        lines = []
        run_game(2, [card(4), card(9)], listener=lambda e: display_event(e, lines.append))
        assert lines == [
            "Round: 1",
            "======================",
            "Player 1 draws: ♠ A",
            "Player 2 draws: ♦ 3",
            "Round winners: Player 2",
            "======================",
        ]

    def test_game_logger(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="HighCardGame"):
            run_game(2, [card(4), card(4)], listener=GameLogger())
        assert "Round: 1" in caplog.text
        assert "Player 2 draws: ♠ A" in caplog.text
        assert "Round winners: Player 1, Player 2" in caplog.text
        assert "GAME COMPLETE" in caplog.text


class TestPrompts:
    """Test terminal input handling."""

    def test_read_counts(self):
        assert read_deck_count(answers(" 2 ")) == 2
        assert read_player_count(answers("6")) == 6

    def test_read_count_rejects_text(self):
        with pytest.raises(ValueError):
            read_deck_count(answers("two"))

    def test_ask_skip(self):
        assert ask_skip(1, 1, answers("y"))
        assert not ask_skip(1, 1, answers("no"))

    def test_ask_skip_repeats_until_answered(self, capsys):
        assert ask_skip(2, 4, answers("maybe", "YES"))
        assert "Please enter 'y' or 'n'" in capsys.readouterr().out

    def test_ask_skip_end_of_input(self):
        def closed(question):
            raise EOFError

        assert not ask_skip(1, 1, closed)

    def test_human_skip(self):
        questions = []

        def prompt(question):
            questions.append(question)
            return "y"

        decider = HumanSkip(prompt)
        assert decider(2, 5)
        assert questions == ["Player 3, skip round 5? (y/n): "]


class TestRun:
    """Test the command-line entry point."""

    def test_create_skip_decider(self):
        assert isinstance(create_skip_decider('never'), NeverSkip)
        assert isinstance(create_skip_decider('random', 0.1, 3), RandomSkip)
        assert isinstance(create_skip_decider('human'), HumanSkip)
        with pytest.raises(ValueError):
            create_skip_decider('sometimes')

    def test_full_game(self, capsys):
        code = main(["--decks", "1", "--players", "4", "--seed", "5"])
        out = capsys.readouterr().out
        assert code == EXIT_OK
        assert "Game prepped with: 52 cards!" in out
        assert "Round: 13" in out
        assert "Round: 14" not in out
        assert "FINAL SCOREBOARD" in out

    def test_quiet_game(self, capsys):
        code = main(["--decks", "2", "--players", "5", "--seed", "1", "--quiet"])
        out = capsys.readouterr().out
        assert code == EXIT_OK
        assert "Round: 1" not in out
        assert "FINAL SCOREBOARD" in out

    def test_random_skips(self, capsys):
        code = main(["--decks", "1", "--players", "4", "--allow-skip",
                     "--skip-mode", "random", "--skip-probability", "0.5", "--seed", "8"])
        out = capsys.readouterr().out
        assert code == EXIT_OK
        assert "skips" in out
        assert "Player 1 skips" not in out

    def test_too_few_players(self, capsys):
        code = main(["--decks", "1", "--players", "3"])
        out = capsys.readouterr().out
        assert code == EXIT_INVALID_SETUP
        assert "Minimum of 4 players required" in out
        assert "Round:" not in out

    def test_zero_decks(self, capsys):
        code = main(["--decks", "0", "--players", "4"])
        assert code == EXIT_INVALID_SETUP
        assert "Minimum of 1 deck required" in capsys.readouterr().out

    def test_prompts_for_counts(self, monkeypatch, capsys):
        replies = iter(["1", "4"])
        monkeypatch.setattr("builtins.input", lambda question: next(replies))
        assert main(["--seed", "2", "--quiet"]) == EXIT_OK
        assert "FINAL SCOREBOARD" in capsys.readouterr().out

    def test_bad_deck_prompt_stops_before_players(self, monkeypatch, capsys):
        questions = []

        def fake_input(question):
            questions.append(question)
            return "0"

        monkeypatch.setattr("builtins.input", fake_input)
        assert main([]) == EXIT_INVALID_SETUP
        assert questions == ["Enter number of decks: "]

    def test_non_numeric_prompt(self, monkeypatch, capsys):
        monkeypatch.setattr("builtins.input", lambda question: "lots")
        assert main([]) == EXIT_INVALID_SETUP
        assert "Expected a whole number" in capsys.readouterr().out

    def test_closed_input_at_prompt(self, monkeypatch, capsys):
        def closed(question):
            raise EOFError

        monkeypatch.setattr("builtins.input", closed)
        assert main([]) == EXIT_INVALID_SETUP
        assert "No input for: Enter number of decks:" in capsys.readouterr().out

    def test_skip_probability_out_of_range(self, capsys):
        code = main(["--decks", "1", "--players", "4", "--allow-skip",
                     "--skip-mode", "random", "--skip-probability", "2"])
        out = capsys.readouterr().out
        assert code == EXIT_INVALID_SETUP
        assert "Skip probability must be within [0, 1]" in out
        assert "Game prepped" not in out

    def test_interrupt_at_prompt(self, monkeypatch, capsys):
        def interrupt(question):
            raise KeyboardInterrupt

        monkeypatch.setattr("builtins.input", interrupt)
        assert main([]) == EXIT_INTERRUPTED
        assert "Setup interrupted by user" in capsys.readouterr().out

    def test_interrupt_during_game(self, monkeypatch, capsys):
        def interrupt(question):
            raise KeyboardInterrupt

        # The first skip question is asked in round 1
        monkeypatch.setattr("builtins.input", interrupt)
        code = main(["--decks", "1", "--players", "4", "--allow-skip", "--skip-mode", "human"])
        out = capsys.readouterr().out
        assert code == EXIT_INTERRUPTED
        assert "Game interrupted by user" in out
        assert "FINAL SCOREBOARD" not in out

    def test_prepped_count_for_two_decks(self, capsys):
        assert main(["--decks", "2", "--players", "4", "--seed", "3"]) == EXIT_OK
        assert "Game prepped with: 104 cards!" in capsys.readouterr().out
