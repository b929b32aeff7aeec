#!/usr/bin/env python3
"""
Main entry point for High Card game.
Set up a game from the command line or terminal prompts and play it out.
"""

import argparse
import logging
import sys
from typing import List, Optional

from highcard.deck import RandomSource, make_rng
from highcard.game import HighCardGame
from highcard.play import (
    HumanSkip, display_event, display_final_results, display_prepped,
    read_deck_count, read_player_count
)
from highcard.player import NeverSkip, RandomSkip, SkipDecider
from highcard.rules import MIN_PLAYERS, GameConfig, HighCardError, validate_deck_count
from highcard.utils import GameLogger, setup_logging

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_INVALID_SETUP = 2
EXIT_INTERRUPTED = 130


def create_skip_decider(mode: str, probability: float = 0.25,
                        rng: RandomSource = None) -> SkipDecider:
    """Create a skip decider by name: 'human', 'random', or 'never'."""
    decider_map = {
        'human': lambda: HumanSkip(),
        'random': lambda: RandomSkip(probability, rng),
        'never': lambda: NeverSkip(),
    }

    if mode not in decider_map:
        raise ValueError(f"Unknown skip mode: {mode}. Available: {list(decider_map.keys())}")

    return decider_map[mode]()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Play the High Card drawing game")
    parser.add_argument('--decks', type=int,
                        help='Number of 52-card decks (prompted for if omitted)')
    parser.add_argument('--players', type=int,
                        help=f'Number of players, at least {MIN_PLAYERS} (prompted for if omitted)')
    parser.add_argument('--allow-skip', action='store_true',
                        help='Let every player but the first skip rounds')
    parser.add_argument('--skip-mode', choices=['human', 'random', 'never'],
                        default='human', help='Who decides skips when --allow-skip is set')
    parser.add_argument('--skip-probability', type=float, default=0.25,
                        help='Chance of a skip with --skip-mode random')
    parser.add_argument('--seed', type=int,
                        help='Seed for shuffling and random skips')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable verbose logging')
    parser.add_argument('--quiet', action='store_true',
                        help='Only print the final scoreboard')
    return parser


def run_cli_game(config: GameConfig, skip_decider: SkipDecider,
                 rng: RandomSource = None, quiet: bool = False) -> List[int]:
    """Play one game with terminal narration and return the final scores."""
    game_logger = GameLogger()

    game = HighCardGame.from_config(config, skip_decider, game_logger, rng)
    if not quiet:
        game.add_listener(display_event)
        display_prepped(config.total_cards)

    game_logger.log_game_start(config.num_players, config.total_cards,
                               config.is_skip_allowed)
    final_scores = game.play()
    display_final_results(final_scores)
    return final_scores


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # Setup logging
    if args.verbose:
        setup_logging(level=logging.DEBUG)
    else:
        setup_logging(level=logging.WARNING)

    try:
        num_decks = args.decks if args.decks is not None else read_deck_count()
        validate_deck_count(num_decks)
        num_players = args.players if args.players is not None else read_player_count()
        config = GameConfig(num_decks, num_players, args.allow_skip, args.seed).validate()
        rng = make_rng(config.seed)
        skip_decider = create_skip_decider(args.skip_mode, args.skip_probability, rng)
    except (HighCardError, ValueError) as e:
        # Setup errors are final, no retry
        logger.error(f"Invalid game setup: {e}")
        print(e)
        return EXIT_INVALID_SETUP
    except KeyboardInterrupt:
        print("\nSetup interrupted by user")
        return EXIT_INTERRUPTED

    try:
        run_cli_game(config, skip_decider, rng, args.quiet)
    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        return EXIT_INTERRUPTED
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
