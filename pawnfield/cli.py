"""
Pawnfield CLI - Command-line interface for the engine.

Usage:
    pawnfield simulate [--red POLICY] [--blue POLICY]   Bot vs bot game
    pawnfield validate <deck_file>                      Check a deck file
"""

import argparse
import logging
import sys

from .bots import POLICIES, create_policy
from .decks import example_big_deck, load_deck
from .engine_core.card import Player
from .engine_core.errors import InvalidConfigurationError
from .engine_core.state import GameConfig, GameState
from .render import render_board
from .session import GameLoop


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Pawnfield - Territory Control Card Game Engine",
        prog="pawnfield",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Simulate command
    simulate_parser = subparsers.add_parser("simulate", help="Play a bot vs bot game")
    simulate_parser.add_argument("--red", choices=sorted(POLICIES), default="max-row-score")
    simulate_parser.add_argument("--blue", choices=sorted(POLICIES), default="fill-first")
    simulate_parser.add_argument("--width", type=int, default=5)
    simulate_parser.add_argument("--height", type=int, default=3)
    simulate_parser.add_argument("--hand-size", type=int, default=5)
    simulate_parser.add_argument("--deck", help="Deck file used by both players")
    simulate_parser.add_argument("--shuffle", action="store_true", help="Shuffle decks first")
    simulate_parser.add_argument("--seed", type=int, help="Seed for shuffling and random bots")

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate a deck file")
    validate_parser.add_argument("deck_file", help="Path to deck file")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if args.command == "simulate":
        cmd_simulate(args)
    elif args.command == "validate":
        cmd_validate(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_simulate(args):
    """Play a full bot vs bot game and print the result."""
    try:
        deck = load_deck(args.deck) if args.deck else example_big_deck()
        config = GameConfig(
            width=args.width,
            height=args.height,
            hand_size=args.hand_size,
            shuffle=args.shuffle,
            random_seed=args.seed,
        )
        state = GameState(config, deck, list(deck))
    except FileNotFoundError:
        print(f"Error: File not found: {args.deck}")
        sys.exit(1)
    except InvalidConfigurationError as e:
        print(f"Error: {e}")
        sys.exit(1)

    loop = GameLoop(state, {
        Player.RED: create_policy(args.red, seed=args.seed),
        Player.BLUE: create_policy(args.blue, seed=args.seed),
    })
    result = loop.run_to_completion()

    for line in result.automa_actions:
        print(line)
    print()
    print(render_board(state.board_snapshot()))
    print()

    sheet = state.score_sheet()
    print(f"Row wins: red {sheet.row_wins[Player.RED]}, blue {sheet.row_wins[Player.BLUE]}")
    print(f"Winner: {sheet.winner.value if sheet.winner else 'draw'}")


def cmd_validate(args):
    """Validate a deck file."""
    print(f"Validating: {args.deck_file}")
    try:
        cards = load_deck(args.deck_file)
    except FileNotFoundError:
        print(f"Error: File not found: {args.deck_file}")
        sys.exit(1)
    except InvalidConfigurationError as e:
        print("\nErrors:")
        for error in e.errors:
            print(f"  - {error}")
        sys.exit(1)

    print(f"Cards: {len(cards)}")
    for card in cards:
        print(f"  - {card.name} (cost {int(card.cost)}, {card.points} pt)")


if __name__ == "__main__":
    main()
