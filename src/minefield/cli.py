"""
Terminal front end.

Usage:
    python main.py play [--size N] [--mines M] [--seed S]
"""
import argparse
import logging
import random
from typing import List, Optional, Tuple

from .board import BoardConfig, InvalidConfiguration, Outcome
from .session import Game


HELP_TEXT = "Commands: 'r c' reveals, 'f r c' toggles a flag, 'n' restarts, 'q' quits."


def parse_move(text: str) -> Optional[Tuple[str, int, int]]:
    """
    Parse a line of player input.

    Returns:
        ("reveal" | "flag", row, col), or None if the line is not a move.
    """
    parts = text.replace(",", " ").split()
    action = "reveal"
    if parts and parts[0].lower() == "f":
        action = "flag"
        parts = parts[1:]
    if len(parts) != 2:
        return None
    try:
        return action, int(parts[0]), int(parts[1])
    except ValueError:
        return None


def print_game(game: Game) -> None:
    print(f"\nTime: {game.elapsed_text}\n")
    print(game.render())


def play(game: Game) -> Outcome:
    """
    Run the input loop until the game ends or the player quits.

    Returns:
        The outcome when the loop exits.
    """
    print(f"Minefield {game.config.size}x{game.config.size} "
          f"with {game.config.num_mines} mines.")
    print(HELP_TEXT)
    print_game(game)

    while True:
        try:
            line = input("\nMove: ").strip().lower()
        except EOFError:
            print("\nQuit.")
            return game.outcome
        if line in {"q", "quit", "exit"}:
            print("Quit.")
            return game.outcome
        if line in {"n", "new"}:
            game.restart()
            print_game(game)
            continue

        move = parse_move(line)
        if move is None:
            print(f"Invalid input. {HELP_TEXT}")
            continue

        action, row, col = move
        if action == "flag":
            game.toggle_flag(row, col)
        else:
            game.open_cell(row, col)
        print_game(game)

        if game.outcome is Outcome.WIN:
            print(f"\nCongratulations! You won in {game.elapsed_text}!")
            return game.outcome
        if game.outcome is Outcome.LOSS:
            print("\nGame Over! Try again")
            return game.outcome


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Minefield - a grid mine-clearing puzzle"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument("--size", type=int, default=10, help="Board size (NxN)")
    play_parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    play_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.command != "play":
        parser.print_help()
        return

    try:
        config = BoardConfig(args.size, args.mines)
    except InvalidConfiguration as exc:
        parser.error(str(exc))
    rng = random.Random(args.seed) if args.seed is not None else None
    play(Game(config, rng=rng))
