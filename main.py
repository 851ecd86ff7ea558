#!/usr/bin/env python3
"""
Minesweeper - text-mode front end.

Usage:
    python main.py play [--save PATH] [--difficulty {easy,medium,hard}]
    python main.py evaluate [--games N] [--difficulty ...] [--seed N]
"""
import argparse
import logging
from pathlib import Path
from typing import List, Optional

from minesweeper import (
    DEFAULT_SAVE_PATH,
    CellDisplay,
    Difficulty,
    DisplayKind,
    InvalidConfiguration,
    Session,
    load_session,
    save_session,
)
from agents import Evaluator, RandomAgent, save_results


HELP = """Commands:
  c X Y        click cell at column X, row Y
  f X Y        toggle flag at column X, row Y
  r            restart with the same board size
  easy | medium | hard
               switch difficulty (starts a new game)
  new W H M    custom game, W x H with M mines
  reset-score  set the score back to 0
  q            save and quit"""


def render_board(grid: List[List[CellDisplay]]) -> str:
    """Draw display instructions as text, with column and row numbers."""
    symbols = {
        DisplayKind.HIDDEN: "?",
        DisplayKind.FLAGGED: "F",
        DisplayKind.MINE: "X",
    }
    width = len(grid[0]) if grid else 0
    lines = ["    " + "".join(f"{x:>3}" for x in range(width))]
    for y, row in enumerate(grid):
        cells = (
            symbols.get(cell.kind, str(cell.value)) for cell in row
        )
        lines.append(f"{y:>3} " + "".join(f"{c:>3}" for c in cells))
    return "\n".join(lines)


def render_status(session: Session) -> str:
    status = f"Score: {session.score} | Mines left: {session.mines_left}"
    if session.game_won:
        status += " | You won!"
    elif session.game_over:
        status += " | Boom. Game over."
    return status


def handle_command(session: Session, line: str) -> Optional[str]:
    """
    Apply one line of player input to the session.

    Returns:
        A message for the player, or None when there is nothing to say.
    """
    parts = line.split()
    if not parts:
        return None
    command, args = parts[0].lower(), parts[1:]

    try:
        numbers = [int(a) for a in args]
    except ValueError:
        return f"Expected numbers, got: {' '.join(args)}"

    if command in ("c", "f"):
        if len(numbers) != 2:
            return f"Usage: {command} X Y"
        x, y = numbers
        if not session.game.board.in_bounds(x, y):
            return f"({x}, {y}) is off the board"
        if command == "c":
            session.click(x, y)
        else:
            session.toggle_flag(x, y)
        return None

    if command == "r":
        try:
            session.restart()
        except InvalidConfiguration as e:
            return str(e)
        return None

    if command in ("easy", "medium", "hard"):
        session.select_difficulty(Difficulty.from_name(command))
        return None

    if command == "new":
        if len(numbers) != 3:
            return "Usage: new W H M"
        try:
            session.new_game(*numbers)
        except InvalidConfiguration as e:
            return str(e)
        return None

    if command == "reset-score":
        session.reset_score()
        return None

    return f"Unknown command: {command}\n{HELP}"


def play(args: argparse.Namespace) -> None:
    """Run the interactive game loop, saving the session on exit."""
    save_path = Path(args.save)
    session = load_session(save_path)
    if args.difficulty:
        session.select_difficulty(Difficulty.from_name(args.difficulty))

    print(HELP)
    try:
        while True:
            print()
            print(render_status(session))
            print(render_board(session.display_grid()))
            try:
                line = input("> ").strip()
            except EOFError:
                break
            if line.lower() in ("q", "quit"):
                break
            message = handle_command(session, line)
            if message:
                print(message)
    finally:
        save_session(save_path, session)
        print(f"Session saved to {save_path}")


def evaluate(args: argparse.Namespace) -> None:
    """Play many games with the random agent and print results."""
    config = Difficulty.from_name(args.difficulty).config
    agent = RandomAgent(config.width, config.height, seed=args.seed)
    evaluator = Evaluator(config, num_episodes=args.games, seed=args.seed)

    print(f"Evaluating Random agent over {args.games} {args.difficulty} games...")
    results = evaluator.evaluate(agent)

    print("Results for Random:")
    print(f"  Win rate: {results['win_rate']:.1%}")
    print(f"  Avg reward: {results['avg_reward']:.2f}")
    print(f"  Avg steps: {results['avg_steps']:.1f}")
    print(f"  Avg revealed: {results['avg_revealed']:.1f} cells")

    if args.output:
        save_results(args.output, {"Random": results})
        print(f"Results saved to {args.output}")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument(
        "--save", default=str(DEFAULT_SAVE_PATH), help="Session file"
    )
    play_parser.add_argument(
        "--difficulty",
        choices=["easy", "medium", "hard"],
        help="Start a new game at this difficulty",
    )

    eval_parser = subparsers.add_parser(
        "evaluate", help="Let the random agent play"
    )
    eval_parser.add_argument(
        "--games", type=int, default=100, help="Number of games to play"
    )
    eval_parser.add_argument(
        "--difficulty", choices=["easy", "medium", "hard"], default="easy"
    )
    eval_parser.add_argument("--seed", type=int, default=None)
    eval_parser.add_argument("--output", default=None, help="Results JSON file")

    args = parser.parse_args()
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        play(args)
    elif args.command == "evaluate":
        evaluate(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
