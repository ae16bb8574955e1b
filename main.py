#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py play [--rows R] [--columns C] [--mines M] [--seed S]
    python main.py demo [--agent {random,logic}] [--games N] [--delay SECONDS]
"""
import argparse
import logging
import os
import time
from typing import Optional

from src.minefield.config import FieldConfig
from src.minefield.environment import MinefieldEnv, observe, render_text
from src.minefield.errors import InvalidConfiguration, OutOfRange
from src.minefield.field import Minefield
from src.agents import RandomAgent, LogicAgent

HELP = "Commands: r ROW COL (reveal), m ROW COL (mark), n (new game), q (quit)"


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def print_field(field: Minefield) -> None:
    """Print the grid with column/row headers and a status line."""
    print("   " + " ".join(str(column % 10) for column in range(field.columns)))
    for row, line in enumerate(render_text(observe(field)).split("\n")):
        print(f"{row:>2} {line}")
    status = field.status()
    print(f"\nMines left: {status.remaining_mines} | {status.phase.name}")


def play(args: argparse.Namespace) -> None:
    """Play interactively in the terminal."""
    field = Minefield.new(args.rows, args.columns, args.mines, rng=args.seed)
    print(HELP)

    while True:
        print()
        print_field(field)
        try:
            line = input("> ").strip().lower()
        except EOFError:
            break

        parts = line.split()
        if not parts:
            continue
        command = parts[0]

        if command == "q":
            break
        if command == "n":
            field.reset()
            continue
        if command not in ("r", "m") or len(parts) != 3:
            print(HELP)
            continue

        try:
            row, column = int(parts[1]), int(parts[2])
            if command == "r":
                outcome = field.reveal(row, column)
                if outcome.is_ignored:
                    print("Nothing to reveal there.")
                elif outcome.is_lost:
                    print(f"BOOM! Mine at {outcome.mine}.")
                elif outcome.won:
                    print("*** You cleared the field! ***")
            elif not field.cycle_mark(row, column):
                print("Cannot mark that cell.")
        except ValueError:
            print(HELP)
        except OutOfRange as exc:
            print(exc)


def demo(args: argparse.Namespace) -> None:
    """Watch an agent play with visualization."""
    config = FieldConfig(args.rows, args.columns, args.mines)
    env = MinefieldEnv(config=config, render_mode="ansi")
    if args.agent == "random":
        agent = RandomAgent(args.rows, args.columns, seed=args.seed)
    else:
        agent = LogicAgent(args.rows, args.columns, seed=args.seed)

    density = 100 * args.mines / config.total_cells
    print(f"Field: {args.rows}x{args.columns} with {args.mines} mines ({density:.1f}% density)")

    wins = 0
    for game in range(args.games):
        seed: Optional[int] = None if args.seed is None else args.seed + game
        obs, _ = env.reset(seed=seed)
        agent.reset()
        done = False
        step = 0
        info = {}

        while not done:
            action = agent.select_action(obs, env.get_action_mask())
            row, column = agent.action_to_position(action)

            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            if args.delay > 0:
                clear_screen()
            print(f"=== Game {game + 1}/{args.games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: ({row}, {column})\n")
            print(env.render())

            if args.delay > 0:
                time.sleep(args.delay)

        if info.get("phase") == "WON":
            wins += 1
            print("\n*** WIN! ***")
        else:
            print("\n*** LOST (hit mine) ***")

    print(f"\n=== Final: {wins}/{args.games} wins ({100 * wins / args.games:.0f}%) ===")


def add_field_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--rows", type=int, default=9, help="Number of rows")
    parser.add_argument("--columns", type=int, default=9, help="Number of columns")
    parser.add_argument("--mines", type=int, default=10, help="Number of mines")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for mine layouts")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minefield - play in the terminal or watch an agent play"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Show debug logging from the game core"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    add_field_arguments(play_parser)

    # Demo command
    demo_parser = subparsers.add_parser("demo", help="Watch an agent play")
    add_field_arguments(demo_parser)
    demo_parser.add_argument(
        "--agent", choices=["random", "logic"], default="logic", help="Agent to watch"
    )
    demo_parser.add_argument("--games", type=int, default=5, help="Number of games")
    demo_parser.add_argument(
        "--delay", type=float, default=0.3, help="Delay between moves in seconds"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='[%(asctime)s] %(name)s: %(message)s',
        datefmt='%H:%M:%S',
    )

    try:
        if args.command == "play":
            play(args)
        elif args.command == "demo":
            demo(args)
        else:
            parser.print_help()
    except InvalidConfiguration as exc:
        parser.error(str(exc))


if __name__ == "__main__":
    main()
