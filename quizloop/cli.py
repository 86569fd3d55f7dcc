"""
Quizloop CLI - Play a quiz in the terminal.

Usage:
    quizloop play <pool_file>        Play games drawn from a question pool
    quizloop validate <pool_file>    Check a question pool file
"""

import argparse
import asyncio
import logging
import sys

from .config import GameConfig
from .engine_core import (
    EffectServices,
    GameEnded,
    GameInProgress,
    answer_action,
    start_game_action,
)
from .questions import InsufficientPoolError, PoolLoadError, load_pool
from .session import GameDriver


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Quizloop - Interactive quiz game",
        prog="quizloop",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a quiz game")
    play_parser.add_argument("pool_file", help="Path to question pool JSON file")
    play_parser.add_argument("--questions", type=int, help="Questions per game")
    play_parser.add_argument("--delay-ms", type=int, help="Pause after each answer")
    play_parser.add_argument("--seed", type=int, help="Seed for question order")

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate a question pool")
    validate_parser.add_argument("pool_file", help="Path to question pool JSON file")

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        cmd_play(args)
    elif args.command == "validate":
        cmd_validate(args)
    else:
        parser.print_help()
        sys.exit(1)


def _load_or_exit(path):
    try:
        return load_pool(path)
    except PoolLoadError as e:
        print(f"Error: {e}")
        sys.exit(1)


def cmd_validate(args):
    """Validate a question pool."""
    items = _load_or_exit(args.pool_file)
    try:
        config = GameConfig.from_env()
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)
    print(f"Pool OK: {len(items)} question items")
    if len(items) < config.num_questions:
        print(f"Warning: fewer than {config.num_questions} items, a game cannot start")
        sys.exit(1)


def cmd_play(args):
    """Play games until the player quits."""
    items = _load_or_exit(args.pool_file)
    try:
        config = GameConfig.from_env(
            num_questions=args.questions,
            advance_delay_ms=args.delay_ms,
            seed=args.seed,
        )
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)

    try:
        asyncio.run(play(items, config))
    except InsufficientPoolError as e:
        print(f"Error: {e}")
        sys.exit(1)
    except (EOFError, KeyboardInterrupt):
        print("\nBye!")


def celebrate():
    print("  *  .  *  Correct!  *  .  *")


async def _prompt(text: str) -> str:
    return (await asyncio.to_thread(input, text)).strip()


async def play(items, config: GameConfig):
    """Terminal game loop on top of GameDriver."""
    services = EffectServices.from_config(config, celebrate=celebrate)
    driver = GameDriver.create(items, config, services=services)

    while True:
        game = driver.state.game_state

        if isinstance(game, GameInProgress):
            number = len(game.answered_questions) + 1
            question = game.current_question
            print(f"\nQuestion {number}/{game.total_questions}: {question.prompt}")
            for option in question.options:
                print(f"  {option.option_id}) {option.label}")

            choice = (await _prompt("Your answer: ")).lower()
            if question.get_option(choice) is None:
                print("Pick one of the listed options.")
                continue

            driver.dispatch(answer_action(choice))
            if not question.is_correct(choice):
                right = question.get_option(question.correct_option)
                print(f"  Wrong. The answer was {right.option_id}) {right.label}")
            await driver.wait_idle()

        elif isinstance(game, GameEnded):
            print(f"\nGame over! {game.correct_count}/{len(game.answered_questions)} correct.")
            again = (await _prompt("Play again? [y/N] ")).lower()
            if again not in ("y", "yes"):
                return
            if not await _start_new_game(driver):
                return

        elif not await _start_new_game(driver):
            return


async def _start_new_game(driver: GameDriver) -> bool:
    previous = driver.state.game_state
    driver.dispatch(start_game_action())
    await driver.wait_idle()
    if driver.state.game_state is previous:
        print("Could not start a new game.")
        return False
    return True


if __name__ == "__main__":
    main()
