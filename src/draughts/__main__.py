"""CLI entry point: python -m draughts [--config draughts.yaml]"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

import draughts
from draughts.config import AppConfig, ConfigError, apply_env_overrides, load_config
from draughts.core.notation import format_move, format_square
from draughts.core.seed import SeedManager
from draughts.game.board import BLACK, WHITE, Move, render_board
from draughts.game.engine import GameState, MoveRecord
from draughts.players import HumanPlayer, RandomPlayer

_BANNER = f"""\
{"=" * 60}
DRAUGHTS {draughts.__version__} — 10x10, you against the computer
{"=" * 60}
You play white ({{white_man}}, kings {{white_king}}) and move up the board.
The computer plays black ({{black_man}}, kings {{black_king}}).
Enter squares like d4. Captures are mandatory and chains must be
completed. A man reaching the far row is crowned king.
"""


def _print_banner(config: AppConfig) -> None:
    print(_BANNER.format(**config.display.glyphs))


def _announce_computer_turn(state: GameState, record: MoveRecord) -> None:
    """Print every step black played on the turn that just ended."""
    if record.player != BLACK:
        return
    steps = [
        r for r in state.history
        if r.turn_number == record.turn_number and r.player == BLACK
    ]
    played = ", ".join(format_move(Move(r.fr, r.to)) for r in steps)
    print(f"Computer plays {played}")
    for r in steps:
        if r.captured is not None:
            print(f"  captured your piece on {format_square(r.captured)}")
        if r.promoted:
            print(f"  crowned on {format_square(r.to)}")


def _print_summary(state: GameState, human: HumanPlayer, config: AppConfig) -> None:
    print(render_board(state.board, config.display.glyphs))
    print()
    result = state.result
    if result is None:
        return
    who = "You win" if result.winner == WHITE else "The computer wins"
    how = "by blocking" if result.reason == "blocked" else "by capturing every piece"
    print("=" * 60)
    print(f"GAME OVER after {state.turn_number} turns: {who} {how}!")
    print("=" * 60)

    report = human.referee.get_report().get(WHITE)
    if report:
        print(f"Rejected inputs: {report['total_violations']}")
        for kind, count in report.items():
            if kind not in ("total_violations", "last_violation") and count:
                print(f"  {kind:20s} {count}")
        print(f"Last rejected: {report['last_violation']}")


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="draughts",
        description="10x10 draughts against a random-move computer opponent",
    )
    parser.add_argument(
        "-c", "--config",
        type=Path,
        default=None,
        help="Path to YAML config file (default: built-in settings)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the computer's moves (default: wall clock)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Logging level (default: WARNING)",
    )
    args = parser.parse_args()

    load_dotenv()

    if args.config and not args.config.exists():
        print(f"Error: config file not found: {args.config}", file=sys.stderr)
        sys.exit(1)

    try:
        config = apply_env_overrides(load_config(args.config))
    except ConfigError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)
    if args.seed is not None:
        config.game.seed = args.seed
    if args.log_level:
        config.logging.level = args.log_level

    logging.basicConfig(
        level=config.logging.level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    seeds = SeedManager(config.game.seed)
    state = GameState(rng=seeds.get_rng(seeds.get_game_seed()))
    logging.getLogger(__name__).info("Base seed %d", seeds.base_seed)

    human = HumanPlayer(glyphs=config.display.glyphs)
    players = {WHITE: human, BLACK: RandomPlayer()}

    _print_banner(config)
    try:
        state.run(players, on_turn=_announce_computer_turn)
    except (KeyboardInterrupt, EOFError):
        print("\nGame aborted.")
        sys.exit(1)

    _print_summary(state, human, config)


if __name__ == "__main__":
    main()
