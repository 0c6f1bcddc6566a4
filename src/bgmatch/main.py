"""Command-line entrypoint for bgmatch.

Subcommands:
    rules      Build match rules from defaults, a config file and flags
    board      Show the opening game state
    roll       Roll the dice
    fairness   Roll many times and report dice statistics
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from bgmatch import __version__
from bgmatch.config import load_rules, save_rules
from bgmatch.core.dice import dice_fairness, dice_to_string, roll
from bgmatch.core.game import Game, board_to_string
from bgmatch.core.rules import Rules
from bgmatch.exceptions import BgmatchError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog="bgmatch",
        description="Backgammon match rules, opening position and dice",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"bgmatch {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    sub = parser.add_subparsers(dest="command")

    rules = sub.add_parser("rules", help="Show match rules")
    rules.add_argument("--config", help="JSON file to start from instead of the defaults")
    rules.add_argument("--points", type=int, help="Points needed to win the match")
    rules.add_argument("--beaver", action="store_true", help="Allow beavers")
    rules.add_argument("--raccoon", action="store_true", help="Allow raccoons")
    rules.add_argument(
        "--murphy", type=int, metavar="LIMIT",
        help="Enable automatic doubles, at most LIMIT times (0 = always)",
    )
    rules.add_argument("--jacoby", action="store_true", help="Enable the Jacoby rule")
    rules.add_argument("--crawford", action="store_true", help="Enable the Crawford rule")
    rules.add_argument("--holland", action="store_true", help="Enable the Holland rule")
    rules.add_argument("--strict", action="store_true", help="Reject inconsistent rules")
    rules.add_argument("--save", help="Write the resulting rules to this JSON file")

    sub.add_parser("board", help="Show the opening game state")

    roll_cmd = sub.add_parser("roll", help="Roll the dice")
    roll_cmd.add_argument("--count", type=int, default=1, help="Number of rolls")

    fair = sub.add_parser("fairness", help="Check the dice for fairness")
    fair.add_argument("--trials", type=int, default=100_000, help="Number of rolls")

    return parser


def build_rules(args: argparse.Namespace) -> Rules:
    """Apply command-line flags on top of the default or configured rules."""
    rules = load_rules(args.config, validate=False) if args.config else Rules.default()

    if args.points is not None:
        rules = rules.with_points(args.points)
    if args.beaver:
        rules = rules.with_beaver()
    if args.raccoon:
        rules = rules.with_raccoon()
    if args.murphy is not None:
        rules = rules.with_murphy(args.murphy)
    if args.jacoby:
        rules = rules.with_jacoby()
    if args.crawford:
        rules = rules.with_crawford()
    if args.holland:
        rules = rules.with_holland()

    if args.strict:
        rules.validate()
    else:
        for problem in rules.problems():
            logger.warning("Inconsistent rules: %s", problem)
    return rules


def _cmd_rules(args: argparse.Namespace) -> None:
    rules = build_rules(args)
    print(rules)
    if args.save:
        path = save_rules(rules, args.save)
        print(f"Rules saved to: {path}")


def _cmd_board(args: argparse.Namespace) -> None:
    print(board_to_string(Game.default()))


def _cmd_roll(args: argparse.Namespace) -> None:
    if args.count < 1:
        raise ValueError(f"count must be positive, got {args.count}")
    for _ in range(args.count):
        dice = roll()
        print(f"{dice[0]} {dice[1]}  ({dice_to_string(dice)})")


def _cmd_fairness(args: argparse.Namespace) -> None:
    stats = dice_fairness(args.trials)
    print(stats.summary())
    print("Fair" if stats.is_fair() else "NOT fair")


_COMMANDS = {
    "rules": _cmd_rules,
    "board": _cmd_board,
    "roll": _cmd_roll,
    "fairness": _cmd_fairness,
}


def main(argv: Optional[List[str]] = None) -> int:
    """CLI entrypoint used by the `bgmatch` console script."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    try:
        _COMMANDS[args.command](args)
    except (BgmatchError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
