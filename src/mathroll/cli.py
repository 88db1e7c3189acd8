"""
mathroll.cli — Command-line interface
=====================================

Runs a demo match between DemoPlayer strategies and prints the result.

Usage:
    mathroll --players 3
    mathroll --policy multi --seed 42
    mathroll --config match.json

Settings can also come from environment variables or a .env file
(MATHROLL_CLAIM_POLICY, MATHROLL_SEED, ...); CLI flags win.
"""

import argparse
import json
import random
import sys
from typing import Any, Dict, Optional, Sequence

from ._engine.claims import ClaimPolicy
from ._shared.logging_config import setup_logging
from .config import load_config
from .demo_player import DemoPlayer
from .errors import MathRollError
from .runner import MatchRunner


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="MathRoll - run a demo match of the dice-and-equations game",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  mathroll --players 3
  mathroll --policy stealable --seed 7
  MATHROLL_CLAIM_POLICY=multi mathroll --config match.json
        """,
    )

    parser.add_argument(
        "--players",
        type=int,
        default=2,
        help="Number of demo players (default: 2)",
    )

    parser.add_argument(
        "--policy",
        choices=[p.value for p in ClaimPolicy],
        help="Claim policy for the match",
    )

    parser.add_argument(
        "--seed",
        type=int,
        help="Seed for board generation and dice",
    )

    parser.add_argument(
        "--board-size",
        type=int,
        help="Number of equations on the board",
    )

    parser.add_argument(
        "--miss-rate",
        type=float,
        default=0.1,
        help="Chance a demo player claims a wrong equation (default: 0.1)",
    )

    parser.add_argument(
        "--config",
        type=str,
        help="Path to JSON config file",
    )

    parser.add_argument(
        "--log-file",
        type=str,
        help="Path to the JSON log file",
    )

    return parser.parse_args(argv)


def _overrides(args: argparse.Namespace) -> Dict[str, Any]:
    return {
        "claim_policy": args.policy,
        "seed": args.seed,
        "board_size": args.board_size,
        "log_file": args.log_file,
    }


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main CLI entry point."""
    args = parse_args(argv)

    try:
        config = load_config(args.config, overrides=_overrides(args))
    except MathRollError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    setup_logging(log_file_path=config.log_file, level=config.log_level)

    rng = random.Random(config.seed)
    strategies = {
        f"player{n}": DemoPlayer(miss_rate=args.miss_rate, rng=random.Random(rng.random()))
        for n in range(1, args.players + 1)
    }

    try:
        runner = MatchRunner(config, strategies, rng=rng)
    except MathRollError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    result = runner.run()
    if result is None:
        print("Match did not finish within max_turns", file=sys.stderr)
        return 2

    print(json.dumps(result.to_dict(), indent=2))
    return 0
