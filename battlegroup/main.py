"""Command line entry point: simulate battles and report shots per win."""

from __future__ import annotations

import argparse
import logging

from battlegroup.game.ai.engine import STRATEGIES
from battlegroup.game.app.battle import run_series
from battlegroup.game.infra.config import TargetingSettings, load_default_env_files
from battlegroup.game.infra.logging import setup_logging, shutdown_logging

logger = logging.getLogger(__name__)


def build_parser(settings: TargetingSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="battlegroup-sim",
        description="Play simulated battles against random fleets.",
    )
    parser.add_argument("--games", type=int, default=100, help="Number of battles to play.")
    parser.add_argument(
        "--strategy",
        choices=sorted(STRATEGIES),
        default=settings.strategy if settings.strategy in STRATEGIES else "probability",
    )
    parser.add_argument("--seed", type=int, default=settings.seed)
    parser.add_argument("--max-turns", type=int, default=settings.max_turns)
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run a battle series."""
    load_default_env_files()
    setup_logging()
    args = build_parser(TargetingSettings.from_env()).parse_args(argv)
    try:
        summary = run_series(
            args.games,
            strategy=args.strategy,
            seed=args.seed,
            max_turns=args.max_turns,
        )
    except ValueError as exc:
        logger.error("series_failed error=%s", exc)
        return 2
    finally:
        shutdown_logging()

    print(
        f"{args.strategy}: won {summary.wins}/{summary.games}, "
        f"{summary.average_shots:.1f} shots per win (best {summary.best}, worst {summary.worst})"
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
