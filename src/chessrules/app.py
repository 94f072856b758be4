"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

from chessrules.config import RulesConfig
from chessrules.console.session import ConsoleSession
from chessrules.core.rules import DEFAULT_MOVE_LIMIT
from chessrules.game.controller import GameController

_LOGGER = logging.getLogger(__name__)

BANNER = (
    "*** Welcome to Chess Game! ***\n"
    "Piece codes: WP1-8/BP1-8 (Pawns), WN1-2/BN1-2 (Knights), "
    "WB1-2/BB1-2 (Bishops), WR1-2/BR1-2 (Rooks), WQ/BQ (Queen), WKG/BKG (King)\n"
    "Type 'quit' as piece code to exit"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chessrules", description="Two-player chess in the terminal."
    )
    parser.add_argument(
        "--move-limit",
        type=int,
        default=DEFAULT_MOVE_LIMIT,
        help="half-moves without a capture before the game is drawn "
        f"(default: {DEFAULT_MOVE_LIMIT})",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        help="logging verbosity (default: WARNING)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Launch an interactive two-player game."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = RulesConfig(move_limit=args.move_limit)
    except ValueError as exc:
        _LOGGER.error("Invalid configuration: %s", exc)
        return 2

    print(BANNER)
    ConsoleSession(GameController(config)).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
