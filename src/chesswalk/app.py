"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import date

from chesswalk.core.errors import MalformedFENError
from chesswalk.core.notation import build_pgn, pgn_result_token
from chesswalk.game import GameConfig, RandomGame, generate_random_game

_LOGGER = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    defaults = GameConfig()
    parser = argparse.ArgumentParser(
        prog="chesswalk",
        description="Generate a random legal chess game in SAN.",
    )
    parser.add_argument(
        "-n",
        "--moves",
        type=int,
        default=defaults.move_pairs,
        help="Number of move pairs (white + black) to play",
    )
    parser.add_argument(
        "--max-moves",
        type=int,
        default=defaults.max_move_pairs,
        help="Upper bound applied to --moves",
    )
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--fen", default=None, help="Starting position as FEN")
    parser.add_argument("--pgn", action="store_true", help="Print a PGN document")
    parser.add_argument(
        "-v", "--verbose", action="count", default=0, help="Increase log verbosity"
    )
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _render(game: RandomGame, as_pgn: bool) -> str:
    if as_pgn:
        headers = {
            "Event": "Random game",
            "Date": date.today().strftime("%Y.%m.%d"),
            "White": "chesswalk",
            "Black": "chesswalk",
            "Result": pgn_result_token(game.result),
        }
        if game.start_fen != GameConfig().start_fen:
            headers["SetUp"] = "1"
            headers["FEN"] = game.start_fen
        return build_pgn(
            headers,
            game.moves,
            headers["Result"],
            game.start_fullmove,
            game.start_side_to_move,
        )

    lines = [game.move_text, game.final_fen]
    if game.terminated is not None:
        lines.append(str(game.terminated))
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    """Run the CLI; returns the process exit status."""
    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    try:
        config = GameConfig(max_move_pairs=args.max_moves).with_overrides(
            move_pairs=args.moves, seed=args.seed, start_fen=args.fen
        )
    except ValueError as exc:
        print(f"chesswalk: {exc}", file=sys.stderr)
        return 2

    try:
        game = generate_random_game(config=config)
    except MalformedFENError as exc:
        _LOGGER.debug("Rejected FEN %r", exc.fen)
        print(f"chesswalk: {exc}", file=sys.stderr)
        return 1

    print(_render(game, args.pgn))
    return 0


if __name__ == "__main__":
    sys.exit(main())
