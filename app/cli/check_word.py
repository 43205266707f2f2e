from __future__ import annotations

import argparse

import structlog

from app.core.logging import configure_logging
from app.game.validation import validate_submission

logger = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Check a found word against a free-tier puzzle")
    parser.add_argument("word", help="Word that was found")
    parser.add_argument(
        "--coords",
        nargs="+",
        type=_coordinate,
        required=True,
        metavar="ROW,COL",
        help="Cells of the selected path, in drag order",
    )
    parser.add_argument("--index", type=_non_negative_int, default=0, help="Puzzle index")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Log level",
    )
    return parser


def _non_negative_int(value: str) -> int:
    parsed = int(value)
    if parsed < 0:
        raise argparse.ArgumentTypeError("index must be a non-negative integer")
    return parsed


def _coordinate(value: str) -> tuple[int, int]:
    try:
        row_text, col_text = value.split(",")
        return int(row_text), int(col_text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected ROW,COL but got {value!r}") from None


def run(args: argparse.Namespace) -> int:
    configure_logging(args.log_level)

    outcome = validate_submission(args.word, args.coords, puzzle_index=args.index)
    logger.info("word_checked", puzzle_index=args.index, word=outcome.word, valid=outcome.valid)

    print(f"{outcome.word}: {'valid' if outcome.valid else 'invalid'}")
    return 0 if outcome.valid else 1


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())
