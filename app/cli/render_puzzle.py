from __future__ import annotations

import argparse
import json
from datetime import date

import structlog

from app.core.logging import configure_logging
from app.game.generator import GeneratedPuzzle, generate_puzzle
from app.game.selection import PuzzleDescriptor, select_daily_puzzle, select_puzzle
from app.services.daily import utc_today

logger = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a word search puzzle and print it")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--index", type=_non_negative_int, default=0, help="Puzzle index")
    source.add_argument(
        "--daily",
        type=date.fromisoformat,
        nargs="?",
        const=utc_today(),
        default=None,
        help="Render the daily puzzle for an ISO date (default: today)",
    )
    parser.add_argument("--premium", action="store_true", help="Use the randomized premium tier")
    parser.add_argument("--show-placements", action="store_true", help="Also print where each word was placed")
    parser.add_argument("--format", choices=["text", "json"], default="text", help="Output format")
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


def render_text(descriptor: PuzzleDescriptor, puzzle: GeneratedPuzzle, show_placements: bool) -> str:
    lines = [
        f"puzzle {descriptor.puzzle_index} size {descriptor.size} difficulty {descriptor.difficulty_level}",
        "",
    ]
    lines.extend(" ".join(row) for row in puzzle.grid)
    lines.append("")
    lines.append("words: " + ", ".join(descriptor.words))

    if show_placements:
        for word in descriptor.words:
            coords = puzzle.placements.get(word)
            if coords is None:
                lines.append(f"  {word}: not placed")
                continue
            lines.append(f"  {word}: " + " ".join(f"{row},{col}" for row, col in coords))

    return "\n".join(lines)


def render_json(descriptor: PuzzleDescriptor, puzzle: GeneratedPuzzle, show_placements: bool) -> str:
    payload: dict[str, object] = {
        "grid": puzzle.grid,
        "words": list(descriptor.words),
        "size": descriptor.size,
        "puzzleIndex": descriptor.puzzle_index,
        "difficultyLevel": descriptor.difficulty_level,
        "isPremium": descriptor.is_premium,
    }
    if show_placements:
        payload["placements"] = {word: [list(coord) for coord in coords] for word, coords in puzzle.placements.items()}
    return json.dumps(payload)


def run(args: argparse.Namespace) -> int:
    configure_logging(args.log_level)

    if args.daily is not None:
        descriptor = select_daily_puzzle(args.daily)
    else:
        descriptor = select_puzzle(args.index, args.premium)

    puzzle = generate_puzzle(descriptor)
    logger.info(
        "puzzle_rendered",
        puzzle_index=descriptor.puzzle_index,
        seed=descriptor.seed,
        placed_count=len(puzzle.placements),
    )

    renderer = render_json if args.format == "json" else render_text
    print(renderer(descriptor, puzzle, args.show_placements))
    return 0


def main() -> int:
    parser = build_parser()
    args = parser.parse_args()
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())
