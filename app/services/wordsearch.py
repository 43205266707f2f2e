from __future__ import annotations

from datetime import date

import structlog

from app.api.schemas.common import Coordinate
from app.api.schemas.puzzles import DailyWordSearchPuzzle, WordSearchPuzzle, WordValidationResult
from app.api.schemas.requests import ValidateWordRequest
from app.game.generator import generate_puzzle
from app.game.selection import select_daily_puzzle, select_puzzle
from app.game.validation import validate_against_descriptor, validate_submission

logger = structlog.get_logger(__name__)


def build_word_search(puzzle_index: int, is_premium: bool) -> WordSearchPuzzle:
    descriptor = select_puzzle(puzzle_index, is_premium)
    puzzle = generate_puzzle(descriptor)

    logger.info(
        "wordsearch_generated",
        puzzle_index=puzzle_index,
        is_premium=is_premium,
        size=descriptor.size,
        placed_count=len(puzzle.placements),
        skipped_words=puzzle.skipped_words,
        word_count=len(descriptor.words),
    )

    return WordSearchPuzzle(
        grid=puzzle.grid,
        words=list(descriptor.words),
        size=descriptor.size,
        puzzle_index=puzzle_index,
        puzzle_number=puzzle_index,
        difficulty_level=descriptor.difficulty_level,
        is_premium=is_premium,
    )


def build_daily_word_search(day: date) -> DailyWordSearchPuzzle:
    descriptor = select_daily_puzzle(day)
    puzzle = generate_puzzle(descriptor)

    logger.info(
        "wordsearch_generated",
        puzzle_number=descriptor.puzzle_index,
        daily=True,
        size=descriptor.size,
        placed_count=len(puzzle.placements),
        skipped_words=puzzle.skipped_words,
        word_count=len(descriptor.words),
    )

    return DailyWordSearchPuzzle(
        grid=puzzle.grid,
        words=list(descriptor.words),
        size=descriptor.size,
        puzzle_number=descriptor.puzzle_index,
        date=day.isoformat(),
    )


def check_word(payload: ValidateWordRequest, word: str, coordinates: list[Coordinate]) -> WordValidationResult:
    outcome = validate_submission(
        word,
        coordinates,
        puzzle_index=payload.puzzle_index,
        is_premium=payload.is_premium,
        known_words=payload.words,
        known_grid=payload.grid,
    )

    logger.info(
        "wordsearch_validated",
        puzzle_index=payload.puzzle_index,
        is_premium=payload.is_premium,
        word=outcome.word,
        valid=outcome.valid,
    )
    return WordValidationResult(valid=outcome.valid, word=outcome.word)


def check_daily_word(day: date, word: str, coordinates: list[Coordinate]) -> WordValidationResult:
    descriptor = select_daily_puzzle(day)
    outcome = validate_against_descriptor(word, coordinates, descriptor)

    logger.info(
        "wordsearch_validated",
        puzzle_number=descriptor.puzzle_index,
        daily=True,
        word=outcome.word,
        valid=outcome.valid,
    )
    return WordValidationResult(valid=outcome.valid, word=outcome.word)


__all__ = ["build_daily_word_search", "build_word_search", "check_daily_word", "check_word"]
