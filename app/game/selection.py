from __future__ import annotations

import random
import time
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date

from app.game.catalog import DAILY_GRID_SIZE, MAX_GRID_SIZE, MIN_GRID_SIZE, WORD_LISTS

_EPOCH = date(1970, 1, 1)


@dataclass(frozen=True)
class PuzzleDescriptor:
    words: tuple[str, ...]
    size: int
    seed: int
    difficulty_level: int
    puzzle_index: int
    is_premium: bool = False


def difficulty_for_index(puzzle_index: int) -> int:
    return puzzle_index // 2


def grid_size_for_difficulty(difficulty_level: int) -> int:
    return min(MIN_GRID_SIZE + difficulty_level * 2, MAX_GRID_SIZE)


def words_for_index(puzzle_index: int) -> tuple[str, ...]:
    return WORD_LISTS[puzzle_index % len(WORD_LISTS)]


def select_puzzle(
    puzzle_index: int,
    is_premium: bool = False,
    *,
    random_source: Callable[[], float] = random.random,
    clock: Callable[[], float] = time.time,
) -> PuzzleDescriptor:
    """Map a puzzle index and tier to the words, grid size and seed to generate from.

    Free-tier descriptors are a pure function of ``puzzle_index``. Premium
    descriptors draw their word group from ``random_source`` and seed from the
    wall clock, so two calls are not expected to agree.
    """
    difficulty_level = difficulty_for_index(puzzle_index)
    size = grid_size_for_difficulty(difficulty_level)

    if is_premium:
        words = WORD_LISTS[int(random_source() * len(WORD_LISTS))]
        seed = int(clock() * 1000)
    else:
        words = words_for_index(puzzle_index)
        seed = puzzle_index

    return PuzzleDescriptor(
        words=words,
        size=size,
        seed=seed,
        difficulty_level=difficulty_level,
        puzzle_index=puzzle_index,
        is_premium=is_premium,
    )


def days_since_epoch(day: date) -> int:
    return (day - _EPOCH).days


def select_daily_puzzle(day: date) -> PuzzleDescriptor:
    puzzle_number = days_since_epoch(day)
    return PuzzleDescriptor(
        words=words_for_index(puzzle_number),
        size=DAILY_GRID_SIZE,
        seed=puzzle_number,
        difficulty_level=0,
        puzzle_index=puzzle_number,
    )


__all__ = [
    "PuzzleDescriptor",
    "days_since_epoch",
    "difficulty_for_index",
    "grid_size_for_difficulty",
    "select_daily_puzzle",
    "select_puzzle",
    "words_for_index",
]
