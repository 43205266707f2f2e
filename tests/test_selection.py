from __future__ import annotations

from datetime import date

import pytest

from app.game.catalog import DAILY_GRID_SIZE, WORD_LISTS
from app.game.generator import generate_puzzle
from app.game.selection import (
    days_since_epoch,
    difficulty_for_index,
    grid_size_for_difficulty,
    select_daily_puzzle,
    select_puzzle,
)


def test_catalog_has_seven_groups_in_reference_order() -> None:
    assert len(WORD_LISTS) == 7
    assert WORD_LISTS[0] == ("HAPPY", "JOY", "SMILE", "PEACE", "CALM")
    assert WORD_LISTS[6] == ("QUIET", "STILL", "REST", "RELAX", "EASE")


@pytest.mark.parametrize(
    ("puzzle_index", "difficulty", "size"),
    [(0, 0, 10), (1, 0, 10), (2, 1, 12), (4, 2, 14), (6, 3, 16), (7, 3, 16), (40, 20, 16)],
)
def test_difficulty_and_size_follow_index(puzzle_index: int, difficulty: int, size: int) -> None:
    assert difficulty_for_index(puzzle_index) == difficulty
    assert grid_size_for_difficulty(difficulty) == size


def test_free_tier_index_four() -> None:
    descriptor = select_puzzle(4, False)

    assert descriptor.difficulty_level == 2
    assert descriptor.size == 14
    assert descriptor.words == WORD_LISTS[4]
    assert descriptor.seed == 4
    assert descriptor.is_premium is False


def test_free_tier_wraps_large_indexes() -> None:
    descriptor = select_puzzle(7 * 1000 + 3, False)
    assert descriptor.words == WORD_LISTS[3]
    assert descriptor.size == 16


def test_free_tier_descriptor_and_puzzle_are_reproducible() -> None:
    assert select_puzzle(9, False) == select_puzzle(9, False)

    first = generate_puzzle(select_puzzle(9, False))
    second = generate_puzzle(select_puzzle(9, False))
    assert first == second


def test_premium_uses_random_group_and_clock_seed() -> None:
    descriptor = select_puzzle(
        2,
        True,
        random_source=lambda: 0.99,
        clock=lambda: 1_700_000_000.5,
    )

    assert descriptor.words == WORD_LISTS[6]
    assert descriptor.seed == 1_700_000_000_500
    assert descriptor.size == 12
    assert descriptor.is_premium is True


def test_premium_ignores_index_for_group_choice() -> None:
    descriptor = select_puzzle(3, True, random_source=lambda: 0.0, clock=lambda: 1.0)
    assert descriptor.words == WORD_LISTS[0]


def test_daily_puzzle_uses_days_since_epoch() -> None:
    day = date(2024, 1, 2)
    descriptor = select_daily_puzzle(day)

    assert days_since_epoch(day) == 19724
    assert descriptor.puzzle_index == 19724
    assert descriptor.seed == 19724
    assert descriptor.words == WORD_LISTS[19724 % 7]
    assert descriptor.size == DAILY_GRID_SIZE
