from __future__ import annotations

from datetime import date

from app.game.catalog import WORD_LISTS
from app.game.generator import generate_placements
from app.game.selection import PuzzleDescriptor, select_daily_puzzle, select_puzzle
from app.game.validation import (
    matches_placement,
    normalize_word,
    validate_against_descriptor,
    validate_submission,
)


def _placed_word(puzzle_index: int) -> tuple[str, list[tuple[int, int]]]:
    descriptor = select_puzzle(puzzle_index, False)
    placements = generate_placements(descriptor.words, descriptor.size, descriptor.seed)
    word = next(word for word in descriptor.words if word in placements)
    return word, placements[word]


def test_forward_path_is_valid() -> None:
    word, coords = _placed_word(0)

    outcome = validate_submission(word, coords, puzzle_index=0)

    assert outcome.valid is True
    assert outcome.word == word


def test_reversed_path_is_valid() -> None:
    word, coords = _placed_word(4)

    outcome = validate_submission(word, list(reversed(coords)), puzzle_index=4)

    assert outcome.valid is True


def test_lowercase_word_is_normalized() -> None:
    word, coords = _placed_word(2)

    outcome = validate_submission(f" {word.lower()} ", coords, puzzle_index=2)

    assert outcome.valid is True
    assert outcome.word == word


def test_word_outside_puzzle_is_invalid() -> None:
    outcome = validate_submission("XYZQQ", [(0, 0)], puzzle_index=0)

    assert outcome.valid is False
    assert outcome.word == "XYZQQ"


def test_word_from_another_group_is_invalid() -> None:
    word, coords = _placed_word(1)

    outcome = validate_submission(word, coords, puzzle_index=0)

    assert word not in WORD_LISTS[0]
    assert outcome.valid is False


def test_wrong_path_is_invalid() -> None:
    word, coords = _placed_word(3)
    shifted = [(row, col + 100) for row, col in coords]

    assert validate_submission(word, shifted, puzzle_index=3).valid is False
    assert validate_submission(word, coords[:-1], puzzle_index=3).valid is False


def test_partially_reversed_path_is_invalid() -> None:
    word, coords = _placed_word(5)
    scrambled = coords[1:] + coords[:1]

    assert validate_submission(word, scrambled, puzzle_index=5).valid is False


def test_premium_trusts_client_word_list() -> None:
    outcome = validate_submission(
        "glow",
        [],
        puzzle_index=0,
        is_premium=True,
        known_words=["BRIGHT", "SHINE", "LIGHT", "SPARK", "GLOW"],
        known_grid=[["A"]],
    )

    assert outcome.valid is True
    assert outcome.word == "GLOW"


def test_premium_rejects_word_outside_client_list() -> None:
    outcome = validate_submission(
        "HAPPY",
        [],
        is_premium=True,
        known_words=["BRIGHT", "SHINE"],
        known_grid=[["A"]],
    )

    assert outcome.valid is False


def test_premium_without_client_state_falls_back_to_regeneration() -> None:
    word, coords = _placed_word(0)

    assert validate_submission(word, coords, puzzle_index=0, is_premium=True).valid is True
    assert validate_submission(word, [], puzzle_index=0, is_premium=True).valid is False


def test_validation_is_repeatable() -> None:
    word, coords = _placed_word(6)

    results = {validate_submission(word, coords, puzzle_index=6).valid for _ in range(5)}

    assert results == {True}


def test_daily_descriptor_validation() -> None:
    descriptor = select_daily_puzzle(date(2024, 1, 3))
    placements = generate_placements(descriptor.words, descriptor.size, descriptor.seed)
    word, coords = next(iter(placements.items()))

    assert validate_against_descriptor(word, coords, descriptor).valid is True
    assert validate_against_descriptor(word, list(reversed(coords)), descriptor).valid is True


def test_matches_placement_accepts_lists_and_tuples() -> None:
    expected = [(0, 0), (1, 1), (2, 2)]

    assert matches_placement([[0, 0], [1, 1], [2, 2]], expected)
    assert matches_placement([[2, 2], [1, 1], [0, 0]], expected)
    assert not matches_placement([[0, 0], [1, 1]], expected)


def test_normalize_word() -> None:
    assert normalize_word("  calm ") == "CALM"


def test_catalog_word_that_was_never_placed_is_invalid() -> None:
    descriptor = PuzzleDescriptor(
        words=("ABCDEFGHIJK",),
        size=10,
        seed=7,
        difficulty_level=0,
        puzzle_index=0,
    )

    outcome = validate_against_descriptor("abcdefghijk", [(0, 0)], descriptor)

    assert outcome.valid is False
    assert outcome.word == "ABCDEFGHIJK"
