from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from app.game.generator import generate_placements
from app.game.placement import Coordinate
from app.game.selection import PuzzleDescriptor, select_puzzle


@dataclass(frozen=True)
class ValidationOutcome:
    valid: bool
    word: str


def normalize_word(word: str) -> str:
    return word.strip().upper()


def matches_placement(coordinates: Sequence[Sequence[int]], expected: Sequence[Coordinate]) -> bool:
    submitted = [tuple(coord) for coord in coordinates]
    expected_path = [tuple(coord) for coord in expected]
    return submitted == expected_path or submitted == expected_path[::-1]


def validate_against_descriptor(
    word: str,
    coordinates: Sequence[Sequence[int]],
    descriptor: PuzzleDescriptor,
) -> ValidationOutcome:
    normalized = normalize_word(word)
    if normalized not in descriptor.words:
        return ValidationOutcome(valid=False, word=normalized)

    placements = generate_placements(descriptor.words, descriptor.size, descriptor.seed)
    expected = placements.get(normalized)
    if expected is None:
        return ValidationOutcome(valid=False, word=normalized)

    return ValidationOutcome(valid=matches_placement(coordinates, expected), word=normalized)


def validate_submission(
    word: str,
    coordinates: Sequence[Sequence[int]],
    *,
    puzzle_index: int = 0,
    is_premium: bool = False,
    known_words: Sequence[str] | None = None,
    known_grid: Sequence[Sequence[str]] | None = None,
) -> ValidationOutcome:
    """Decide whether a found word is correct.

    Premium grids are seeded from the clock and cannot be rebuilt here, so when
    the client sends back its word list and grid the word is only checked for
    membership in that list. Every other submission is checked against the
    placement replayed from the free-tier descriptor of ``puzzle_index``,
    accepting the path in either drag direction.
    """
    if is_premium and known_words and known_grid:
        normalized = normalize_word(word)
        return ValidationOutcome(valid=normalized in known_words, word=normalized)

    return validate_against_descriptor(word, coordinates, select_puzzle(puzzle_index, False))


__all__ = [
    "ValidationOutcome",
    "matches_placement",
    "normalize_word",
    "validate_against_descriptor",
    "validate_submission",
]
