from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

import structlog

from app.game.catalog import DIRECTIONS, EMPTY_CELL
from app.game.rng import SeededRandom

logger = structlog.get_logger(__name__)

MAX_PLACEMENT_ATTEMPTS = 100

Coordinate = tuple[int, int]
Grid = list[list[str]]


@dataclass
class PlacementResult:
    grid: Grid
    placements: dict[str, list[Coordinate]] = field(default_factory=dict)
    requested: tuple[str, ...] = ()

    @property
    def skipped_words(self) -> list[str]:
        return [word for word in self.requested if word not in self.placements]


def empty_grid(size: int) -> Grid:
    return [[EMPTY_CELL for _ in range(size)] for _ in range(size)]


def path_cells(row: int, col: int, direction: Coordinate, length: int) -> list[Coordinate]:
    d_row, d_col = direction
    return [(row + d_row * offset, col + d_col * offset) for offset in range(length)]


def can_place_word(grid: Grid, word: str, row: int, col: int, direction: Coordinate) -> bool:
    size = len(grid)
    d_row, d_col = direction
    end_row = row + d_row * (len(word) - 1)
    end_col = col + d_col * (len(word) - 1)
    if not (0 <= end_row < size and 0 <= end_col < size):
        return False

    for letter, (r, c) in zip(word, path_cells(row, col, direction, len(word))):
        current = grid[r][c]
        if current != EMPTY_CELL and current != letter:
            return False
    return True


def _write_word(grid: Grid, word: str, row: int, col: int, direction: Coordinate) -> list[Coordinate]:
    coords = path_cells(row, col, direction, len(word))
    for letter, (r, c) in zip(word, coords):
        grid[r][c] = letter
    return coords


def place_words(words: Sequence[str], size: int, rng: SeededRandom) -> PlacementResult:
    grid = empty_grid(size)
    result = PlacementResult(grid=grid, requested=tuple(words))

    for word in words:
        for _attempt in range(MAX_PLACEMENT_ATTEMPTS):
            row = rng.next_below(size)
            col = rng.next_below(size)
            direction = DIRECTIONS[rng.next_below(len(DIRECTIONS))]

            if can_place_word(grid, word, row, col, direction):
                result.placements[word] = _write_word(grid, word, row, col, direction)
                break
        else:
            logger.warning(
                "word_placement_skipped",
                word=word,
                size=size,
                attempts=MAX_PLACEMENT_ATTEMPTS,
            )

    return result


__all__ = [
    "Coordinate",
    "Grid",
    "MAX_PLACEMENT_ATTEMPTS",
    "PlacementResult",
    "can_place_word",
    "empty_grid",
    "path_cells",
    "place_words",
]
