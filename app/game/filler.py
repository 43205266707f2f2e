from __future__ import annotations

from app.game.catalog import ALPHABET, EMPTY_CELL
from app.game.placement import Grid
from app.game.rng import SeededRandom


def fill_grid(grid: Grid, rng: SeededRandom) -> Grid:
    # Row-major; filled cells do not consume draws.
    for row in grid:
        for col_index, cell in enumerate(row):
            if cell == EMPTY_CELL:
                row[col_index] = ALPHABET[rng.next_below(len(ALPHABET))]
    return grid


__all__ = ["fill_grid"]
