from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from app.game.filler import fill_grid
from app.game.placement import Coordinate, Grid, place_words
from app.game.rng import SeededRandom
from app.game.selection import PuzzleDescriptor


@dataclass(frozen=True)
class GeneratedPuzzle:
    grid: Grid
    placements: dict[str, list[Coordinate]]
    skipped_words: list[str] = field(default_factory=list)


def generate_grid(words: Sequence[str], size: int, seed: int) -> GeneratedPuzzle:
    rng = SeededRandom(seed)
    placement = place_words(words, size, rng)
    grid = fill_grid(placement.grid, rng)
    return GeneratedPuzzle(grid=grid, placements=placement.placements, skipped_words=placement.skipped_words)


def generate_placements(words: Sequence[str], size: int, seed: int) -> dict[str, list[Coordinate]]:
    return place_words(words, size, SeededRandom(seed)).placements


def generate_puzzle(descriptor: PuzzleDescriptor) -> GeneratedPuzzle:
    return generate_grid(descriptor.words, descriptor.size, descriptor.seed)


__all__ = ["GeneratedPuzzle", "generate_grid", "generate_placements", "generate_puzzle"]
