from __future__ import annotations

from typing import Literal

from pydantic import Field, model_validator

from app.api.schemas.common import CamelModel


class WordSearchPuzzle(CamelModel):
    grid: list[list[str]]
    words: list[str]
    size: int = Field(ge=1)
    puzzle_index: int
    puzzle_number: int
    difficulty_level: int
    is_premium: bool

    @model_validator(mode="after")
    def validate_grid_shape(self) -> "WordSearchPuzzle":
        if len(self.grid) != self.size or any(len(row) != self.size for row in self.grid):
            raise ValueError("grid must be size x size")
        return self


class DailyWordSearchPuzzle(CamelModel):
    grid: list[list[str]]
    words: list[str]
    size: int = Field(ge=1)
    puzzle_number: int
    date: str


class WordValidationResult(CamelModel):
    valid: bool
    word: str


class PuzzleTypeOfDay(CamelModel):
    puzzle_type: Literal["wordle", "wordsearch"]
    puzzle_number: int
    date: str


__all__ = [
    "DailyWordSearchPuzzle",
    "PuzzleTypeOfDay",
    "WordSearchPuzzle",
    "WordValidationResult",
]
