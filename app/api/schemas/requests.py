from __future__ import annotations

from pydantic import Field, field_validator

from app.api.schemas.common import (
    CamelModel,
    Coordinate,
    ensure_ascii_word,
    ensure_single_ascii_letter,
    normalize_upper_trimmed,
)


class WordSubmission(CamelModel):
    # Presence of word/coordinates is checked by a guard so that a missing
    # value is answered with 400 rather than a schema error.
    word: str | None = None
    coordinates: list[Coordinate] | None = None

    @field_validator("word", mode="before")
    @classmethod
    def normalize_word(cls, value: object) -> str | None:
        if value is None:
            return None
        if not isinstance(value, str):
            raise ValueError("word must be a string")
        return normalize_upper_trimmed(value)


class ValidateWordRequest(WordSubmission):
    puzzle_index: int = Field(default=0, ge=0)
    is_premium: bool = False
    words: list[str] | None = None
    grid: list[list[str]] | None = None

    @field_validator("words", mode="before")
    @classmethod
    def normalize_words(cls, value: object) -> object:
        if not isinstance(value, list):
            return value
        return [normalize_upper_trimmed(item) if isinstance(item, str) else item for item in value]

    @field_validator("words")
    @classmethod
    def validate_words(cls, value: list[str] | None) -> list[str] | None:
        if value is None:
            return None
        return [ensure_ascii_word(item) for item in value]

    @field_validator("grid")
    @classmethod
    def validate_grid(cls, value: list[list[str]] | None) -> list[list[str]] | None:
        if value is None:
            return None
        for row in value:
            if len(row) != len(value):
                raise ValueError("grid must be square")
            for cell in row:
                ensure_single_ascii_letter(cell)
        return value


class DailyValidateWordRequest(WordSubmission):
    pass


__all__ = [
    "DailyValidateWordRequest",
    "ValidateWordRequest",
    "WordSubmission",
]
