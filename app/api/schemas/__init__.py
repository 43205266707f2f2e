from app.api.schemas.puzzles import (
    DailyWordSearchPuzzle,
    PuzzleTypeOfDay,
    WordSearchPuzzle,
    WordValidationResult,
)
from app.api.schemas.requests import DailyValidateWordRequest, ValidateWordRequest, WordSubmission

__all__ = [
    "DailyValidateWordRequest",
    "DailyWordSearchPuzzle",
    "PuzzleTypeOfDay",
    "ValidateWordRequest",
    "WordSearchPuzzle",
    "WordSubmission",
    "WordValidationResult",
]
