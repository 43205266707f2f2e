from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Literal

from app.api.schemas.puzzles import PuzzleTypeOfDay
from app.game.selection import days_since_epoch


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def puzzle_type_for_day(day: date) -> Literal["wordle", "wordsearch"]:
    return "wordle" if days_since_epoch(day) % 2 == 0 else "wordsearch"


def build_puzzle_type_of_day(day: date | None = None) -> PuzzleTypeOfDay:
    day = day or utc_today()
    return PuzzleTypeOfDay(
        puzzle_type=puzzle_type_for_day(day),
        puzzle_number=days_since_epoch(day),
        date=day.isoformat(),
    )


__all__ = ["build_puzzle_type_of_day", "puzzle_type_for_day", "utc_today"]
