from __future__ import annotations

from fastapi import APIRouter

from app.api.schemas.puzzles import PuzzleTypeOfDay
from app.services import daily

router = APIRouter(prefix="/puzzletype", tags=["puzzletype"])


@router.get("", response_model=PuzzleTypeOfDay)
async def get_puzzle_type() -> PuzzleTypeOfDay:
    return daily.build_puzzle_type_of_day(daily.utc_today())


__all__ = ["router"]
