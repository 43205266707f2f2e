from __future__ import annotations

from fastapi import APIRouter, Query, Request

from app.api.guards import client_ip_from_request, ensure_submission_complete
from app.api.schemas.puzzles import DailyWordSearchPuzzle, WordSearchPuzzle, WordValidationResult
from app.api.schemas.requests import DailyValidateWordRequest, ValidateWordRequest
from app.services import daily, rate_limit, wordsearch

router = APIRouter(prefix="/wordsearch", tags=["wordsearch"])


@router.get("", response_model=WordSearchPuzzle)
async def get_word_search(
    index: int = Query(0, ge=0, description="Sequential puzzle index."),
    premium: bool = Query(False, description="Serve a randomized premium puzzle."),
) -> WordSearchPuzzle:
    return wordsearch.build_word_search(index, premium)


@router.post("/validate", response_model=WordValidationResult)
async def validate_word(payload: ValidateWordRequest, request: Request) -> WordValidationResult:
    word, coordinates = ensure_submission_complete(payload)
    tier = "premium" if payload.is_premium else "free"
    await rate_limit.enforce_validate_rate_limit(
        puzzle_key=f"{tier}:{payload.puzzle_index}",
        client_ip=client_ip_from_request(request),
    )
    return wordsearch.check_word(payload, word, coordinates)


@router.get("/daily", response_model=DailyWordSearchPuzzle)
async def get_daily_word_search() -> DailyWordSearchPuzzle:
    return wordsearch.build_daily_word_search(daily.utc_today())


@router.post("/daily/validate", response_model=WordValidationResult)
async def validate_daily_word(payload: DailyValidateWordRequest, request: Request) -> WordValidationResult:
    word, coordinates = ensure_submission_complete(payload)
    today = daily.utc_today()
    await rate_limit.enforce_validate_rate_limit(
        puzzle_key=f"daily:{today.isoformat()}",
        client_ip=client_ip_from_request(request),
    )
    return wordsearch.check_daily_word(today, word, coordinates)


__all__ = ["router"]
