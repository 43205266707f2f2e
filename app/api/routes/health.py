from __future__ import annotations

import time
from typing import Literal

from fastapi import APIRouter, Request
from pydantic import BaseModel

from app.core.config import get_settings
from app.game.catalog import DIRECTIONS, WORD_LISTS

router = APIRouter(tags=["health"])
APP_VERSION = "0.1.0"


class HealthCatalogStatus(BaseModel):
    groups: int
    directions: int


class HealthResponse(BaseModel):
    status: Literal["ok"]
    service: str
    env: str
    version: str
    uptime_s: float
    catalog: HealthCatalogStatus


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    settings = get_settings()
    process_started_at = getattr(request.app.state, "process_started_at", time.monotonic())
    uptime_s = round(time.monotonic() - process_started_at, 2)

    return HealthResponse(
        status="ok",
        service=settings.service_name,
        env=settings.env,
        version=APP_VERSION,
        uptime_s=uptime_s,
        catalog=HealthCatalogStatus(groups=len(WORD_LISTS), directions=len(DIRECTIONS)),
    )
