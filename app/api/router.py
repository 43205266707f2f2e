from fastapi import APIRouter

from app.api.routes import health, puzzletype, wordsearch

api_router = APIRouter()
api_router.include_router(health.router)
api_router.include_router(wordsearch.router)
api_router.include_router(puzzletype.router)

__all__ = ["api_router"]
