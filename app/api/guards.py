from __future__ import annotations

from fastapi import Request

from app.api.errors import ApiErrorCode, BadRequestError
from app.api.schemas.common import Coordinate
from app.api.schemas.requests import WordSubmission


def ensure_submission_complete(payload: WordSubmission) -> tuple[str, list[Coordinate]]:
    missing = []
    if not payload.word:
        missing.append("word")
    if payload.coordinates is None:
        missing.append("coordinates")
    if missing:
        raise BadRequestError(code=ApiErrorCode.SUBMISSION_INCOMPLETE, details={"missing": missing})

    assert payload.word is not None
    assert payload.coordinates is not None
    return payload.word, payload.coordinates


def client_ip_from_request(request: Request) -> str:
    client_ip = getattr(request.state, "client_ip", None)
    if isinstance(client_ip, str) and client_ip:
        return client_ip
    return request.client.host if request.client else "unknown"


__all__ = ["client_ip_from_request", "ensure_submission_complete"]
