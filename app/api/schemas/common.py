from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

_WORD_RE = re.compile(r"^[A-Z]+$")
_SINGLE_LETTER_RE = re.compile(r"^[A-Z]$")

Coordinate = tuple[int, int]


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def normalize_trimmed(value: str) -> str:
    return value.strip()


def normalize_upper_trimmed(value: str) -> str:
    return normalize_trimmed(value).upper()


def ensure_ascii_word(value: str) -> str:
    if not _WORD_RE.fullmatch(value):
        raise ValueError("must contain only letters A-Z")
    return value


def ensure_single_ascii_letter(value: str) -> str:
    if not _SINGLE_LETTER_RE.fullmatch(value):
        raise ValueError("must be exactly one letter A-Z")
    return value


__all__ = [
    "CamelModel",
    "Coordinate",
    "ensure_ascii_word",
    "ensure_single_ascii_letter",
    "normalize_trimmed",
    "normalize_upper_trimmed",
]
