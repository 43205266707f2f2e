from __future__ import annotations

WORD_LISTS: tuple[tuple[str, ...], ...] = (
    ("HAPPY", "JOY", "SMILE", "PEACE", "CALM"),
    ("STRONG", "BRAVE", "POWER", "FOCUS", "SHARP"),
    ("HEALTH", "VITAL", "ENERGY", "ALIVE", "FIT"),
    ("TRUST", "FAITH", "HOPE", "LOVE", "GRACE"),
    ("BRIGHT", "SHINE", "LIGHT", "SPARK", "GLOW"),
    ("MUSIC", "DANCE", "LAUGH", "CHEER", "PLAY"),
    ("QUIET", "STILL", "REST", "RELAX", "EASE"),
)

# Order matters: placement draws an index into this tuple.
DIRECTIONS: tuple[tuple[int, int], ...] = (
    (0, 1),
    (1, 0),
    (1, 1),
    (0, -1),
    (-1, 0),
    (-1, -1),
    (1, -1),
    (-1, 1),
)

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
EMPTY_CELL = ""

MIN_GRID_SIZE = 10
MAX_GRID_SIZE = 16
DAILY_GRID_SIZE = 10


__all__ = [
    "ALPHABET",
    "DAILY_GRID_SIZE",
    "DIRECTIONS",
    "EMPTY_CELL",
    "MAX_GRID_SIZE",
    "MIN_GRID_SIZE",
    "WORD_LISTS",
]
