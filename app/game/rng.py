from __future__ import annotations

LCG_MULTIPLIER = 1103515245
LCG_INCREMENT = 12345
LCG_MASK = 0x7FFFFFFF
LCG_MODULUS = LCG_MASK + 1


class SeededRandom:
    """Linear congruential generator used only for reproducible puzzle layout.

    Not suitable for anything that needs unpredictability.
    """

    def __init__(self, seed: int) -> None:
        self.state = seed

    def next(self) -> float:
        self.state = (self.state * LCG_MULTIPLIER + LCG_INCREMENT) & LCG_MASK
        return self.state / LCG_MODULUS

    def next_below(self, bound: int) -> int:
        return int(self.next() * bound)


__all__ = ["LCG_INCREMENT", "LCG_MASK", "LCG_MODULUS", "LCG_MULTIPLIER", "SeededRandom"]
