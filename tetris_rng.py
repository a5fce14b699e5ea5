"""Uniform piece randomizer"""
import random
from typing import Optional

from tetris_piece import CATALOG, PieceType


class PieceRandom:
    PIECES = list(CATALOG)

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self._rng = random.Random(seed)

    def randint(self, a: int, b: int) -> int:
        return self._rng.randint(a, b)

    def next_kind(self) -> PieceType:
        return CATALOG[self._rng.choice(self.PIECES)]
