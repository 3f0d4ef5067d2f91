
"""Uniform piece randomizer module"""
import random
from typing import Optional
from tetris_piece import PLAYABLE, Shape

class ShapeRandom:
    PIECES = PLAYABLE
    def __init__(self, seed: Optional[int] = None):
        # seed None draws from OS entropy
        self._rng = random.Random(seed)

    def next_shape(self) -> Shape:
        return self.PIECES[self._rng.randrange(len(self.PIECES))]
