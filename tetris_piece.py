
"""Piece model: shape table, colors, rotation"""
from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Iterator, Tuple

Color = Tuple[int, int, int]
Offsets = Tuple[Tuple[int, int], ...]

class Shape(Enum):
    NO_SHAPE = 0
    Z = 1
    S = 2
    LINE = 3
    T = 4
    SQUARE = 5
    L = 6
    MIRRORED_L = 7

# offsets relative to the pivot, y grows downward
COORDS = MappingProxyType({
    Shape.NO_SHAPE:   ((0,0),(0,0),(0,0),(0,0)),
    Shape.Z:          ((-1,-1),(0,-1),(0,0),(1,0)),
    Shape.S:          ((-1,0),(0,0),(0,-1),(1,-1)),
    Shape.LINE:       ((-1,0),(0,0),(1,0),(2,0)),
    Shape.T:          ((-1,0),(0,0),(1,0),(0,-1)),
    Shape.SQUARE:     ((0,0),(1,0),(0,-1),(1,-1)),
    Shape.L:          ((-1,-1),(-1,0),(0,0),(1,0)),
    Shape.MIRRORED_L: ((-1,0),(0,0),(1,0),(1,-1)),
})

COLORS = MappingProxyType({
    Shape.NO_SHAPE:   (0,0,0),
    Shape.Z:          (204,102,102),
    Shape.S:          (102,204,102),
    Shape.LINE:       (102,102,204),
    Shape.T:          (204,204,102),
    Shape.SQUARE:     (204,102,204),
    Shape.L:          (102,204,204),
    Shape.MIRRORED_L: (218,170,0),
})

PLAYABLE = tuple(s for s in Shape if s is not Shape.NO_SHAPE)

@dataclass(frozen=True)
class Piece:
    shape: Shape
    coords: Offsets
    color: Color

    @staticmethod
    def from_shape(shape: Shape) -> "Piece":
        return Piece(shape, COORDS[shape], COLORS[shape])

    @staticmethod
    def random(rng) -> "Piece":
        """Uniform pick among the seven playable shapes; rng needs next_shape()."""
        return Piece.from_shape(rng.next_shape())

    def x(self, i: int) -> int: return self.coords[i][0]
    def y(self, i: int) -> int: return self.coords[i][1]

    def cells(self, px: int, py: int) -> Iterator[Tuple[int, int]]:
        for dx, dy in self.coords:
            yield px + dx, py + dy

    def rotate_right(self) -> "Piece":
        if self.shape is Shape.SQUARE: return self
        return Piece(self.shape, tuple((-y, x) for x, y in self.coords), self.color)

    def rotate_left(self) -> "Piece":
        if self.shape is Shape.SQUARE: return self
        return Piece(self.shape, tuple((y, -x) for x, y in self.coords), self.color)
