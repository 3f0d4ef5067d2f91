import pytest

from tetris_board import Grid
from tetris_piece import Shape
from tetris_state import GameState


class FixedRandom:
    """Hands out a scripted sequence of shapes, repeating the last one."""
    def __init__(self, *shapes):
        self.shapes = list(shapes)

    def next_shape(self):
        if len(self.shapes) > 1:
            return self.shapes.pop(0)
        return self.shapes[0]


def fill_row(grid, y, color=(1, 2, 3), skip=()):
    for x in range(grid.width):
        if x not in skip:
            grid._cells[y][x] = color


@pytest.fixture
def grid():
    return Grid()


@pytest.fixture
def make_state():
    def make(*shapes):
        return GameState(rng=FixedRandom(*(shapes or (Shape.T,))))
    return make
