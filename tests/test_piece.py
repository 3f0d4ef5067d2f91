import pytest

from tetris_piece import COLORS, COORDS, PLAYABLE, Piece, Shape
from tetris_rng import ShapeRandom


def test_from_shape_loads_table():
    p = Piece.from_shape(Shape.LINE)
    assert p.shape is Shape.LINE
    assert p.color == (102, 102, 204)
    assert [(p.x(i), p.y(i)) for i in range(4)] == [(-1, 0), (0, 0), (1, 0), (2, 0)]


def test_every_playable_shape_has_four_distinct_cells():
    for shape in PLAYABLE:
        assert len(set(COORDS[shape])) == 4
        assert shape in COLORS


def test_offset_index_out_of_range():
    with pytest.raises(IndexError):
        Piece.from_shape(Shape.T).x(4)


def test_rotate_right_maps_x_y_to_minus_y_x():
    p = Piece.from_shape(Shape.T).rotate_right()
    assert p.coords == ((0, -1), (0, 0), (0, 1), (1, 0))


def test_rotate_left_maps_x_y_to_y_minus_x():
    p = Piece.from_shape(Shape.T).rotate_left()
    assert p.coords == ((0, 1), (0, 0), (0, -1), (-1, 0))


def test_rotation_returns_new_piece():
    p = Piece.from_shape(Shape.Z)
    r = p.rotate_right()
    assert r is not p
    assert p.coords == COORDS[Shape.Z]
    assert r.shape is p.shape and r.color == p.color


def test_square_is_rotation_invariant():
    p = Piece.from_shape(Shape.SQUARE)
    q = p
    for _ in range(5):
        q = q.rotate_right()
    assert q.coords == p.coords
    assert p.rotate_left().rotate_left().coords == p.coords


@pytest.mark.parametrize("shape", [s for s in PLAYABLE if s is not Shape.SQUARE])
def test_right_then_left_restores(shape):
    p = Piece.from_shape(shape)
    assert p.rotate_right().rotate_left() == p
    assert p.rotate_left().rotate_right() == p
    assert p.rotate_right().rotate_right().rotate_right().rotate_right() == p


def test_cells_are_pivot_plus_offsets():
    p = Piece.from_shape(Shape.SQUARE)
    assert sorted(p.cells(5, 1)) == [(5, 0), (5, 1), (6, 0), (6, 1)]


def test_random_never_picks_empty_and_covers_all():
    rng = ShapeRandom(seed=7)
    seen = {Piece.random(rng).shape for _ in range(500)}
    assert Shape.NO_SHAPE not in seen
    assert seen == set(PLAYABLE)


def test_seeded_random_is_reproducible():
    a, b = ShapeRandom(seed=42), ShapeRandom(seed=42)
    assert [a.next_shape() for _ in range(20)] == [b.next_shape() for _ in range(20)]


def test_random_is_roughly_uniform():
    rng = ShapeRandom(seed=1)
    counts = {s: 0 for s in PLAYABLE}
    for _ in range(7000):
        counts[rng.next_shape()] += 1
    assert all(800 < c < 1200 for c in counts.values())
