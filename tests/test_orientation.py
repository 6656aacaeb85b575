import pytest

from somacube.core.model import Block
from somacube.core.orientation import Direction, Orientation

UNIT = [(0, 0, 0)]
SLAB = [(0, 0, 0), (1, 0, 0), (0, 1, 0), (1, 1, 0)]
I3 = [(0, 0, 0), (1, 0, 0), (2, 0, 0)]
L3 = [(0, 0, 0), (1, 0, 0), (0, 1, 0)]
T4 = [(0, 0, 0), (1, 0, 0), (2, 0, 0), (1, 1, 0)]
L4 = [(0, 0, 0), (1, 0, 0), (2, 0, 0), (0, 1, 0)]
Z4 = [(1, 0, 0), (2, 0, 0), (0, 1, 0), (1, 1, 0)]
BRANCH = [(0, 0, 0), (1, 0, 0), (0, 1, 0), (0, 0, 1)]
SCREW = [(0, 0, 0), (1, 0, 0), (0, 1, 0), (0, 1, 1)]


def _cell_sets(orientations):
    return {o.cells() for o in orientations}


def test_normalise_anchors_bounding_box_at_origin():
    ori = Orientation.of([(2, 3, 4), (3, 3, 4), (2, 5, 6)]).normalise()
    assert min(b.x for b in ori) == 0
    assert min(b.y for b in ori) == 0
    assert min(b.z for b in ori) == 0
    assert ori.blocks[0] == Block(0, 0, 0)
    assert ori.blocks[2] == Block(0, 2, 2)


def test_primitive_rotations():
    ori = Orientation.of([(1, 2, 3)])
    assert ori.rotate(Direction.NEXT).blocks == (Block(1, 3, -2),)
    assert ori.rotate(Direction.CLOCKWISE).blocks == (Block(3, 2, -1),)
    assert ori.rotate(Direction.COUNTER_CLOCKWISE).blocks == (Block(-3, 2, 1),)


def test_clockwise_and_counter_clockwise_undo_each_other():
    ori = Orientation.of(L4)
    assert ori.rotate(Direction.CLOCKWISE).rotate(Direction.COUNTER_CLOCKWISE) == ori


def test_similar_ignores_block_order():
    a = Orientation.of([(0, 0, 0), (1, 0, 0)])
    b = Orientation.of([(1, 0, 0), (0, 0, 0)])
    c = Orientation.of([(0, 0, 0), (0, 1, 0)])
    assert a.similar(b)
    assert not a.similar(c)


@pytest.mark.parametrize(
    "shape, expected",
    [
        (UNIT, 1),
        (SLAB, 3),
        (I3, 3),
        (L3, 12),
        (T4, 12),
        (Z4, 12),
        (L4, 24),
        (BRANCH, 8),
        (SCREW, 12),
    ],
)
def test_orientation_counts(shape, expected):
    assert len(Orientation.of(shape).all_orientations()) == expected


def test_symmetric_piece_has_fewer_than_24_orientations():
    count = len(Orientation.of(L3).all_orientations())
    assert count < 24
    assert 24 % count == 0


def test_orientations_are_pairwise_distinct_and_normalised():
    oris = Orientation.of(L4).all_orientations()
    for i, a in enumerate(oris):
        assert min(b.x for b in a) == min(b.y for b in a) == min(b.z for b in a) == 0
        for b in oris[i + 1:]:
            assert not a.similar(b)


@pytest.mark.parametrize("shape", [L3, T4, L4, BRANCH, SCREW])
def test_orientation_set_is_independent_of_starting_rotation(shape):
    base = Orientation.of(shape).all_orientations()
    expected = _cell_sets(base)
    for ori in base:
        assert _cell_sets(ori.all_orientations()) == expected


def test_rotated_input_regenerates_same_set():
    base = Orientation.of(L4)
    turned = base.rotate(Direction.NEXT).rotate(Direction.CLOCKWISE).translate(5, -3, 2)
    assert _cell_sets(turned.all_orientations()) == _cell_sets(base.all_orientations())


def test_empty_orientation_has_no_rotations():
    assert Orientation(()).all_orientations() == []

