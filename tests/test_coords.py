import pytest

from voxbox.sandbox.coords import FACE_NORMALS, add_coords, block_key


def test_block_key_distinguishes_axis_order_and_sign():
    coords = [(1, 2, 3), (3, 2, 1), (2, 1, 3), (-1, 2, 3), (1, -2, 3), (1, 2, -3), (0, 0, 0)]
    keys = {block_key(c) for c in coords}
    assert len(keys) == len(coords)


def test_block_key_is_stable():
    assert block_key((4, -7, 9)) == block_key((4, -7, 9))


def test_block_key_rejects_out_of_range():
    with pytest.raises(ValueError):
        block_key((1 << 21, 0, 0))
    with pytest.raises(ValueError):
        block_key((0, -(1 << 20) - 1, 0))


def test_add_coords():
    assert add_coords((1, 2, 3), (0, 1, 0)) == (1, 3, 3)


def test_face_normals_are_unit_axes():
    assert len(set(FACE_NORMALS)) == 6
    for n in FACE_NORMALS:
        assert sorted(abs(c) for c in n) == [0, 0, 1]
