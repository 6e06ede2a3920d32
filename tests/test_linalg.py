import math

import numpy as np
import pytest

from voxbox.linalg import Mat3, Vec3


def test_rotate_y_turns_z_toward_x():
    v = Mat3.rotate_y(math.pi / 2) @ Vec3(0.0, 0.0, 1.0)
    assert v.to_tuple() == pytest.approx((1.0, 0.0, 0.0), abs=1e-12)


def test_transpose_undoes_rotation():
    r = Mat3.rotate_x(0.3) @ Mat3.rotate_y(-1.1)
    v = Vec3(1.0, -2.0, 0.5)
    back = r.transpose() @ (r @ v)
    assert back.to_tuple() == pytest.approx(v.to_tuple())


def test_to_array_matches_transform():
    r = Mat3.rotate_x(0.7)
    v = Vec3(0.2, 0.4, -1.0)
    assert (r.to_array() @ np.array(v.to_tuple())).tolist() == pytest.approx((r @ v).to_tuple())


def test_norm_of_zero_vector_is_itself():
    z = Vec3()
    assert z.norm() is z
    assert Vec3(3.0, 0.0, 4.0).norm().mag() == pytest.approx(1.0)
