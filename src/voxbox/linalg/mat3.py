import math

import numpy as np

from voxbox.linalg.vec3 import Vec3


class Mat3:
    """3x3 rotation matrix (row-major).

    Vectors are treated as column vectors:
        v' = M @ v

    The camera only ever composes pure rotations, so the inverse is the
    transpose and no general inverse is provided.
    """

    def __init__(self, m=None):
        if m is None:
            self.m = [1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0]
        else:
            if len(m) != 9:
                raise ValueError("Mat3 expects 9 elements")
            self.m = [float(x) for x in m]

    @classmethod
    def rotate_x(cls, angle):
        """Rotate around +X by `angle` radians (right-hand rule)."""
        c = math.cos(angle)
        s = math.sin(angle)
        return cls([1.0, 0.0, 0.0, 0.0, c, -s, 0.0, s, c])

    @classmethod
    def rotate_y(cls, angle):
        """Rotate around +Y by `angle` radians (right-hand rule)."""
        c = math.cos(angle)
        s = math.sin(angle)
        return cls([c, 0.0, s, 0.0, 1.0, 0.0, -s, 0.0, c])

    def __repr__(self):
        return f"Mat3({self.m[0:3]}, {self.m[3:6]}, {self.m[6:9]})"

    def transpose(self):
        m = self.m
        return Mat3([m[0], m[3], m[6], m[1], m[4], m[7], m[2], m[5], m[8]])

    def to_array(self) -> np.ndarray:
        return np.array(self.m, dtype=np.float64).reshape(3, 3)

    def _mul_mat3(self, other):
        a = self.m
        b = other.m
        out = [0.0] * 9
        for r in range(3):
            for c in range(3):
                out[r * 3 + c] = (
                    a[r * 3 + 0] * b[0 * 3 + c]
                    + a[r * 3 + 1] * b[1 * 3 + c]
                    + a[r * 3 + 2] * b[2 * 3 + c]
                )
        return Mat3(out)

    def transform(self, v):
        x = float(v.x)
        y = float(v.y)
        z = float(v.z)
        m = self.m
        return Vec3(
            m[0] * x + m[1] * y + m[2] * z,
            m[3] * x + m[4] * y + m[5] * z,
            m[6] * x + m[7] * y + m[8] * z,
        )

    def __matmul__(self, other):
        if isinstance(other, Mat3):
            return self._mul_mat3(other)
        if isinstance(other, Vec3):
            return self.transform(other)
        raise TypeError(f"unsupported operand type(s) for @: 'Mat3' and '{type(other)}'")
