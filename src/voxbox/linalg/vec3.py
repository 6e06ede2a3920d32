import math


class Vec3:
    def __init__(self, x=0.0, y=0.0, z=0.0):
        self.x, self.y, self.z = x, y, z

    @classmethod
    def of(cls, t):
        """Build from any 3-sequence, e.g. an integer block coordinate."""
        return cls(float(t[0]), float(t[1]), float(t[2]))

    def mag(self):
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def norm(self):
        mag = self.mag()
        if mag > 0:
            return Vec3(
                self.x / mag,
                self.y / mag,
                self.z / mag,
            )
        return self

    def __add__(self, other):
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other):
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other):
        if isinstance(other, Vec3):
            return Vec3(self.x * other.x, self.y * other.y, self.z * other.z)
        return Vec3(self.x * other, self.y * other, self.z * other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def dot(self, vec3):
        return self.x * vec3.x + self.y * vec3.y + self.z * vec3.z

    def __repr__(self):
        return f"Vec3({self.x}, {self.y}, {self.z})"

    def clone(self):
        return Vec3(self.x, self.y, self.z)

    def to_tuple(self):
        return (self.x, self.y, self.z)
