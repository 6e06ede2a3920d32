from .vec3 import Vec3
from .mat3 import Mat3

__all__ = ["Vec3", "Mat3"]
