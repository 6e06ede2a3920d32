from __future__ import annotations

import math

from voxbox.linalg import Mat3, Vec3

from . import config
from .pick import Ray


class Camera:
    """Yaw/pitch eye. Camera space is x right, y up, z forward."""

    def __init__(self, pos: Vec3, yaw: float = 0.0, pitch: float = 0.0, fov: float = config.FOV):
        self.pos = pos
        self.yaw = yaw
        self.pitch = pitch
        self.fov = fov

    def look_at(self, target: Vec3) -> None:
        d = target - self.pos
        self.yaw = math.atan2(d.x, d.z)
        self.pitch = math.atan2(d.y, math.sqrt(d.x * d.x + d.z * d.z))

    def forward(self) -> Vec3:
        cp = math.cos(self.pitch)
        return Vec3(math.sin(self.yaw) * cp, math.sin(self.pitch), math.cos(self.yaw) * cp)

    def view_rotation(self) -> Mat3:
        # Yaw uses a negative angle here, then pitch.
        return Mat3.rotate_x(self.pitch) @ Mat3.rotate_y(-self.yaw)

    def to_camera(self, world: Vec3) -> Vec3:
        return self.view_rotation() @ (world - self.pos)

    def focal_length_px(self, width: int) -> float:
        half_angle = math.radians(float(self.fov) * 0.5)
        return (width * 0.5) / max(1e-6, math.tan(half_angle))

    def project(self, cam: Vec3, width: int, height: int):
        if cam.z <= config.NEAR_CLIP:
            return None
        factor = self.focal_length_px(width) / cam.z
        return (cam.x * factor + width / 2, -cam.y * factor + height / 2)

    def screen_ray(self, sx: float, sy: float, width: int, height: int) -> Ray:
        """Ray from the eye through pixel (sx, sy) of a width x height view."""
        f = self.focal_length_px(width)
        local = Vec3((sx - width / 2) / f, -(sy - height / 2) / f, 1.0)
        direction = (self.view_rotation().transpose() @ local).norm()
        return Ray(self.pos.clone(), direction)
