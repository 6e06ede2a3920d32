from __future__ import annotations

import pygame
from OpenGL.GL import (
    GL_COLOR_BUFFER_BIT,
    GL_DEPTH_BUFFER_BIT,
    GL_DEPTH_TEST,
    GL_QUADS,
    glBegin,
    glClear,
    glClearColor,
    glColor3ub,
    glEnable,
    glEnd,
    glVertex3f,
)


class SoftPrimitives:
    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self._font: pygame.font.Font | None = None

    def clear(self, color: tuple[int, int, int]) -> None:
        self.surface.fill(color)

    def polygon(self, points, color: tuple[int, int, int]) -> None:
        pygame.draw.polygon(self.surface, color, points)

    def text(self, x: int, y: int, msg: str, color: tuple[int, int, int]) -> None:
        if self._font is None:
            self._font = pygame.font.SysFont(None, 22)
        self.surface.blit(self._font.render(msg, True, color), (x, y))


class GLPrimitives:
    def __init__(self) -> None:
        self._quad_batch_active = False

    def clear(self, color: tuple[int, int, int]) -> None:
        r, g, b = [c / 255.0 for c in color]
        glClearColor(r, g, b, 1.0)
        glEnable(GL_DEPTH_TEST)
        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)

    def begin_quads(self) -> None:
        if self._quad_batch_active:
            return
        self._quad_batch_active = True
        glBegin(GL_QUADS)

    def end_quads(self) -> None:
        if not self._quad_batch_active:
            return
        glEnd()
        self._quad_batch_active = False

    def quad(self, corners, color: tuple[int, int, int]) -> None:
        glColor3ub(*color)
        if self._quad_batch_active:
            for x, y, z in corners:
                glVertex3f(x, y, z)
        else:
            glBegin(GL_QUADS)
            for x, y, z in corners:
                glVertex3f(x, y, z)
            glEnd()
