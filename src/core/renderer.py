"""Renderer: draws a scene graph through a perspective camera.

Uses the fixed-function pipeline (legacy) so scene nodes can draw
themselves with client-side arrays and VBOs. The camera's projection and
view matrices are loaded directly; nodes push their own local transforms.
"""

from __future__ import annotations

import logging
from typing import Tuple

from camera.camera import PerspectiveCamera
from core.object3d import gl_matrix
from core.scene import Scene

logger = logging.getLogger(__name__)


class Renderer:
    def __init__(self, width: int, height: int, *, alpha: bool = True) -> None:
        self.alpha = alpha
        self.width = 1
        self.height = 1
        self.pixel_ratio = 1.0
        self.set_size(width, height)

    def set_size(self, width: int, height: int) -> None:
        self.width = max(int(width), 1)
        self.height = max(int(height), 1)

    def set_pixel_ratio(self, ratio: float) -> None:
        if ratio <= 0:
            raise ValueError(f"Pixel ratio must be positive, got {ratio}")
        self.pixel_ratio = float(ratio)

    def drawing_buffer_size(self) -> Tuple[int, int]:
        return (round(self.width * self.pixel_ratio), round(self.height * self.pixel_ratio))

    def init_gl(self) -> None:  # pragma: no cover - visual
        from OpenGL.GL import (
            glEnable,
            glDisable,
            glDepthFunc,
            glBlendFunc,
            GL_DEPTH_TEST,
            GL_LEQUAL,
            GL_CULL_FACE,
            GL_LIGHTING,
            GL_BLEND,
            GL_SRC_ALPHA,
            GL_ONE_MINUS_SRC_ALPHA,
            GL_LINE_SMOOTH,
            GL_PROGRAM_POINT_SIZE,
        )

        glEnable(GL_DEPTH_TEST)
        glDepthFunc(GL_LEQUAL)
        glDisable(GL_CULL_FACE)
        # Shading is computed per vertex on the CPU
        glDisable(GL_LIGHTING)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glEnable(GL_LINE_SMOOTH)
        glDisable(GL_PROGRAM_POINT_SIZE)
        logger.debug("GL state initialized (alpha=%s)", self.alpha)

    def render(self, scene: Scene, camera: PerspectiveCamera) -> None:  # pragma: no cover - visual
        from OpenGL.GL import (
            glViewport,
            glClearColor,
            glClear,
            glMatrixMode,
            glLoadMatrixf,
            GL_COLOR_BUFFER_BIT,
            GL_DEPTH_BUFFER_BIT,
            GL_PROJECTION,
            GL_MODELVIEW,
        )

        buffer_w, buffer_h = self.drawing_buffer_size()
        glViewport(0, 0, buffer_w, buffer_h)

        r, g, b, a = scene.clear_color
        glClearColor(r, g, b, a if self.alpha else 1.0)
        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)

        glMatrixMode(GL_PROJECTION)
        glLoadMatrixf(gl_matrix(camera.projection_matrix))
        glMatrixMode(GL_MODELVIEW)
        glLoadMatrixf(gl_matrix(camera.view_matrix()))

        scene.draw()
