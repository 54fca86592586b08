"""Screen-space text drawn over the 3D view with pygame fonts.

Each distinct (text, colour) label is rasterised once by pygame, uploaded as
a linear-filtered texture and drawn as a quad in a pixel-space orthographic
projection (origin top-left, y down, like window coordinates).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

import numpy as np
import pygame

from textures.texture_utils import upload_rgba

Color = Tuple[int, int, int, int]

# Texture coordinates for a quad listed top-left, top-right, bottom-right,
# bottom-left; tostring(..., True) stores rows bottom-up
_QUAD_UVS = np.array([[0.0, 1.0], [1.0, 1.0], [1.0, 0.0], [0.0, 0.0]], dtype=np.float32)


@dataclass
class Label:
    texture_id: int
    size: Tuple[int, int]


def aligned_origin(x: float, y: float, w: float, h: float, align: str) -> Tuple[float, float]:
    """Top-left corner of a w*h box anchored at (x, y) with the given alignment.

    align: 'topleft' | 'topright' | 'midleft' | 'midright' | 'center'
    """
    if align == "topright":
        return x - w, y
    if align == "midleft":
        return x, y - h / 2
    if align == "midright":
        return x - w, y - h / 2
    if align == "center":
        return x - w / 2, y - h / 2
    return x, y


def quad_vertices(x: float, y: float, w: float, h: float) -> np.ndarray:
    return np.array([[x, y], [x + w, y], [x + w, y + h], [x, y + h]], dtype=np.float32)


class TextRenderer:
    """Draws cached text labels between begin() and end()."""

    def __init__(
        self,
        screen_width: int,
        screen_height: int,
        font: Optional[pygame.font.Font] = None,
        size: int = 48,
    ) -> None:
        self.width = screen_width
        self.height = screen_height
        if font is None:
            pygame.font.init()
            font = pygame.font.Font(None, size)
        self.font = font
        self._labels: Dict[Tuple[str, Color], Label] = {}
        self._active = False

    def resize(self, screen_width: int, screen_height: int) -> None:
        self.width = screen_width
        self.height = screen_height

    def begin(self, buffer_size: Optional[Tuple[int, int]] = None) -> None:  # pragma: no cover - visual
        from OpenGL.GL import (
            glViewport,
            glMatrixMode,
            glPushMatrix,
            glLoadIdentity,
            glOrtho,
            glDisable,
            glEnable,
            glBlendFunc,
            GL_PROJECTION,
            GL_MODELVIEW,
            GL_DEPTH_TEST,
            GL_BLEND,
            GL_TEXTURE_2D,
            GL_SRC_ALPHA,
            GL_ONE_MINUS_SRC_ALPHA,
        )

        if self._active:
            return
        if buffer_size is not None:
            glViewport(0, 0, *buffer_size)
        glMatrixMode(GL_PROJECTION)
        glPushMatrix()
        glLoadIdentity()
        glOrtho(0, self.width, self.height, 0, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glPushMatrix()
        glLoadIdentity()
        glDisable(GL_DEPTH_TEST)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
        glEnable(GL_TEXTURE_2D)
        self._active = True

    def end(self) -> None:  # pragma: no cover - visual
        from OpenGL.GL import (
            glMatrixMode,
            glPopMatrix,
            glDisable,
            glEnable,
            GL_PROJECTION,
            GL_MODELVIEW,
            GL_DEPTH_TEST,
            GL_TEXTURE_2D,
        )

        if not self._active:
            return
        glDisable(GL_TEXTURE_2D)
        glEnable(GL_DEPTH_TEST)
        glPopMatrix()
        glMatrixMode(GL_PROJECTION)
        glPopMatrix()
        glMatrixMode(GL_MODELVIEW)
        self._active = False

    def label(self, text: str, color: Color) -> Label:  # pragma: no cover - visual
        key = (text, color)
        label = self._labels.get(key)
        if label is None:
            surface = self.font.render(text, True, color)
            width, height = surface.get_size()
            data = pygame.image.tostring(surface, "RGBA", True)
            label = Label(upload_rgba(data, width, height, nearest=False), (width, height))
            self._labels[key] = label
        return label

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        color: Color = (255, 255, 255, 255),
        *,
        align: str = "topleft",
    ) -> Tuple[int, int]:  # pragma: no cover - visual
        """Draw one line of text anchored at window coords; returns its (w, h)."""
        from OpenGL.GL import (
            glBindTexture,
            glColor4f,
            glEnableClientState,
            glDisableClientState,
            glVertexPointer,
            glTexCoordPointer,
            glDrawArrays,
            GL_TEXTURE_2D,
            GL_FLOAT,
            GL_QUADS,
            GL_VERTEX_ARRAY,
            GL_TEXTURE_COORD_ARRAY,
        )

        label = self.label(text, color)
        w, h = label.size
        left, top = aligned_origin(x, y, w, h, align)

        glBindTexture(GL_TEXTURE_2D, label.texture_id)
        glColor4f(1.0, 1.0, 1.0, 1.0)
        glEnableClientState(GL_VERTEX_ARRAY)
        glEnableClientState(GL_TEXTURE_COORD_ARRAY)
        glVertexPointer(2, GL_FLOAT, 0, quad_vertices(left, top, w, h))
        glTexCoordPointer(2, GL_FLOAT, 0, _QUAD_UVS)
        glDrawArrays(GL_QUADS, 0, 4)
        glDisableClientState(GL_TEXTURE_COORD_ARRAY)
        glDisableClientState(GL_VERTEX_ARRAY)
        return w, h
