"""Texture loading utilities for OpenGL.

GL entry points are imported where they are used so the pixel helpers can be
used (and tested) without a GL context.
"""

import logging
from typing import Optional

import numpy as np
import pygame

logger = logging.getLogger(__name__)


def gradient_pixels(steps: int = 3, width: Optional[int] = None) -> np.ndarray:
    """Build a dark-to-light ramp of `steps` flat tones as an (1, W, 4) RGBA array.

    Each step is one texel wide by default, matching the tiny gradient maps
    toon materials sample with nearest filtering.
    """
    if steps < 1:
        raise ValueError("A gradient needs at least one step")
    width = width or steps
    # Tone of each column: which step it falls into, spread over 0..255
    step_index = (np.arange(width) * steps) // width
    if steps == 1:
        tones = np.full(width, 255, dtype=np.uint8)
    else:
        tones = np.round(step_index * 255.0 / (steps - 1)).astype(np.uint8)
    pixels = np.empty((1, width, 4), dtype=np.uint8)
    pixels[0, :, 0] = tones
    pixels[0, :, 1] = tones
    pixels[0, :, 2] = tones
    pixels[0, :, 3] = 255
    return pixels


def upload_rgba(data: bytes, width: int, height: int, *, nearest: bool) -> int:
    from OpenGL.GL import (
        glGenTextures,
        glBindTexture,
        glTexImage2D,
        glTexParameteri,
        GL_TEXTURE_2D,
        GL_RGBA,
        GL_UNSIGNED_BYTE,
        GL_TEXTURE_MIN_FILTER,
        GL_TEXTURE_MAG_FILTER,
        GL_TEXTURE_WRAP_S,
        GL_TEXTURE_WRAP_T,
        GL_NEAREST,
        GL_LINEAR,
        GL_CLAMP_TO_EDGE,
    )

    texture_id = glGenTextures(1)
    glBindTexture(GL_TEXTURE_2D, texture_id)
    glTexImage2D(
        GL_TEXTURE_2D,
        0,
        GL_RGBA,
        width,
        height,
        0,
        GL_RGBA,
        GL_UNSIGNED_BYTE,
        data,
    )
    # Nearest keeps gradient tones from blending into each other
    gl_filter = GL_NEAREST if nearest else GL_LINEAR
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, gl_filter)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, gl_filter)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_S, GL_CLAMP_TO_EDGE)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_T, GL_CLAMP_TO_EDGE)

    return texture_id


def load_texture(filename, *, nearest: bool = True):
    """Load a texture from an image file.

    Parameters
    ----------
    filename : str
        Path to the image file
    nearest : bool
        Use nearest-neighbour filtering (what gradient maps need)

    Returns
    -------
    int
        OpenGL texture ID. A generated 3-tone gradient is returned when the
        file can't be read.
    """
    try:
        surface = pygame.image.load(filename)
    except (pygame.error, FileNotFoundError) as e:
        logger.error("Failed to load texture %s: %s", filename, e)
        return create_gradient_texture()

    surface = surface.convert_alpha() if pygame.display.get_surface() else surface
    texture_data = pygame.image.tostring(surface, "RGBA", True)
    width, height = surface.get_size()
    texture_id = upload_rgba(texture_data, width, height, nearest=nearest)
    logger.debug("Loaded texture: %s (ID: %s, Size: %sx%s)", filename, texture_id, width, height)
    return texture_id


def create_gradient_texture(steps: int = 3):
    """Upload the fallback toon gradient (see gradient_pixels)."""
    pixels = gradient_pixels(steps)
    height, width = pixels.shape[0], pixels.shape[1]
    texture_id = upload_rgba(pixels.tobytes(), width, height, nearest=True)
    logger.info("Created %d-tone fallback gradient texture (ID: %s)", steps, texture_id)
    return texture_id
