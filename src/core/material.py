"""Materials for the section meshes and the particle field.

ToonMaterial reproduces cel shading without shaders: each vertex gets a
texture coordinate from how much it faces the light, and that coordinate
samples a small gradient texture with nearest filtering, so the shade snaps
to the gradient's discrete tones.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

Color = Tuple[float, float, float]


def parse_color(value) -> Color:
    """Accept '#rrggbb', 'rrggbb', or an RGB tuple in 0..1 and return floats."""
    if isinstance(value, str):
        hex_str = value.lstrip("#")
        if len(hex_str) != 6:
            raise ValueError(f"Expected a #rrggbb colour, got {value!r}")
        r, g, b = (int(hex_str[i : i + 2], 16) / 255.0 for i in (0, 2, 4))
        return (r, g, b)
    r, g, b = value
    return (float(r), float(g), float(b))


def light_direction(position) -> np.ndarray:
    """Unit vector from the origin toward a directional light's position."""
    d = np.asarray(position, dtype=np.float64)
    length = np.linalg.norm(d)
    if length == 0:
        raise ValueError("Directional light position can't be the origin")
    return d / length


@dataclass
class ToonMaterial:
    color: Color = (1.0, 1.0, 1.0)
    gradient_map: Optional[int] = None  # GL texture id, nearest filtered
    wireframe: bool = True
    line_width: float = 1.5

    def __post_init__(self) -> None:
        self.color = parse_color(self.color)

    @staticmethod
    def shade_coords(normals: np.ndarray, rotation: np.ndarray, light_dir: np.ndarray) -> np.ndarray:
        """Gradient lookup coordinate per vertex: 0.5 * dot(n_world, L) + 0.5."""
        world_normals = normals @ rotation.T
        dots = world_normals @ np.asarray(light_dir, dtype=np.float64)
        u = np.clip(0.5 * dots + 0.5, 0.0, 1.0)
        coords = np.empty((len(u), 2), dtype=np.float32)
        coords[:, 0] = u
        coords[:, 1] = 0.5
        return coords


@dataclass
class PointsMaterial:
    color: Color = (1.0, 1.0, 1.0)
    size: float = 0.03
    size_attenuation: bool = True

    def __post_init__(self) -> None:
        self.color = parse_color(self.color)

    def point_scale(self, viewport_height: float) -> float:
        """Pixel size at distance 1; GL divides by eye distance when attenuating."""
        if not self.size_attenuation:
            return self.size
        return self.size * max(viewport_height, 1) / 2.0


__all__ = ["parse_color", "light_direction", "ToonMaterial", "PointsMaterial"]
