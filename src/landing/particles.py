from __future__ import annotations

from typing import Optional

import numpy as np

from config import (
    MATERIAL_COLOR,
    PARTICLE_SIZE,
    PARTICLE_SPREAD,
    PARTICLES_COUNT,
    SECTION_SPACING,
    SECTIONS_COUNT,
)
from core.material import PointsMaterial
from core.mesh import Points


def particle_positions(
    count: int = PARTICLES_COUNT,
    spacing: float = SECTION_SPACING,
    sections: int = SECTIONS_COUNT,
    spread: float = PARTICLE_SPREAD,
    rng: Optional[np.random.Generator] = None,
) -> np.ndarray:
    """Random (count, 3) positions filling the volume behind every section.

    x and z cover [-spread/2, spread/2); y runs from half a section above the
    first mesh down through the last section.
    """
    if count <= 0:
        raise ValueError(f"Particle count must be positive, got {count}")
    rng = rng or np.random.default_rng()
    r = rng.random((count, 3))
    positions = np.empty((count, 3), dtype=np.float32)
    positions[:, 0] = (r[:, 0] - 0.5) * spread
    positions[:, 1] = spacing * 0.5 - r[:, 1] * spacing * sections
    positions[:, 2] = (r[:, 2] - 0.5) * spread
    return positions


class ParticleField(Points):
    """Ambient points; positions are generated once and frozen."""

    def __init__(
        self,
        count: int = PARTICLES_COUNT,
        *,
        spacing: float = SECTION_SPACING,
        sections: int = SECTIONS_COUNT,
        spread: float = PARTICLE_SPREAD,
        rng: Optional[np.random.Generator] = None,
        material: Optional[PointsMaterial] = None,
    ) -> None:
        positions = particle_positions(count, spacing, sections, spread, rng)
        super().__init__(
            positions,
            material or PointsMaterial(color=MATERIAL_COLOR, size=PARTICLE_SIZE, size_attenuation=True),
            name="particles",
        )
        self.positions.flags.writeable = False
