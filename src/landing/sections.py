"""Decorative meshes, one beside each page section.

Positions are fixed at construction: `y = -spacing * section` lines a mesh up
with the section the camera reaches after scrolling that many viewport
heights. Only rotation changes afterwards (see view_loop).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List

import trimesh
from pygame.math import Vector3

from config import SECTION_SPACING
from core import geometry
from core.material import ToonMaterial
from core.mesh import Mesh


@dataclass(frozen=True)
class SectionMeshSpec:
    name: str
    build: Callable[[], trimesh.Trimesh]
    section: float  # may sit between sections
    x: float


# Draw/animation order
SECTION_LAYOUT = (
    SectionMeshSpec("hero", lambda: geometry.torus(1.3, 0.2, 16, 60), 0.0, 1.5),
    SectionMeshSpec("sphere", lambda: geometry.sphere(0.3, 32, 16), 1.6, -2.0),
    SectionMeshSpec("cone", lambda: geometry.cone(0.3, 0.6, 32), 3.5, 1.3),
    SectionMeshSpec("icosahedron", lambda: geometry.icosahedron(0.3), 2.6, 0.0),
    SectionMeshSpec("capsule", lambda: geometry.capsule(0.3, 0.3, 4, 8), 4.5, -1.2),
)


def section_position(spec: SectionMeshSpec, spacing: float = SECTION_SPACING) -> Vector3:
    return Vector3(spec.x, -spacing * spec.section, 0.0)


def build_section_meshes(material: ToonMaterial, spacing: float = SECTION_SPACING) -> List[Mesh]:
    """Build every mesh in SECTION_LAYOUT, sharing one material."""
    return [
        Mesh(spec.build(), material, position=section_position(spec, spacing), name=spec.name)
        for spec in SECTION_LAYOUT
    ]


__all__ = ["SectionMeshSpec", "SECTION_LAYOUT", "section_position", "build_section_meshes"]
