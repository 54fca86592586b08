"""Procedural primitives for the decorative section meshes.

Geometry generation is delegated to trimesh. trimesh builds cones and
capsules around +Z; they are turned so their axis is +Y and centered on the
origin, which keeps every primitive spinning about its own middle.
"""

from __future__ import annotations

import math
from typing import Tuple

import numpy as np
import trimesh
from trimesh import transformations


# Maps the +Z axis onto +Y
_Z_TO_Y = transformations.rotation_matrix(-math.pi / 2.0, [1.0, 0.0, 0.0])


def torus(radius: float = 1.3, tube: float = 0.2, radial_segments: int = 16, tubular_segments: int = 60) -> trimesh.Trimesh:
    # trimesh's torus lies in the XY plane, facing the camera like the original ring
    return trimesh.creation.torus(
        major_radius=radius,
        minor_radius=tube,
        major_sections=tubular_segments,
        minor_sections=radial_segments,
    )


def sphere(radius: float = 0.3, width_segments: int = 32, height_segments: int = 16) -> trimesh.Trimesh:
    return trimesh.creation.uv_sphere(radius=radius, count=[height_segments, width_segments])


def icosahedron(radius: float = 0.3) -> trimesh.Trimesh:
    mesh = trimesh.creation.icosahedron()
    mesh.apply_scale(radius)
    return mesh


def cone(radius: float = 0.3, height: float = 0.6, radial_segments: int = 32) -> trimesh.Trimesh:
    mesh = trimesh.creation.cone(radius=radius, height=height, sections=radial_segments)
    mesh.apply_translation([0.0, 0.0, -height / 2.0])
    mesh.apply_transform(_Z_TO_Y)
    return mesh


def capsule(radius: float = 0.3, length: float = 0.3, cap_segments: int = 4, radial_segments: int = 8) -> trimesh.Trimesh:
    mesh = trimesh.creation.capsule(
        height=length, radius=radius, count=[cap_segments * 2, radial_segments]
    )
    mesh.apply_transform(_Z_TO_Y)
    return mesh


def wireframe_arrays(mesh: trimesh.Trimesh) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Return (vertices, vertex normals, unique edges) ready for GL_LINES."""
    vertices = np.ascontiguousarray(mesh.vertices, dtype=np.float32)
    normals = np.ascontiguousarray(mesh.vertex_normals, dtype=np.float32)
    edges = np.ascontiguousarray(mesh.edges_unique, dtype=np.uint32)
    return vertices, normals, edges


__all__ = ["torus", "sphere", "icosahedron", "cone", "capsule", "wireframe_arrays"]
