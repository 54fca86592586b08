"""Drawable scene nodes: toon wireframe meshes, point clouds and loaded models.

Vertex data is kept as numpy arrays so transforms and shading can be
computed (and tested) without a GL context; GL buffers are created lazily
on the first draw.
"""

from __future__ import annotations

from typing import Iterable, Optional

import numpy as np
import trimesh

from core.geometry import wireframe_arrays
from core.material import PointsMaterial, ToonMaterial
from core.object3d import Object3D


_DEFAULT_LIGHT_DIR = np.array([0.0, 0.0, 1.0], dtype=np.float64)


class Mesh(Object3D):
    """Wireframe mesh shaded through a ToonMaterial's gradient map."""

    def __init__(self, geometry: trimesh.Trimesh, material: ToonMaterial, position=None, name: str = ""):
        super().__init__(position=position, name=name)
        self.geometry = geometry
        self.material = material
        self.vertices, self.normals, self.edges = wireframe_arrays(geometry)
        # Set by the scene from its directional light
        self.light_dir = _DEFAULT_LIGHT_DIR
        self.light_color = (1.0, 1.0, 1.0)
        self._vbo: Optional[int] = None

    def shade_coords(self) -> np.ndarray:
        return self.material.shade_coords(self.normals, self.world_rotation_matrix(), self.light_dir)

    def _ensure_vbo(self) -> int:  # pragma: no cover - visual
        if self._vbo is None:
            from OpenGL.GL import glGenBuffers, glBindBuffer, glBufferData, GL_ARRAY_BUFFER, GL_STATIC_DRAW

            self._vbo = glGenBuffers(1)
            glBindBuffer(GL_ARRAY_BUFFER, self._vbo)
            glBufferData(GL_ARRAY_BUFFER, self.vertices.nbytes, self.vertices, GL_STATIC_DRAW)
            glBindBuffer(GL_ARRAY_BUFFER, 0)
        return self._vbo

    def draw_self(self) -> None:  # pragma: no cover - visual
        from OpenGL.GL import (
            glBindBuffer,
            glEnableClientState,
            glDisableClientState,
            glVertexPointer,
            glTexCoordPointer,
            glColorPointer,
            glDrawElements,
            glBindTexture,
            glEnable,
            glDisable,
            glColor3f,
            glLineWidth,
            GL_ARRAY_BUFFER,
            GL_FLOAT,
            GL_LINES,
            GL_TRIANGLES,
            GL_UNSIGNED_INT,
            GL_VERTEX_ARRAY,
            GL_TEXTURE_COORD_ARRAY,
            GL_COLOR_ARRAY,
            GL_TEXTURE_2D,
        )

        if len(self.edges) == 0:
            return
        coords = self.shade_coords()
        r, g, b = (c * l for c, l in zip(self.material.color, self.light_color))

        glBindBuffer(GL_ARRAY_BUFFER, self._ensure_vbo())
        glEnableClientState(GL_VERTEX_ARRAY)
        glVertexPointer(3, GL_FLOAT, 0, None)
        # Shading coordinates change every frame, stream them from client memory
        glBindBuffer(GL_ARRAY_BUFFER, 0)

        if self.material.gradient_map is not None:
            glEnableClientState(GL_TEXTURE_COORD_ARRAY)
            glTexCoordPointer(2, GL_FLOAT, 0, coords)
            glEnable(GL_TEXTURE_2D)
            glBindTexture(GL_TEXTURE_2D, self.material.gradient_map)
            glColor3f(r, g, b)
        else:
            colors = np.outer(coords[:, 0], (r, g, b)).astype(np.float32)
            glEnableClientState(GL_COLOR_ARRAY)
            glColorPointer(3, GL_FLOAT, 0, colors)

        if self.material.wireframe:
            glLineWidth(self.material.line_width)
            glDrawElements(GL_LINES, self.edges.size, GL_UNSIGNED_INT, self.edges)
        else:
            faces = np.ascontiguousarray(self.geometry.faces, dtype=np.uint32)
            glDrawElements(GL_TRIANGLES, faces.size, GL_UNSIGNED_INT, faces)

        glDisable(GL_TEXTURE_2D)
        glDisableClientState(GL_COLOR_ARRAY)
        glDisableClientState(GL_TEXTURE_COORD_ARRAY)
        glDisableClientState(GL_VERTEX_ARRAY)


class Points(Object3D):
    """Static point cloud drawn with distance-attenuated point sizes."""

    def __init__(self, positions: np.ndarray, material: PointsMaterial, name: str = ""):
        super().__init__(name=name)
        positions = np.ascontiguousarray(positions, dtype=np.float32)
        if positions.ndim != 2 or positions.shape[1] != 3:
            raise ValueError(f"Expected (N, 3) positions, got shape {positions.shape}")
        self.positions = positions
        self.material = material
        self._vbo: Optional[int] = None

    @property
    def count(self) -> int:
        return int(self.positions.shape[0])

    def draw_self(self) -> None:  # pragma: no cover - visual
        from OpenGL.GL import (
            glGenBuffers,
            glBindBuffer,
            glBufferData,
            glEnableClientState,
            glDisableClientState,
            glVertexPointer,
            glDrawArrays,
            glPointSize,
            glPointParameterfv,
            glGetIntegerv,
            glColor3f,
            GL_ARRAY_BUFFER,
            GL_STATIC_DRAW,
            GL_FLOAT,
            GL_POINTS,
            GL_VERTEX_ARRAY,
            GL_VIEWPORT,
            GL_POINT_DISTANCE_ATTENUATION,
        )

        if self._vbo is None:
            self._vbo = glGenBuffers(1)
            glBindBuffer(GL_ARRAY_BUFFER, self._vbo)
            glBufferData(GL_ARRAY_BUFFER, self.positions.nbytes, self.positions, GL_STATIC_DRAW)

        viewport_height = int(glGetIntegerv(GL_VIEWPORT)[3])
        glPointSize(max(1.0, self.material.point_scale(viewport_height)))
        # size / distance, like sizeAttenuation in a points shader
        attenuation = (0.0, 0.0, 1.0) if self.material.size_attenuation else (1.0, 0.0, 0.0)
        glPointParameterfv(GL_POINT_DISTANCE_ATTENUATION, attenuation)

        glColor3f(*self.material.color)
        glBindBuffer(GL_ARRAY_BUFFER, self._vbo)
        glEnableClientState(GL_VERTEX_ARRAY)
        glVertexPointer(3, GL_FLOAT, 0, None)
        glDrawArrays(GL_POINTS, 0, self.count)
        glDisableClientState(GL_VERTEX_ARRAY)
        glBindBuffer(GL_ARRAY_BUFFER, 0)


def _vertex_colors(mesh: trimesh.Trimesh) -> np.ndarray:
    visual = mesh.visual
    if visual.kind == "texture":
        visual = visual.to_color()
    colors = np.asarray(visual.vertex_colors, dtype=np.float32)
    return colors[:, :3] / 255.0


class ModelMesh(Object3D):
    """A loaded model flattened into one triangle list with per-vertex colours."""

    def __init__(self, vertices: np.ndarray, normals: np.ndarray, colors: np.ndarray, faces: np.ndarray, name: str = ""):
        super().__init__(name=name)
        self.vertices = np.ascontiguousarray(vertices, dtype=np.float32)
        self.normals = np.ascontiguousarray(normals, dtype=np.float32)
        self.colors = np.ascontiguousarray(colors, dtype=np.float32)
        self.faces = np.ascontiguousarray(faces, dtype=np.uint32)
        self.light_dir = _DEFAULT_LIGHT_DIR
        self.light_color = (1.0, 1.0, 1.0)
        self._lit_colors: Optional[np.ndarray] = None

    @classmethod
    def from_meshes(cls, meshes: Iterable[trimesh.Trimesh], name: str = "") -> "ModelMesh":
        meshes = [m for m in meshes if isinstance(m, trimesh.Trimesh) and len(m.faces)]
        if not meshes:
            raise ValueError("Model has no triangle geometry")
        vertices, normals, colors, faces = [], [], [], []
        offset = 0
        for m in meshes:
            vertices.append(np.asarray(m.vertices, dtype=np.float32))
            normals.append(np.asarray(m.vertex_normals, dtype=np.float32))
            colors.append(_vertex_colors(m))
            faces.append(np.asarray(m.faces, dtype=np.uint32) + offset)
            offset += len(m.vertices)
        return cls(np.vstack(vertices), np.vstack(normals), np.vstack(colors), np.vstack(faces), name=name)

    @classmethod
    def from_scene(cls, scene: trimesh.Scene, name: str = "") -> "ModelMesh":
        # dump() bakes each node's transform into a copy of its geometry
        return cls.from_meshes(scene.dump(), name=name)

    @property
    def triangle_count(self) -> int:
        return int(self.faces.shape[0])

    def lit_colors(self) -> np.ndarray:
        """Lambert-lit vertex colours for the current placement (cached)."""
        if self._lit_colors is None:
            world_normals = self.normals @ self.world_rotation_matrix().T
            lambert = np.clip(world_normals @ np.asarray(self.light_dir, dtype=np.float64), 0.0, 1.0)
            lit = self.colors * lambert[:, None] * np.asarray(self.light_color, dtype=np.float32)
            self._lit_colors = np.ascontiguousarray(lit, dtype=np.float32)
        return self._lit_colors

    def invalidate_lighting(self) -> None:
        self._lit_colors = None

    def draw_self(self) -> None:  # pragma: no cover - visual
        from OpenGL.GL import (
            glEnableClientState,
            glDisableClientState,
            glVertexPointer,
            glColorPointer,
            glDrawElements,
            GL_FLOAT,
            GL_TRIANGLES,
            GL_UNSIGNED_INT,
            GL_VERTEX_ARRAY,
            GL_COLOR_ARRAY,
        )

        glEnableClientState(GL_VERTEX_ARRAY)
        glVertexPointer(3, GL_FLOAT, 0, self.vertices)
        glEnableClientState(GL_COLOR_ARRAY)
        glColorPointer(3, GL_FLOAT, 0, self.lit_colors())
        glDrawElements(GL_TRIANGLES, self.faces.size, GL_UNSIGNED_INT, self.faces)
        glDisableClientState(GL_COLOR_ARRAY)
        glDisableClientState(GL_VERTEX_ARRAY)


__all__ = ["Mesh", "Points", "ModelMesh"]
