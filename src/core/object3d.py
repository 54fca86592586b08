from __future__ import annotations

import math
from typing import Iterator, List, Optional

import numpy as np
from pygame.math import Vector3


def rotation_matrix_xyz(rx: float, ry: float, rz: float) -> np.ndarray:
    """3x3 rotation for Euler angles applied in X, Y, Z order (Rx @ Ry @ Rz)."""
    cx, sx = math.cos(rx), math.sin(rx)
    cy, sy = math.cos(ry), math.sin(ry)
    cz, sz = math.cos(rz), math.sin(rz)
    Rx = np.array([[1.0, 0.0, 0.0], [0.0, cx, -sx], [0.0, sx, cx]], dtype=np.float64)
    Ry = np.array([[cy, 0.0, sy], [0.0, 1.0, 0.0], [-sy, 0.0, cy]], dtype=np.float64)
    Rz = np.array([[cz, -sz, 0.0], [sz, cz, 0.0], [0.0, 0.0, 1.0]], dtype=np.float64)
    return Rx @ Ry @ Rz


def gl_matrix(m: np.ndarray) -> np.ndarray:
    """Row-major 4x4 -> contiguous float32 in the column-major order GL expects."""
    return np.ascontiguousarray(m.T, dtype=np.float32)


class Object3D:
    def __init__(self, position=None, rotation=None, scale=None, name: str = ""):
        self.position = Vector3(position) if position is not None else Vector3(0, 0, 0)
        self.rotation = Vector3(rotation) if rotation is not None else Vector3(0, 0, 0)
        self.scale = Vector3(scale) if scale is not None else Vector3(1, 1, 1)
        self.name = name
        self.visible = True
        self.parent: Optional[Object3D] = None
        self.children: List[Object3D] = []

    def add(self, *children: "Object3D") -> "Object3D":
        for child in children:
            if child is self:
                raise ValueError("an object can't be added as a child of itself")
            if child.parent is not None:
                child.parent.remove(child)
            child.parent = self
            self.children.append(child)
        return self

    def remove(self, child: "Object3D") -> None:
        if child in self.children:
            self.children.remove(child)
            child.parent = None

    def traverse(self) -> Iterator["Object3D"]:
        yield self
        for child in self.children:
            yield from child.traverse()

    def rotation_matrix(self) -> np.ndarray:
        return rotation_matrix_xyz(self.rotation.x, self.rotation.y, self.rotation.z)

    def local_matrix(self) -> np.ndarray:
        """4x4 local transform: translate * rotate(XYZ) * scale."""
        m = np.eye(4, dtype=np.float64)
        m[:3, :3] = self.rotation_matrix() * np.array(
            [self.scale.x, self.scale.y, self.scale.z], dtype=np.float64
        )
        m[:3, 3] = (self.position.x, self.position.y, self.position.z)
        return m

    def world_matrix(self) -> np.ndarray:
        m = self.local_matrix()
        node = self.parent
        while node is not None:
            m = node.local_matrix() @ m
            node = node.parent
        return m

    def world_position(self) -> Vector3:
        x, y, z = self.world_matrix()[:3, 3]
        return Vector3(float(x), float(y), float(z))

    def world_rotation_matrix(self) -> np.ndarray:
        """World rotation with scale removed (columns normalized)."""
        m = self.world_matrix()[:3, :3]
        norms = np.linalg.norm(m, axis=0)
        norms[norms == 0] = 1.0
        return m / norms

    def draw_self(self) -> None:  # pragma: no cover - visual
        # Plain nodes have nothing of their own to draw
        pass

    def draw(self) -> None:  # pragma: no cover - visual
        """Draw this node and its children under the node's local transform."""
        from OpenGL.GL import glPushMatrix, glPopMatrix, glMultMatrixf

        glPushMatrix()
        # OpenGL expects column-major order
        glMultMatrixf(gl_matrix(self.local_matrix()))
        self.draw_self()
        for child in self.children:
            if child.visible:
                child.draw()
        glPopMatrix()


class Group(Object3D):
    """Transform-only node used to move several objects together."""
