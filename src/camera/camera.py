import math

import numpy as np

from core.object3d import Object3D


def perspective_matrix(fov: float, aspect: float, near: float, far: float) -> np.ndarray:
    """OpenGL-style projection matrix (same formula as gluPerspective)."""
    f = 1.0 / math.tan(math.radians(fov) / 2.0)
    m = np.zeros((4, 4), dtype=np.float64)
    m[0, 0] = f / aspect
    m[1, 1] = f
    m[2, 2] = (far + near) / (near - far)
    m[2, 3] = (2.0 * far * near) / (near - far)
    m[3, 2] = -1.0
    return m


class PerspectiveCamera(Object3D):
    def __init__(self, fov=75, aspect=1.0, near=0.1, far=100, position=None):
        super().__init__(position=position, name="camera")
        self.fov = float(fov)
        self.aspect = float(aspect)
        self.near = float(near)
        self.far = float(far)
        self.projection_matrix = np.eye(4, dtype=np.float64)
        self.update_projection_matrix()

    def update_projection_matrix(self) -> None:
        """Recompute the projection after fov/aspect/near/far change."""
        self.projection_matrix = perspective_matrix(self.fov, self.aspect, self.near, self.far)

    def view_matrix(self) -> np.ndarray:
        """World -> camera transform (inverse of the camera's world matrix)."""
        return np.linalg.inv(self.world_matrix())
