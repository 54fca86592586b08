"""Camera rig: a parent group that carries the perspective camera.

The rig's x/y drift toward a parallax target set from the cursor while the
camera itself slides along y with the page scroll. Keeping the two motions on
separate nodes lets each be driven independently every frame.
"""

from __future__ import annotations

from camera.camera import PerspectiveCamera
from core.object3d import Group


def smooth_axis(current: float, target: float, rate: float, dt: float) -> float:
    """First-order low-pass step of `current` toward `target`.

    Moves the fraction `rate * dt` of the remaining distance. No clamping is
    applied, so `rate * dt > 1` overshoots the target.
    """
    return current + (target - current) * rate * dt


class CameraRig(Group):
    def __init__(self, camera: PerspectiveCamera, *, base_depth: float = 6.0) -> None:
        super().__init__(name="camera_rig")
        self.camera = camera
        self.camera.position.z = base_depth
        self.add(camera)

    def apply_scroll_offset(self, offset: float) -> None:
        """Set the camera's local y directly (no smoothing)."""
        self.camera.position.y = offset

    def smooth_toward(self, target_x: float, target_y: float, rate: float, dt: float) -> None:
        self.position.x = smooth_axis(self.position.x, target_x, rate, dt)
        self.position.y = smooth_axis(self.position.y, target_y, rate, dt)


__all__ = ["CameraRig", "smooth_axis"]
