"""Per-frame camera and mesh update.

Every frame, with no early exit:

1. derive the frame delta from the clock,
2. slide the camera along y with the page scroll (direct, no smoothing),
3. compute a parallax target from the cursor,
4. ease the camera rig toward that target (frame-rate independent),
5. set each decorative mesh's rotation from elapsed time,
6. render synchronously,
7. ask the scheduler for the next frame unless stopped.

Rotation is an absolute function of elapsed time, so any frame can be
reproduced from its timestamp alone.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from camera.camera_rig import CameraRig, smooth_axis
from config import (
    MESH_ROTATION_RATE_X,
    MESH_ROTATION_RATE_Y,
    PARALLAX_GAIN,
    PARALLAX_SMOOTHING,
    SECTION_SPACING,
)
from core.clock import Clock
from core.frame_loop import FrameScheduler
from core.object3d import Object3D
from landing.input_state import Cursor, InputChannel

logger = logging.getLogger(__name__)


def camera_vertical_offset(scroll_y: float, viewport_height: float, spacing: float = SECTION_SPACING) -> float:
    """Camera y for a scroll position: one viewport height scrolls one section.

    Not clamped, scrolling past the last section keeps moving the camera.
    """
    return -(scroll_y / max(viewport_height, 1)) * spacing


def parallax_target(cursor: Cursor, gain: float = PARALLAX_GAIN) -> Tuple[float, float]:
    # Screen y grows downward, world y grows upward
    return (cursor.x * gain, -cursor.y * gain)


def mesh_rotation(
    elapsed: float, rate_x: float = MESH_ROTATION_RATE_X, rate_y: float = MESH_ROTATION_RATE_Y
) -> Tuple[float, float]:
    return (elapsed * rate_x, elapsed * rate_y)


@dataclass(frozen=True)
class FrameSnapshot:
    frame: int
    elapsed: float
    delta: float
    camera_offset: float
    parallax_target: Tuple[float, float]
    rig_position: Tuple[float, float]
    mesh_rotation: Tuple[float, float]


class ViewUpdateLoop:
    def __init__(
        self,
        rig: CameraRig,
        meshes: Sequence[Object3D],
        renderer,
        scene: Object3D,
        channel: InputChannel,
        clock: Clock,
        scheduler: FrameScheduler,
        *,
        spacing: float = SECTION_SPACING,
        gain: float = PARALLAX_GAIN,
        smoothing: float = PARALLAX_SMOOTHING,
        rotation_rates: Tuple[float, float] = (MESH_ROTATION_RATE_X, MESH_ROTATION_RATE_Y),
    ) -> None:
        self.rig = rig
        self.meshes = list(meshes)
        self.renderer = renderer
        self.scene = scene
        self.channel = channel
        self.clock = clock
        self.scheduler = scheduler
        self.spacing = spacing
        self.gain = gain
        self.smoothing = smoothing
        self.rotation_rates = rotation_rates

        self.previous_elapsed = 0.0
        self.frame_count = 0
        self.running = False

    def start(self) -> Optional[FrameSnapshot]:
        """Start the clock and run the first frame; later frames self-schedule.

        Returns None without starting a second frame chain if already running.
        """
        if self.running:
            logger.warning("View loop already running, ignoring start()")
            return None
        self.running = True
        self.previous_elapsed = 0.0
        self.clock.start()
        logger.info("View loop started with %d animated meshes", len(self.meshes))
        return self._frame()

    def stop(self) -> None:
        """The frame in flight (if any) finishes but doesn't reschedule."""
        if self.running:
            logger.info("View loop stopped after %d frames", self.frame_count)
        self.running = False

    def _frame(self) -> FrameSnapshot:
        # Only callback ever handed to the scheduler
        snapshot = self.tick()
        if self.running:
            self.scheduler.request_frame(self._frame)
        return snapshot

    def tick(self) -> FrameSnapshot:
        """Update and render one frame; never schedules another."""
        elapsed = self.clock.get_elapsed_time()
        delta = elapsed - self.previous_elapsed
        self.previous_elapsed = elapsed

        state = self.channel.state

        offset = camera_vertical_offset(state.scroll_y, state.viewport.height, self.spacing)
        self.rig.apply_scroll_offset(offset)

        target_x, target_y = parallax_target(state.cursor, self.gain)
        self.rig.smooth_toward(target_x, target_y, self.smoothing, delta)

        rot_x, rot_y = mesh_rotation(elapsed, *self.rotation_rates)
        for mesh in self.meshes:
            mesh.rotation.x = rot_x
            mesh.rotation.y = rot_y

        self.renderer.render(self.scene, self.rig.camera)
        self.frame_count += 1

        return FrameSnapshot(
            frame=self.frame_count,
            elapsed=elapsed,
            delta=delta,
            camera_offset=offset,
            parallax_target=(target_x, target_y),
            rig_position=(self.rig.position.x, self.rig.position.y),
            mesh_rotation=(rot_x, rot_y),
        )


__all__ = [
    "camera_vertical_offset",
    "parallax_target",
    "smooth_axis",
    "mesh_rotation",
    "FrameSnapshot",
    "ViewUpdateLoop",
]
