"""Frame scheduling.

A frame callback asks the scheduler for the next frame itself (like
requestAnimationFrame) instead of looping internally, so host events can be
handled between frames. Two schedulers implement the same small protocol:

- PygameScheduler: paced by the display; pumps window events before each frame.
- ManualScheduler: frames run only when `step()` is called (tests, headless).
"""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Optional, Protocol

import pygame

FrameCallback = Callable[[], object]


class FrameScheduler(Protocol):
    def request_frame(self, callback: FrameCallback) -> None: ...


class ManualScheduler:
    def __init__(self) -> None:
        self._pending: Deque[FrameCallback] = deque()
        self.frames_run = 0

    def request_frame(self, callback: FrameCallback) -> None:
        self._pending.append(callback)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def step(self) -> int:
        """Run the callbacks queued before this call; returns how many ran.

        Callbacks requested while stepping wait for the next step.
        """
        callbacks = list(self._pending)
        self._pending.clear()
        for callback in callbacks:
            callback()
        if callbacks:
            self.frames_run += 1
        return len(callbacks)

    def run(self, frames: int) -> int:
        """Step up to `frames` times, stopping early once nothing is queued."""
        ran = 0
        for _ in range(frames):
            if not self.step():
                break
            ran += 1
        return ran


class PygameScheduler:
    def __init__(
        self,
        *,
        fps: int = 60,
        vsync: bool = True,
        before_frame: Optional[Callable[[], None]] = None,
        after_frame: Optional[Callable[[], None]] = None,
    ) -> None:
        self.fps = fps
        self.vsync = vsync
        self.before_frame = before_frame
        self.after_frame = after_frame
        self._clock = pygame.time.Clock()
        self._pending: Deque[FrameCallback] = deque()

    def request_frame(self, callback: FrameCallback) -> None:
        self._pending.append(callback)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def get_fps(self) -> float:
        return self._clock.get_fps()

    def run(self) -> None:  # pragma: no cover - visual
        """Run frames until no callback re-registers itself."""
        while self._pending:
            # Without vsync don't cap; with vsync keep the cap as a safety net
            # for drivers that don't honor it.
            if self.vsync:
                self._clock.tick(self.fps)
            else:
                self._clock.tick()
            if self.before_frame is not None:
                self.before_frame()
            callbacks = list(self._pending)
            self._pending.clear()
            for callback in callbacks:
                callback()
            if self.after_frame is not None:
                self.after_frame()
