"""Shared fixtures.

- seeded random generator
- a renderer stand-in that records calls instead of drawing
- a landing scene driven by a manual clock and scheduler
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np
import pytest

from core.clock import Clock, ManualTimeSource
from core.frame_loop import ManualScheduler
from landing.input_state import InputChannel, InputState, Viewport
from landing.landing_scene import LandingScene
from landing.view_loop import ViewUpdateLoop


@pytest.fixture()
def rng() -> np.random.Generator:
    return np.random.default_rng(12345)


class FakeRenderer:
    def __init__(self, width: int = 1280, height: int = 800) -> None:
        self.sizes: List[Tuple[int, int]] = [(width, height)]
        self.pixel_ratios: List[float] = [1.0]
        self.renders: List[Tuple[object, object]] = []

    def set_size(self, width: int, height: int) -> None:
        self.sizes.append((width, height))

    def set_pixel_ratio(self, ratio: float) -> None:
        self.pixel_ratios.append(ratio)

    def render(self, scene, camera) -> None:
        self.renders.append((scene, camera))


@dataclass
class Harness:
    scene: LandingScene
    channel: InputChannel
    renderer: FakeRenderer
    time: ManualTimeSource
    scheduler: ManualScheduler
    loop: ViewUpdateLoop
    snapshots: list = field(default_factory=list)

    def frame(self, dt: float = 1 / 60):
        """Advance time by dt and run the pending frame."""
        self.time.advance(dt)
        self.scheduler.step()
        return self.loop.frame_count


@pytest.fixture()
def fake_renderer() -> FakeRenderer:
    return FakeRenderer()


@pytest.fixture()
def landing(rng: np.random.Generator, fake_renderer: FakeRenderer) -> Harness:
    channel = InputChannel(InputState(viewport=Viewport(1280, 800)))
    scene = LandingScene(viewport=channel.state.viewport, rng=rng)
    channel.subscribe(scene.resize_listener(fake_renderer))
    time_source = ManualTimeSource()
    scheduler = ManualScheduler()
    loop = ViewUpdateLoop(
        scene.rig,
        scene.meshes,
        fake_renderer,
        scene,
        channel,
        Clock(time_source),
        scheduler,
    )
    return Harness(scene, channel, fake_renderer, time_source, scheduler, loop)
