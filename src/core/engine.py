"""Host window, event pump and frame scheduling.

Separates concerns:
- Engine: sets up the window and GL state, turns pygame events into input
  events, and hosts the frame scheduler.
- LandingScene: owns the scene graph (meshes, particles, camera rig, model).
- ViewUpdateLoop: per-frame camera/mesh update; schedules itself.
"""

from __future__ import annotations

import logging
import time

import pygame

from config import FPS, FULLSCREEN, HEIGHT, MAX_PIXEL_RATIO, SCROLL_STEP, VSYNC, WIDTH
from core.clock import Clock
from core.frame_loop import PygameScheduler
from core.renderer import Renderer
from landing.input_state import (
    InputChannel,
    InputState,
    PointerMove,
    Resize,
    Scroll,
    ScrollBy,
    Viewport,
)
from landing.landing_scene import LandingScene
from landing.view_loop import ViewUpdateLoop
from logging_config import log_timing
from textures.texture_utils import load_texture
from ui.section_overlay import SectionOverlay
from ui.text_renderer import TextRenderer

logger = logging.getLogger(__name__)

# Keyboard scrolling, in multiples of the viewport height
_PAGE_KEYS = {
    pygame.K_PAGEDOWN: 1.0,
    pygame.K_PAGEUP: -1.0,
    pygame.K_SPACE: 1.0,
}
_LINE_KEYS = {
    pygame.K_DOWN: 1.0,
    pygame.K_UP: -1.0,
}


def display_pixel_ratio() -> float:
    """Drawable pixels per window pixel, clamped like the renderer expects."""
    window_w, _ = pygame.display.get_window_size()
    surface = pygame.display.get_surface()
    if surface is None or window_w <= 0:
        return 1.0
    return min(max(surface.get_width() / window_w, 1.0), MAX_PIXEL_RATIO)


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class Engine:
    def __init__(self):
        pygame.init()
        pygame.display.gl_set_attribute(pygame.GL_DEPTH_SIZE, 24)
        pygame.display.gl_set_attribute(pygame.GL_ALPHA_SIZE, 8)
        pygame.display.gl_set_attribute(pygame.GL_MULTISAMPLEBUFFERS, 1)
        pygame.display.gl_set_attribute(pygame.GL_MULTISAMPLESAMPLES, 4)
        pygame.display.set_caption("Landing")
        flags = pygame.DOUBLEBUF | pygame.OPENGL | pygame.RESIZABLE
        if FULLSCREEN:
            flags |= pygame.FULLSCREEN
        try:
            # vsync: 1 to enable, 0 to disable
            pygame.display.set_mode((WIDTH, HEIGHT), flags, vsync=(1 if VSYNC else 0))
        except pygame.error:
            # vsync was requested but is unavailable on this system/driver
            pygame.display.set_mode((WIDTH, HEIGHT), flags)

        width, height = pygame.display.get_window_size()
        self.channel = InputChannel(
            InputState(viewport=Viewport(width, height), pixel_ratio=display_pixel_ratio())
        )
        state = self.channel.state

        self.renderer = Renderer(state.viewport.width, state.viewport.height, alpha=True)
        self.renderer.set_pixel_ratio(state.pixel_ratio)
        self.renderer.init_gl()

        start_time = time.perf_counter()
        self.scene = LandingScene(viewport=state.viewport, texture_factory=load_texture)
        self.scene.load_model()
        log_timing(logger, "Building landing scene", start_time, time.perf_counter())

        self.channel.subscribe(self.scene.resize_listener(self.renderer))

        self.overlay = SectionOverlay()
        self.text = TextRenderer(state.viewport.width, state.viewport.height)

        self.scheduler = PygameScheduler(
            fps=FPS,
            vsync=VSYNC,
            before_frame=self.handle_events,
            after_frame=self.present,
        )
        self.loop = ViewUpdateLoop(
            self.scene.rig,
            self.scene.meshes,
            self.renderer,
            self.scene,
            self.channel,
            Clock(),
            self.scheduler,
        )

    # ------------------------------------------------------------------
    def handle_event(self, event) -> None:
        state = self.channel.state
        if event.type == pygame.QUIT:
            self.loop.stop()
        elif event.type == pygame.KEYDOWN:
            self._handle_key(event.key, state)
        elif event.type in (pygame.VIDEORESIZE, pygame.WINDOWRESIZED, pygame.WINDOWSIZECHANGED):
            width, height = pygame.display.get_window_size()
            self.channel.dispatch(Resize(width, height, display_pixel_ratio()))
        elif event.type == pygame.MOUSEWHEEL:
            # Wheel up (positive y) scrolls toward the top of the page
            self.channel.dispatch(ScrollBy(-event.y * SCROLL_STEP))
        elif event.type == pygame.MOUSEMOTION:
            x, y = event.pos
            self.channel.dispatch(PointerMove(x, y))

    def _handle_key(self, key: int, state: InputState) -> None:
        if key == pygame.K_ESCAPE:
            self.loop.stop()
        elif key in _PAGE_KEYS:
            self.channel.dispatch(ScrollBy(_PAGE_KEYS[key] * state.viewport.height))
        elif key in _LINE_KEYS:
            self.channel.dispatch(ScrollBy(_LINE_KEYS[key] * SCROLL_STEP))
        elif key == pygame.K_HOME:
            self.channel.dispatch(Scroll(0.0))
        elif key == pygame.K_END:
            self.channel.dispatch(Scroll(state.max_scroll))

    def handle_events(self) -> None:
        for event in pygame.event.get():
            self.handle_event(event)

    # ------------------------------------------------------------------
    def present(self) -> None:  # pragma: no cover - visual
        self.overlay.draw(self.text, self.channel.state, self.renderer.drawing_buffer_size())
        pygame.display.flip()

    # ------------------------------------------------------------------
    def run(self):  # pragma: no cover - visual
        self.loop.start()
        self.present()
        try:
            self.scheduler.run()
        finally:
            logger.info(
                "Shutting down after %d frames (%.1f fps)", self.loop.frame_count, self.scheduler.get_fps()
            )
            pygame.quit()
