"""Landing scene: section meshes, particles, light, camera rig and the model.

Everything GL-dependent is injected (`texture_factory`) or deferred to draw
time, so the whole graph can be assembled without a window.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional

import numpy as np

from camera import CameraRig, PerspectiveCamera
from config import (
    CAMERA_BASE_DEPTH,
    CAMERA_FAR,
    CAMERA_FOV,
    CAMERA_NEAR,
    CLEAR_COLOR,
    LIGHT_COLOR,
    LIGHT_INTENSITY,
    LIGHT_POSITION,
    MATERIAL_COLOR,
    PARTICLES_COUNT,
    SECTION_SPACING,
    SECTIONS_COUNT,
    WIREFRAME_LINE_WIDTH,
)
from core.material import ToonMaterial
from core.mesh import Mesh, ModelMesh
from core.scene import DirectionalLight, Scene
from landing.input_state import InputEvent, InputState, Resize, Viewport
from landing.model_loader import ModelLoader, place_model
from landing.particles import ParticleField
from landing.sections import build_section_meshes
from logging_config import log_timing
from textures.resourcepath import GRADIENT_TEXTURE_PATH, MODEL_PATH

logger = logging.getLogger(__name__)

TextureFactory = Callable[[str], int]


class LandingScene(Scene):
    def __init__(
        self,
        *,
        viewport: Optional[Viewport] = None,
        texture_factory: Optional[TextureFactory] = None,
        model_loader: Optional[ModelLoader] = None,
        rng: Optional[np.random.Generator] = None,
        spacing: float = SECTION_SPACING,
        sections: int = SECTIONS_COUNT,
        particles_count: int = PARTICLES_COUNT,
    ) -> None:
        super().__init__(clear_color=CLEAR_COLOR)
        viewport = viewport or Viewport()
        self.spacing = spacing

        start_time = time.perf_counter()
        gradient = texture_factory(GRADIENT_TEXTURE_PATH) if texture_factory is not None else None
        self.material = ToonMaterial(
            color=MATERIAL_COLOR,
            gradient_map=gradient,
            wireframe=True,
            line_width=WIREFRAME_LINE_WIDTH,
        )
        log_timing(logger, "Loading materials", start_time, time.perf_counter())

        start_time = time.perf_counter()
        self.meshes: List[Mesh] = build_section_meshes(self.material, spacing)
        self.add(*self.meshes)
        log_timing(logger, "Building section meshes", start_time, time.perf_counter())

        start_time = time.perf_counter()
        self.particles = ParticleField(particles_count, spacing=spacing, sections=sections, rng=rng)
        self.add(self.particles)
        log_timing(logger, "Generating particles", start_time, time.perf_counter())

        self.light = DirectionalLight(color=LIGHT_COLOR, intensity=LIGHT_INTENSITY, position=LIGHT_POSITION)
        self.add(self.light)

        self.camera = PerspectiveCamera(CAMERA_FOV, viewport.aspect, CAMERA_NEAR, CAMERA_FAR)
        self.rig = CameraRig(self.camera, base_depth=CAMERA_BASE_DEPTH)
        self.add(self.rig)

        self.apply_lighting()

        self.model: Optional[ModelMesh] = None
        self.model_loader = model_loader or ModelLoader()

        logger.info(
            "Landing scene assembled: %d meshes, %d particles",
            len(self.meshes),
            self.particles.count,
        )

    # ------------------------------------------------------------------
    def load_model(self, path: str = MODEL_PATH) -> Optional[ModelMesh]:
        """Load the showcase model; the scene carries on without it on failure."""
        return self.model_loader.load(path, self.add_model)

    def add_model(self, model: ModelMesh) -> None:
        if self.model is not None:
            logger.warning("Model already in the scene, ignoring %s", model.name)
            return
        place_model(model)
        self.apply_lighting(model)
        self.add(model)
        self.model = model

    # ------------------------------------------------------------------
    def on_resize(self, state: InputState, renderer) -> None:
        """Match camera aspect and renderer size to the viewport; nothing else."""
        viewport = state.viewport
        self.camera.aspect = viewport.aspect
        self.camera.update_projection_matrix()
        renderer.set_size(viewport.width, viewport.height)
        renderer.set_pixel_ratio(state.pixel_ratio)

    def resize_listener(self, renderer) -> Callable[[InputState, InputEvent], None]:
        """InputChannel listener applying on_resize for Resize events only."""

        def _listener(state: InputState, event: InputEvent) -> None:
            if isinstance(event, Resize):
                self.on_resize(state, renderer)

        return _listener


__all__ = ["LandingScene"]
