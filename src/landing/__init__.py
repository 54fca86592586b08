"""Landing package: re-export common symbols for simpler imports.

Callers can import public types from `landing` directly, e.g.:

    from landing import LandingScene, ViewUpdateLoop, InputChannel
"""

from .input_state import InputChannel, InputState, PointerMove, Resize, Scroll, ScrollBy, Viewport
from .landing_scene import LandingScene
from .model_loader import ModelLoader, place_model
from .particles import ParticleField, particle_positions
from .sections import SECTION_LAYOUT, build_section_meshes
from .view_loop import FrameSnapshot, ViewUpdateLoop

__all__ = [
    "InputChannel",
    "InputState",
    "PointerMove",
    "Resize",
    "Scroll",
    "ScrollBy",
    "Viewport",
    "LandingScene",
    "ModelLoader",
    "place_model",
    "ParticleField",
    "particle_positions",
    "SECTION_LAYOUT",
    "build_section_meshes",
    "FrameSnapshot",
    "ViewUpdateLoop",
]
