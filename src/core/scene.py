from typing import List, Optional, Tuple

import numpy as np

from core.material import light_direction
from core.object3d import Object3D


class DirectionalLight(Object3D):
    """Parallel light shining from `position` toward the origin."""

    def __init__(self, color=(1.0, 1.0, 1.0), intensity: float = 1.0, position=(0.0, 1.0, 0.0)):
        super().__init__(position=position, name="directional_light")
        self.color = tuple(float(c) for c in color)
        self.intensity = float(intensity)

    @property
    def direction(self) -> np.ndarray:
        return light_direction((self.position.x, self.position.y, self.position.z))

    @property
    def radiance(self) -> Tuple[float, float, float]:
        r, g, b = self.color
        return (r * self.intensity, g * self.intensity, b * self.intensity)


class Scene(Object3D):
    def __init__(self, clear_color=(0.0, 0.0, 0.0, 0.0)) -> None:
        super().__init__(name="scene")
        self.clear_color = tuple(clear_color)

    @property
    def lights(self) -> List[DirectionalLight]:
        return [node for node in self.traverse() if isinstance(node, DirectionalLight)]

    def main_light(self) -> Optional[DirectionalLight]:
        lights = self.lights
        return lights[0] if lights else None

    def apply_lighting(self, *objects: Object3D) -> None:
        """Hand the main light's direction and colour to lit drawables."""
        light = self.main_light()
        if light is None:
            return
        targets = objects or tuple(self.traverse())
        for node in targets:
            if hasattr(node, "light_dir"):
                node.light_dir = light.direction
                node.light_color = light.radiance

    # The scene root is the world frame; only its children are transformed
    def draw(self) -> None:  # pragma: no cover - visual
        for child in self.children:
            if child.visible:
                child.draw()
