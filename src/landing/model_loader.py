"""Model loading with progress/success/error callbacks.

The file is read in chunks so progress can be reported, then parsed by
trimesh (glTF, GLB, OBJ, ...). External buffers and images referenced by a
.gltf are resolved relative to the file. A failed load is reported once and
the scene simply goes on without the model.
"""

from __future__ import annotations

import io
import logging
import os
from typing import Callable, Optional

import trimesh
from trimesh.resolvers import FilePathResolver

from config import MODEL_POSITION, MODEL_ROTATION, MODEL_SCALE
from core.mesh import ModelMesh

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[float], None]
ErrorCallback = Callable[[Exception], None]


class ModelLoader:
    def __init__(self, chunk_size: int = 64 * 1024) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be positive")
        self.chunk_size = chunk_size

    def _read(self, path: str, on_progress: Optional[ProgressCallback], name: str) -> bytes:
        total = os.path.getsize(path)
        buf = bytearray()
        with open(path, "rb") as f:
            while True:
                chunk = f.read(self.chunk_size)
                if not chunk:
                    break
                buf.extend(chunk)
                fraction = len(buf) / total if total else 1.0
                logger.info("%.0f%% loaded - %s", fraction * 100, name)
                if on_progress is not None:
                    on_progress(fraction)
        if not buf and on_progress is not None:
            on_progress(1.0)
        return bytes(buf)

    def load(
        self,
        path: str,
        on_load: Callable[[ModelMesh], None],
        on_progress: Optional[ProgressCallback] = None,
        on_error: Optional[ErrorCallback] = None,
        *,
        name: Optional[str] = None,
    ) -> Optional[ModelMesh]:
        """Load `path` and hand the model to `on_load` exactly once.

        Returns the model, or None when loading failed (after `on_error`).
        """
        name = name or os.path.basename(path)
        try:
            data = self._read(path, on_progress, name)
            file_type = os.path.splitext(path)[1].lstrip(".").lower()
            scene = trimesh.load(
                io.BytesIO(data),
                file_type=file_type,
                resolver=FilePathResolver(path),
                force="scene",
            )
            model = ModelMesh.from_scene(scene, name=name)
        except Exception as e:  # any read or parse failure leaves the scene without a model
            logger.error("An error happened loading the model %s: %s", path, e)
            if on_error is not None:
                on_error(e)
            return None

        logger.info("Loaded model %s (%d triangles)", name, model.triangle_count)
        on_load(model)
        return model


def place_model(
    model: ModelMesh,
    *,
    scale: float = MODEL_SCALE,
    position=MODEL_POSITION,
    rotation=MODEL_ROTATION,
) -> ModelMesh:
    """Scale, move and turn a freshly loaded model into its section."""
    model.scale.update(scale, scale, scale)
    model.position.update(*position)
    model.rotation.update(*rotation)
    model.invalidate_lighting()
    return model


__all__ = ["ModelLoader", "place_model"]
