from __future__ import annotations

import numpy as np
import pytest

from core.renderer import Renderer
from textures import texture_utils


def test_drawing_buffer_scales_with_pixel_ratio() -> None:
    renderer = Renderer(1280, 800)
    assert renderer.drawing_buffer_size() == (1280, 800)
    renderer.set_pixel_ratio(2.0)
    assert renderer.drawing_buffer_size() == (2560, 1600)
    renderer.set_pixel_ratio(1.5)
    renderer.set_size(101, 51)
    assert renderer.drawing_buffer_size() == (round(151.5), round(76.5))


def test_renderer_size_never_zero() -> None:
    renderer = Renderer(0, 0)
    assert (renderer.width, renderer.height) == (1, 1)


def test_renderer_rejects_non_positive_ratio() -> None:
    with pytest.raises(ValueError):
        Renderer(10, 10).set_pixel_ratio(0)


def test_gradient_pixels_three_tones() -> None:
    pixels = texture_utils.gradient_pixels(3)
    assert pixels.shape == (1, 3, 4)
    assert pixels.dtype == np.uint8
    assert list(pixels[0, :, 0]) == [0, 128, 255]
    assert np.all(pixels[0, :, 3] == 255)


def test_gradient_pixels_wider_than_steps() -> None:
    pixels = texture_utils.gradient_pixels(3, width=6)
    assert list(pixels[0, :, 0]) == [0, 0, 128, 128, 255, 255]


def test_gradient_pixels_needs_a_step() -> None:
    with pytest.raises(ValueError):
        texture_utils.gradient_pixels(0)
    assert list(texture_utils.gradient_pixels(1)[0, :, 0]) == [255]


def test_missing_texture_falls_back_to_gradient(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(texture_utils, "create_gradient_texture", lambda steps=3: 99)
    assert texture_utils.load_texture(str(tmp_path / "absent.jpg")) == 99
