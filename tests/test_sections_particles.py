from __future__ import annotations

import numpy as np
import pytest

from core.material import ToonMaterial
from landing.particles import ParticleField, particle_positions
from landing.sections import SECTION_LAYOUT, build_section_meshes, section_position


def test_layout_order_and_positions() -> None:
    meshes = build_section_meshes(ToonMaterial(), spacing=4.0)
    placed = [(m.name, tuple(m.position)) for m in meshes]
    expected = [
        ("hero", (1.5, 0.0, 0.0)),
        ("sphere", (-2.0, -6.4, 0.0)),
        ("cone", (1.3, -14.0, 0.0)),
        ("icosahedron", (0.0, -10.4, 0.0)),
        ("capsule", (-1.2, -18.0, 0.0)),
    ]
    assert [name for name, _ in placed] == [name for name, _ in expected]
    for (_, got), (_, want) in zip(placed, expected):
        assert got == pytest.approx(want)


def test_section_position_scales_with_spacing() -> None:
    spec = SECTION_LAYOUT[1]
    assert section_position(spec, 10.0).y == pytest.approx(-16.0)


def test_every_section_mesh_has_edges_and_matching_normals() -> None:
    for mesh in build_section_meshes(ToonMaterial()):
        assert mesh.edges.ndim == 2 and mesh.edges.shape[1] == 2
        assert len(mesh.edges) > 0
        assert mesh.normals.shape == mesh.vertices.shape


def test_particle_positions_fill_page_volume(rng) -> None:
    pos = particle_positions(800, spacing=4.0, sections=6, spread=10.0, rng=rng)
    assert pos.shape == (800, 3)
    assert pos.dtype == np.float32
    assert pos[:, 0].min() >= -5.0 and pos[:, 0].max() < 5.0
    assert pos[:, 2].min() >= -5.0 and pos[:, 2].max() < 5.0
    assert pos[:, 1].max() <= 2.0
    assert pos[:, 1].min() > 2.0 - 24.0


def test_particle_positions_reproducible_with_seed() -> None:
    a = particle_positions(50, rng=np.random.default_rng(1))
    b = particle_positions(50, rng=np.random.default_rng(1))
    assert np.array_equal(a, b)


@pytest.mark.parametrize("count", [0, -3])
def test_particle_count_must_be_positive(count: int) -> None:
    with pytest.raises(ValueError):
        particle_positions(count)


def test_particle_field_is_read_only(rng) -> None:
    field = ParticleField(100, rng=rng)
    assert field.count == 100
    assert field.material.size == pytest.approx(0.03)
    assert field.material.size_attenuation
    with pytest.raises(ValueError):
        field.positions[0, 0] = 1.0
