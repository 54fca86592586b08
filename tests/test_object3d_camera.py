from __future__ import annotations

import math

import numpy as np
import pytest

from camera import CameraRig, PerspectiveCamera, perspective_matrix
from core.object3d import Group, Object3D, gl_matrix, rotation_matrix_xyz


def test_rotation_xyz_order() -> None:
    r = rotation_matrix_xyz(0.0, math.pi / 2, 0.0)
    # +X turns to -Z about Y
    assert np.allclose(r @ [1.0, 0.0, 0.0], [0.0, 0.0, -1.0])
    combined = rotation_matrix_xyz(0.3, 0.4, 0.5)
    expected = rotation_matrix_xyz(0.3, 0, 0) @ rotation_matrix_xyz(0, 0.4, 0) @ rotation_matrix_xyz(0, 0, 0.5)
    assert np.allclose(combined, expected)


def test_local_matrix_translate_rotate_scale() -> None:
    node = Object3D(position=(1, 2, 3), rotation=(0, 0, math.pi / 2), scale=(2, 2, 2))
    p = node.local_matrix() @ [1.0, 0.0, 0.0, 1.0]
    assert np.allclose(p, [1.0, 4.0, 3.0, 1.0])


def test_world_matrix_composes_parents() -> None:
    parent = Group(position=(0, 5, 0))
    child = Object3D(position=(1, 0, 0))
    parent.add(child)
    assert tuple(child.world_position()) == pytest.approx((1.0, 5.0, 0.0))


def test_world_rotation_ignores_scale() -> None:
    node = Object3D(rotation=(0.2, 0.1, 0.0), scale=(3, 3, 3))
    assert np.allclose(node.world_rotation_matrix(), node.rotation_matrix())


def test_add_reparents_and_rejects_self() -> None:
    a, b, child = Group(), Group(), Object3D()
    a.add(child)
    b.add(child)
    assert child.parent is b
    assert child not in a.children
    with pytest.raises(ValueError):
        a.add(a)


def test_traverse_is_depth_first() -> None:
    root = Group(name="root")
    mid = Group(name="mid")
    leaf = Object3D(name="leaf")
    root.add(mid.add(leaf), Object3D(name="other"))
    assert [n.name for n in root.traverse()] == ["root", "mid", "leaf", "other"]


def test_gl_matrix_is_contiguous_transpose() -> None:
    m = np.arange(16, dtype=np.float64).reshape(4, 4)
    out = gl_matrix(m)
    assert out.dtype == np.float32
    assert out.flags["C_CONTIGUOUS"]
    assert np.array_equal(out, m.T.astype(np.float32))


def test_perspective_matrix_matches_glu_formula() -> None:
    m = perspective_matrix(90.0, 2.0, 1.0, 3.0)
    assert m[0, 0] == pytest.approx(0.5)
    assert m[1, 1] == pytest.approx(1.0)
    assert m[2, 2] == pytest.approx(-2.0)
    assert m[2, 3] == pytest.approx(-3.0)
    assert m[3, 2] == -1.0


def test_camera_update_projection_after_aspect_change() -> None:
    camera = PerspectiveCamera(35, 1.0, 0.1, 100)
    camera.aspect = 2.0
    camera.update_projection_matrix()
    assert np.allclose(camera.projection_matrix, perspective_matrix(35, 2.0, 0.1, 100))


def test_view_matrix_inverts_camera_placement() -> None:
    camera = PerspectiveCamera(position=(0, 0, 6))
    p = camera.view_matrix() @ [0.0, 0.0, 0.0, 1.0]
    assert np.allclose(p, [0.0, 0.0, -6.0, 1.0])


def test_rig_sets_depth_and_carries_camera() -> None:
    camera = PerspectiveCamera()
    rig = CameraRig(camera, base_depth=6.0)
    rig.position.x = 0.25
    rig.apply_scroll_offset(-4.0)
    assert tuple(camera.world_position()) == pytest.approx((0.25, -4.0, 6.0))


def test_rig_smooth_toward_eases_both_axes() -> None:
    rig = CameraRig(PerspectiveCamera())
    rig.smooth_toward(1.0, -1.0, 5.0, 0.1)
    assert (rig.position.x, rig.position.y) == pytest.approx((0.5, -0.5))
    assert rig.camera.position.y == 0.0
