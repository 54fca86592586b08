from __future__ import annotations

import pytest
import trimesh

from core.mesh import ModelMesh
from landing.model_loader import ModelLoader, place_model


@pytest.fixture()
def box_obj(tmp_path):
    path = tmp_path / "box.obj"
    trimesh.creation.box().export(str(path))
    return path


def test_load_reports_progress_then_success(box_obj) -> None:
    progress, loaded, errors = [], [], []
    model = ModelLoader(chunk_size=64).load(
        str(box_obj), loaded.append, progress.append, errors.append
    )

    assert errors == []
    assert loaded == [model]
    assert isinstance(model, ModelMesh)
    assert model.triangle_count == 12
    assert model.name == "box.obj"
    assert len(progress) > 1
    assert progress == sorted(progress)
    assert progress[-1] == pytest.approx(1.0)


def test_missing_file_reports_error_once(tmp_path) -> None:
    loaded, errors = [], []
    result = ModelLoader().load(str(tmp_path / "nope.gltf"), loaded.append, on_error=errors.append)
    assert result is None
    assert loaded == []
    assert len(errors) == 1
    assert isinstance(errors[0], OSError)


def test_unparseable_file_reports_error(tmp_path) -> None:
    path = tmp_path / "broken.glb"
    path.write_bytes(b"definitely not a binary gltf")
    loaded, errors = [], []
    assert ModelLoader().load(str(path), loaded.append, on_error=errors.append) is None
    assert loaded == []
    assert len(errors) == 1


def test_error_without_callback_is_only_logged(tmp_path, caplog) -> None:
    with caplog.at_level("ERROR", logger="landing.model_loader"):
        assert ModelLoader().load(str(tmp_path / "gone.obj"), lambda m: None) is None
    assert "gone.obj" in caplog.text


def test_chunk_size_must_be_positive() -> None:
    with pytest.raises(ValueError):
        ModelLoader(chunk_size=0)


def test_place_model_applies_transform() -> None:
    model = ModelMesh.from_meshes([trimesh.creation.box()])
    place_model(model, scale=2.0, position=(1, 2, 3), rotation=(0.1, 0.2, 0.3))
    assert tuple(model.scale) == (2.0, 2.0, 2.0)
    assert tuple(model.position) == (1.0, 2.0, 3.0)
    assert tuple(model.rotation) == pytest.approx((0.1, 0.2, 0.3))
