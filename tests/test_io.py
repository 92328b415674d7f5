import json

import pytest

from spritemesh.builders.registry import build_shape
from spritemesh.config import DEFAULT_PRESETS_PATH
from spritemesh.model.io import IOManager
from spritemesh.model.mesh_data import ColliderKind, ValidationError
from spritemesh.model.params import QuadrangleParams, EllipseParams, PointedCircleParams


@pytest.mark.parametrize("params, kind", [
    (QuadrangleParams(vertices=((0, 0), (1, 1), (1, 0), (0, 1))), ColliderKind.POLYGON),
    (EllipseParams(radius_horizontal=1.5, radius_vertical=0.5, sides=7), ColliderKind.POLYGON),
    (PointedCircleParams(radius=1.0, sides=9, shift=(0.1, 0.2)), ColliderKind.CIRCLE),
    (PointedCircleParams(radius=1.0, sides=9, shift=(-2.0, 1.0)), ColliderKind.CIRCLE_WITH_TRIANGLE),
])
def test_save_and_load_shape(tmp_path, params, kind):
    path = str(tmp_path / "shape.h5")
    built = build_shape(params)

    IOManager.save_shape(params, path)
    record = IOManager.load_shape(path)

    assert record.params == params
    assert record.mesh == built.mesh
    assert record.collider == built.collider
    assert record.collider.kind == kind


def test_save_uses_given_result(tmp_path):
    path = str(tmp_path / "ellipse.h5")
    result = build_shape(EllipseParams(radius_horizontal=-2.0, radius_vertical=1.0, sides=5))

    IOManager.save_shape(result.params, path, result)

    record = IOManager.load_shape(path)
    assert record.params.radius_horizontal == 2.0
    assert record.mesh == result.mesh


def test_save_refuses_invalid_shape(tmp_path):
    path = tmp_path / "bad.h5"
    with pytest.raises(ValidationError):
        IOManager.save_shape(EllipseParams(sides=1), str(path))
    assert not path.exists()


def test_load_rejects_non_hdf5(tmp_path):
    path = tmp_path / "shape.h5"
    path.write_text("not hdf5")
    with pytest.raises(ValueError):
        IOManager.load_shape(str(path))


def test_default_presets_build():
    presets = IOManager.load_presets(DEFAULT_PRESETS_PATH)
    assert {"unit_square", "circle", "teardrop"} <= set(presets)
    for name, params in presets.items():
        assert build_shape(params).ok, name


def test_custom_presets(tmp_path):
    path = tmp_path / "presets.json"
    path.write_text(json.dumps({
        "drop": {"kind": "pointed_circle", "radius": 1.0, "sides": 8, "shift": [0.0, 2.0]},
    }))
    presets = IOManager.load_presets(str(path))
    assert presets == {"drop": PointedCircleParams(radius=1.0, sides=8, shift=(0.0, 2.0))}


def test_broken_presets(tmp_path):
    path = tmp_path / "presets.json"
    path.write_text("{not json")
    with pytest.raises(IOError) as excinfo:
        IOManager.load_presets(str(path))
    assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)

    with pytest.raises(IOError) as excinfo:
        IOManager.load_presets(str(tmp_path / "missing.json"))
    assert isinstance(excinfo.value.__cause__, FileNotFoundError)
