from __future__ import annotations
from typing import Callable

from spritemesh.model.mesh_data import BuildResult
from spritemesh.model.params import ShapeKind, ShapeParams, PARAMS_BY_KIND
from spritemesh.builders.quadrangle import build_quadrangle_from_params
from spritemesh.builders.ellipse import build_ellipse_from_params
from spritemesh.builders.pointed_circle import build_pointed_circle_from_params

Builder = Callable[[ShapeParams], BuildResult]

_REGISTRY: dict[ShapeKind, Builder] = {
    ShapeKind.QUADRANGLE: build_quadrangle_from_params,
    ShapeKind.ELLIPSE: build_ellipse_from_params,
    ShapeKind.POINTED_CIRCLE: build_pointed_circle_from_params,
}

def get_builder(kind: ShapeKind | str) -> Builder:
    try:
        return _REGISTRY[ShapeKind(kind)]
    except ValueError:
        raise KeyError(f"No builder registered for kind '{kind}'") from None

def build_shape(params: ShapeParams) -> BuildResult:
    """Build any shape from its parameter record."""
    kind = getattr(params, "kind", None)
    if kind is None or not isinstance(params, PARAMS_BY_KIND[kind]):
        raise TypeError(f"Not a shape parameter record: {params!r}")
    return _REGISTRY[kind](params)

def list_kinds() -> list[str]:
    return [str(kind) for kind in _REGISTRY]
