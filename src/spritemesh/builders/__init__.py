"""
The BUILDERS layer turns shape parameters into MeshData and colliders.
Each builder is a pure function; none of them depends on another.
"""
from spritemesh.builders.quadrangle import build_quadrangle, build_quadrangle_from_params
from spritemesh.builders.ellipse import build_ellipse, build_ellipse_from_params
from spritemesh.builders.pointed_circle import build_pointed_circle, build_pointed_circle_from_params
from spritemesh.builders.registry import build_shape, get_builder, list_kinds

__all__ = [
    "build_quadrangle",
    "build_quadrangle_from_params",
    "build_ellipse",
    "build_ellipse_from_params",
    "build_pointed_circle",
    "build_pointed_circle_from_params",
    "build_shape",
    "get_builder",
    "list_kinds",
]
