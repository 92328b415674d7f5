"""
Procedural 2D sprite meshes.

Builds quadrangle, ellipse and pointed-circle triangle meshes, with UVs and
matching collider geometry, from a handful of numeric parameters.
"""
from spritemesh.builders import (
    build_quadrangle,
    build_ellipse,
    build_pointed_circle,
    build_shape,
)
from spritemesh.model.geometry_primitives import Point
from spritemesh.model.mesh_data import (
    MeshData,
    PolygonCollider,
    CircleCollider,
    CircleWithTriangleCollider,
    BuildResult,
    ValidationError,
    ValidationIssue,
)
from spritemesh.model.params import QuadrangleParams, EllipseParams, PointedCircleParams

__all__ = [
    "build_quadrangle",
    "build_ellipse",
    "build_pointed_circle",
    "build_shape",
    "Point",
    "MeshData",
    "PolygonCollider",
    "CircleCollider",
    "CircleWithTriangleCollider",
    "BuildResult",
    "ValidationError",
    "ValidationIssue",
    "QuadrangleParams",
    "EllipseParams",
    "PointedCircleParams",
]
