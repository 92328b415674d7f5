"""
Ellipse Builder
===============
Triangle fan around the origin approximating an ellipse (a circle when both
radii are equal), plus a polygon collider traced from the same parameters.
"""
from __future__ import annotations

import logging
import math
from typing import Optional

from spritemesh.config import FULL_TURN, MIN_SIDES, UV_CENTER
from spritemesh.model.geometry_primitives import Point
from spritemesh.model.geometry_utils import generate_normals
from spritemesh.model.mesh_data import (
    MeshData, PolygonCollider, BuildResult, ValidationError, ValidationIssue
)
from spritemesh.model.params import EllipseParams

logger = logging.getLogger(__name__)


def validate_ellipse(radius_horizontal: float, radius_vertical: float, sides: int) -> Optional[ValidationError]:
    if sides < MIN_SIDES:
        return ValidationError(
            ValidationIssue.SIDES_TOO_FEW,
            f"Ellipse: sides count can't be less than {MIN_SIDES} (got {sides})."
        )
    if radius_horizontal == 0 or radius_vertical == 0:
        return ValidationError(
            ValidationIssue.ZERO_RADIUS,
            f"Ellipse: radii can't be equal to zero (got {radius_horizontal}, {radius_vertical})."
        )
    return None


def _rim_point(step: int, angle_delta: float, radius_horizontal: float, radius_vertical: float) -> Point:
    # Rim vertex i sits at step i + 1; mesh and collider share this offset
    angle = (step + 1) * angle_delta
    return Point(math.cos(angle) * radius_horizontal, math.sin(angle) * radius_vertical)


def ellipse_outline(radius_horizontal: float, radius_vertical: float, sides: int) -> tuple[Point, ...]:
    """
    Collider outline: `sides + 1` points, the last one repeating the first.
    """
    angle_delta = FULL_TURN / sides
    return tuple(
        _rim_point(i, angle_delta, radius_horizontal, radius_vertical)
        for i in range(sides + 1)
    )


def build_ellipse(radius_horizontal: float, radius_vertical: float, sides: int) -> BuildResult:
    """
    Build an ellipse fan.

    Args:
        radius_horizontal: Radius along X. Negative values are flipped.
        radius_vertical: Radius along Y. Negative values are flipped.
        sides: Number of rim vertices (and fan triangles), at least 2.

    Returns:
        BuildResult with `sides + 1` vertices (centre first) and `sides`
        triangles, or a failed result if `sides < 2` or a radius is zero.
    """
    error = validate_ellipse(radius_horizontal, radius_vertical, sides)
    if error is not None:
        logger.warning(str(error))
        return BuildResult.failure(
            error,
            EllipseParams(radius_horizontal=radius_horizontal, radius_vertical=radius_vertical, sides=sides),
        )

    rh = abs(radius_horizontal)
    rv = abs(radius_vertical)
    angle_delta = FULL_TURN / sides

    vertices = [(0.0, 0.0, 0.0)]
    uvs = [(UV_CENTER, UV_CENTER)]
    triangles: list[int] = []
    for i in range(1, sides + 1):
        p = _rim_point(i, angle_delta, rh, rv)
        vertices.append((p.x, p.y, 0.0))
        uvs.append((p.x / 2 / rh + UV_CENTER, p.y / 2 / rv + UV_CENTER))
        triangles.extend((1 + i % sides, 1 + (i - 1) % sides, 0))

    mesh = MeshData(
        vertices=vertices,
        triangles=triangles,
        uvs=uvs,
        normals=generate_normals(len(vertices)),
    )
    params = EllipseParams(radius_horizontal=rh, radius_vertical=rv, sides=sides)
    logger.debug(
        f"{'Circle' if params.is_circle else 'Ellipse'} built: "
        f"{mesh.vertex_count} vertices, {mesh.triangle_count} triangles."
    )

    return BuildResult(
        mesh=mesh,
        collider=PolygonCollider(ellipse_outline(rh, rv, sides)),
        params=params,
    )


def build_ellipse_from_params(params: EllipseParams) -> BuildResult:
    return build_ellipse(params.radius_horizontal, params.radius_vertical, params.sides)
