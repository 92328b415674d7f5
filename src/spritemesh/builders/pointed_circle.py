"""
Pointed Circle Builder
======================
Triangle fan over a circle whose apex (the fan anchor) is shifted away from
the centre. A large enough shift pokes the apex out of the circle and the
shape grows a "point".

Colliders:
    - Circle, if the shape degenerates to a plain circle.
    - Circle + triangle, if the apex lies outside (see `has_point`).
"""
from __future__ import annotations

import logging
import math
from typing import Optional, Sequence, Union

from spritemesh.config import FULL_TURN, MIN_SIDES
from spritemesh.model.geometry_primitives import Point, Circle, ORIGIN
from spritemesh.model.geometry_utils import uv_unwrap, generate_normals, deg2rad, point_on_circle
from spritemesh.model.mesh_data import (
    MeshData, PolygonCollider, CircleCollider, CircleWithTriangleCollider, ColliderShape,
    BuildResult, ValidationError, ValidationIssue
)
from spritemesh.model.params import PointedCircleParams

logger = logging.getLogger(__name__)

RIGHT_ANGLE = deg2rad(90.0)


def validate_pointed_circle(radius: float, sides: int) -> Optional[ValidationError]:
    if sides < MIN_SIDES:
        return ValidationError(
            ValidationIssue.SIDES_TOO_FEW,
            f"PointedCircle: sides count can't be less than {MIN_SIDES} (got {sides})."
        )
    if radius == 0:
        return ValidationError(ValidationIssue.ZERO_RADIUS, "PointedCircle: radius can't be equal to zero.")
    return None


def has_point(radius: float, shift: Point) -> bool:
    """
    Whether the apex counts as sticking out of the circle.

    Compares the radius against the squared shift length, not the length
    itself: radius 4 with shift (3, 0) has a point although the apex is inside.
    """
    return radius < shift.sqr_magnitude


def pointed_circle_collider(radius: float, shift: Point) -> ColliderShape:
    """Circle collider, with the apex triangle attached when `has_point`."""
    circle = Circle(center=ORIGIN, radius=radius)
    base = CircleCollider(circle)
    if not has_point(radius, shift):
        logger.debug(f"PointedCircle degenerates to a circle (radius {radius}, shift {shift.to_tuple()}).")
        return base

    # Triangle from the apex to the two circle points perpendicular to it
    apex_angle = shift.angle
    triangle = PolygonCollider((
        shift,
        point_on_circle(circle, apex_angle - RIGHT_ANGLE),
        point_on_circle(circle, apex_angle + RIGHT_ANGLE),
    ))
    return CircleWithTriangleCollider(circle=base, triangle=triangle)


def build_pointed_circle(
    radius: float,
    sides: int,
    shift: Union[Point, Sequence[float]] = ORIGIN,
) -> BuildResult:
    """
    Build a pointed circle fan.

    Args:
        radius: Circle radius. A negative value is flipped.
        sides: Number of rim vertices (and fan triangles), at least 2.
        shift: Position of the apex vertex relative to the circle centre.

    Returns:
        BuildResult with the apex as vertex 0 followed by `sides` rim
        vertices, or a failed result if `sides < 2` or `radius == 0`.
    """
    shift = Point.coerce(shift)
    error = validate_pointed_circle(radius, sides)
    if error is not None:
        logger.warning(str(error))
        return BuildResult.failure(error, PointedCircleParams(radius=radius, sides=sides, shift=shift))

    radius = abs(radius)
    angle_delta = FULL_TURN / sides

    points = [shift]
    triangles: list[int] = []
    for i in range(1, sides + 1):
        angle = i * angle_delta
        points.append(Point(math.cos(angle), math.sin(angle)) * radius)
        triangles.extend((1 + i % sides, 1 + (i - 1) % sides, 0))

    mesh = MeshData(
        vertices=[(p.x, p.y, 0.0) for p in points],
        triangles=triangles,
        uvs=uv_unwrap(points),
        normals=generate_normals(len(points)),
    )
    logger.debug(f"PointedCircle built: {mesh.vertex_count} vertices, {mesh.triangle_count} triangles.")

    return BuildResult(
        mesh=mesh,
        collider=pointed_circle_collider(radius, shift),
        params=PointedCircleParams(radius=radius, sides=sides, shift=shift),
    )


def build_pointed_circle_from_params(params: PointedCircleParams) -> BuildResult:
    return build_pointed_circle(params.radius, params.sides, params.shift)
