"""
Quadrangle Builder
==================
Splits four arbitrary points into two triangles and orders them into a
collider outline.

The input may be convex, concave or self-intersecting (a "bowtie" in input
order). The case analysis below always picks the diagonal that lies inside
the quadrangle, so the two triangles never overlap. Degenerate input
(collinear points, zero area) still builds; one triangle simply has no area.
"""
from __future__ import annotations

import logging
from typing import Sequence, Union

from spritemesh.model.geometry_primitives import Point
from spritemesh.model.geometry_utils import side, point_in_triangle, uv_unwrap, generate_normals
from spritemesh.model.mesh_data import MeshData, PolygonCollider, BuildResult
from spritemesh.model.params import QuadrangleParams

logger = logging.getLogger(__name__)

PointLike = Union[Point, Sequence[float]]


def triangulate_quadrangle(
    v0: Point, v1: Point, v2: Point, v3: Point
) -> tuple[tuple[int, ...], tuple[Point, Point, Point, Point]]:
    """
    Choose the two triangles and the outline order for a quadrangle.

    Returns:
        (triangles, outline): six vertex indices (two triangles) into
        (v0, v1, v2, v3), and the four points in the order they trace the
        quadrangle's boundary.
    """
    if not point_in_triangle(v3, v0, v1, v2):
        # v3 outside (v0, v1, v2): that triangle is part of the mesh
        first = (0, 1, 2)
        if side(v3, v0, v1) * side(v2, v0, v1) <= 0:
            # v0-v1 separates v3 from v2
            return first + (3, 1, 0), (v0, v3, v1, v2)
        if side(v3, v1, v2) * side(v0, v1, v2) <= 0:
            # v1-v2 separates v3 from v0
            return first + (1, 2, 3), (v0, v1, v3, v2)
        # convex in input order
        return first + (0, 2, 3), (v0, v1, v2, v3)

    # v3 nested in (v0, v1, v2): the quadrangle is concave at v3
    first = (1, 2, 3)
    if side(v0, v3, v1) <= 0 and side(v2, v3, v1) >= 0:
        return first + (0, 1, 3), (v0, v1, v2, v3)
    if side(v0, v1, v2) <= 0 and side(v3, v1, v2) >= 0:
        return first + (0, 1, 2), (v0, v1, v3, v2)
    return first + (0, 2, 3), (v0, v3, v1, v2)


def build_quadrangle(points: Sequence[PointLike]) -> BuildResult:
    """
    Build a two-triangle mesh and polygon collider from four points.

    Args:
        points: Exactly four points (Point or (x, y) pairs) in input order.

    Returns:
        A successful BuildResult. UVs stay indexed by the input order; only the
        collider outline is reordered.

    Raises:
        ValueError: If `points` does not hold exactly four points.
    """
    if len(points) != 4:
        raise ValueError(f"A quadrangle needs exactly 4 points, got {len(points)}.")

    verts = tuple(Point.coerce(p) for p in points)
    triangles, outline = triangulate_quadrangle(*verts)

    mesh = MeshData(
        vertices=[(v.x, v.y, 0.0) for v in verts],
        triangles=triangles,
        uvs=uv_unwrap(verts),
        normals=generate_normals(len(verts)),
    )
    logger.debug(f"Quadrangle built: triangles {triangles}, outline {[p.to_tuple() for p in outline]}.")

    return BuildResult(
        mesh=mesh,
        collider=PolygonCollider(outline),
        params=QuadrangleParams(vertices=verts),
    )


def build_quadrangle_from_params(params: QuadrangleParams) -> BuildResult:
    return build_quadrangle(params.vertices)
