from __future__ import annotations

import math
from typing import Sequence, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    from numpy import typing as npt

from spritemesh.config import FLAT_NORMAL, UV_CENTER
from spritemesh.model.geometry_primitives import Point, Vector, Circle


def deg2rad(degrees: float) -> float:
    return degrees * math.pi / 180


def point_on_circle(circle: Circle, angle_rad: float) -> Point:
    """Point of `circle` at polar angle `angle_rad`, measured from +X counter-clockwise."""
    return Point(
        circle.center.x + math.cos(angle_rad) * circle.radius,
        circle.center.y + math.sin(angle_rad) * circle.radius,
    )


def side(p: Point, a: Point, b: Point) -> float:
    """
    Orientation of `p` relative to the directed line a -> b.

    Returns twice the signed area of the triangle (p, a, b). The sign tells
    which half-plane contains `p`; zero means `p` lies on the line. For two
    points p1, p2 the product ``side(p1, a, b) * side(p2, a, b) <= 0`` holds
    when they are on opposite sides (or one of them is on the line).
    """
    return (b.x - a.x) * (p.y - a.y) - (b.y - a.y) * (p.x - a.x)


def point_in_triangle(v: Point, v1: Point, v2: Point, v3: Point) -> bool:
    """
    Closed point-in-triangle test, independent of the triangle's winding.

    A point on an edge or a vertex counts as inside.
    """
    a1 = side(v, v1, v2)
    a2 = side(v, v2, v3)
    a3 = side(v, v3, v1)
    return (a1 >= 0 and a2 >= 0 and a3 >= 0) or (a1 <= 0 and a2 <= 0 and a3 <= 0)


def uv_unwrap(vertices: Sequence[Point]) -> npt.NDArray[np.float64]:
    """
    Map vertices into the unit UV square using their bounding box.

    Args:
        vertices: Ordered vertices of the mesh.

    Returns:
        Array of shape (n, 2), row i holding the UV of vertex i. An axis with
        zero extent maps every vertex to the texture centre (0.5) on that axis.
    """
    xy = np.array([(v.x, v.y) for v in vertices], dtype=np.float64).reshape(-1, 2)
    if xy.size == 0:
        return xy

    lo = xy.min(axis=0)
    extent = xy.max(axis=0) - lo

    uvs = np.full_like(xy, UV_CENTER)
    for axis in range(2):
        if extent[axis] != 0.0:
            uvs[:, axis] = (xy[:, axis] - lo[axis]) / extent[axis]
    return uvs


def generate_normals(count: int) -> npt.NDArray[np.float64]:
    """`count` copies of the camera-facing normal (0, 0, -1)."""
    normal = Vector(*FLAT_NORMAL).to_array()
    return np.tile(normal, (max(count, 0), 1))


def shoelace_area(points: Sequence[Point]) -> float:
    """Signed polygon area, positive for counter-clockwise winding."""
    xy = np.array([(p.x, p.y) for p in points], dtype=np.float64).reshape(-1, 2)
    if len(xy) < 3:
        return 0.0
    x, y = xy[:, 0], xy[:, 1]
    return 0.5 * float(np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1)))


def circle_to_polyline(
    circle: Circle,
    n_segments: int
) -> np.ndarray:
    """
    Discretize a circle in XY into an (N,2) polyline (closed).

    Args:
        circle: The Circle primitive object.
        n_segments: Number of segments to use for discretization.

    Returns:
        An array of shape (n, 2) containing the (x, y) coordinates of the points along the circle.
    """
    return ellipse_to_polyline(circle.center, circle.radius, circle.radius, n_segments)


def ellipse_to_polyline(
    center: Point,
    a: float,
    b: float,
    n_segments: int
) -> np.ndarray:
    """
    Discretize an ellipse in XY into an (N,2) polyline (closed).

    Args:
        center: (x, y) coordinates of the ellipse center.
        a: Horizontal radius.
        b: Vertical radius.
        n_segments: Number of segments to use for discretization.

    Returns:
        An array of shape (n, 2) containing the (x, y) coordinates of the points along the ellipse.
    """
    theta = np.linspace(0.0, 2.0 * np.pi, n_segments, endpoint=False)
    pts = np.c_[center.x + a * np.cos(theta), center.y + b * np.sin(theta)]

    # close the ring
    if not np.allclose(pts[0], pts[-1]):
        pts = np.vstack((pts, pts[0]))

    return pts
