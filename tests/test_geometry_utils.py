import numpy as np
import pytest

from spritemesh.model.geometry_primitives import Point, Circle
from spritemesh.model.geometry_utils import (
    side, point_in_triangle, uv_unwrap, generate_normals, shoelace_area, circle_to_polyline,
    deg2rad, point_on_circle,
)

A, B, C = Point(0.0, 0.0), Point(4.0, 0.0), Point(0.0, 3.0)


def test_side_sign_and_magnitude():
    # left of A->B is positive, magnitude is twice the triangle area
    assert side(Point(0.0, 3.0), A, B) == pytest.approx(12.0)
    assert side(Point(0.0, -3.0), A, B) == pytest.approx(-12.0)
    assert side(Point(2.0, 0.0), A, B) == 0.0


def test_side_product_detects_opposite_sides():
    above, below, on_line = Point(1.0, 1.0), Point(1.0, -1.0), Point(7.0, 0.0)
    assert side(above, A, B) * side(below, A, B) <= 0
    assert side(above, A, B) * side(Point(3.0, 2.0), A, B) > 0
    assert side(above, A, B) * side(on_line, A, B) <= 0


@pytest.mark.parametrize("v", [A, B, C])
def test_point_in_triangle_contains_its_vertices(v):
    assert point_in_triangle(v, A, B, C)
    assert point_in_triangle(v, C, B, A)


@pytest.mark.parametrize("v, expected", [
    (Point(1.0, 1.0), True),
    (Point(2.0, 0.0), True),      # on an edge
    (Point(2.0, 1.5), True),      # on the hypotenuse
    (Point(3.0, 3.0), False),
    (Point(-0.1, 1.0), False),
])
def test_point_in_triangle_ignores_winding(v, expected):
    assert point_in_triangle(v, A, B, C) is expected
    assert point_in_triangle(v, C, B, A) is expected
    assert point_in_triangle(v, B, C, A) is expected


def test_uv_unwrap_normalizes_bounding_box():
    uvs = uv_unwrap([Point(-1.0, 2.0), Point(3.0, 2.0), Point(1.0, 6.0)])
    np.testing.assert_allclose(uvs, [[0.0, 0.0], [1.0, 0.0], [0.5, 1.0]])


def test_uv_unwrap_flat_axis_maps_to_center():
    uvs = uv_unwrap([Point(2.0, 0.0), Point(2.0, 1.0), Point(2.0, 4.0)])
    np.testing.assert_allclose(uvs[:, 0], 0.5)
    np.testing.assert_allclose(uvs[:, 1], [0.0, 0.25, 1.0])

    single = uv_unwrap([Point(5.0, 5.0)])
    np.testing.assert_allclose(single, [[0.5, 0.5]])


def test_generate_normals():
    normals = generate_normals(3)
    assert normals.shape == (3, 3)
    np.testing.assert_array_equal(normals, [[0.0, 0.0, -1.0]] * 3)
    assert generate_normals(0).shape == (0, 3)


def test_shoelace_area_is_signed():
    square = [Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]
    assert shoelace_area(square) == pytest.approx(4.0)
    assert shoelace_area(square[::-1]) == pytest.approx(-4.0)
    assert shoelace_area(square[:2]) == 0.0


def test_circle_to_polyline_is_closed():
    ring = circle_to_polyline(Circle(Point(1.0, 0.0), 2.0), 16)
    assert ring.shape == (17, 2)
    np.testing.assert_allclose(ring[0], ring[-1])
    np.testing.assert_allclose(np.hypot(ring[:, 0] - 1.0, ring[:, 1]), 2.0)


def test_deg2rad():
    assert deg2rad(180.0) == pytest.approx(np.pi)
    assert deg2rad(-90.0) == pytest.approx(-np.pi / 2)
    assert deg2rad(0.0) == 0.0


@pytest.mark.parametrize("degrees, expected", [
    (0.0, (3.0, -1.0)),
    (90.0, (1.0, 1.0)),
    (180.0, (-1.0, -1.0)),
    (270.0, (1.0, -3.0)),
])
def test_point_on_circle(degrees, expected):
    circle = Circle(Point(1.0, -1.0), 2.0)
    p = point_on_circle(circle, deg2rad(degrees))
    np.testing.assert_allclose(p.to_array(), expected, atol=1e-12)
