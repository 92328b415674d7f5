import logging
import math

import numpy as np
import pytest

from spritemesh.builders.pointed_circle import build_pointed_circle, has_point, pointed_circle_collider
from spritemesh.model.geometry_primitives import Point
from spritemesh.model.mesh_data import (
    CircleCollider, CircleWithTriangleCollider, ColliderKind, ValidationError, ValidationIssue
)
from spritemesh.model.params import PointedCircleParams


def test_centered_apex_is_plain_circle():
    mesh, collider = build_pointed_circle(1.0, 8, (0.0, 0.0)).unwrap()

    assert isinstance(collider, CircleCollider)
    assert collider.center == Point(0.0, 0.0)
    assert collider.radius == 1.0
    np.testing.assert_array_equal(mesh.vertices[0], [0.0, 0.0, 0.0])


def test_far_apex_adds_triangle():
    mesh, collider = build_pointed_circle(1.0, 8, (3.0, 0.0)).unwrap()

    assert isinstance(collider, CircleWithTriangleCollider)
    assert collider.kind == ColliderKind.CIRCLE_WITH_TRIANGLE
    assert collider.circle.radius == 1.0
    apex, right, left = collider.triangle.path
    assert apex == Point(3.0, 0.0)
    np.testing.assert_allclose(right.to_array(), [0.0, -1.0], atol=1e-12)
    np.testing.assert_allclose(left.to_array(), [0.0, 1.0], atol=1e-12)
    np.testing.assert_array_equal(mesh.vertices[0], [3.0, 0.0, 0.0])


def test_triangle_is_perpendicular_to_shift():
    collider = pointed_circle_collider(2.0, Point(0.0, -5.0))
    _, a, b = collider.triangle.path
    # shift points straight down: triangle base runs along the X axis
    np.testing.assert_allclose(a.to_array(), [-2.0, 0.0], atol=1e-12)
    np.testing.assert_allclose(b.to_array(), [2.0, 0.0], atol=1e-12)


@pytest.mark.parametrize("radius, shift, expected", [
    (4.0, Point(3.0, 0.0), True),     # apex inside, but 4 < 9
    (0.5, Point(0.6, 0.0), False),    # apex outside, but 0.5 > 0.36
    (1.0, Point(1.0, 0.0), False),    # equality is not enough
    (1.0, Point(0.0, 0.0), False),
])
def test_point_rule_uses_squared_shift(radius, shift, expected):
    assert has_point(radius, shift) is expected
    collider = build_pointed_circle(radius, 12, shift).collider
    assert isinstance(collider, CircleWithTriangleCollider) is expected


def test_rim_has_no_angle_offset():
    # vertex i sits at angle i * 360 / sides
    mesh = build_pointed_circle(2.0, 4, (0.5, 0.5)).mesh
    np.testing.assert_allclose(mesh.vertices[1, :2], [0.0, 2.0], atol=1e-12)
    np.testing.assert_allclose(mesh.vertices[4, :2], [2.0, 0.0], atol=1e-12)
    np.testing.assert_allclose(np.hypot(mesh.vertices[1:, 0], mesh.vertices[1:, 1]), 2.0)


def test_uvs_unwrap_over_apex_and_rim():
    mesh = build_pointed_circle(1.0, 4, (3.0, 0.0)).mesh
    # x spans [-1, 3], y spans [-1, 1]
    np.testing.assert_allclose(mesh.uvs[0], [1.0, 0.5])
    np.testing.assert_allclose(mesh.uvs[2], [0.0, 0.5], atol=1e-12)
    assert mesh.uvs.min() >= 0.0 and mesh.uvs.max() <= 1.0


@pytest.mark.parametrize("sides", [2, 5, 32])
def test_counts(sides):
    mesh = build_pointed_circle(1.0, sides, (0.2, 0.1)).mesh
    assert mesh.vertex_count == sides + 1
    assert mesh.triangle_count == sides
    assert list(mesh.triangles[-3:]) == [1, sides, 0]


def test_negative_radius_is_flipped():
    result = build_pointed_circle(-1.5, 6, (0.1, 0.0))
    assert result.ok
    assert result.collider.radius == 1.5
    assert result.params == PointedCircleParams(radius=1.5, sides=6, shift=(0.1, 0.0))
    assert result.mesh == build_pointed_circle(1.5, 6, (0.1, 0.0)).mesh


def test_too_few_sides(caplog):
    with caplog.at_level(logging.WARNING, logger="spritemesh"):
        result = build_pointed_circle(1.0, 1, (2.0, 0.0))
    assert result.error.issue == ValidationIssue.SIDES_TOO_FEW
    assert result.mesh is None
    assert len(caplog.records) == 1


def test_zero_radius():
    result = build_pointed_circle(0.0, 8)
    assert result.error.issue == ValidationIssue.ZERO_RADIUS
    with pytest.raises(ValidationError, match="radius"):
        result.unwrap()


def test_rebuild_is_identical():
    first = build_pointed_circle(1.0, 16, (0.0, 2.5))
    second = build_pointed_circle(1.0, 16, (0.0, 2.5))
    assert first.mesh == second.mesh
    assert first.collider == second.collider
    assert math.isclose(first.mesh.area, second.mesh.area)
