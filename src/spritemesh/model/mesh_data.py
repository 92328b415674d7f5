"""
Mesh & Collider Data (Build Results)
====================================
This module defines the values every shape builder returns.

Why is this file needed?
------------------------
1. Contract: The three builders share no code paths, only these result types.
   A rendering/physics adapter consumes them without knowing which builder ran.
2. Immutability: A rebuild produces new objects. Arrays are frozen on
   construction so a result can be shared across threads.

Classes:
    MeshData: Vertices, flat triangle indices, UVs and normals.
    PolygonCollider / CircleCollider / CircleWithTriangleCollider: Collision geometry.
    ValidationError: Rejected builder parameters.
    BuildResult: Mesh + collider, or the validation error.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional, Union, TYPE_CHECKING

import numpy as np

from spritemesh.model.geometry_primitives import Point, Circle

if TYPE_CHECKING:
    import numpy.typing as npt
    from spritemesh.model.params import ShapeParams


def _frozen(values, dtype, columns: Optional[int] = None) -> np.ndarray:
    arr = np.array(values, dtype=dtype)
    if columns is not None:
        arr = arr.reshape(-1, columns)
    arr.setflags(write=False)
    return arr


_MESH_ARRAYS = ("vertices", "triangles", "uvs", "normals")


# ------------------------------------------------------------------------------
# Mesh
# ------------------------------------------------------------------------------
@dataclass(frozen=True, eq=False)
class MeshData:
    """
    Triangulated 2D mesh lying in the Z=0 plane.

    `triangles` is flat: every three consecutive entries index one triangle.
    """
    vertices: npt.NDArray[np.float64]
    triangles: npt.NDArray[np.int32]
    uvs: npt.NDArray[np.float64]
    normals: npt.NDArray[np.float64]

    def __post_init__(self) -> None:
        vertices = np.asarray(self.vertices, dtype=np.float64)
        if vertices.ndim != 2 or vertices.shape[1] not in (2, 3):
            raise ValueError(f"Expected vertices of shape (N, 2) or (N, 3), got {vertices.shape}.")
        if vertices.shape[1] == 2:
            vertices = np.c_[vertices, np.zeros(len(vertices))]

        triangles = np.asarray(self.triangles).ravel()
        if len(triangles) % 3 != 0:
            raise ValueError(f"Triangle index count must be a multiple of 3, got {len(triangles)}.")
        if len(triangles) and (triangles.min() < 0 or triangles.max() >= len(vertices)):
            raise ValueError("Triangle index out of range of the vertex array.")

        uvs = np.asarray(self.uvs, dtype=np.float64).reshape(-1, 2)
        if len(uvs) != len(vertices):
            raise ValueError(f"Expected {len(vertices)} UVs, got {len(uvs)}.")

        normals = np.asarray(self.normals, dtype=np.float64).reshape(-1, 3)
        if len(normals) != len(vertices):
            raise ValueError(f"Expected {len(vertices)} normals, got {len(normals)}.")

        # frozen dataclass: bypass __setattr__ once, during construction
        object.__setattr__(self, "vertices", _frozen(vertices, np.float64, 3))
        object.__setattr__(self, "triangles", _frozen(triangles, np.int32))
        object.__setattr__(self, "uvs", _frozen(uvs, np.float64, 2))
        object.__setattr__(self, "normals", _frozen(normals, np.float64, 3))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MeshData):
            return NotImplemented
        return all(
            np.array_equal(getattr(self, name), getattr(other, name))
            for name in _MESH_ARRAYS
        )

    def __hash__(self) -> int:
        # arrays are read-only; adding 0 folds -0.0 into 0.0 so equal meshes hash alike
        return hash(tuple((getattr(self, name) + 0).tobytes() for name in _MESH_ARRAYS))

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def triangle_count(self) -> int:
        return len(self.triangles) // 3

    @property
    def faces(self) -> npt.NDArray[np.int32]:
        """Triangles as an (M, 3) array."""
        return self.triangles.reshape(-1, 3)

    @property
    def points(self) -> list[Point]:
        return [Point(float(x), float(y)) for x, y, _ in self.vertices]

    @property
    def area(self) -> float:
        """Sum of the absolute triangle areas."""
        if not self.triangle_count:
            return 0.0
        xy = self.vertices[:, :2][self.faces]  # (M, 3, 2)
        ab = xy[:, 1] - xy[:, 0]
        ac = xy[:, 2] - xy[:, 0]
        cross = ab[:, 0] * ac[:, 1] - ab[:, 1] * ac[:, 0]
        return float(0.5 * np.abs(cross).sum())


# ------------------------------------------------------------------------------
# Colliders
# ------------------------------------------------------------------------------
class ColliderKind(StrEnum):
    POLYGON = "polygon"
    CIRCLE = "circle"
    CIRCLE_WITH_TRIANGLE = "circle_with_triangle"


@dataclass(frozen=True)
class PolygonCollider:
    """Ordered outline, implicitly closed (last point connects to the first)."""
    path: tuple[Point, ...]
    kind = ColliderKind.POLYGON

    def __post_init__(self) -> None:
        object.__setattr__(self, "path", tuple(Point.coerce(p) for p in self.path))

    def __len__(self) -> int:
        return len(self.path)

    @property
    def points(self) -> npt.NDArray[np.float64]:
        return np.array([p.to_tuple() for p in self.path], dtype=np.float64).reshape(-1, 2)


@dataclass(frozen=True)
class CircleCollider:
    circle: Circle
    kind = ColliderKind.CIRCLE

    @property
    def center(self) -> Point:
        return self.circle.center

    @property
    def radius(self) -> float:
        return self.circle.radius

    @property
    def points(self) -> npt.NDArray[np.float64]:
        # A primitive: no outline until an adapter discretizes it
        return np.empty((0, 2), dtype=np.float64)


@dataclass(frozen=True)
class CircleWithTriangleCollider:
    """Circle plus the triangle covering the part of the shape outside it."""
    circle: CircleCollider
    triangle: PolygonCollider
    kind = ColliderKind.CIRCLE_WITH_TRIANGLE

    def __post_init__(self) -> None:
        if len(self.triangle) != 3:
            raise ValueError(f"Expected a 3-point triangle, got {len(self.triangle)} points.")

    @property
    def points(self) -> npt.NDArray[np.float64]:
        return self.triangle.points


ColliderShape = Union[PolygonCollider, CircleCollider, CircleWithTriangleCollider]


# ------------------------------------------------------------------------------
# Errors & results
# ------------------------------------------------------------------------------
class ValidationIssue(StrEnum):
    SIDES_TOO_FEW = "sides_too_few"
    ZERO_RADIUS = "zero_radius"


class ValidationError(ValueError):
    """Builder parameters that cannot produce a mesh."""

    def __init__(self, issue: ValidationIssue, message: str) -> None:
        super().__init__(message)
        self.issue = issue


@dataclass(frozen=True)
class BuildResult:
    """
    Outcome of one build call.

    On success `mesh` and `collider` are set and `params` holds the
    sign-normalized parameters the geometry was built from. On failure
    only `error` (and the rejected `params`) is set.
    """
    mesh: Optional[MeshData] = None
    collider: Optional[ColliderShape] = None
    params: Optional[ShapeParams] = None
    error: Optional[ValidationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> tuple[MeshData, ColliderShape]:
        """Returns (mesh, collider), raising the stored ValidationError on failure."""
        if self.error is not None:
            raise self.error
        return self.mesh, self.collider

    @classmethod
    def failure(cls, error: ValidationError, params: Optional[ShapeParams] = None) -> BuildResult:
        return cls(params=params, error=error)
