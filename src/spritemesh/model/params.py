"""
Shape Parameter Records
=======================
Plain value records describing a shape, one per builder.

Why is this file needed?
------------------------
1. Persistence: These records are what gets saved to and loaded from disk
   (HDF5 projects, JSON preset catalogs). Geometry is always rebuilt from them.
2. Round-tripping: Every successful build returns the record it was built
   from, sign-normalized, so a caller can store exactly what it sees.

Records carry no validation. The builders decide what is buildable.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict, field
from enum import StrEnum
from typing import Any, Dict, Union

from spritemesh.config import DEFAULT_SIDES
from spritemesh.model.geometry_primitives import Point, ORIGIN


class ShapeKind(StrEnum):
    QUADRANGLE = "quadrangle"
    ELLIPSE = "ellipse"
    POINTED_CIRCLE = "pointed_circle"


def _unit_square() -> tuple[Point, ...]:
    return Point(0.0, 0.0), Point(1.0, 0.0), Point(1.0, 1.0), Point(0.0, 1.0)


@dataclass(frozen=True)
class QuadrangleParams:
    # Order matters: it is the input winding, not necessarily convex or simple
    vertices: tuple[Point, ...] = field(default_factory=_unit_square)
    kind = ShapeKind.QUADRANGLE

    def __post_init__(self) -> None:
        object.__setattr__(self, "vertices", tuple(Point.coerce(v) for v in self.vertices))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": str(self.kind),
            "vertices": [[v.x, v.y] for v in self.vertices],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> QuadrangleParams:
        return cls(vertices=tuple(Point.coerce(v) for v in data["vertices"]))


@dataclass(frozen=True)
class EllipseParams:
    radius_horizontal: float = 1.0
    radius_vertical: float = 1.0
    sides: int = DEFAULT_SIDES
    kind = ShapeKind.ELLIPSE

    @property
    def is_circle(self) -> bool:
        return self.radius_horizontal == self.radius_vertical

    def to_dict(self) -> Dict[str, Any]:
        return {"kind": str(self.kind), **asdict(self)}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> EllipseParams:
        return cls(
            radius_horizontal=float(data["radius_horizontal"]),
            radius_vertical=float(data["radius_vertical"]),
            sides=int(data.get("sides", DEFAULT_SIDES)),
        )


@dataclass(frozen=True)
class PointedCircleParams:
    radius: float = 1.0
    sides: int = DEFAULT_SIDES
    shift: Point = ORIGIN
    kind = ShapeKind.POINTED_CIRCLE

    def __post_init__(self) -> None:
        object.__setattr__(self, "shift", Point.coerce(self.shift))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "kind": str(self.kind),
            "radius": self.radius,
            "sides": self.sides,
            "shift": [self.shift.x, self.shift.y],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> PointedCircleParams:
        return cls(
            radius=float(data["radius"]),
            sides=int(data.get("sides", DEFAULT_SIDES)),
            shift=Point.coerce(data.get("shift", (0.0, 0.0))),
        )


# Union for type hinting
ShapeParams = Union[QuadrangleParams, EllipseParams, PointedCircleParams]

PARAMS_BY_KIND: dict[ShapeKind, type] = {
    ShapeKind.QUADRANGLE: QuadrangleParams,
    ShapeKind.ELLIPSE: EllipseParams,
    ShapeKind.POINTED_CIRCLE: PointedCircleParams,
}


def params_from_dict(data: Dict[str, Any]) -> ShapeParams:
    """Instantiate the record named by data["kind"]."""
    kind = data.get("kind")
    try:
        cls = PARAMS_BY_KIND[ShapeKind(kind)]
    except ValueError:
        raise KeyError(f"Unknown shape kind '{kind}'") from None
    return cls.from_dict(data)
