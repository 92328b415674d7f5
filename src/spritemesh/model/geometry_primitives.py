"""
Geometric Primitives for shape builders and colliders.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, Union, TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector:
    """
    A vector in 3D space representing direction and magnitude.
    Used for mesh normals; planar geometry works with `Point`.
    """
    x: float
    y: float
    z: float = 0.0

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z])


@dataclass(frozen=True)
class Point:
    """An immutable point in the XY plane."""
    x: float
    y: float

    def __mul__(self, scalar: float) -> Point:
        return Point(self.x * scalar, self.y * scalar)

    @property
    def sqr_magnitude(self) -> float:
        """Squared distance from the origin."""
        return self.x * self.x + self.y * self.y

    @property
    def angle(self) -> float:
        """Polar angle in radians, in (-pi, pi]."""
        return math.atan2(self.y, self.x)

    def to_tuple(self) -> tuple[float, float]:
        return self.x, self.y

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y])

    @classmethod
    def coerce(cls, value: Union[Point, Sequence[float]]) -> Point:
        """Accepts a Point or any (x, y) pair."""
        if isinstance(value, Point):
            return value
        x, y = value
        return cls(float(x), float(y))


ORIGIN = Point(0.0, 0.0)


@dataclass(frozen=True)
class Circle:
    """
    A circle in the XY plane.
    Base primitive of the pointed-circle collider.
    """
    center: Point
    radius: float
