"""
Geometric Primitives returned by curve evaluations.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING
import numpy as np
import math

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Point:
    """
    A point (or vector) in 3D space.

    Curve positions and derivatives are both returned as Points; the
    derivative is read as a direction rather than a location.
    """
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __str__(self) -> str:
        return f"{{{self.x:g}, {self.y:g}, {self.z:g}}}"

    @classmethod
    def from_array(cls, values: npt.ArrayLike) -> Point:
        x, y, z = np.asarray(values, dtype=np.float64)
        return cls(float(x), float(y), float(z))

    @property
    def magnitude(self) -> float:
        return math.sqrt(self.x**2 + self.y**2 + self.z**2)

    def distance_to(self, other: Point) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y, self.z])
