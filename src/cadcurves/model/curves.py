"""
Parametric Curves
=================
Closed-form 3D curves evaluated at a scalar parameter t (radians).

Every curve owns a strictly positive radius. The concrete variants add their
own radius-like parameters, validated the same way at construction:

    Circle(r)          (r cos t, r sin t, 0)
    Ellipse(r1, r2)    (r1 cos t, r2 sin t, 0)
    Helix(r, step)     (r cos t, r sin t, step / (2 PI) * t)

Instances are immutable. The variant of a curve is exposed through its `KIND`
discriminant so collections of mixed curves can be filtered without
isinstance checks.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING, ClassVar
import math

import numpy as np
import matplotlib.pyplot as plt

from cadcurves.config import PI
from cadcurves.model.geometry_primitives import Point

if TYPE_CHECKING:
    import numpy.typing as npt

    Columns = tuple[npt.NDArray[np.float64], npt.NDArray[np.float64], npt.NDArray[np.float64]]


class CurveKind(StrEnum):
    CIRCLE = "circle"
    ELLIPSE = "ellipse"
    HELIX = "helix"


def _require_positive(value: float, message: str) -> None:
    # NaN fails every comparison, so test for the valid range
    if not (math.isfinite(value) and value > 0):
        raise ValueError(message)


def _as_parameters(t_values: npt.ArrayLike) -> npt.NDArray[np.float64]:
    return np.atleast_1d(np.asarray(t_values, dtype=np.float64)).ravel()


# ==========================================
# ABSTRACT CLASS FOR CURVES
# ==========================================
@dataclass(frozen=True)
class Curve(ABC):
    """
    Abstract base class for parametric curves.

    Attributes:
        radius: Curve radius (must be > 0).

    Raises:
        ValueError: If `radius` is not a finite number > 0.
    """
    KIND: ClassVar[CurveKind]
    NAME: ClassVar[str] = "Curve"

    radius: float

    def __post_init__(self) -> None:
        _require_positive(self.radius, "Radius must be > 0")

    def get_radius(self) -> float:
        """
        Get curve radius.

        Returns:
            Curve radius.
        """
        return self.radius

    @abstractmethod
    def find_point(self, t: float) -> Point:
        """
        Calculate the 3D point at parameter t along the curve.

        Args:
            t: Parameter in radians.

        Returns:
            Point at parameter t.
        """
        pass

    @abstractmethod
    def derivative(self, t: float) -> Point:
        """
        Calculate the tangent vector dP/dt at parameter t.

        Args:
            t: Parameter in radians.

        Returns:
            Point holding the vector components.
        """
        pass

    @abstractmethod
    def _position_columns(self, ts: npt.NDArray[np.float64]) -> Columns:
        """x, y and z of the positions at each parameter in `ts`."""
        pass

    @abstractmethod
    def _tangent_columns(self, ts: npt.NDArray[np.float64]) -> Columns:
        pass

    def sample(self, t_values: npt.ArrayLike) -> npt.NDArray[np.float64]:
        """
        Evaluate the curve at several parameters.

        Args:
            t_values: Scalar or 1D array of parameters in radians.

        Returns:
            Array of shape (n, 3) with one point per row.
        """
        return np.column_stack(self._position_columns(_as_parameters(t_values)))

    def sample_derivative(self, t_values: npt.ArrayLike) -> npt.NDArray[np.float64]:
        """Same as `sample`, for the tangent vectors."""
        return np.column_stack(self._tangent_columns(_as_parameters(t_values)))

    def plot(self, n_points: int = 200, turns: float = 1.0) -> None:
        """
        Plot the curve in 3D.

        Args:
            n_points: Number of sampled parameters.
            turns: Number of full revolutions (2 PI) to draw.
        """
        ts = np.linspace(0.0, 2 * PI * turns, n_points)
        pts = self.sample(ts)

        fig = plt.figure(figsize=(7, 5))
        ax = fig.add_subplot(projection="3d")

        ax.plot(pts[:, 0], pts[:, 1], pts[:, 2], 'r', lw=2)

        ax.set_title(f"{self.NAME}")
        ax.set_xlabel("x")
        ax.set_ylabel("y")
        ax.set_zlabel("z")

        plt.show()


# ==========================================
# CONCRETE CURVES
# ==========================================
@dataclass(frozen=True)
class Circle(Curve):
    """
    Circle of the given radius centred at the origin in the XY plane.
    """
    KIND = CurveKind.CIRCLE
    NAME = "Circle"

    def find_point(self, t: float) -> Point:
        return Point(self.radius * math.cos(t), self.radius * math.sin(t), 0.0)

    def derivative(self, t: float) -> Point:
        return Point(-self.radius * math.sin(t), self.radius * math.cos(t), 0.0)

    def _position_columns(self, ts: npt.NDArray[np.float64]) -> Columns:
        return self.radius * np.cos(ts), self.radius * np.sin(ts), np.zeros_like(ts)

    def _tangent_columns(self, ts: npt.NDArray[np.float64]) -> Columns:
        return -self.radius * np.sin(ts), self.radius * np.cos(ts), np.zeros_like(ts)


@dataclass(frozen=True)
class Ellipse(Curve):
    """
    Axis-aligned ellipse centred at the origin in the XY plane.

    Attributes:
        radius: Semi-axis along X (must be > 0).
        second_radius: Semi-axis along Y (must be > 0).
    """
    KIND = CurveKind.ELLIPSE
    NAME = "Ellipse"

    second_radius: float

    def __post_init__(self) -> None:
        super().__post_init__()
        _require_positive(self.second_radius, "Second radius must be > 0")

    def get_radius(self) -> tuple[float, float]:  # type: ignore[override]
        """Both semi-axes as (radius, second_radius)."""
        return self.radius, self.second_radius

    def find_point(self, t: float) -> Point:
        return Point(self.radius * math.cos(t), self.second_radius * math.sin(t), 0.0)

    def derivative(self, t: float) -> Point:
        return Point(-self.radius * math.sin(t), self.second_radius * math.cos(t), 0.0)

    def _position_columns(self, ts: npt.NDArray[np.float64]) -> Columns:
        return self.radius * np.cos(ts), self.second_radius * np.sin(ts), np.zeros_like(ts)

    def _tangent_columns(self, ts: npt.NDArray[np.float64]) -> Columns:
        return -self.radius * np.sin(ts), self.second_radius * np.cos(ts), np.zeros_like(ts)


@dataclass(frozen=True)
class Helix(Curve):
    """
    Circular helix around the Z axis.

    The helix rises by `step` along Z for every full turn (t += 2 PI).
    """
    KIND = CurveKind.HELIX
    NAME = "Helix"

    step: float

    def __post_init__(self) -> None:
        super().__post_init__()
        _require_positive(self.step, "Step of helix must be > 0")

    @property
    def pitch_rate(self) -> float:
        """Rise along Z per radian, step / (2 PI)."""
        return self.step / (2 * PI)

    def find_point(self, t: float) -> Point:
        return Point(self.radius * math.cos(t), self.radius * math.sin(t), self.pitch_rate * t)

    def derivative(self, t: float) -> Point:
        return Point(-self.radius * math.sin(t), self.radius * math.cos(t), self.pitch_rate)

    def _position_columns(self, ts: npt.NDArray[np.float64]) -> Columns:
        return self.radius * np.cos(ts), self.radius * np.sin(ts), self.pitch_rate * ts

    def _tangent_columns(self, ts: npt.NDArray[np.float64]) -> Columns:
        return -self.radius * np.sin(ts), self.radius * np.cos(ts), np.full_like(ts, self.pitch_rate)
