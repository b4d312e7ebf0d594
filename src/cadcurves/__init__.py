"""Parametric 3D curves (circle, ellipse, helix) and a small demo pipeline."""
from cadcurves.model.geometry_primitives import Point
from cadcurves.model.curves import Curve, CurveKind, Circle, Ellipse, Helix

__all__ = [
    "Point",
    "Curve",
    "CurveKind",
    "Circle",
    "Ellipse",
    "Helix",
]
