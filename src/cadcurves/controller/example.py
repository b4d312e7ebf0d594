"""
Curve Demo Pipeline
===================
Generates a random population of curves and runs the demo steps over it:

1. Report the point and derivative of every curve at t = PI/4.
2. Select the circles into a second list (same instances, not copies).
3. Sort the circles by radius.
4. Sum the circle radii, in parallel for large inputs.

Report output goes to stdout (or the given stream); diagnostics go through
the `cadcurves` logger.
"""
from __future__ import annotations

import logging
import sys
from typing import List, Optional, Sequence, TextIO

import numpy as np

from cadcurves.config import (
    DEFAULT_POPULATION_SIZE,
    DEMO_POPULATION_SIZE,
    EVALUATION_PARAMETER,
    RADIUS_RANGE,
)
from cadcurves.controller.workers import parallel_radii_sum
from cadcurves.model.curves import Circle, Curve, CurveKind, Ellipse, Helix

logger = logging.getLogger(__name__)

# Draw order of the variant index
VARIANTS: tuple[CurveKind, ...] = (CurveKind.CIRCLE, CurveKind.ELLIPSE, CurveKind.HELIX)


def generate_population(
    n: int = DEFAULT_POPULATION_SIZE,
    rng: Optional[np.random.Generator] = None,
) -> List[Curve]:
    """
    Create `n` random curves.

    Each curve picks its variant uniformly from Circle, Ellipse and Helix, and
    each radius-like value uniformly from the integers in RADIUS_RANGE.

    Args:
        n: Number of curves.
        rng: Random generator. A fresh, unseeded one is used if omitted.

    Raises:
        ValueError: If `n` is negative.
    """
    if n < 0:
        raise ValueError(f"Population size must be >= 0, got {n}")

    if rng is None:
        rng = np.random.default_rng()

    low, high = RADIUS_RANGE

    def draw() -> float:
        return float(rng.integers(low, high, endpoint=True))

    curves: List[Curve] = []
    for _ in range(n):
        match VARIANTS[rng.integers(0, len(VARIANTS))]:
            case CurveKind.CIRCLE:
                curves.append(Circle(draw()))
            case CurveKind.ELLIPSE:
                curves.append(Ellipse(draw(), draw()))
            case CurveKind.HELIX:
                curves.append(Helix(draw(), draw()))

    logger.info(f"Generated {len(curves)} curves")
    return curves


def report_all(
    curves: Sequence[Curve],
    t: float = EVALUATION_PARAMETER,
    stream: Optional[TextIO] = None,
) -> None:
    """Print the point and derivative at `t` for every curve, in order."""
    out = stream if stream is not None else sys.stdout
    for curve in curves:
        print(f"{curve.NAME} Point at t = {curve.find_point(t)} derivative = {curve.derivative(t)}", file=out)


def select_circles(curves: Sequence[Curve]) -> List[Curve]:
    """
    Return the circles of `curves` in their original order.

    The returned list holds the same instances as `curves`; the source is left
    untouched.
    """
    circles = [curve for curve in curves if curve.KIND is CurveKind.CIRCLE]
    logger.debug(f"Selected {len(circles)} circles out of {len(curves)} curves")
    return circles


def sort_by_radius(circles: List[Curve], stream: Optional[TextIO] = None) -> None:
    """
    Sort `circles` in place by ascending radius and print the sorted radii.

    The sort is stable, so circles of equal radius keep their relative order.
    """
    out = stream if stream is not None else sys.stdout
    circles.sort(key=lambda circle: circle.radius)

    print("Sorted Circles:", file=out)
    print(" ".join(f"{circle.radius:g}" for circle in circles), file=out)


def sum_radii(circles: Sequence[Curve], workers: Optional[int] = None) -> float:
    """Sum of the radii of `circles`. See `parallel_radii_sum`."""
    return parallel_radii_sum(circles, workers=workers)


def start_example(
    n: int = DEMO_POPULATION_SIZE,
    workers: Optional[int] = None,
    rng: Optional[np.random.Generator] = None,
    stream: Optional[TextIO] = None,
) -> float:
    """
    Run the full demo pipeline.

    Returns:
        Sum of the radii of the generated circles.
    """
    out = stream if stream is not None else sys.stdout

    curves = generate_population(n, rng=rng)
    report_all(curves, stream=out)

    circles = select_circles(curves)
    sort_by_radius(circles, stream=out)

    total = sum_radii(circles, workers=workers)
    print(f"Sum of circles radii = {total}", file=out)
    return total
