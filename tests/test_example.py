"""Tests for the demo pipeline."""

import io

import numpy as np
import pytest

from cadcurves.config import EVALUATION_PARAMETER, RADIUS_RANGE
from cadcurves.controller.example import (
    generate_population,
    report_all,
    select_circles,
    sort_by_radius,
    start_example,
    sum_radii,
)
from cadcurves.model.curves import Circle, CurveKind, Ellipse, Helix


def test_generate_population_size_and_ranges(rng):
    curves = generate_population(500, rng=rng)
    assert len(curves) == 500

    low, high = RADIUS_RANGE
    for curve in curves:
        assert low <= curve.radius <= high
        assert float(curve.radius).is_integer()
        if isinstance(curve, Ellipse):
            assert low <= curve.second_radius <= high
        if isinstance(curve, Helix):
            assert low <= curve.step <= high


def test_generate_population_uses_every_variant(rng):
    kinds = {curve.KIND for curve in generate_population(300, rng=rng)}
    assert kinds == {CurveKind.CIRCLE, CurveKind.ELLIPSE, CurveKind.HELIX}


def test_generate_population_is_reproducible_with_seed():
    first = generate_population(50, rng=np.random.default_rng(7))
    second = generate_population(50, rng=np.random.default_rng(7))
    assert first == second


def test_generate_population_edge_sizes():
    assert generate_population(0) == []
    with pytest.raises(ValueError):
        generate_population(-1)


def test_report_all_one_line_per_curve(one_of_each):
    out = io.StringIO()
    report_all(one_of_each, stream=out)
    lines = out.getvalue().splitlines()

    assert len(lines) == 3
    for line, curve in zip(lines, one_of_each):
        assert line.startswith(curve.NAME)
        assert str(curve.find_point(EVALUATION_PARAMETER)) in line
        assert str(curve.derivative(EVALUATION_PARAMETER)) in line


def test_report_all_defaults_to_stdout(capsys):
    report_all([Circle(1.0)], t=0.0)
    assert capsys.readouterr().out == "Circle Point at t = {1, 0, 0} derivative = {-0, 1, 0}\n"


def test_select_circles_keeps_order_and_identity(mixed_curves):
    source = list(mixed_curves)
    circles = select_circles(mixed_curves)

    assert circles[0] is mixed_curves[0]
    assert circles[1] is mixed_curves[2]
    assert len(circles) == 2
    assert mixed_curves == source


def test_select_circles_count_matches_population(rng):
    curves = generate_population(400, rng=rng)
    circles = select_circles(curves)
    assert all(curve.KIND is CurveKind.CIRCLE for curve in circles)
    assert len(circles) == sum(1 for curve in curves if isinstance(curve, Circle))
    # relative order is preserved
    positions = [next(i for i, c in enumerate(curves) if c is circle) for circle in circles]
    assert positions == sorted(positions)


def test_sort_by_radius_is_stable_and_prints(capsys):
    a, b, c, d = Circle(3.0), Circle(1.0), Circle(3.0), Circle(2.0)
    circles = [a, b, c, d]
    sort_by_radius(circles)

    assert [circle.radius for circle in circles] == [1.0, 2.0, 3.0, 3.0]
    assert circles[2] is a
    assert circles[3] is c
    assert capsys.readouterr().out == "Sorted Circles:\n1 2 3 3\n"


def test_sum_unchanged_by_sorting(rng):
    circles = select_circles(generate_population(1_000, rng=rng))
    before = sum_radii(circles, workers=1)
    sort_by_radius(circles, stream=io.StringIO())
    radii = [circle.radius for circle in circles]

    assert radii == sorted(radii)
    assert sum_radii(circles, workers=4) == pytest.approx(before)


def test_end_to_end_example(mixed_curves):
    circles = select_circles(mixed_curves)
    assert [c.radius for c in circles] == [5.0, 2.0]

    sort_by_radius(circles, stream=io.StringIO())
    assert [c.radius for c in circles] == [2.0, 5.0]

    assert sum_radii(circles) == pytest.approx(7.0)


def test_start_example_output(rng):
    out = io.StringIO()
    total = start_example(n=60, rng=rng, stream=out)
    lines = out.getvalue().splitlines()

    assert len(lines) == 60 + 3
    assert lines[60] == "Sorted Circles:"
    assert lines[-1] == f"Sum of circles radii = {total}"
    radii = [float(r) for r in lines[61].split()]
    assert radii == sorted(radii)
    assert total == pytest.approx(sum(radii))
