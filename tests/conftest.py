"""Shared test fixtures."""

from __future__ import annotations

import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from cadcurves.model.curves import Circle, Ellipse, Helix


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(12345)


@pytest.fixture
def mixed_curves():
    """Population from the end-to-end example: [Circle(5), Ellipse(3, 4), Circle(2)]."""
    return [Circle(5.0), Ellipse(3.0, 4.0), Circle(2.0)]


@pytest.fixture
def one_of_each():
    return [Circle(2.0), Ellipse(3.0, 1.5), Helix(4.0, 10.0)]
