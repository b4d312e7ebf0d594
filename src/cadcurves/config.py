"""
Configuration & Global Constants
================================
This module serves as the central registry for the numeric constants shared
by the curve model and the demo pipeline.

Exports:
    PI (float): Value of pi used in all curve formulas.
    EVALUATION_PARAMETER (float): Parameter t at which the demo reports curves.
    DEFAULT_POPULATION_SIZE (int): Number of curves generated when not specified.
    DEMO_POPULATION_SIZE (int): Number of curves generated by the demo run.
    RADIUS_RANGE (tuple[int, int]): Inclusive bounds for random radius-like values.
    PARALLEL_THRESHOLD (int): Minimum number of items before the radii sum fans out.
"""
import math

PI: float = math.pi
EVALUATION_PARAMETER: float = PI / 4

DEFAULT_POPULATION_SIZE: int = 100_000
DEMO_POPULATION_SIZE: int = 100

RADIUS_RANGE: tuple[int, int] = (1, 100)

PARALLEL_THRESHOLD: int = 1_000
