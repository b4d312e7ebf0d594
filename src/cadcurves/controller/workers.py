"""
Background Workers (Threading)
==============================
Parallel reduction of curve radii.

Each worker sums the radii of its own chunk into a local partial sum; the
partial sums are merged on the calling thread once all workers finish, so no
accumulator is ever shared between threads.

Functions:
    divide_by_count: Split items round-robin across workers.
    partial_radii_sum: Local accumulation for a single worker.
    parallel_radii_sum: Fan out, sum, merge.
"""
from __future__ import annotations

import logging
import os
from multiprocessing.pool import ThreadPool
from typing import Any, List, Optional, Sequence

import numpy as np

from cadcurves.config import PARALLEL_THRESHOLD
from cadcurves.model.curves import Curve

logger = logging.getLogger(__name__)


def divide_by_count(items: Sequence[Any], n_workers: int) -> List[List[Any]]:
    """
    Deal `items` out to `n_workers` chunks like cards, one at a time.

    Chunk sizes differ by at most one. Chunks that would stay empty (more
    workers than items) are not returned. A non-positive `n_workers` puts
    everything in a single chunk.
    """
    if n_workers <= 0:
        return [list(items)]

    return [list(items[start::n_workers]) for start in range(min(n_workers, len(items)))]


def partial_radii_sum(chunk: Sequence[Curve]) -> float:
    """Sum the radii of one chunk of curves."""
    return float(np.sum([curve.radius for curve in chunk], dtype=np.float64))


def parallel_radii_sum(curves: Sequence[Curve], workers: Optional[int] = None) -> float:
    """
    Sum the radii of `curves`, optionally across several worker threads.

    Args:
        curves: Curves to reduce. Only the common `radius` is read.
        workers: Number of worker threads. Defaults to the CPU count.

    Returns:
        Sum of radii. Equal to the serial sum within floating-point error;
        the summation order depends on the chunking.
    """
    if workers is None:
        workers = os.cpu_count() or 1

    if workers <= 1 or len(curves) < PARALLEL_THRESHOLD:
        return partial_radii_sum(curves)

    chunks = divide_by_count(curves, workers)
    logger.debug(f"Summing {len(curves)} radii in {len(chunks)} chunks")

    with ThreadPool(processes=len(chunks)) as pool:
        partials = pool.map(partial_radii_sum, chunks)

    return float(sum(partials))
