"""
Degree elevation of Bézier control points.

A degree-n curve with points P_0..P_n is also a degree-(n+1) curve with
points Q_0..Q_{n+1}:

    Q_0     = P_0
    Q_i     = (i/(n+1)) * P_{i-1} + (1 - i/(n+1)) * P_i,   i = 1..n
    Q_{n+1} = P_n

Written as a matrix product Q = E @ P with E of shape (n+2, n+1).
"""

import logging

import numpy as np

from .bezier import as_control_points
from .exceptions import InvalidArgument

logger = logging.getLogger(__name__)

_MATRIX_CACHE = {}


def get_elevation_matrix(degree):
    """
    Compute elevation matrix E for Bézier curve of degree N.
    Elevates degree from N to N+1.

    Args:
        degree: Original degree N

    Returns:
        E: (N+2, N+1) read-only matrix
    """
    if degree < 0:
        raise InvalidArgument(f"degree must be >= 0, got {degree}")

    if degree in _MATRIX_CACHE:
        return _MATRIX_CACHE[degree]

    N = degree
    E = np.zeros((N + 2, N + 1))
    E[0, 0] = 1.0  # Q_0 = P_0
    E[N + 1, N] = 1.0  # Q_{N+1} = P_N
    for i in range(1, N + 1):
        fraction = i / (N + 1)
        E[i, i - 1] = fraction
        E[i, i] = 1 - fraction

    E.setflags(write=False)
    _MATRIX_CACHE[degree] = E
    return E


def elevate(points):
    """
    Elevate the degree of a Bézier curve by one without changing its shape.

    Args:
        points: Control points (N, dim), N >= 2

    Returns:
        (N+1, dim) float array of control points
    """
    P = as_control_points(points)
    degree = P.shape[0] - 1
    logger.debug("Elevating curve from degree %d to %d", degree, degree + 1)
    return get_elevation_matrix(degree) @ P


def elevate_by(points, steps):
    """
    Elevate the degree several times.

    Args:
        points: Control points (N, dim), N >= 2
        steps: Number of elevations, >= 0

    Returns:
        (N+steps, dim) float array of control points
    """
    if steps < 0:
        raise InvalidArgument(f"elevation steps must be >= 0, got {steps}")

    P = as_control_points(points)
    for _ in range(steps):
        P = elevate(P)
    return P


def clear_matrix_cache():
    _MATRIX_CACHE.clear()


def get_cache_info():
    """Return the number of cached matrices and their degrees."""
    return {
        'cached_matrices': len(_MATRIX_CACHE),
        'degrees': sorted(_MATRIX_CACHE),
    }
