"""
Bézier curve evaluation.

All evaluators sample the parameter range with the closed convention
t = i / stops for i = 0..stops, so both anchor points are always part of
the result.
"""

import numpy as np
from scipy.special import comb

from .constants import DEFAULT_STOPS, MIN_CONTROL_POINTS
from .exceptions import InvalidArgument


METHODS = ("de_casteljau", "bernstein", "closed_form")


def as_control_points(points, count=None, name="Bézier"):
    """
    Convert control points to a float (N, dim) array and check their number.

    Args:
        points: Sequence of points, array-like of shape (N, dim)
        count: Exact number of points required, or None for "at least 2"
        name: Curve name used in error messages

    Returns:
        P: (N, dim) float array (always a new array)
    """
    P = np.array(points, dtype=float)
    if P.ndim != 2:
        raise InvalidArgument(f"control points must be an (N, dim) array, got shape {P.shape}")

    n_points = P.shape[0]
    if count is not None and n_points != count:
        raise InvalidArgument(f"{name} curve needs exactly {count} control points, got {n_points}")
    if n_points < MIN_CONTROL_POINTS:
        raise InvalidArgument(
            f"{name} curve needs at least {MIN_CONTROL_POINTS} control points, got {n_points}"
        )
    return P


def resolve_stops(stops):
    """Return the effective sample count; 0 selects DEFAULT_STOPS."""
    if isinstance(stops, bool) or not isinstance(stops, (int, np.integer)):
        raise InvalidArgument(f"stops must be an integer, got {stops!r}")
    if stops < 0:
        raise InvalidArgument(f"stops must be >= 0, got {stops}")
    return DEFAULT_STOPS if stops == 0 else int(stops)


def sample_parameters(stops):
    """Parameter values t = i / stops for i = 0..stops (stops + 1 values)."""
    stops = resolve_stops(stops)
    return np.arange(stops + 1) / stops


def _as_parameters(tau):
    t = np.atleast_1d(np.asarray(tau, dtype=float))
    if t.ndim != 1:
        raise InvalidArgument(f"tau must be a scalar or 1-D array, got shape {t.shape}")
    if np.any((t < 0) | (t > 1)):
        raise InvalidArgument("tau must lie in [0, 1]")
    return t


def de_casteljau(points, tau):
    """
    Evaluate a Bézier curve by repeated linear interpolation.

    Each pass replaces the N points by the N-1 interpolants between
    neighbours; after N-1 passes one point per parameter value remains.

    Args:
        points: Control points (N, dim)
        tau: Parameter value or 1-D array of values in [0, 1]

    Returns:
        (dim,) array for a scalar tau, otherwise (len(tau), dim)
    """
    P = as_control_points(points)
    t = _as_parameters(tau)

    # W: (points, parameters, dim)
    W = P[:, None, :]
    t = t[None, :, None]
    for _ in range(1, P.shape[0]):
        W = (1 - t) * W[:-1] + t * W[1:]

    if np.ndim(tau) == 0:
        return W[0, 0]
    return W[0]


def bernstein_basis(degree, tau):
    """
    Bernstein basis values B_{i,n}(t) = C(n,i) * t^i * (1-t)^(n-i).

    Args:
        degree: Curve degree n
        tau: Parameter value or 1-D array of values in [0, 1]

    Returns:
        (len(tau), degree+1) matrix
    """
    if degree < 0:
        raise InvalidArgument(f"degree must be >= 0, got {degree}")
    t = _as_parameters(tau)[:, None]
    i = np.arange(degree + 1)
    return comb(degree, i) * (t ** i) * ((1 - t) ** (degree - i))


def closed_form(points, tau):
    """
    Evaluate a linear, quadratic or cubic curve with its polynomial formula.

    The terms are grouped and summed in a fixed order so that truncated
    results are reproducible to the pixel:

        linear:    P0 + (P1 - P0) * t
        quadratic: (1-t)^2 P0 + 2(1-t) t P1 + t^2 P2
        cubic:     (1-t)^3 P0 + t P1 3(1-t)^2 + P2 3(1-t) t^2 + P3 t^3

    Powers are computed by repeated multiplication.

    Args:
        points: Control points (N, dim), 2 <= N <= 4
        tau: Parameter value or 1-D array of values in [0, 1]

    Returns:
        (dim,) array for a scalar tau, otherwise (len(tau), dim)
    """
    P = as_control_points(points)
    if P.shape[0] > 4:
        raise InvalidArgument(f"closed form needs 2 to 4 control points, got {P.shape[0]}")
    t = _as_parameters(tau)[:, None]
    u = 1.0 - t

    if P.shape[0] == 2:
        curve = P[0] + (P[1] - P[0]) * t
    elif P.shape[0] == 3:
        curve = (u * u) * P[0] + 2.0 * u * t * P[1] + (t * t) * P[2]
    else:
        curve = (
            (u * u * u) * P[0]
            + t * P[1] * (3.0 * (u * u))
            + P[2] * (3.0 * u * (t * t))
            + P[3] * (t * t * t)
        )

    if np.ndim(tau) == 0:
        return curve[0]
    return curve


def evaluate(points, stops=DEFAULT_STOPS, method="de_casteljau", truncate=True):
    """
    Sample a Bézier curve of any degree.

    Args:
        points: Control points (N, dim), N >= 2
        stops: Number of parameter intervals; stops + 1 points are returned.
            0 selects DEFAULT_STOPS.
        method: "de_casteljau" (default), "bernstein" or "closed_form".
            "closed_form" uses the per-degree polynomial for 2 to 4 points
            and falls back to De Casteljau for more.
        truncate: Truncate every coordinate toward zero and return integers
            (pixel coordinates). If False, the float samples are returned.

    Returns:
        (stops+1, dim) array of points on the curve, ordered by t

    Note:
        The methods agree within floating-point rounding, not bit for bit.
        After truncation a sample lying on an integer in exact arithmetic
        may come out one pixel apart between methods. linear(), quadratic()
        and cubic() use "closed_form" for pixel-exact per-degree output.
    """
    if method not in METHODS:
        raise InvalidArgument(f"unknown evaluation method {method!r}, expected one of {METHODS}")

    P = as_control_points(points)
    t = sample_parameters(stops)

    if method == "closed_form" and P.shape[0] <= 4:
        curve = closed_form(P, t)
    elif method == "bernstein":
        curve = bernstein_basis(P.shape[0] - 1, t) @ P
    else:
        curve = de_casteljau(P, t)

    if truncate:
        return np.trunc(curve).astype(int)
    return curve


def linear_points(points, stops=DEFAULT_STOPS, truncate=True):
    """Linear curve B(t) = P0 + t * (P1 - P0) through exactly 2 points."""
    P = as_control_points(points, count=2, name="linear")
    return evaluate(P, stops, method="closed_form", truncate=truncate)


def quadratic_points(points, stops=DEFAULT_STOPS, truncate=True):
    """Quadratic curve B(t) = (1-t)^2 P0 + 2(1-t)t P1 + t^2 P2 from exactly 3 points."""
    P = as_control_points(points, count=3, name="quadratic")
    return evaluate(P, stops, method="closed_form", truncate=truncate)


def cubic_points(points, stops=DEFAULT_STOPS, truncate=True):
    """Cubic curve B(t) = (1-t)^3 P0 + 3(1-t)^2 t P1 + 3(1-t) t^2 P2 + t^3 P3 from exactly 4 points."""
    P = as_control_points(points, count=4, name="cubic")
    return evaluate(P, stops, method="closed_form", truncate=truncate)


def linear(p0, p1, stops=DEFAULT_STOPS, truncate=True):
    """
    Sample the straight segment between two anchor points.

    Args:
        p0: First anchor point
        p1: Second anchor point
        stops: Number of parameter intervals; 0 selects DEFAULT_STOPS
        truncate: Return integer (truncated) coordinates

    Returns:
        (stops+1, dim) array of points from p0 to p1
    """
    return linear_points([p0, p1], stops, truncate)


def quadratic(p0, p1, p2, stops=DEFAULT_STOPS, truncate=True):
    """
    Sample a quadratic curve.

    Args:
        p0: First anchor point
        p1: Control point
        p2: Second anchor point
        stops: Number of parameter intervals; 0 selects DEFAULT_STOPS
        truncate: Return integer (truncated) coordinates

    Returns:
        (stops+1, dim) array of points from p0 to p2
    """
    return quadratic_points([p0, p1, p2], stops, truncate)


def cubic(p0, p1, p2, p3, stops=DEFAULT_STOPS, truncate=True):
    """
    Sample a cubic curve.

    Args:
        p0: First anchor point
        p1: First control point
        p2: Second control point
        p3: Second anchor point
        stops: Number of parameter intervals; 0 selects DEFAULT_STOPS
        truncate: Return integer (truncated) coordinates

    Returns:
        (stops+1, dim) array of points from p0 to p3
    """
    return cubic_points([p0, p1, p2, p3], stops, truncate)


class BezierCurve:
    """
    Immutable Bézier curve defined by its control points.
    """

    def __init__(self, control_points):
        P = as_control_points(control_points)
        P.setflags(write=False)
        self.control_points = P
        self.degree = P.shape[0] - 1  # = N
        self.dimension = P.shape[1]

    def point(self, tau):
        """Evaluate curve at parameter tau using De Casteljau's algorithm."""
        return de_casteljau(self.control_points, tau)

    def sample(self, stops=DEFAULT_STOPS, method="de_casteljau", truncate=True):
        """Sample stops + 1 points along the curve."""
        return evaluate(self.control_points, stops, method=method, truncate=truncate)

    def elevate_degree(self):
        """Return the same curve described with one more control point."""
        from .elevation import elevate
        return BezierCurve(elevate(self.control_points))

    def __repr__(self):
        return f"BezierCurve(degree={self.degree}, dimension={self.dimension})"
