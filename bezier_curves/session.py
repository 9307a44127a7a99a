"""
Editing session state for an interactive Bézier editor.

The state is immutable: every transition returns a new EditorState whose
curve points were recomputed from its control points. A front end keeps a
reference to the latest state, feeds it pointer and button events through
the functions below and draws ``state.control_points`` and
``state.curve_points`` with the marker sizes the state reports.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple

import numpy as np

from .bezier import as_control_points, evaluate, resolve_stops
from .config import EditorConfig
from .constants import MIN_CONTROL_POINTS
from .elevation import elevate
from .exceptions import InvalidArgument

logger = logging.getLogger(__name__)


def _read_only(array: np.ndarray) -> np.ndarray:
    array.setflags(write=False)
    return array


@dataclass(frozen=True, eq=False)
class EditorState:
    """
    Snapshot of an editing session.

    Attributes:
        control_points: (N, 2) float array, read-only
        curve_points: (stops+1, 2) int array, read-only
        stops: Effective sample count used for curve_points
        config: Settings the session was created with
        scale: Zoom factor applied to marker sizes only
        selected: Index of the control point being dragged, or None
    """
    control_points: np.ndarray
    curve_points: np.ndarray
    stops: int
    config: EditorConfig = field(default_factory=EditorConfig)
    scale: float = 1.0
    selected: Optional[int] = None

    @property
    def control_point_size(self) -> int:
        return int(self.config.control_point_size * self.scale)

    @property
    def curve_point_size(self) -> int:
        return int(self.config.curve_point_size * self.scale)

    @property
    def hit_radius(self) -> float:
        return self.control_point_size / 2.0

    @property
    def point_count(self) -> int:
        return self.control_points.shape[0]


def new_session(config: Optional[EditorConfig] = None) -> EditorState:
    """Create a session with the configured initial control points."""
    config = config or EditorConfig()
    stops = resolve_stops(config.stops)
    P = _read_only(as_control_points(config.initial_control_points))
    curve = _read_only(evaluate(P, stops))
    logger.debug("New session with %d control points, %d stops", P.shape[0], stops)
    return EditorState(control_points=P, curve_points=curve, stops=stops, config=config)


def on_control_points_changed(state: EditorState, control_points) -> EditorState:
    """
    Replace the control points and recompute the curve.

    Every mutation of the control points goes through this function. The
    selection survives as long as its index is still valid.
    """
    P = as_control_points(control_points)
    if P.shape[1] != 2:
        raise InvalidArgument(f"editor control points must be 2-D, got dimension {P.shape[1]}")

    curve = evaluate(P, state.stops)
    selected = state.selected
    if selected is not None and selected >= P.shape[0]:
        selected = None

    logger.debug("Recomputed curve: %d control points -> %d curve points", P.shape[0], curve.shape[0])
    return replace(
        state,
        control_points=_read_only(P),
        curve_points=_read_only(curve),
        selected=selected,
    )


def add_control_point(state: EditorState) -> EditorState:
    """Add a control point by degree elevation; the curve keeps its shape."""
    new_state = on_control_points_changed(state, elevate(state.control_points))
    return replace(new_state, selected=None)


def can_remove_control_point(state: EditorState) -> bool:
    return state.point_count > MIN_CONTROL_POINTS


def remove_control_point(state: EditorState) -> EditorState:
    """Drop the last control point. Requires more than two points."""
    if not can_remove_control_point(state):
        raise InvalidArgument(
            f"cannot remove a control point from a curve with {state.point_count} points"
        )
    return on_control_points_changed(state, state.control_points[:-1])


def clamp_point(x: float, y: float, width: float, height: float) -> Tuple[float, float]:
    """Clamp a point to the canvas [0, width] x [0, height]."""
    return min(max(x, 0), width), min(max(y, 0), height)


def hit_test(control_points, x: float, y: float, radius: float) -> Optional[int]:
    """
    Find the control point nearest to (x, y).

    Returns:
        Index of the nearest point if it lies within radius, else None.
        Ties go to the lower index.
    """
    P = np.asarray(control_points, dtype=float)
    if P.size == 0:
        return None
    distances = np.hypot(P[:, 0] - x, P[:, 1] - y)
    index = int(np.argmin(distances))
    if distances[index] <= radius:
        return index
    return None


def press(state: EditorState, x: float, y: float) -> EditorState:
    """Select the control point under the pointer, if any."""
    selected = hit_test(state.control_points, x, y, state.hit_radius)
    return replace(state, selected=selected)


def drag(state: EditorState, x: float, y: float) -> EditorState:
    """Move the selected control point to the (clamped) pointer location."""
    if state.selected is None:
        return state

    P = state.control_points.copy()
    P[state.selected] = clamp_point(x, y, state.config.canvas_width, state.config.canvas_height)
    return on_control_points_changed(state, P)


def release(state: EditorState) -> EditorState:
    return replace(state, selected=None)


def zoom(state: EditorState, wheel_rotation: float) -> EditorState:
    """
    Change the marker scale by one wheel event.

    Positive rotation (scrolling down) shrinks the markers. Coordinates
    and curve points are not affected.
    """
    config = state.config
    scale = state.scale - wheel_rotation * config.wheel_step
    scale = min(max(scale, config.min_scale), config.max_scale)
    return replace(state, scale=scale)


def set_stops(state: EditorState, stops: int) -> EditorState:
    """Change the curve resolution; 0 selects the default."""
    stops = resolve_stops(stops)
    return on_control_points_changed(replace(state, stops=stops), state.control_points)
