"""
Editor settings.

Defaults come from constants.py. A front end can override any of them,
e.g. from a settings dialog or a parsed config file:

    >>> config = EditorConfig.from_dict({"stops": 50, "canvas_width": 1024})
"""

from dataclasses import dataclass, fields
from typing import Any, Mapping, Tuple

from .bezier import resolve_stops
from .constants import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    CONTROL_POINT_SIZE,
    CURVE_POINT_SIZE,
    EDITOR_STOPS,
    INITIAL_CONTROL_POINTS,
    MAX_SCALE,
    MIN_CONTROL_POINTS,
    MIN_SCALE,
    WHEEL_STEP,
)
from .exceptions import InvalidArgument


@dataclass(frozen=True)
class EditorConfig:
    """Settings of an interactive editing session."""
    stops: int = EDITOR_STOPS
    canvas_width: int = CANVAS_WIDTH
    canvas_height: int = CANVAS_HEIGHT
    control_point_size: int = CONTROL_POINT_SIZE
    curve_point_size: int = CURVE_POINT_SIZE
    min_scale: float = MIN_SCALE
    max_scale: float = MAX_SCALE
    wheel_step: float = WHEEL_STEP
    initial_control_points: Tuple[Tuple[float, float], ...] = INITIAL_CONTROL_POINTS

    def __post_init__(self) -> None:
        # 0 stays 0 here; the session resolves it to the default
        resolve_stops(self.stops)
        if self.canvas_width <= 0 or self.canvas_height <= 0:
            raise InvalidArgument(
                f"canvas size must be positive, got {self.canvas_width}x{self.canvas_height}"
            )
        if self.control_point_size <= 0 or self.curve_point_size <= 0:
            raise InvalidArgument("marker sizes must be positive")
        if not 0 < self.min_scale <= self.max_scale:
            raise InvalidArgument(
                f"scale limits must satisfy 0 < min_scale <= max_scale, got {self.min_scale}, {self.max_scale}"
            )
        if self.wheel_step <= 0:
            raise InvalidArgument(f"wheel_step must be positive, got {self.wheel_step}")

        points = tuple(tuple(p) for p in self.initial_control_points)
        if len(points) < MIN_CONTROL_POINTS or any(len(p) != 2 for p in points):
            raise InvalidArgument(
                f"initial_control_points must hold at least {MIN_CONTROL_POINTS} (x, y) pairs"
            )
        # Lists from a parsed file become tuples so the config stays hashable
        object.__setattr__(self, "initial_control_points", points)

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> "EditorConfig":
        """Build a config from a mapping, rejecting unknown keys."""
        known = {f.name for f in fields(cls)}
        unknown = set(values) - known
        if unknown:
            raise InvalidArgument(f"unknown editor settings: {', '.join(sorted(unknown))}")
        return cls(**values)
