"""
Bézier Curve Editor Core

This package evaluates Bézier curves of any degree from a sequence of
control points and elevates their degree without changing their shape.
An immutable editing session model lets any UI toolkit drag, add and
remove control points and redraw the resulting curve points.
"""

from .bezier import (
    BezierCurve,
    as_control_points,
    bernstein_basis,
    closed_form,
    cubic,
    cubic_points,
    de_casteljau,
    evaluate,
    linear,
    linear_points,
    quadratic,
    quadratic_points,
    resolve_stops,
    sample_parameters,
)
from .elevation import (
    clear_matrix_cache,
    elevate,
    elevate_by,
    get_cache_info,
    get_elevation_matrix,
)
from .session import (
    EditorState,
    add_control_point,
    can_remove_control_point,
    clamp_point,
    drag,
    hit_test,
    new_session,
    on_control_points_changed,
    press,
    release,
    remove_control_point,
    set_stops,
    zoom,
)
from .config import EditorConfig
from .exceptions import InvalidArgument
from .logging_config import setup_logging
from . import constants

__all__ = [
    # Core classes
    'BezierCurve',

    # Evaluation functions
    'as_control_points',
    'bernstein_basis',
    'closed_form',
    'de_casteljau',
    'evaluate',
    'linear',
    'linear_points',
    'quadratic',
    'quadratic_points',
    'cubic',
    'cubic_points',
    'resolve_stops',
    'sample_parameters',

    # Degree elevation
    'elevate',
    'elevate_by',
    'get_elevation_matrix',
    'clear_matrix_cache',
    'get_cache_info',

    # Editing session
    'EditorState',
    'new_session',
    'on_control_points_changed',
    'add_control_point',
    'remove_control_point',
    'can_remove_control_point',
    'press',
    'drag',
    'release',
    'zoom',
    'set_stops',
    'hit_test',
    'clamp_point',

    # Configuration and errors
    'EditorConfig',
    'InvalidArgument',
    'setup_logging',

    # Constants module
    'constants',
]

__version__ = "1.0.0"
