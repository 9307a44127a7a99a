"""
Default editor parameters and sampling constants.
"""

# Sampling
DEFAULT_STOPS = 20  # Used when a caller passes stops=0
EDITOR_STOPS = 200  # Curve resolution of the interactive editor
MIN_CONTROL_POINTS = 2

# Canvas (pixels)
CANVAS_WIDTH = 800
CANVAS_HEIGHT = 600
INITIAL_CONTROL_POINTS = ((100, 100), (200, 200))

# Marker sizes in pixels at scale 1.0
CONTROL_POINT_SIZE = 10
CURVE_POINT_SIZE = 3

# Zoom
MIN_SCALE = 0.7
MAX_SCALE = 3.0
WHEEL_STEP = 0.1  # Scale change per wheel notch
