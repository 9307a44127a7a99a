"""
Exceptions raised by the curve functions.
"""


class InvalidArgument(ValueError):
    """A curve function received control points or parameters it cannot use."""
