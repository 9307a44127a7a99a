"""
Example scripts for the bezier_curves package.

Included examples:
- basic_usage.py: curves of every degree and degree elevation (plotly)
- interactive_editor.py: drag / add / remove control points (matplotlib)

How to run:
    pip install -e .[examples]
    python examples/basic_usage.py
    python examples/interactive_editor.py
"""

__all__ = []
