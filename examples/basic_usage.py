#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Bézier curve basic usage examples
"""

import numpy as np
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from bezier_curves import BezierCurve, cubic, elevate_by, evaluate, linear, quadratic


def add_curve(fig, curve_points, control_points, row, col):
    """Add a curve and its control polygon to a subplot."""
    fig.add_trace(go.Scatter(
        x=curve_points[:, 0], y=curve_points[:, 1],
        mode='lines', line=dict(color='green', width=3),
        showlegend=False
    ), row=row, col=col)

    control_points = np.asarray(control_points)
    fig.add_trace(go.Scatter(
        x=control_points[:, 0], y=control_points[:, 1],
        mode='markers+lines', line=dict(color='red', dash='dash'),
        marker=dict(color='red', size=10),
        showlegend=False
    ), row=row, col=col)


def curve_gallery_example():
    """Linear, quadratic, cubic and general curves side by side"""
    print("=== Curve gallery ===")

    linear_ctrl = [(0, 0), (100, 40)]
    quadratic_ctrl = [(0, 0), (50, 100), (100, 0)]
    cubic_ctrl = [(0, 0), (20, 100), (80, -60), (100, 40)]
    general_ctrl = [(0, 0), (10, 90), (40, -40), (60, 120), (90, -30), (100, 50)]

    fig = make_subplots(
        rows=2, cols=2,
        subplot_titles=('Linear', 'Quadratic', 'Cubic', 'Degree 5 (De Casteljau)')
    )
    add_curve(fig, linear(*linear_ctrl, stops=50), linear_ctrl, 1, 1)
    add_curve(fig, quadratic(*quadratic_ctrl, stops=50), quadratic_ctrl, 1, 2)
    add_curve(fig, cubic(*cubic_ctrl, stops=50), cubic_ctrl, 2, 1)
    add_curve(fig, evaluate(general_ctrl, stops=200), general_ctrl, 2, 2)

    fig.update_layout(title="Bézier curves by degree", width=900, height=700)
    fig.show()


def elevation_example():
    """Degree elevation keeps the curve and moves the control polygon towards it"""
    print("\n=== Degree elevation ===")

    curve = BezierCurve([(0, 0), (30, 100), (100, 0)])
    fig = go.Figure()
    colors = ['red', 'orange', 'purple', 'blue']

    for steps, color in enumerate(colors):
        ctrl = elevate_by(curve.control_points, steps)
        points = evaluate(ctrl, stops=100, truncate=False)
        print(f"{ctrl.shape[0]} control points, max deviation from original: "
              f"{np.abs(points - curve.sample(100, truncate=False)).max():.2e}")

        fig.add_trace(go.Scatter(
            x=ctrl[:, 0], y=ctrl[:, 1],
            mode='markers+lines', name=f'{ctrl.shape[0]} control points',
            line=dict(color=color, dash='dash'), marker=dict(color=color, size=8)
        ))

    fig.add_trace(go.Scatter(
        x=points[:, 0], y=points[:, 1],
        mode='lines', name='Curve',
        line=dict(color='green', width=3)
    ))
    fig.update_layout(title="Degree elevation", width=700, height=500)
    fig.show()


if __name__ == "__main__":
    curve_gallery_example()
    elevation_example()
