#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Interactive Bézier editor built on matplotlib.

Controls:
    left drag   move a control point
    +  / -      add a control point (degree elevation) / remove the last one
    scroll      zoom the markers

Session coordinates are canvas pixels and map 1:1 onto the axes data
units (0..canvas_width, 0..canvas_height). Marker diameters and the hit
radius are therefore in canvas units; marker areas are converted to
points^2 through ax.transData on every redraw.
"""

import argparse
import logging

import matplotlib.pyplot as plt

from bezier_curves import (
    EditorConfig,
    add_control_point,
    can_remove_control_point,
    drag,
    new_session,
    press,
    release,
    remove_control_point,
    setup_logging,
    zoom,
)

logger = logging.getLogger("bezier_curves.examples.editor")


class MatplotlibEditor:
    """Glue between matplotlib events and the editing session."""

    def __init__(self, config):
        self.state = new_session(config)

        self.fig, self.ax = plt.subplots(figsize=(8, 6))
        self.ax.set_xlim(0, config.canvas_width)
        self.ax.set_ylim(config.canvas_height, 0)  # pixel coordinates, y down
        self.ax.set_aspect('equal')
        self.ax.set_title("Bézier Curves  (+/- add/remove point, scroll to zoom)")

        self.curve_artist = self.ax.scatter([], [], color='green', zorder=1)
        self.control_artist = self.ax.scatter([], [], color='red', zorder=2)

        self.fig.canvas.mpl_connect('button_press_event', self.on_press)
        self.fig.canvas.mpl_connect('motion_notify_event', self.on_motion)
        self.fig.canvas.mpl_connect('button_release_event', self.on_release)
        self.fig.canvas.mpl_connect('scroll_event', self.on_scroll)
        self.fig.canvas.mpl_connect('key_press_event', self.on_key)
        self.fig.canvas.mpl_connect('resize_event', lambda event: self.redraw())

        self.redraw()

    def on_press(self, event):
        if event.inaxes != self.ax or event.button != 1 or event.xdata is None:
            return
        self.state = press(self.state, event.xdata, event.ydata)

    def on_motion(self, event):
        if self.state.selected is None or event.xdata is None:
            return
        self.state = drag(self.state, event.xdata, event.ydata)
        self.redraw()

    def on_release(self, event):
        self.state = release(self.state)

    def on_scroll(self, event):
        # matplotlib reports +1 for scrolling up, which enlarges the markers
        self.state = zoom(self.state, -event.step)
        self.redraw()

    def on_key(self, event):
        if event.key == '+':
            self.state = add_control_point(self.state)
        elif event.key == '-':
            if not can_remove_control_point(self.state):
                logger.info("A curve needs at least two control points")
                return
            self.state = remove_control_point(self.state)
        else:
            return
        logger.info("Curve now has %d control points", self.state.point_count)
        self.redraw()

    def marker_area(self, diameter):
        """Convert a diameter in canvas units to a scatter area in points^2."""
        x0, _ = self.ax.transData.transform((0, 0))
        x1, _ = self.ax.transData.transform((diameter, 0))
        points = abs(x1 - x0) * 72.0 / self.fig.dpi
        return points ** 2

    def redraw(self):
        state = self.state
        self.curve_artist.set_offsets(state.curve_points)
        self.curve_artist.set_sizes([self.marker_area(state.curve_point_size)])
        self.control_artist.set_offsets(state.control_points)
        self.control_artist.set_sizes([self.marker_area(state.control_point_size)])
        self.fig.canvas.draw_idle()


def main():
    parser = argparse.ArgumentParser(description="Interactive Bézier curve editor")
    parser.add_argument('--stops', type=int, default=EditorConfig.stops, help="curve sample count")
    parser.add_argument('--debug', action='store_true', help="enable debug logging")
    args = parser.parse_args()

    setup_logging(logging.DEBUG if args.debug else logging.INFO)
    MatplotlibEditor(EditorConfig(stops=args.stops))
    plt.show()


if __name__ == "__main__":
    main()
