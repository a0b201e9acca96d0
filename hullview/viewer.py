"""
Interactive hull viewer.

Left click inside the canvas adds a point, the radio buttons choose the
builder, ``c`` clears the canvas. Every event redraws everything and the hull
is recomputed from scratch on each redraw.
"""
from __future__ import annotations

import logging

import matplotlib.pyplot as plt
from matplotlib.backend_bases import MouseButton
from matplotlib.widgets import RadioButtons

from hullview import config
from hullview.polygon import closed_path
from hullview.session import Algorithm, HullSession
from hullview.viewport import Viewport

logger = logging.getLogger(__name__)

# Axes rectangles in figure fractions: drawing canvas on top, selector below
CANVAS_RECT = (0.0, 0.12, 1.0, 0.88)
SELECTOR_RECT = (0.0, 0.0, 0.3, 0.12)


class HullViewer:
    def __init__(self, session: HullSession):
        self.session = session

        width, height = config.WINDOW_SIZE
        self.fig = plt.figure(figsize=(width / config.FIGURE_DPI, height / config.FIGURE_DPI), dpi=config.FIGURE_DPI)
        if self.fig.canvas.manager is not None:
            self.fig.canvas.manager.set_window_title(config.WINDOW_TITLE)

        self.ax = self.fig.add_axes(CANVAS_RECT)
        self.ax.set_facecolor(config.BACKGROUND_COLOR)
        self.ax.set_xticks([])
        self.ax.set_yticks([])

        # Coordinate system backdrop
        self.ax.plot([-1.0, 1.0], [0.0, 0.0], color=config.AXIS_COLOR, lw=1)
        self.ax.plot([0.0, 0.0], [-1.0, 1.0], color=config.AXIS_COLOR, lw=1)

        self.points_plot, = self.ax.plot([], [], 'o', ms=config.POINT_SIZE, color=config.POINT_COLOR, linestyle='none')
        self.hull_plot, = self.ax.plot([], [], '-', lw=config.HULL_LINE_WIDTH, color=config.HULL_COLOR)
        self.status_text = self.ax.text(0.02, 0.98, "", transform=self.ax.transAxes, ha="left", va="top",
                                        fontsize=9, color=config.STATUS_COLOR)

        labels = [algorithm.value for algorithm in Algorithm]
        if session.algorithm is None:
            session.select(Algorithm(labels[0]))
        self.selector = RadioButtons(self.fig.add_axes(SELECTOR_RECT), labels,
                                     active=labels.index(session.algorithm.value))
        self.selector.on_clicked(self.on_select)

        self.viewport = Viewport(*self._canvas_size())
        self._apply_limits()

        self.fig.canvas.mpl_connect('button_press_event', self.on_click)
        self.fig.canvas.mpl_connect('key_press_event', self.on_key)
        self.fig.canvas.mpl_connect('resize_event', self.on_resize)

        self.redraw()

    def _canvas_size(self):
        bbox = self.ax.bbox
        return max(int(round(bbox.width)), 1), max(int(round(bbox.height)), 1)

    def _apply_limits(self):
        x0, x1, y0, y1 = self.viewport.limits()
        self.ax.set_xlim(x0, x1)
        self.ax.set_ylim(y0, y1)

    def on_click(self, event):
        if event.inaxes is not self.ax or event.button != MouseButton.LEFT:
            return
        bbox = self.ax.bbox
        # matplotlib reports pixels from the bottom-left corner
        point = self.viewport.transform(event.x - bbox.x0, bbox.y1 - event.y)
        self.session.add_point(point.x, point.y)
        self.redraw()

    def on_key(self, event):
        if event.key == config.CLEAR_KEY:
            self.session.clear()
            self.redraw()

    def on_resize(self, event):
        self.viewport.resize(*self._canvas_size())
        self._apply_limits()
        self.redraw()

    def on_select(self, label):
        self.session.select(Algorithm(label))
        self.redraw()

    def redraw(self):
        points = self.session.points
        self.points_plot.set_data([p.x for p in points], [p.y for p in points])

        hull = self.session.compute_hull()
        self.hull_plot.set_data(*closed_path(hull))

        self.status_text.set_text(self.session.status)
        self.fig.canvas.draw_idle()
        return hull

    def show(self):
        plt.show()
