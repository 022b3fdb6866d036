"""
Drawing surfaces the tree is rendered onto.

The generator only needs two capabilities from its host: a line segment with
round caps and a filled circle. Everything else (origin placement, flipping
the vertical axis, device pixel scaling, clearing) belongs to the surface.
"""

from typing import Protocol

import matplotlib.pyplot as plt
from matplotlib.patches import Circle

from fractree.commands import DrawCommand, Flower, Segment
from fractree.config import Point


class Surface(Protocol):
    """Minimal drawing interface consumed by the tree renderer."""

    def draw_segment(self, start: Point, end: Point, width: float, color: str) -> Point:
        """Draw a straight line with round caps and return `end`."""
        ...

    def draw_filled_circle(self, center: Point, radius: float, color: str) -> None:
        """Draw a filled circle."""
        ...


def dispatch(command: DrawCommand, surface: Surface) -> None:
    """Send one draw command to a surface."""
    if isinstance(command, Segment):
        surface.draw_segment(command.start, command.end, command.width, command.color)
    elif isinstance(command, Flower):
        surface.draw_filled_circle(command.center, command.radius, command.color)
    else:
        raise TypeError(f"Unknown draw command: {command!r}")


class RecordingSurface:
    """Surface that keeps every call as a draw command, in order."""

    def __init__(self) -> None:
        self.commands: list[DrawCommand] = []

    def draw_segment(self, start: Point, end: Point, width: float, color: str) -> Point:
        self.commands.append(Segment(start, end, width, color))
        return end

    def draw_filled_circle(self, center: Point, radius: float, color: str) -> None:
        self.commands.append(Flower(center, radius, color))

    def clear(self) -> None:
        self.commands.clear()


# Line widths are given in canvas pixels, matplotlib wants points
POINTS_PER_INCH = 72.0

# Lines and flowers share one layer so later draws cover earlier ones
DRAW_ZORDER = 2


class MatplotlibSurface:
    """
    Surface backed by a matplotlib Axes.

    The axes is set up so that canvas coordinates map directly onto data
    coordinates: x spans [-width/2, width/2] and y spans [0, height] with
    y increasing upward.
    """

    def __init__(
        self,
        ax: plt.Axes,
        width: float,
        height: float,
        background_color: str = "#ffffff",
    ):
        self.ax = ax
        self.width = width
        self.height = height
        self.background_color = background_color
        self._setup_axes()

    @classmethod
    def create(
        cls,
        width: int,
        height: int,
        dpi: float = 100.0,
        background_color: str = "#ffffff",
    ) -> "MatplotlibSurface":
        """Create a figure exactly `width` x `height` pixels at `dpi`."""
        fig = plt.figure(figsize=(width / dpi, height / dpi), dpi=dpi)
        ax = fig.add_axes([0.0, 0.0, 1.0, 1.0])
        return cls(ax, width, height, background_color)

    @property
    def figure(self) -> plt.Figure:
        return self.ax.figure

    def _setup_axes(self) -> None:
        self.ax.set_xlim(-self.width / 2, self.width / 2)
        self.ax.set_ylim(0, self.height)
        self.ax.set_aspect("equal")
        self.ax.set_facecolor(self.background_color)
        self.ax.set_xticks([])
        self.ax.set_yticks([])
        for spine in self.ax.spines.values():
            spine.set_visible(False)

    def points_per_unit(self) -> float:
        """Conversion from canvas units to matplotlib points."""
        bbox = self.ax.get_position()
        fig_width_in = self.figure.get_figwidth()
        axes_width_in = bbox.width * fig_width_in
        return axes_width_in * POINTS_PER_INCH / self.width

    def draw_segment(self, start: Point, end: Point, width: float, color: str) -> Point:
        self.ax.plot(
            [start.x, end.x],
            [start.y, end.y],
            color=color,
            linewidth=max(0.0, width) * self.points_per_unit(),
            solid_capstyle="round",
            zorder=DRAW_ZORDER,
        )
        return end

    def draw_filled_circle(self, center: Point, radius: float, color: str) -> None:
        circle = Circle(
            (center.x, center.y),
            radius,
            facecolor=color,
            edgecolor="none",
            zorder=DRAW_ZORDER,
        )
        self.ax.add_patch(circle)

    def clear(self, background_color: str | None = None) -> None:
        """Remove everything drawn so far and repaint the background."""
        if background_color is not None:
            self.background_color = background_color
        self.ax.cla()
        self._setup_axes()

    def resize(self, width: float, height: float) -> None:
        """Change the canvas extent; drawn content is discarded."""
        self.width = width
        self.height = height
        self.clear()
