"""
Tests for drawing surfaces.

The matplotlib surface is exercised with the Agg backend so no display is
needed.
"""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest
from matplotlib.patches import Circle

from fractree.commands import Flower, Segment
from fractree.config import Point
from fractree.surface import MatplotlibSurface, RecordingSurface, dispatch


class TestRecordingSurface:
    """Tests for the in-memory surface."""

    def test_records_in_order(self) -> None:
        surface = RecordingSurface()
        end = surface.draw_segment(Point(0, 0), Point(0, 10), 2.0, "#000000")
        surface.draw_filled_circle(end, 3.0, "#00ff00")
        assert end == Point(0, 10)
        assert surface.commands == [
            Segment(Point(0, 0), Point(0, 10), 2.0, "#000000"),
            Flower(Point(0, 10), 3.0, "#00ff00"),
        ]

    def test_clear(self) -> None:
        surface = RecordingSurface()
        surface.draw_filled_circle(Point(0, 0), 1.0, "#000000")
        surface.clear()
        assert surface.commands == []


class TestDispatch:
    """Tests for routing commands to a surface."""

    def test_round_trip(self) -> None:
        commands = [
            Segment(Point(1, 2), Point(3, 4), 1.5, "#123456"),
            Flower(Point(3, 4), 5.0, "#654321"),
        ]
        surface = RecordingSurface()
        for command in commands:
            dispatch(command, surface)
        assert surface.commands == commands

    def test_unknown_command(self) -> None:
        with pytest.raises(TypeError):
            dispatch(("not", "a", "command"), RecordingSurface())


class TestMatplotlibSurface:
    """Tests for the matplotlib-backed surface."""

    def test_canvas_space(self) -> None:
        """Origin at bottom-center, y up."""
        surface = MatplotlibSurface.create(400, 300, dpi=100)
        try:
            assert surface.ax.get_xlim() == (-200, 200)
            assert surface.ax.get_ylim() == (0, 300)
        finally:
            plt.close(surface.figure)

    def test_segment_and_circle(self) -> None:
        surface = MatplotlibSurface.create(400, 300, dpi=100)
        try:
            end = surface.draw_segment(Point(0, 0), Point(10, 50), 10.0, "#1e2202")
            surface.draw_filled_circle(end, 5.0, "#27b027")
            assert end == Point(10, 50)

            (line,) = surface.ax.lines
            assert list(line.get_xdata()) == [0, 10]
            assert list(line.get_ydata()) == [0, 50]
            assert line.get_solid_capstyle() == "round"
            # 10 px at 100 dpi is 7.2 pt
            assert line.get_linewidth() == pytest.approx(7.2)

            (patch,) = surface.ax.patches
            assert isinstance(patch, Circle)
            assert patch.get_radius() == 5.0
            assert patch.center == (10, 50)
        finally:
            plt.close(surface.figure)

    def test_later_draws_on_top(self) -> None:
        """Lines and flowers share a layer, so insertion order decides overlap."""
        surface = MatplotlibSurface.create(100, 100)
        try:
            surface.draw_filled_circle(Point(0, 10), 5.0, "#27b027")
            surface.draw_segment(Point(0, 0), Point(0, 20), 4.0, "#1e2202")
            assert surface.ax.patches[0].get_zorder() == surface.ax.lines[0].get_zorder()
        finally:
            plt.close(surface.figure)

    def test_negative_width_is_clamped(self) -> None:
        surface = MatplotlibSurface.create(100, 100)
        try:
            surface.draw_segment(Point(0, 0), Point(0, -5), -3.0, "#000000")
            assert surface.ax.lines[0].get_linewidth() == 0.0
        finally:
            plt.close(surface.figure)

    def test_clear_and_resize(self) -> None:
        surface = MatplotlibSurface.create(100, 100)
        try:
            surface.draw_segment(Point(0, 0), Point(0, 20), 4.0, "#1e2202")
            surface.clear("#000000")
            assert len(surface.ax.lines) == 0
            assert surface.background_color == "#000000"

            surface.draw_filled_circle(Point(0, 0), 1.0, "#ffffff")
            surface.resize(200, 50)
            assert len(surface.ax.patches) == 0
            assert surface.ax.get_xlim() == (-100, 100)
            assert surface.ax.get_ylim() == (0, 50)
        finally:
            plt.close(surface.figure)
