"""
Tests for tree configuration and value types.
"""

import dataclasses
import math

import pytest

from fractree.config import BranchState, CanvasBounds, Point, TreeConfig


class TestTreeConfig:
    """Tests for tree parameters."""

    def test_default_for_canvas(self) -> None:
        """Default root sits right of center and the trunk is 30% of the height."""
        config = TreeConfig.default(1000, 800)
        assert config.root_position == Point(1000 / 2 * 0.37, 30.0)
        assert config.main_branch_height == pytest.approx(240.0)
        assert config.main_branch_thickness == 100.0
        assert config.angle_delta == math.pi / 4
        assert config.branch_length_decrease_ratio == 0.1
        assert config.branch_thickness_decrease_ratio == 0.3
        assert config.has_flower and config.random

    def test_derived_lengths(self) -> None:
        config = TreeConfig(main_branch_height=80.0)
        assert config.leaf_length == 10.0
        assert config.first_branch_length == pytest.approx(29.6)

    def test_frozen(self) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            TreeConfig().random = False

    def test_no_validation(self) -> None:
        """Out-of-range values are accepted as-is."""
        config = TreeConfig(branch_length_decrease_ratio=2.0, main_branch_height=-5.0)
        assert config.branch_length_decrease_ratio == 2.0


class TestCanvasBounds:
    """Tests for canvas extent."""

    def test_from_canvas(self) -> None:
        assert CanvasBounds.from_canvas(640, 480) == CanvasBounds(320.0, 480.0)


class TestBranchState:
    """Tests for branch state values."""

    def test_replace_is_new_value(self) -> None:
        state = BranchState(Point(0.0, 0.0), math.pi / 2, 10.0, 2.0)
        moved = state._replace(position=Point(1.0, 1.0))
        assert state.position == Point(0.0, 0.0)
        assert moved.length == state.length
