"""
Configuration and value types for fractal tree generation.

This module defines the coordinate and branch state representations and the
parameters that drive the branch generator.

Coordinates:
    The origin sits at the bottom-center of the canvas and y grows upward.
    Hosts are responsible for mapping this space onto their own surface.

Angles are in radians, measured counter-clockwise from the positive x axis,
so a vertical trunk grows at pi / 2.
"""

import math
from dataclasses import dataclass, field
from typing import NamedTuple


class Point(NamedTuple):
    """A point in canvas space (origin bottom-center, y up)."""

    x: float
    y: float


class BranchState(NamedTuple):
    """
    One growth step of the tree.

    A state is produced by its parent's growth step, consumed once
    (yielding zero or two children) and then discarded.
    """

    position: Point  # Where this branch grows from
    angle: float  # Growth direction in radians
    length: float  # Length of the branch drawn at this step
    thickness: float  # Line width of the branch drawn at this step


@dataclass(frozen=True)
class CanvasBounds:
    """
    Visible extent of the drawing surface.

    Only the `beyond` termination test reads these values: a branch whose
    position leaves [-half_width, half_width] x [-height, height] stops.
    """

    half_width: float
    height: float

    @classmethod
    def from_canvas(cls, width: float, height: float) -> "CanvasBounds":
        """Bounds for a canvas of the given size in device pixels."""
        return cls(half_width=width / 2, height=height)


@dataclass(frozen=True)
class TreeConfig:
    """
    Parameters for a single fractal tree.

    The generator treats these as read-only and performs no validation:
    out-of-range values produce degenerate geometry rather than errors.
    Upstream validation lives in `fractree.schema`.
    """

    # Trunk
    root_position: Point = field(default_factory=lambda: Point(0.0, 0.0))
    main_branch_height: float = 300.0  # Trunk length; also sets the leaf threshold
    main_branch_thickness: float = 100.0

    # Branching
    angle_delta: float = math.pi / 4  # Rotation applied to each child
    branch_length_decrease_ratio: float = 0.1  # Fraction of length lost per level
    branch_thickness_decrease_ratio: float = 0.3  # Fraction of width lost per level
    random: bool = True  # Gaussian jitter on child angles

    # Decoration
    has_flower: bool = True
    flower_color: str = "#27b027"
    branch_color: str = "#1e2202"
    background_color: str = "#ffffff"  # Only used by hosts when clearing

    @classmethod
    def default(cls, width: float, height: float) -> "TreeConfig":
        """Default tree for a canvas of `width` x `height` device pixels.

        The root is offset right of center and the trunk takes 30% of the
        canvas height.
        """
        return cls(
            root_position=Point(width / 2 * 0.37, 30.0),
            main_branch_height=height * 0.3,
        )

    @property
    def leaf_length(self) -> float:
        """Branches shorter than this stop growing (and may flower).

        The threshold is fixed by the trunk height for the whole tree, not
        relative to the current branch.
        """
        return self.main_branch_height / 8

    @property
    def first_branch_length(self) -> float:
        """Length carried into the first growth step after the trunk."""
        return self.main_branch_height * 0.37


# Growth begins straight up
TRUNK_ANGLE = math.pi / 2

# Flower radius before Gaussian scaling
FLOWER_SIZE = 20.0
