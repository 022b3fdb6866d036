"""
Fractal tree branch generation.

A tree is a vertical trunk followed by a binary tree of branches. Each growth
step either stops (and may leave a flower) or emits two children:

    left  = angle + angle_delta * jitter
    right = angle - angle_delta * jitter
    length'    = length    * (1 - branch_length_decrease_ratio)
    thickness' = thickness * (1 - branch_thickness_decrease_ratio)

where jitter is a Gaussian sample in (0, 1) when randomization is enabled and
1 otherwise. A branch stops growing when it points downward (back), leaves the
canvas (beyond), or becomes shorter than main_branch_height / 8 (short).

Generation is a lazy sequence of draw commands. The left subtree, including
all of its descendants, is always emitted before the right child's segment.
"""

import logging
import math
from collections.abc import Iterator

import numpy as np

from fractree.commands import DrawCommand, Flower, Segment, count_commands
from fractree.config import FLOWER_SIZE, TRUNK_ANGLE, BranchState, CanvasBounds, Point, TreeConfig
from fractree.sampler import coin_flip, gaussian_sample, make_rng
from fractree.surface import Surface, dispatch

_LOGGER = logging.getLogger(__name__)


def segment_end(start: Point, angle: float, length: float) -> Point:
    """Endpoint of a segment of `length` leaving `start` at `angle`."""
    return Point(
        start.x + length * math.cos(angle),
        start.y + length * math.sin(angle),
    )


def is_back(state: BranchState) -> bool:
    """Branch has rotated past horizontal and would grow downward."""
    return state.angle < 0 or state.angle > math.pi


def is_beyond(state: BranchState, bounds: CanvasBounds) -> bool:
    """Branch has left the visible canvas."""
    return abs(state.position.x) > bounds.half_width or abs(state.position.y) > bounds.height


def is_short(state: BranchState, config: TreeConfig) -> bool:
    """Branch has decayed below the fixed leaf length."""
    return state.length < config.leaf_length


def child_states(
    state: BranchState,
    config: TreeConfig,
    rng: np.random.Generator,
) -> tuple[BranchState, BranchState]:
    """
    Compute the left and right children of a growing branch.

    Children start at the parent's position; their own position becomes the
    endpoint of the segment drawn for them. The left jitter is drawn before
    the right one.
    """
    if config.random:
        left_jitter = gaussian_sample(rng)
        right_jitter = gaussian_sample(rng)
    else:
        left_jitter = right_jitter = 1.0

    next_length = state.length * (1 - config.branch_length_decrease_ratio)
    next_thickness = state.thickness * (1 - config.branch_thickness_decrease_ratio)

    left = BranchState(
        position=state.position,
        angle=state.angle + config.angle_delta * left_jitter,
        length=next_length,
        thickness=next_thickness,
    )
    right = BranchState(
        position=state.position,
        angle=state.angle - config.angle_delta * right_jitter,
        length=next_length,
        thickness=next_thickness,
    )
    return left, right


def grow(
    state: BranchState,
    config: TreeConfig,
    bounds: CanvasBounds,
    rng: np.random.Generator,
) -> Iterator[DrawCommand]:
    """
    Grow the tree from `state`, yielding draw commands in paint order.

    Uses an explicit stack instead of recursion. A stack entry is a child
    whose segment has not been drawn yet; its position is the point it
    grows from. The right child is pushed before the left so the whole left
    subtree is emitted first.

    Args:
        state: Branch state at the tip of an already drawn segment
        config: Tree parameters (read-only, not validated)
        bounds: Visible canvas extent for the `beyond` test
        rng: Entropy source for jitter and flowers

    Yields:
        Segment and Flower commands
    """
    # None marks the root node, whose segment was drawn by the caller
    stack: list[BranchState | None] = [None]

    while stack:
        pending = stack.pop()
        if pending is None:
            node = state
        else:
            end = segment_end(pending.position, pending.angle, pending.length)
            yield Segment(pending.position, end, pending.thickness, config.branch_color)
            node = pending._replace(position=end)

        back = is_back(node)
        beyond = is_beyond(node, bounds)
        short = is_short(node, config)
        if back or beyond or short:
            if short and config.has_flower and coin_flip(rng):
                radius = FLOWER_SIZE * gaussian_sample(rng)
                yield Flower(node.position, radius, config.flower_color)
            continue

        left, right = child_states(node, config, rng)
        stack.append(right)
        stack.append(left)


def generate_tree(
    config: TreeConfig,
    bounds: CanvasBounds,
    rng: int | np.random.Generator | None = None,
) -> Iterator[DrawCommand]:
    """
    Yield the full draw sequence for a tree: trunk first, then branches.

    The trunk is drawn straight up without any termination test. Growth
    then starts at its tip with 37% of the trunk height and the full trunk
    thickness.

    Args:
        config: Tree parameters
        bounds: Visible canvas extent
        rng: Seed or Generator; None draws fresh entropy

    Yields:
        Segment and Flower commands in paint order
    """
    rng = make_rng(rng)

    root = config.root_position
    trunk_end = segment_end(root, TRUNK_ANGLE, config.main_branch_height)
    yield Segment(root, trunk_end, config.main_branch_thickness, config.branch_color)

    first = BranchState(
        position=trunk_end,
        angle=TRUNK_ANGLE,
        length=config.first_branch_length,
        thickness=config.main_branch_thickness,
    )
    yield from grow(first, config, bounds, rng)


def draw_tree(
    config: TreeConfig,
    surface: Surface,
    bounds: CanvasBounds,
    rng: int | np.random.Generator | None = None,
    max_commands: int | None = None,
) -> tuple[int, int]:
    """
    Draw a tree straight onto a surface.

    A zero trunk height never satisfies the `short` test, so the sequence
    can be endless; `max_commands` lets a host stop after a fixed number
    of draws.

    Returns:
        (segments, flowers) drawn
    """
    def dispatched():
        for drawn, command in enumerate(generate_tree(config, bounds, rng)):
            if max_commands is not None and drawn >= max_commands:
                _LOGGER.warning("draw_tree: stopped after %d commands", max_commands)
                return
            dispatch(command, surface)
            yield command

    segments, flowers = count_commands(dispatched())
    _LOGGER.debug("draw_tree: %d segments, %d flowers", segments, flowers)
    return segments, flowers
