"""
Draw commands emitted by the branch generator.

A generated tree is nothing more than an ordered sequence of these records.
Hosts may dispatch them immediately, in batches, or paced over time, as long
as the order is preserved (later marks may overlap earlier ones).
"""

from collections.abc import Iterable
from typing import NamedTuple, Union

from fractree.config import Point


class Segment(NamedTuple):
    """A straight line with round end caps."""

    start: Point
    end: Point
    width: float
    color: str


class Flower(NamedTuple):
    """A filled circle at the tip of a terminal branch."""

    center: Point
    radius: float
    color: str


DrawCommand = Union[Segment, Flower]


def count_commands(commands: Iterable[DrawCommand]) -> tuple[int, int]:
    """Return (segments, flowers) in a command sequence, consuming it."""
    segments = flowers = 0
    for command in commands:
        if isinstance(command, Segment):
            segments += 1
        else:
            flowers += 1
    return segments, flowers
