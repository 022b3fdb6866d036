"""
Fractree Module

A procedural fractal tree renderer: a vertical trunk, then binary branching
with decaying length and thickness, optional Gaussian jitter and flowers at
the leaves.

Modules:
    config: Value types, tree parameters and canvas bounds
    sampler: Gaussian and coin-flip sampling
    commands: Draw commands making up a generated tree
    generator: Branch generation (trunk, growth, termination)
    surface: Drawing surfaces (recording, matplotlib)
    playback: Paced, cancellable dispatch of draw commands
    render: Still images and animations via matplotlib
    schema: Validated input and JSON loading
"""

from fractree.commands import DrawCommand, Flower, Segment
from fractree.config import BranchState, CanvasBounds, Point, TreeConfig
from fractree.generator import draw_tree, generate_tree, grow, segment_end
from fractree.playback import Player
from fractree.render import animate_tree, render_tree, save_tree
from fractree.sampler import coin_flip, gaussian_sample, make_rng
from fractree.schema import TreeConfigSchema, load_config
from fractree.surface import MatplotlibSurface, RecordingSurface, Surface, dispatch

__all__ = [
    # Config
    "BranchState",
    "CanvasBounds",
    "Point",
    "TreeConfig",
    # Sampling
    "coin_flip",
    "gaussian_sample",
    "make_rng",
    # Generation
    "DrawCommand",
    "Flower",
    "Segment",
    "draw_tree",
    "generate_tree",
    "grow",
    "segment_end",
    # Surfaces
    "MatplotlibSurface",
    "RecordingSurface",
    "Surface",
    "dispatch",
    # Presentation
    "Player",
    "animate_tree",
    "render_tree",
    "save_tree",
    # Input
    "TreeConfigSchema",
    "load_config",
]
