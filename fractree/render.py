"""
Matplotlib rendering of fractal trees.

Provides a still render, a file export and a paced animation. All three
share the same generated command sequence, so a given seed draws the same
tree whichever way it is shown.
"""

import logging
from itertools import islice

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.animation import FuncAnimation

from fractree.config import CanvasBounds, TreeConfig
from fractree.generator import draw_tree, generate_tree
from fractree.sampler import make_rng
from fractree.surface import MatplotlibSurface, dispatch

_LOGGER = logging.getLogger(__name__)

# Default canvas, in device pixels
CANVAS_SIZE = (800, 600)

# Cap on draws per render; a zero-height trunk never reaches its leaf length
MAX_COMMANDS = 200_000


def render_tree(
    config: TreeConfig | None = None,
    seed: int | np.random.Generator | None = 42,
    canvas_size: tuple[int, int] = CANVAS_SIZE,
    dpi: float = 100.0,
) -> tuple[plt.Figure, plt.Axes]:
    """
    Render a fractal tree onto a new figure.

    Args:
        config: Tree parameters (defaults sized to the canvas)
        seed: Random seed for reproducibility
        canvas_size: Canvas (width, height) in device pixels
        dpi: Figure resolution

    Returns:
        (figure, axes) tuple
    """
    width, height = canvas_size
    if config is None:
        config = TreeConfig.default(width, height)

    surface = MatplotlibSurface.create(width, height, dpi, config.background_color)
    bounds = CanvasBounds.from_canvas(width, height)
    segments, flowers = draw_tree(
        config, surface, bounds, make_rng(seed), max_commands=MAX_COMMANDS
    )
    _LOGGER.info("Rendered tree: %d segments, %d flowers", segments, flowers)

    return surface.figure, surface.ax


def save_tree(
    filepath: str,
    config: TreeConfig | None = None,
    seed: int | np.random.Generator | None = 42,
    canvas_size: tuple[int, int] = CANVAS_SIZE,
    dpi: float = 100.0,
) -> None:
    """Render and save a tree to file (format from the extension)."""
    fig, ax = render_tree(config, seed, canvas_size, dpi)
    fig.savefig(filepath, dpi=dpi, facecolor=ax.get_facecolor())
    plt.close(fig)
    print(f"Saved to {filepath}")


def animate_tree(
    config: TreeConfig | None = None,
    seed: int | np.random.Generator | None = 42,
    canvas_size: tuple[int, int] = CANVAS_SIZE,
    dpi: float = 100.0,
    interval: int = 50,
    batch_size: int = 1,
    save_path: str | None = None,
) -> FuncAnimation:
    """
    Animate the tree being drawn, one batch of commands per frame.

    The command order is the generation order, so the left subtree of every
    branch finishes before its right sibling appears.

    Args:
        config: Tree parameters (defaults sized to the canvas)
        seed: Random seed for reproducibility
        canvas_size: Canvas (width, height) in device pixels
        dpi: Figure resolution
        interval: Delay between frames in milliseconds
        batch_size: Draw commands added per frame
        save_path: Optional path to write the animation to

    Returns:
        The FuncAnimation; keep a reference for as long as it should play.
        Stop it early with `anim.event_source.stop()`.
    """
    if batch_size < 1:
        raise ValueError("batch_size must be at least 1")

    width, height = canvas_size
    if config is None:
        config = TreeConfig.default(width, height)

    surface = MatplotlibSurface.create(width, height, dpi, config.background_color)
    bounds = CanvasBounds.from_canvas(width, height)
    commands = list(islice(generate_tree(config, bounds, make_rng(seed)), MAX_COMMANDS))
    batches = [commands[i:i + batch_size] for i in range(0, len(commands), batch_size)]

    def init():
        surface.clear()
        return []

    def update(frame: int):
        for command in batches[frame]:
            dispatch(command, surface)
        return []

    anim = FuncAnimation(
        surface.figure,
        update,
        frames=len(batches),
        init_func=init,
        interval=interval,
        blit=False,
        repeat=False,
    )

    if save_path:
        print(f"Saving animation to {save_path}...")
        writer = "pillow" if save_path.endswith(".gif") else None
        anim.save(save_path, writer=writer, fps=max(1, 1000 // max(1, interval)))
        print(f"Saved animation to {save_path}")

    return anim
