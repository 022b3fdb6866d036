"""
Fractree - Fractal Tree Renderer

Renders a procedurally generated fractal tree:
1. A vertical trunk from the root position
2. Binary branching with decaying length and thickness
3. Optional Gaussian jitter on branch angles and flowers on leaves

Parameters come from the defaults for the canvas size, an optional JSON
file, then command-line overrides, in that order. The tree is either saved
to an image file or animated in a window.
"""

import argparse
import logging
import sys
from dataclasses import replace

import pydantic

from fractree.config import Point, TreeConfig
from fractree.render import CANVAS_SIZE, animate_tree, save_tree
from fractree.schema import TreeConfigSchema, load_config


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render a fractal tree.")
    parser.add_argument("--config", type=str, default=None,
                        help="JSON file with tree parameters")
    parser.add_argument("--width", type=int, default=CANVAS_SIZE[0],
                        help="Canvas width in pixels")
    parser.add_argument("--height", type=int, default=CANVAS_SIZE[1],
                        help="Canvas height in pixels")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed (default: fresh entropy)")
    parser.add_argument("--dpi", type=float, default=100.0)

    tree = parser.add_argument_group("tree parameters")
    tree.add_argument("--root-x", type=float, default=None)
    tree.add_argument("--root-y", type=float, default=None)
    tree.add_argument("--trunk-height", type=float, default=None)
    tree.add_argument("--trunk-thickness", type=float, default=None)
    tree.add_argument("--angle-delta", type=float, default=None,
                      help="Branch rotation in radians")
    tree.add_argument("--length-ratio", type=float, default=None,
                      help="Branch length decrease ratio (0-1)")
    tree.add_argument("--thickness-ratio", type=float, default=None,
                      help="Branch thickness decrease ratio (0-1)")
    tree.add_argument("--branch-color", type=str, default=None)
    tree.add_argument("--flower-color", type=str, default=None)
    tree.add_argument("--background-color", type=str, default=None)
    tree.add_argument("--no-flower", action="store_true")
    tree.add_argument("--no-random", action="store_true")

    out = parser.add_mutually_exclusive_group()
    out.add_argument("--output", type=str, default="tree.png",
                     help="Image file to write (default: tree.png)")
    out.add_argument("--animate", action="store_true",
                     help="Show the tree growing in a window")
    parser.add_argument("--interval", type=int, default=50,
                        help="Animation frame delay in milliseconds")
    parser.add_argument("--batch-size", type=int, default=8,
                        help="Draw commands per animation frame")
    parser.add_argument("--verbose", "-v", action="store_true")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> TreeConfig:
    """Defaults for the canvas, then the JSON file, then flags; validated."""
    config = TreeConfig.default(args.width, args.height)
    if args.config:
        config = load_config(args.config, base=config)

    overrides = {}
    if args.root_x is not None or args.root_y is not None:
        root = config.root_position
        overrides["root_position"] = Point(
            root.x if args.root_x is None else args.root_x,
            root.y if args.root_y is None else args.root_y,
        )
    flags = {
        "main_branch_height": args.trunk_height,
        "main_branch_thickness": args.trunk_thickness,
        "angle_delta": args.angle_delta,
        "branch_length_decrease_ratio": args.length_ratio,
        "branch_thickness_decrease_ratio": args.thickness_ratio,
        "branch_color": args.branch_color,
        "flower_color": args.flower_color,
        "background_color": args.background_color,
    }
    overrides.update({k: v for k, v in flags.items() if v is not None})
    if args.no_flower:
        overrides["has_flower"] = False
    if args.no_random:
        overrides["random"] = False

    config = replace(config, **overrides)
    return TreeConfigSchema.from_config(config).to_config()


def main(argv: list[str] | None = None) -> int:
    args = parse_arguments(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    try:
        config = build_config(args)
    except pydantic.ValidationError as e:
        print(f"Invalid tree parameters:\n{e}", file=sys.stderr)
        return 2
    except (OSError, ValueError) as e:
        print(f"Could not load {args.config}: {e}", file=sys.stderr)
        return 2

    canvas_size = (args.width, args.height)
    print("=" * 60)
    print("  FRACTREE: Fractal Tree Renderer")
    print("=" * 60)
    print(f"Canvas: {args.width}x{args.height}")
    print(f"Trunk: height={config.main_branch_height:.1f}, "
          f"thickness={config.main_branch_thickness:.1f}")
    print(f"Decay: length={config.branch_length_decrease_ratio}, "
          f"thickness={config.branch_thickness_decrease_ratio}")
    print(f"Random: {config.random}, Flowers: {config.has_flower}")

    if args.animate:
        import matplotlib.pyplot as plt

        anim = animate_tree(
            config, args.seed, canvas_size, args.dpi,
            interval=args.interval, batch_size=args.batch_size,
        )
        plt.show()
        anim.event_source.stop()
    else:
        save_tree(args.output, config, args.seed, canvas_size, args.dpi)

    return 0


if __name__ == "__main__":
    sys.exit(main())
