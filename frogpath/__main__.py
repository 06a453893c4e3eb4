"""Entry point for ``python -m frogpath``.

Loads a pond map (or generates a random pond from the config), runs the
frog's search, prints the result line, and optionally replays the search
in a Pygame window.
"""

from __future__ import annotations

import argparse
import logging
import pathlib

import numpy as np

from frogpath.pond.generator import generate_pond
from frogpath.pond.pond import InvalidMapError, Pond
from frogpath.search.config import FrogConfig
from frogpath.search.frog_path import FrogPath

_DEFAULT_CONFIG = (
    pathlib.Path(__file__).resolve().parent.parent / "config" / "default.yaml"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="frogpath",
        description="Frogpath - greedy frog hopping across a hexagonal pond",
    )
    parser.add_argument(
        "map",
        nargs="?",
        type=pathlib.Path,
        help="YAML pond map (default: generate a random pond)",
    )
    parser.add_argument(
        "-c",
        "--config",
        type=pathlib.Path,
        default=_DEFAULT_CONFIG,
        help="Path to YAML config file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Override the config seed for random ponds",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Replay the search in a Pygame window",
    )
    parser.add_argument(
        "--cell-size",
        type=int,
        default=24,
        help="Hexagon radius in pixels (default: 24)",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=30,
        help="Target frames per second (default: 30)",
    )
    parser.add_argument(
        "--speed",
        type=float,
        default=4.0,
        help="Replay hops per second (default: 4)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log every hop and backtrack",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Parse CLI args, build the pond, run the search, print the result."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = FrogConfig.from_yaml(args.config)
    except FileNotFoundError:
        parser.error(f"config file not found: {args.config}")

    if args.map is not None:
        try:
            pond = Pond.from_yaml(args.map)
        except FileNotFoundError:
            parser.error(f"map file not found: {args.map}")
        except InvalidMapError as e:
            parser.error(f"invalid map {args.map}: {e}")
    else:
        seed = config.seed if args.seed is None else args.seed
        pond = generate_pond(
            config.pond_width,
            config.pond_height,
            np.random.default_rng(seed),
            config.terrain_weights,
        )

    result = FrogPath(pond=pond, config=config).find_path()
    print(result)

    if args.show:
        from frogpath.ui.pygame_client import PygameRenderer

        renderer = PygameRenderer(
            pond=pond,
            result=result,
            cell_size=args.cell_size,
            steps_per_second=args.speed,
        )
        renderer.run(fps=args.fps)


if __name__ == "__main__":
    main()
