"""Random pond generation.

Produces rectangular ponds from a seeded NumPy generator so the same
seed always yields the same map.  Terrain is drawn independently per
hexagon from weighted map symbols, then one start and one end are
dropped onto two distinct positions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from frogpath.pond.pond import Pond

if TYPE_CHECKING:
    from numpy.random import Generator

DEFAULT_TERRAIN_WEIGHTS: dict[str, float] = {
    "W": 0.35,
    "L": 0.15,
    "R": 0.15,
    "M": 0.10,
    "A": 0.05,
    "1": 0.08,
    "2": 0.07,
    "3": 0.05,
}


def generate_rows(
    width: int,
    height: int,
    rng: Generator,
    terrain_weights: dict[str, float] | None = None,
) -> list[str]:
    """Draw map rows for a ``width`` x ``height`` pond.

    Args:
        width: Hexagons per row.
        height: Number of rows.
        rng: Seeded random generator.
        terrain_weights: Relative weight per map symbol; start and end
            symbols are placed separately and must not appear here.

    Returns:
        Map rows suitable for ``Pond.from_rows``.

    Raises:
        ValueError: If the pond is too small for a start and an end, or
            the weights are unusable.
    """
    if width * height < 2:
        msg = f"{width}x{height} pond cannot hold both a start and an end"
        raise ValueError(msg)
    weights = dict(terrain_weights or DEFAULT_TERRAIN_WEIGHTS)
    if "S" in weights or "E" in weights:
        msg = "start and end cells are placed automatically"
        raise ValueError(msg)

    symbols = list(weights)
    p = np.array([weights[s] for s in symbols], dtype=np.float64)
    if p.sum() <= 0 or np.any(p < 0):
        msg = f"terrain weights must be non-negative and not all zero: {weights}"
        raise ValueError(msg)
    p /= p.sum()

    grid = rng.choice(symbols, size=(height, width), p=p)
    start, end = rng.choice(width * height, size=2, replace=False)
    grid[divmod(int(start), width)] = "S"
    grid[divmod(int(end), width)] = "E"
    return ["".join(row) for row in grid]


def generate_pond(
    width: int,
    height: int,
    rng: Generator,
    terrain_weights: dict[str, float] | None = None,
) -> Pond:
    """Generate a random, fully connected rectangular pond.

    See ``generate_rows`` for the arguments.
    """
    rows = generate_rows(width, height, rng, terrain_weights)
    return Pond.from_rows(rows, name=f"random {width}x{height}")
