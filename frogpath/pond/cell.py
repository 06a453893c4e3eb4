"""Cell — a single hexagon in the pond.

Each cell holds its terrain, a fly count for food cells, a visit mark
used by the frog's search, and six directional neighbour slots.  The
neighbour slots hold *indices* into the owning ``Pond`` rather than
references, so the cell graph never owns itself.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

NUM_DIRECTIONS = 6


class Terrain(Enum):
    """Closed set of pond terrain kinds."""

    WATER = "W"
    MUD = "M"
    REEDS = "R"
    LILYPAD = "L"
    ALLIGATOR = "A"
    FOOD = "F"
    START = "S"
    END = "E"


class Mark(Enum):
    """Where a cell stands relative to the frog's current path."""

    UNVISITED = auto()
    IN_STACK = auto()
    OUT_STACK = auto()


class Direction(Enum):
    """The six hex directions, numbered counter-clockwise from east."""

    EAST = 0
    NORTH_EAST = 1
    NORTH_WEST = 2
    WEST = 3
    SOUTH_WEST = 4
    SOUTH_EAST = 5

    @property
    def opposite(self) -> Direction:
        """Return the direction pointing back the way this one came."""
        return Direction((self.value + 3) % NUM_DIRECTIONS)


@dataclass(eq=False)
class Cell:
    """A single hexagon in the pond.

    Cells compare by identity: two cells are the same only if they are
    the same arena slot.

    Attributes:
        index: Position in the owning pond's arena; also the reported ID.
        terrain: What the cell is made of.
        flies: Flies waiting on a food cell (ignored for other terrain).
        mark: Visit state maintained by the search.
        neighbours: Arena indices per direction, ``None`` at pond edges.
        row: Map row the cell was read from, if any.
        col: Map column the cell was read from, if any.
    """

    index: int
    terrain: Terrain = Terrain.WATER
    flies: int = 0
    mark: Mark = Mark.UNVISITED
    neighbours: list[int | None] = field(
        default_factory=lambda: [None] * NUM_DIRECTIONS,
        repr=False,
    )
    row: int | None = None
    col: int | None = None

    @property
    def is_water(self) -> bool:
        return self.terrain is Terrain.WATER

    @property
    def is_mud(self) -> bool:
        return self.terrain is Terrain.MUD

    @property
    def is_reeds(self) -> bool:
        return self.terrain is Terrain.REEDS

    @property
    def is_lilypad(self) -> bool:
        return self.terrain is Terrain.LILYPAD

    @property
    def is_alligator(self) -> bool:
        return self.terrain is Terrain.ALLIGATOR

    @property
    def is_food(self) -> bool:
        return self.terrain is Terrain.FOOD

    @property
    def is_start(self) -> bool:
        return self.terrain is Terrain.START

    @property
    def is_end(self) -> bool:
        return self.terrain is Terrain.END

    @property
    def is_marked(self) -> bool:
        """Return True if the frog is on, or has already left, this cell."""
        return self.mark is not Mark.UNVISITED

    @property
    def in_stack(self) -> bool:
        return self.mark is Mark.IN_STACK

    def mark_in_stack(self) -> None:
        self.mark = Mark.IN_STACK

    def mark_out_stack(self) -> None:
        self.mark = Mark.OUT_STACK

    def reset_mark(self) -> None:
        self.mark = Mark.UNVISITED

    def remove_flies(self) -> int:
        """Eat every fly on this cell.

        Returns:
            The number of flies that were here.
        """
        eaten = self.flies
        self.flies = 0
        return eaten

    def __str__(self) -> str:
        return str(self.index)
