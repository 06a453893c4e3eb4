"""Pond — the hexagonal grid the frog hops across.

The Pond is an arena: it owns every ``Cell`` in a flat list and cells
refer to their neighbours by arena index.  Ponds are normally read from
a map (a list of row strings laid out in even-r offset coordinates, see
``Pond.from_rows``) but can also be wired by hand with ``add_cell`` and
``connect`` for irregular shapes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

import yaml

from frogpath.pond.cell import NUM_DIRECTIONS, Cell, Direction, Terrain

logger = logging.getLogger(__name__)

# Column/row offsets per direction for even-r offset layout
# (odd rows are shoved half a hex to the right).
_EVEN_ROW_OFFSETS = [(1, 0), (0, -1), (-1, -1), (-1, 0), (-1, 1), (0, 1)]
_ODD_ROW_OFFSETS = [(1, 0), (1, -1), (0, -1), (-1, 0), (0, 1), (1, 1)]

_NO_CELL = "-"
_TERRAIN_BY_SYMBOL: dict[str, Terrain] = {t.value: t for t in Terrain}
_MAX_FLIES = 3


class InvalidMapError(ValueError):
    """Raised when a pond map cannot be turned into a pond."""


@dataclass
class Pond:
    """An arena of hexagonal cells.

    Attributes:
        cells: Every cell, indexed by ``Cell.index``.
        start_index: Arena index of the frog's starting cell.
        name: Optional human-readable map name.
    """

    cells: list[Cell] = field(default_factory=list, repr=False)
    start_index: int | None = None
    name: str = ""

    @property
    def start(self) -> Cell:
        """Return the starting cell.

        Raises:
            InvalidMapError: If no start cell has been set.
        """
        if self.start_index is None:
            msg = "pond has no start cell"
            raise InvalidMapError(msg)
        return self.cells[self.start_index]

    def __len__(self) -> int:
        return len(self.cells)

    def cell(self, index: int) -> Cell:
        """Return the cell stored at ``index``.

        Raises:
            IndexError: If ``index`` is outside the arena.
        """
        if not 0 <= index < len(self.cells):
            msg = f"cell {index} out of range for pond of {len(self.cells)}"
            raise IndexError(msg)
        return self.cells[index]

    def add_cell(
        self,
        terrain: Terrain,
        flies: int = 0,
        *,
        row: int | None = None,
        col: int | None = None,
    ) -> Cell:
        """Append a new, unconnected cell to the arena.

        A ``START`` cell becomes the pond's start.

        Args:
            terrain: Terrain of the new cell.
            flies: Flies on the cell (food cells only).
            row: Optional map row, kept for rendering.
            col: Optional map column, kept for rendering.

        Returns:
            The newly created Cell.
        """
        cell = Cell(
            index=len(self.cells),
            terrain=terrain,
            flies=flies,
            row=row,
            col=col,
        )
        self.cells.append(cell)
        if terrain is Terrain.START:
            self.start_index = cell.index
        return cell

    def connect(self, a: Cell, direction: int | Direction, b: Cell) -> None:
        """Link ``b`` as ``a``'s neighbour in ``direction``, and back again.

        Args:
            a: The cell the link starts from.
            direction: Direction from ``a`` to ``b``.
            b: The neighbouring cell.
        """
        d = Direction(direction)
        a.neighbours[d.value] = b.index
        b.neighbours[d.opposite.value] = a.index

    def neighbour(self, cell: Cell, direction: int | Direction) -> Cell | None:
        """Return ``cell``'s neighbour in ``direction``, or None at an edge."""
        index = cell.neighbours[Direction(direction).value]
        if index is None:
            return None
        return self.cells[index]

    def neighbours(self, cell: Cell) -> list[Cell]:
        """Return all existing neighbours of ``cell`` in direction order."""
        result: list[Cell] = []
        for d in range(NUM_DIRECTIONS):
            nb = self.neighbour(cell, d)
            if nb is not None:
                result.append(nb)
        return result

    def reset_marks(self) -> None:
        """Clear every visit mark so the pond can be searched again."""
        for cell in self.cells:
            cell.reset_mark()

    @property
    def total_flies(self) -> int:
        return sum(c.flies for c in self.cells if c.is_food)

    @classmethod
    def from_rows(cls, rows: Iterable[str], name: str = "") -> Pond:
        """Build a pond from map rows in even-r offset layout.

        One character per hexagon (spaces are ignored):

        - ``W`` water, ``M`` mud, ``R`` reeds, ``L`` lily pad,
          ``A`` alligator, ``S`` start, ``E`` end
        - ``0``-``3`` a food cell holding that many flies
        - ``-`` no hexagon at this position

        Args:
            rows: Map rows, top to bottom.
            name: Optional map name.

        Returns:
            A fully connected Pond.

        Raises:
            InvalidMapError: If rows are empty or ragged, a symbol is
                unknown, or the map lacks exactly one start and at least
                one end.
        """
        grid = [row.replace(" ", "") for row in rows]
        if not grid or not grid[0]:
            msg = "map has no rows"
            raise InvalidMapError(msg)
        width = len(grid[0])
        for r, row in enumerate(grid):
            if len(row) != width:
                msg = f"row {r} has {len(row)} cells, expected {width}"
                raise InvalidMapError(msg)

        pond = cls(name=name)
        positions: dict[tuple[int, int], Cell] = {}
        for r, row in enumerate(grid):
            for c, symbol in enumerate(row):
                if symbol == _NO_CELL:
                    continue
                terrain, flies = _parse_symbol(symbol, r, c)
                if terrain is Terrain.START and pond.start_index is not None:
                    msg = f"second start cell at row {r}, column {c}"
                    raise InvalidMapError(msg)
                positions[(c, r)] = pond.add_cell(terrain, flies, row=r, col=c)

        if pond.start_index is None:
            msg = "map has no start cell"
            raise InvalidMapError(msg)
        if not any(cell.is_end for cell in pond.cells):
            msg = "map has no end cell"
            raise InvalidMapError(msg)

        for (c, r), cell in positions.items():
            offsets = _ODD_ROW_OFFSETS if r % 2 else _EVEN_ROW_OFFSETS
            for d, (dc, dr) in enumerate(offsets):
                nb = positions.get((c + dc, r + dr))
                if nb is not None:
                    cell.neighbours[d] = nb.index

        logger.debug(
            "built pond %r: %d cells from %dx%d map",
            name,
            len(pond.cells),
            width,
            len(grid),
        )
        return pond

    @classmethod
    def from_yaml(cls, path: str | Path) -> Pond:
        """Load a pond from a YAML map file.

        The file holds a ``rows`` list of map strings (see
        ``from_rows``) and an optional ``name``.

        Raises:
            FileNotFoundError: If the map file does not exist.
            InvalidMapError: If the file has no usable ``rows`` entry or
                the rows are malformed.
        """
        path = Path(path)
        with path.open("r") as f:
            data = yaml.safe_load(f) or {}

        if not isinstance(data, dict):
            msg = f"{path}: expected a mapping with a 'rows' list"
            raise InvalidMapError(msg)
        rows = data.get("rows")
        if not isinstance(rows, list) or not all(isinstance(r, str) for r in rows):
            msg = f"{path}: 'rows' must be a list of strings"
            raise InvalidMapError(msg)
        return cls.from_rows(rows, name=str(data.get("name", path.stem)))


def _parse_symbol(symbol: str, row: int, col: int) -> tuple[Terrain, int]:
    if symbol.isdigit():
        flies = int(symbol)
        if flies > _MAX_FLIES:
            msg = f"{flies} flies at row {row}, column {col} (max {_MAX_FLIES})"
            raise InvalidMapError(msg)
        return Terrain.FOOD, flies
    terrain = _TERRAIN_BY_SYMBOL.get(symbol.upper())
    if terrain is None or terrain is Terrain.FOOD:
        msg = f"unknown map symbol {symbol!r} at row {row}, column {col}"
        raise InvalidMapError(msg)
    return terrain, 0
