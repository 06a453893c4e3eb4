"""FrogPath — greedy hop selection with depth-first backtracking.

At every step the frog scores the cells it could hop to, jumps to the
most attractive one, and eats any flies it lands on.  When nothing is
safe to hop to it backs up one cell and tries again.  The search is not
an optimal-path solver: it commits to the first acceptable route it
stumbles onto.

Scoring of a decision point (``find_best``):

1. Every neighbour that is unmarked and not already scored gets a
   terrain priority (see ``FrogConfig``).  Mud, alligators and the start
   are never scored.  A cell next to an alligator is skipped, except
   reeds, which are merely penalised.
2. From a lily pad the frog can also jump two hexagons.  Those cells get
   the same terrain priority plus a penalty that is smaller for a
   straight jump than for an angled one.

The lowest priority wins; equal priorities go to whichever was scored
first.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from frogpath.pond.cell import NUM_DIRECTIONS, Cell
from frogpath.search.config import FrogConfig
from frogpath.structures.unique_priority_queue import UniquePriorityQueue

if TYPE_CHECKING:
    from frogpath.pond.pond import Pond

logger = logging.getLogger(__name__)

NO_SOLUTION = "No solution"


@dataclass
class PathResult:
    """Outcome of one ``FrogPath.find_path`` run.

    Attributes:
        trace: Cell indices in the order they were processed as the top
            of the path stack, dead ends and backtracking included.
        flies_eaten: Total flies consumed along the way.
        solved: Whether the frog reached an end cell.
    """

    trace: list[int] = field(default_factory=list)
    flies_eaten: int = 0
    solved: bool = False

    def __str__(self) -> str:
        if not self.solved:
            return NO_SOLUTION
        return " ".join(str(i) for i in self.trace) + f" ate {self.flies_eaten} flies"


@dataclass
class FrogPath:
    """Runs the frog's search over a pond.

    Attributes:
        pond: The pond to explore; its cells' marks and flies are mutated.
        config: Heuristic constants.
    """

    pond: Pond
    config: FrogConfig = field(default_factory=FrogConfig)

    def find_best(self, cell: Cell) -> Cell | None:
        """Pick the most attractive cell to hop to from ``cell``.

        Args:
            cell: The cell the frog is sitting on.

        Returns:
            The lowest-priority candidate, or None if nothing is safe.
        """
        queue: UniquePriorityQueue[Cell] = UniquePriorityQueue(
            capacity=self.config.queue_capacity,
            growth=self.config.queue_growth,
        )

        for i in range(NUM_DIRECTIONS):
            nb = self.pond.neighbour(cell, i)
            if nb is None or nb in queue or nb.is_marked:
                continue
            priority = self.terrain_priority(nb)
            if priority is not None:
                queue.add(nb, priority)

        if cell.is_lilypad:
            for i in range(NUM_DIRECTIONS):
                nb = self.pond.neighbour(cell, i)
                if nb is None:
                    continue
                for j in range(NUM_DIRECTIONS):
                    away = self.pond.neighbour(nb, j)
                    if away is None or away in queue or away.is_marked:
                        continue
                    priority = self.terrain_priority(away)
                    if priority is None:
                        continue
                    if i == j:
                        priority += self.config.inline_hop_penalty
                    else:
                        priority += self.config.angled_hop_penalty
                    queue.add(away, priority)

        if queue.is_empty():
            return None
        return queue.peek()

    def find_path(self) -> PathResult:
        """Walk from the start until an end cell is reached or all hope is lost.

        Flies on a food cell are eaten the first time it is processed;
        later visits find it empty.  A cell the frog backs out of is
        marked out-of-stack and is never hopped to again.

        Returns:
            The trace of processed cells and the flies eaten.  A result
            with ``solved=False`` means every route was exhausted.
        """
        result = PathResult()
        start = self.pond.start
        stack: list[int] = [start.index]
        start.mark_in_stack()

        while stack:
            curr = self.pond.cells[stack[-1]]
            result.trace.append(curr.index)

            if curr.is_end:
                result.solved = True
                break

            if curr.is_food and curr.flies:
                eaten = curr.remove_flies()
                result.flies_eaten += eaten
                logger.debug("ate %d flies on cell %d", eaten, curr.index)

            nxt = self.find_best(curr)
            if nxt is None:
                stack.pop()
                curr.mark_out_stack()
                logger.debug("backtracking from cell %d", curr.index)
            else:
                stack.append(nxt.index)
                nxt.mark_in_stack()
                logger.debug("hop %d -> %d", curr.index, nxt.index)

        if result.solved:
            logger.info(
                "reached cell %d after %d steps, %d flies eaten",
                result.trace[-1],
                len(result.trace),
                result.flies_eaten,
            )
        else:
            logger.info("no route from cell %d", start.index)
        return result

    def terrain_priority(self, cell: Cell) -> float | None:
        """Return the one-hop priority of ``cell``, or None if unusable."""
        cfg = self.config
        if cell.is_reeds:
            if self.near_alligator(cell):
                return cfg.reeds_near_alligator_priority
            return cfg.reeds_priority

        if cell.is_water:
            priority: float | None = cfg.water_priority
        elif cell.is_lilypad:
            priority = cfg.lilypad_priority
        elif cell.is_end:
            priority = cfg.end_priority
        elif cell.is_food:
            priority = cfg.fly_priorities.get(cell.flies)
        else:
            # mud, alligators and the start
            return None

        if priority is None or self.near_alligator(cell):
            return None
        return priority

    def near_alligator(self, cell: Cell) -> bool:
        """Return True if any neighbour of ``cell`` is an alligator."""
        return any(nb.is_alligator for nb in self.pond.neighbours(cell))
