"""Pygame 2D replay of a frog's search.

Draws the pond as pointy-top hexagons and replays the trace of a
finished ``find_path`` run one step at a time.  Recently visited cells
glow so backtracking is easy to follow.  Only cells that carry a map
row/column (ponds read from maps or generated) can be drawn.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, ClassVar

import numpy as np
import pygame

if TYPE_CHECKING:
    from frogpath.pond.pond import Pond
    from frogpath.search.frog_path import PathResult

from frogpath.pond.cell import Cell, Terrain

# Colour palette
_BG = (15, 30, 40)
_OUTLINE = (10, 20, 25)
_FROG = (120, 255, 80)

_TERRAIN_COLOURS: dict[Terrain, tuple[int, int, int]] = {
    Terrain.WATER: (40, 90, 160),
    Terrain.MUD: (110, 80, 50),
    Terrain.REEDS: (120, 150, 60),
    Terrain.LILYPAD: (50, 160, 80),
    Terrain.ALLIGATOR: (200, 50, 50),
    Terrain.FOOD: (230, 200, 60),
    Terrain.START: (230, 230, 230),
    Terrain.END: (180, 80, 220),
}

# Visited-cell glow (orange), fading over this many steps
_TRAIL_COLOUR = np.array([255, 150, 40], dtype=np.float64)
_TRAIL_STEPS = 12


class PygameRenderer:
    """Replays a PathResult over its Pond in a Pygame window.

    Attributes:
        pond: The pond that was searched.
        result: The search outcome to replay.
        cell_size: Hexagon radius in pixels.
        screen: The Pygame display surface.
    """

    # Speed presets: hops per second
    _SPEED_STEPS: ClassVar[list[float]] = [0.5, 1.0, 2.0, 4.0, 8.0, 16.0, 32.0]

    def __init__(
        self,
        pond: Pond,
        result: PathResult,
        cell_size: int = 24,
        steps_per_second: float = 4.0,
    ) -> None:
        """Initialise the renderer.

        Args:
            pond: The searched pond.
            result: Trace to replay.
            cell_size: Hexagon radius in pixels.
            steps_per_second: Replay speed.
        """
        self.pond = pond
        self.result = result
        self.cell_size = cell_size
        self.steps_per_second = steps_per_second
        self._speed_index = self._nearest_speed(steps_per_second)
        self._step_accumulator = 0.0
        self.step = 0

        rows = max((c.row for c in pond.cells if c.row is not None), default=0) + 1
        cols = max((c.col for c in pond.cells if c.col is not None), default=0) + 1
        w = int((cols + 0.5) * self._hex_width) + cell_size
        h = int((rows * 1.5 + 0.5) * cell_size) + cell_size
        self._panel_width = 220
        self._win_w = w + self._panel_width
        self._win_h = max(h, 260)
        self._board_w = w

        pygame.init()
        self.screen = pygame.display.set_mode((self._win_w, self._win_h))
        pygame.display.set_caption(f"Frog path - {pond.name}" if pond.name else "Frog path")
        self.clock = pygame.time.Clock()
        self.font = pygame.font.SysFont("monospace", 14)
        self.running = True
        self.paused = False

    @property
    def _hex_width(self) -> float:
        return math.sqrt(3) * self.cell_size

    def _nearest_speed(self, sps: float) -> int:
        """Return the index of the closest speed preset."""
        diffs = [abs(s - sps) for s in self._SPEED_STEPS]
        return diffs.index(min(diffs))

    def run(self, fps: int = 30) -> None:
        """Main loop: handle events, advance the replay, render.

        Args:
            fps: Target frames per second.
        """
        last = len(self.result.trace) - 1
        while self.running:
            dt = self.clock.tick(fps) / 1000.0
            self._handle_events()
            if not self.paused and self.step < last:
                self._step_accumulator += self.steps_per_second * dt
                steps = int(self._step_accumulator)
                self._step_accumulator -= steps
                self.step = min(last, self.step + steps)
            self._draw()

        pygame.quit()

    def _handle_events(self) -> None:
        """Process Pygame input events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.running = False
                elif event.key == pygame.K_SPACE:
                    self.paused = not self.paused
                elif event.key == pygame.K_r:
                    self.step = 0
                elif event.key in (pygame.K_PLUS, pygame.K_EQUALS):
                    self._speed_index = min(
                        len(self._SPEED_STEPS) - 1,
                        self._speed_index + 1,
                    )
                    self.steps_per_second = self._SPEED_STEPS[self._speed_index]
                elif event.key == pygame.K_MINUS:
                    self._speed_index = max(0, self._speed_index - 1)
                    self.steps_per_second = self._SPEED_STEPS[self._speed_index]

    def _centre(self, cell: Cell) -> tuple[float, float]:
        """Pixel centre of a cell in even-r offset layout."""
        shift = 0.5 if cell.row % 2 else 0.0
        x = (cell.col + shift + 0.5) * self._hex_width + self.cell_size / 2
        y = (cell.row * 1.5 + 1.0) * self.cell_size + self.cell_size / 2
        return x, y

    def _corners(self, cell: Cell) -> list[tuple[float, float]]:
        cx, cy = self._centre(cell)
        r = self.cell_size - 1
        return [
            (
                cx + r * math.cos(math.radians(60 * k - 30)),
                cy + r * math.sin(math.radians(60 * k - 30)),
            )
            for k in range(6)
        ]

    def _draw(self) -> None:
        """Render one frame."""
        self.screen.fill(_BG)
        self._draw_terrain()
        self._draw_trail_overlay()
        self._draw_frog()
        self._draw_info_panel()
        pygame.display.flip()

    def _drawable(self) -> list[Cell]:
        return [c for c in self.pond.cells if c.row is not None and c.col is not None]

    def _draw_terrain(self) -> None:
        """Draw every hexagon in its terrain colour."""
        for cell in self._drawable():
            corners = self._corners(cell)
            pygame.draw.polygon(self.screen, _TERRAIN_COLOURS[cell.terrain], corners)
            pygame.draw.polygon(self.screen, _OUTLINE, corners, 1)

    def _draw_trail_overlay(self) -> None:
        """Tint cells the frog passed through recently."""
        overlay = pygame.Surface((self._board_w, self._win_h), pygame.SRCALPHA)
        recent = self.result.trace[max(0, self.step - _TRAIL_STEPS) : self.step + 1]
        colour = _TRAIL_COLOUR.astype(int).tolist()
        for age, index in enumerate(reversed(recent)):
            cell = self.pond.cells[index]
            if cell.row is None or cell.col is None:
                continue
            alpha = int((1.0 - age / (_TRAIL_STEPS + 1)) * 150)
            pygame.draw.polygon(overlay, (*colour, alpha), self._corners(cell))
        self.screen.blit(overlay, (0, 0))

    def _draw_frog(self) -> None:
        """Draw the frog as a dot on the current trace cell."""
        if not self.result.trace:
            return
        cell = self.pond.cells[self.result.trace[self.step]]
        if cell.row is None or cell.col is None:
            return
        cx, cy = self._centre(cell)
        pygame.draw.circle(
            self.screen,
            _FROG,
            (int(cx), int(cy)),
            max(3, self.cell_size // 3),
        )

    def _draw_info_panel(self) -> None:
        """Draw a stats panel on the right side of the window."""
        panel_x = self._board_w + 10
        y = 10
        trace = self.result.trace
        current = trace[self.step] if trace else "-"
        done = self.step >= len(trace) - 1

        lines = [
            f"Step: {self.step + 1}/{len(trace)}",
            f"Cell: {current}",
            f"Speed: {self.steps_per_second:.1f} hops/s",
            f"{'PAUSED' if self.paused else 'RUNNING'}",
            "",
            "--- Result ---",
            f"Solved: {'yes' if self.result.solved else 'no'}" if done else "Solved: ?",
            f"Flies: {self.result.flies_eaten}" if done else "Flies: ?",
            "",
            "--- Controls ---",
            "SPACE: pause",
            "R: restart",
            "+/-: speed",
            "ESC: quit",
        ]

        for line in lines:
            surf = self.font.render(line, True, (200, 200, 200))
            self.screen.blit(surf, (panel_x, y))
            y += 18
