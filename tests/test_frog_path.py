"""Tests for frogpath.search.frog_path — scoring, hopping, backtracking."""

from pathlib import Path

import numpy as np
import pytest

from frogpath.pond.cell import Direction, Mark, Terrain
from frogpath.pond.generator import generate_pond
from frogpath.pond.pond import Pond
from frogpath.search.config import FrogConfig
from frogpath.search.frog_path import NO_SOLUTION, FrogPath, PathResult


def _isolated(terrain: Terrain, flies: int = 0) -> tuple[Pond, FrogPath]:
    """A pond with a single cell of ``terrain`` next to the start."""
    pond = Pond()
    start = pond.add_cell(Terrain.START)
    cell = pond.add_cell(terrain, flies)
    pond.connect(start, Direction.EAST, cell)
    return pond, FrogPath(pond=pond)


class TestTerrainPriority:
    """Tests for the one-hop scoring table."""

    @pytest.mark.parametrize(
        ("terrain", "flies", "expected"),
        [
            (Terrain.WATER, 0, 6.0),
            (Terrain.REEDS, 0, 5.0),
            (Terrain.LILYPAD, 0, 4.0),
            (Terrain.END, 0, 3.0),
            (Terrain.FOOD, 1, 2.0),
            (Terrain.FOOD, 2, 1.0),
            (Terrain.FOOD, 3, 0.0),
            (Terrain.FOOD, 0, None),
            (Terrain.MUD, 0, None),
            (Terrain.ALLIGATOR, 0, None),
            (Terrain.START, 0, None),
        ],
    )
    def test_safe_cells(
        self,
        terrain: Terrain,
        flies: int,
        expected: float | None,
    ) -> None:
        pond, frog = _isolated(terrain, flies)
        assert frog.terrain_priority(pond.cells[1]) == expected

    @pytest.mark.parametrize(
        ("terrain", "flies", "expected"),
        [
            (Terrain.WATER, 0, None),
            (Terrain.REEDS, 0, 10.0),
            (Terrain.LILYPAD, 0, None),
            (Terrain.END, 0, None),
            (Terrain.FOOD, 3, None),
        ],
    )
    def test_next_to_alligator(
        self,
        terrain: Terrain,
        flies: int,
        expected: float | None,
    ) -> None:
        pond, frog = _isolated(terrain, flies)
        gator = pond.add_cell(Terrain.ALLIGATOR)
        pond.connect(pond.cells[1], Direction.EAST, gator)
        assert frog.near_alligator(pond.cells[1])
        assert frog.terrain_priority(pond.cells[1]) == expected

    def test_config_overrides(self) -> None:
        pond, _ = _isolated(Terrain.WATER)
        frog = FrogPath(pond=pond, config=FrogConfig(water_priority=1.5))
        assert frog.terrain_priority(pond.cells[1]) == 1.5

    def test_empty_fly_table_from_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "no_food.yaml"
        yaml_file.write_text("fly_priorities: {}\n")
        pond, _ = _isolated(Terrain.FOOD, 3)
        frog = FrogPath(pond=pond, config=FrogConfig.from_yaml(yaml_file))
        assert frog.terrain_priority(pond.cells[1]) is None


class TestFindBest:
    """Tests for choosing the next hop."""

    def test_food_beats_water(self) -> None:
        pond = Pond()
        start = pond.add_cell(Terrain.START)
        water = pond.add_cell(Terrain.WATER)
        food = pond.add_cell(Terrain.FOOD, flies=3)
        pond.connect(start, Direction.EAST, water)
        pond.connect(start, Direction.NORTH_EAST, food)
        assert FrogPath(pond=pond).find_best(start) is food

    def test_reeds_near_alligator_still_usable(self) -> None:
        pond = Pond()
        start = pond.add_cell(Terrain.START)
        reeds = pond.add_cell(Terrain.REEDS)
        gator = pond.add_cell(Terrain.ALLIGATOR)
        pond.connect(start, Direction.EAST, reeds)
        pond.connect(reeds, Direction.EAST, gator)
        assert FrogPath(pond=pond).find_best(start) is reeds

    def test_all_mud_or_alligator(self) -> None:
        pond = Pond()
        start = pond.add_cell(Terrain.START)
        for d in Direction:
            terrain = Terrain.MUD if d.value % 2 else Terrain.ALLIGATOR
            pond.connect(start, d, pond.add_cell(terrain))
        assert FrogPath(pond=pond).find_best(start) is None

    def test_marked_cells_skipped(self) -> None:
        pond = Pond()
        start = pond.add_cell(Terrain.START)
        food = pond.add_cell(Terrain.FOOD, flies=3)
        water = pond.add_cell(Terrain.WATER)
        pond.connect(start, Direction.EAST, food)
        pond.connect(start, Direction.WEST, water)
        food.mark_out_stack()
        assert FrogPath(pond=pond).find_best(start) is water

    def test_ties_go_to_first_direction(self) -> None:
        pond = Pond()
        start = pond.add_cell(Terrain.START)
        west = pond.add_cell(Terrain.WATER)
        east = pond.add_cell(Terrain.WATER)
        pond.connect(start, Direction.WEST, west)
        pond.connect(start, Direction.EAST, east)
        assert FrogPath(pond=pond).find_best(start) is east

    def test_non_lilypad_ignores_two_hops(self) -> None:
        pond = Pond()
        start = pond.add_cell(Terrain.START)
        mud = pond.add_cell(Terrain.MUD)
        far = pond.add_cell(Terrain.FOOD, flies=3)
        pond.connect(start, Direction.EAST, mud)
        pond.connect(mud, Direction.EAST, far)
        assert FrogPath(pond=pond).find_best(start) is None


class TestTwoHops:
    """Tests for two-hop jumps from lily pads."""

    def test_inline_lilypad_beats_angled_reeds(self) -> None:
        pond = Pond()
        centre = pond.add_cell(Terrain.LILYPAD)
        mud_a = pond.add_cell(Terrain.MUD)
        lily = pond.add_cell(Terrain.LILYPAD)
        mud_b = pond.add_cell(Terrain.MUD)
        reeds = pond.add_cell(Terrain.REEDS)
        pond.connect(centre, Direction.EAST, mud_a)
        pond.connect(mud_a, Direction.EAST, lily)  # in-line: 4.0 + 0.5
        pond.connect(centre, Direction.NORTH_EAST, mud_b)
        pond.connect(mud_b, Direction.NORTH_WEST, reeds)  # angled: 5.0 + 1.0
        centre.mark_in_stack()
        assert FrogPath(pond=pond).find_best(centre) is lily

    def test_inline_beats_angled_of_same_terrain(self) -> None:
        pond = Pond()
        centre = pond.add_cell(Terrain.LILYPAD)
        mud_a = pond.add_cell(Terrain.MUD)
        angled = pond.add_cell(Terrain.WATER)
        mud_b = pond.add_cell(Terrain.MUD)
        inline = pond.add_cell(Terrain.WATER)
        pond.connect(centre, Direction.EAST, mud_a)
        pond.connect(mud_a, Direction.NORTH_EAST, angled)  # 7.0, scored first
        pond.connect(centre, Direction.NORTH_EAST, mud_b)
        pond.connect(mud_b, Direction.NORTH_EAST, inline)  # 6.5
        centre.mark_in_stack()
        assert FrogPath(pond=pond).find_best(centre) is inline

    def test_angled_lilypad_beats_inline_reeds(self) -> None:
        pond = Pond()
        centre = pond.add_cell(Terrain.LILYPAD)
        mud_a = pond.add_cell(Terrain.MUD)
        reeds = pond.add_cell(Terrain.REEDS)
        mud_b = pond.add_cell(Terrain.MUD)
        lily = pond.add_cell(Terrain.LILYPAD)
        pond.connect(centre, Direction.EAST, mud_a)
        pond.connect(mud_a, Direction.EAST, reeds)  # 5.5
        pond.connect(centre, Direction.WEST, mud_b)
        pond.connect(mud_b, Direction.SOUTH_WEST, lily)  # 5.0
        centre.mark_in_stack()
        assert FrogPath(pond=pond).find_best(centre) is lily

    def test_leaps_over_water_to_food(self) -> None:
        pond = Pond()
        centre = pond.add_cell(Terrain.LILYPAD)
        water = pond.add_cell(Terrain.WATER)
        food = pond.add_cell(Terrain.FOOD, flies=3)
        pond.connect(centre, Direction.EAST, water)  # 6.0
        pond.connect(water, Direction.EAST, food)  # 0.0 + 0.5
        centre.mark_in_stack()
        assert FrogPath(pond=pond).find_best(centre) is food

    def test_two_hop_next_to_alligator_skipped(self) -> None:
        pond = Pond()
        centre = pond.add_cell(Terrain.LILYPAD)
        mud = pond.add_cell(Terrain.MUD)
        far = pond.add_cell(Terrain.FOOD, flies=3)
        gator = pond.add_cell(Terrain.ALLIGATOR)
        pond.connect(centre, Direction.EAST, mud)
        pond.connect(mud, Direction.EAST, far)
        pond.connect(far, Direction.EAST, gator)
        centre.mark_in_stack()
        assert FrogPath(pond=pond).find_best(centre) is None


class TestFindPath:
    """Tests for the full depth-first search."""

    def test_straight_line(self, line_pond: Pond) -> None:
        result = FrogPath(pond=line_pond).find_path()
        assert result.solved
        assert result.trace == [0, 1, 2, 3]
        assert result.flies_eaten == 3
        assert str(result) == "0 1 2 3 ate 3 flies"
        assert line_pond.cells[2].flies == 0

    def test_no_solution(self) -> None:
        pond = Pond()
        start = pond.add_cell(Terrain.START)
        pond.connect(start, Direction.EAST, pond.add_cell(Terrain.MUD))
        pond.connect(start, Direction.WEST, pond.add_cell(Terrain.ALLIGATOR))
        pond.add_cell(Terrain.END)
        result = FrogPath(pond=pond).find_path()
        assert not result.solved
        assert result.trace == [0]
        assert str(result) == NO_SOLUTION
        assert start.mark is Mark.OUT_STACK

    def test_backtracks_out_of_dead_end(self) -> None:
        pond = Pond()
        start = pond.add_cell(Terrain.START)
        dead_end = pond.add_cell(Terrain.FOOD, flies=1)
        water = pond.add_cell(Terrain.WATER)
        end = pond.add_cell(Terrain.END)
        pond.connect(start, Direction.EAST, dead_end)
        pond.connect(start, Direction.WEST, water)
        pond.connect(water, Direction.WEST, end)
        result = FrogPath(pond=pond).find_path()
        assert result.trace == [0, 1, 0, 2, 3]
        assert result.flies_eaten == 1
        assert dead_end.mark is Mark.OUT_STACK
        assert str(result) == "0 1 0 2 3 ate 1 flies"

    def test_flies_eaten_once(self) -> None:
        pond = Pond()
        start = pond.add_cell(Terrain.START)
        food = pond.add_cell(Terrain.FOOD, flies=2)
        dead_end = pond.add_cell(Terrain.FOOD, flies=1)
        water = pond.add_cell(Terrain.WATER)
        end = pond.add_cell(Terrain.END)
        pond.connect(start, Direction.EAST, food)
        pond.connect(food, Direction.EAST, dead_end)
        pond.connect(food, Direction.NORTH_EAST, water)
        pond.connect(water, Direction.EAST, end)
        result = FrogPath(pond=pond).find_path()
        assert result.trace == [0, 1, 2, 1, 3, 4]
        assert result.flies_eaten == 3

    def test_exited_cells_never_reentered(self) -> None:
        """A cell the frog backed out of is not hopped to again."""
        pond = Pond()
        start = pond.add_cell(Terrain.START)
        a = pond.add_cell(Terrain.WATER)
        b = pond.add_cell(Terrain.WATER)
        pond.connect(start, Direction.EAST, a)
        pond.connect(a, Direction.EAST, b)
        pond.add_cell(Terrain.END)
        result = FrogPath(pond=pond).find_path()
        assert not result.solved
        assert result.trace == [0, 1, 2, 1, 0]
        assert all(c.mark is not Mark.IN_STACK for c in pond.cells)

    def test_end_next_to_start(self) -> None:
        pond = Pond.from_rows(["S E"])
        result = FrogPath(pond=pond).find_path()
        assert result.trace == [0, 1]
        assert str(result) == "0 1 ate 0 flies"

    def test_sample_map_route(self, sample_map: Path) -> None:
        pond = Pond.from_yaml(sample_map)
        result = FrogPath(pond=pond).find_path()
        assert result.solved
        assert result.trace == [0, 1, 7, 19, 20, 27, 28]
        assert result.flies_eaten == 4
        assert pond.cells[28].is_end

    @pytest.mark.parametrize("seed", range(20))
    def test_random_ponds_terminate(self, seed: int) -> None:
        """Each cell is pushed at most once, so the trace stays short."""
        pond = generate_pond(9, 7, np.random.default_rng(seed))
        flies_before = pond.total_flies
        result = FrogPath(pond=pond).find_path()

        assert len(result.trace) <= 2 * len(pond)
        assert result.flies_eaten == flies_before - pond.total_flies
        assert result.trace[0] == pond.start_index
        if result.solved:
            assert pond.cells[result.trace[-1]].is_end
        else:
            assert all(c.mark is not Mark.IN_STACK for c in pond.cells)


class TestPathResult:
    """Tests for the result formatting."""

    def test_unsolved(self) -> None:
        assert str(PathResult(trace=[0, 1], flies_eaten=2)) == NO_SOLUTION

    def test_solved(self) -> None:
        result = PathResult(trace=[4, 5], flies_eaten=0, solved=True)
        assert str(result) == "4 5 ate 0 flies"
