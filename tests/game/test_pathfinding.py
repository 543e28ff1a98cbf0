"""
Unit tests for the grid pathfinder.

Tests shortest routes, obstacle handling, the occupied-target exemption,
unreachable targets and determinism.
"""
import pytest

from battlegrid.core.data import Vector2
from battlegrid.game.pathfinding import PathFinder, find_path
from tests.conftest import TestDataBuilder


def assert_orthogonal_walk(path: list[Vector2]) -> None:
    for step_from, step_to in zip(path, path[1:]):
        assert step_from.is_adjacent_to(step_to), f"{step_from} -> {step_to} is not one orthogonal step"


def blockers(*cells: tuple[int, int]):
    """Live obstacle units at the given (x, y) cells."""
    return [TestDataBuilder.unit(f"Wall {i}", x=x, y=y) for i, (x, y) in enumerate(cells)]


class TestOpenBoard:
    """Paths on a board with no obstacles."""

    @pytest.mark.parametrize("x,y", [(1, 0), (0, 1), (3, 4), (26, 20), (13, 7)])
    def test_path_length_is_manhattan_distance(self, pathfinder, x: int, y: int):
        """Test that an open-board path takes exactly |x| + |y| steps."""
        path = pathfinder.find_path(Vector2.from_xy(0, 0), Vector2.from_xy(x, y), [])

        assert len(path) - 1 == x + y
        assert path[0] == Vector2.from_xy(0, 0)
        assert path[-1] == Vector2.from_xy(x, y)
        assert_orthogonal_walk(path)

    def test_path_stays_on_board(self, small_pathfinder):
        """Test that every cell of a path lies inside the board."""
        path = small_pathfinder.find_path(Vector2.from_xy(4, 4), Vector2.from_xy(0, 0), [])

        assert all(small_pathfinder.is_valid_position(cell) for cell in path)

    def test_zero_distance_returns_origin_only(self, small_pathfinder):
        """Test that origin == target yields a single-cell path."""
        origin = Vector2.from_xy(2, 2)
        assert small_pathfinder.find_path(origin, origin, []) == [origin]

    def test_module_level_wrapper(self):
        """Test find_path convenience function with explicit board size."""
        path = find_path(Vector2.from_xy(0, 0), Vector2.from_xy(2, 0), [], width=3, height=1)
        assert path == [Vector2.from_xy(0, 0), Vector2.from_xy(1, 0), Vector2.from_xy(2, 0)]

    @pytest.mark.parametrize("cell", [(-1, 0), (0, -1), (5, 0), (0, 5)])
    def test_out_of_bounds_endpoints_rejected(self, small_pathfinder, cell):
        """Test that endpoints outside the board raise ValueError."""
        outside = Vector2.from_xy(*cell)
        inside = Vector2.from_xy(0, 0)

        with pytest.raises(ValueError):
            small_pathfinder.find_path(outside, inside, [])
        with pytest.raises(ValueError):
            small_pathfinder.find_path(inside, outside, [])

    def test_invalid_board_size(self):
        with pytest.raises(ValueError):
            PathFinder(0, 5)


class TestObstacles:
    """Obstacle avoidance and the occupied-target exemption."""

    def test_detours_around_wall(self, small_pathfinder):
        """Test that a partial wall forces a longer, valid route."""
        # Wall at x=2 covering rows 0..3, leaving row 4 open
        walls = blockers((2, 0), (2, 1), (2, 2), (2, 3))
        path = small_pathfinder.find_path(Vector2.from_xy(0, 0), Vector2.from_xy(4, 0), walls)

        wall_cells = {unit.position for unit in walls}
        assert path
        assert not wall_cells.intersection(path)
        assert_orthogonal_walk(path)
        # Down to row 4, across, back up: 4 + 4 + 4
        assert len(path) - 1 == 12

    def test_dead_obstacles_do_not_block(self, small_pathfinder):
        """Test that dead units are ignored as obstacles."""
        walls = blockers((1, 0), (1, 1), (1, 2), (1, 3), (1, 4))
        for wall in walls:
            wall.health = 0

        path = small_pathfinder.find_path(Vector2.from_xy(0, 0), Vector2.from_xy(2, 0), walls)
        assert len(path) - 1 == 2

    def test_occupied_target_is_reachable(self, small_pathfinder):
        """Test that a live unit on the target cell does not block reaching it."""
        occupant = blockers((3, 3))
        target = Vector2.from_xy(3, 3)

        path = small_pathfinder.find_path(Vector2.from_xy(0, 3), target, occupant)

        assert path[-1] == target
        assert len(path) - 1 == 3

    def test_enclosed_target_is_unreachable(self, small_pathfinder):
        """Test that walling off all four neighbours of the target yields []."""
        walls = blockers((1, 2), (3, 2), (2, 1), (2, 3))
        path = small_pathfinder.find_path(Vector2.from_xy(0, 0), Vector2.from_xy(2, 2), walls)

        assert path == []

    def test_enclosed_origin_cannot_leave(self, small_pathfinder):
        """Test that a boxed-in origin has no route out."""
        walls = blockers((1, 0), (0, 1))
        path = small_pathfinder.find_path(Vector2.from_xy(0, 0), Vector2.from_xy(4, 4), walls)

        assert path == []

    def test_blocking_mask_marks_live_units(self, small_pathfinder):
        walls = blockers((1, 2), (4, 0))
        walls[1].health = 0

        mask = small_pathfinder.get_blocking_mask(walls)

        assert mask.shape == (5, 5)
        assert mask[2, 1]
        assert not mask[0, 4]
        assert mask.sum() == 1


class TestTargetPath:
    """get_target_path excludes attacker and target from the obstacles."""

    def test_attacker_and_target_excluded(self, pathfinder):
        attacker = TestDataBuilder.unit("Attacker", x=2, y=10)
        target = TestDataBuilder.unit("Target", x=24, y=10)
        others = blockers((12, 9), (12, 11))

        path = pathfinder.get_target_path(attacker, target, [attacker, target] + others)

        assert path[0] == attacker.position
        assert path[-1] == target.position
        assert len(path) - 1 == 22

    def test_target_behind_line_is_reached_through_gap(self, pathfinder):
        """Test routing through the only gap in a full-height line of units."""
        attacker = TestDataBuilder.unit("Attacker", x=0, y=0)
        target = TestDataBuilder.unit("Target", x=10, y=0)
        line = blockers(*[(5, y) for y in range(21) if y != 20])

        path = pathfinder.get_target_path(attacker, target, [attacker, target] + line)

        assert Vector2.from_xy(5, 20) in path
        assert len(path) - 1 == 10 + 2 * 20


class TestDeterminism:
    """Repeated queries give identical answers."""

    def test_identical_inputs_identical_paths(self, pathfinder):
        walls = blockers((5, 5), (5, 6), (6, 5), (10, 3))
        origin, target = Vector2.from_xy(1, 1), Vector2.from_xy(20, 15)

        first = pathfinder.find_path(origin, target, walls)
        for _ in range(5):
            assert pathfinder.find_path(origin, target, walls) == first

    def test_fifo_tie_break_prefers_horizontal_first(self, small_pathfinder):
        """Test the fixed expansion order: x moves are explored before y moves."""
        path = small_pathfinder.find_path(Vector2.from_xy(0, 0), Vector2.from_xy(1, 1), [])

        assert path == [Vector2.from_xy(0, 0), Vector2.from_xy(1, 0), Vector2.from_xy(1, 1)]


class TestMultiTargetPaths:
    """One expansion toward several targets matches separate queries."""

    def test_matches_single_target_queries(self, pathfinder):
        attacker = TestDataBuilder.unit("Attacker", x=2, y=10)
        targets = [TestDataBuilder.unit(f"Target {y}", x=24, y=y) for y in (3, 9, 10, 11, 17)]
        walls = blockers(*[(12, y) for y in range(4, 16)], (23, 10), (25, 9))
        existing = [attacker] + targets + walls

        paths = pathfinder.get_target_paths(attacker, targets, existing)

        for target, path in zip(targets, paths):
            others = [unit for unit in existing if unit is not target]
            assert path == pathfinder.get_target_path(attacker, target, others)
            assert path[-1] == target.position
            assert_orthogonal_walk(path)

    def test_routes_never_pass_through_other_targets(self, small_pathfinder):
        """Test a target walled in by another target on a 5x5 board."""
        origin = Vector2.from_xy(0, 2)
        front = Vector2.from_xy(3, 2)
        behind = Vector2.from_xy(4, 2)
        walls = blockers((4, 1), (4, 3))

        paths = small_pathfinder.find_paths(origin, [front, behind], walls)

        assert len(paths[front]) - 1 == 3
        assert paths[behind] == []
        assert small_pathfinder.find_path(origin, behind, walls) != []

    def test_origin_among_targets(self, small_pathfinder):
        origin = Vector2.from_xy(1, 1)

        paths = small_pathfinder.find_paths(origin, [origin, Vector2.from_xy(3, 1)], [])

        assert paths[origin] == [origin]
        assert len(paths[Vector2.from_xy(3, 1)]) == 3

    def test_no_targets(self, pathfinder):
        attacker = TestDataBuilder.unit("Attacker")

        assert pathfinder.get_target_paths(attacker, [], [attacker]) == []

    def test_out_of_bounds_target_rejected(self, small_pathfinder):
        with pytest.raises(ValueError):
            small_pathfinder.find_paths(Vector2(0, 0), [Vector2(1, 1), Vector2(0, 5)], [])
