"""Shortest-path search for units approaching a target on the battle grid.

Movement is 4-directional with a cost of 1 per step. Cells held by live
obstacle units are impassable, except the target cell itself, which is
always walkable even though the target unit stands on it.

The search is a uniform-cost (Dijkstra) expansion over a heap keyed by
(distance, sequence). The sequence number is an insertion counter, so
entries with equal distance pop in the order they were pushed. Together with
the fixed neighbour order (left, right, up, down) this makes every query
fully deterministic.

Several targets can share one expansion (find_paths); each target cell is a
dead end there, which gives the same routes as separate single-target
queries that treat the other targets as obstacles.
"""

import heapq
from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Optional

import numpy as np
from numpy.typing import NDArray

from ..core.config import BattleConfig
from ..core.data import Vector2

if TYPE_CHECKING:
    from .entities.unit import Unit

UNREACHED = np.iinfo(np.int32).max
NO_PREDECESSOR = -1


class PathFinder:
    """Grid pathfinder bound to a fixed board size."""

    def __init__(self, width: Optional[int] = None, height: Optional[int] = None):
        defaults = BattleConfig()
        self.width = width if width is not None else defaults.board_width
        self.height = height if height is not None else defaults.board_height
        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Board dimensions must be positive, got {self.width}x{self.height}")

    @classmethod
    def from_config(cls, config: BattleConfig) -> "PathFinder":
        return cls(config.board_width, config.board_height)

    def is_valid_position(self, position: Vector2) -> bool:
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    def get_target_path(
        self, attack_unit: "Unit", target_unit: "Unit", existing_units: Iterable["Unit"]
    ) -> list[Vector2]:
        """Route attack_unit toward target_unit around the other live units.

        The attacker and the target are excluded from the obstacles by
        identity, whatever their position.
        """
        obstacles = [
            unit for unit in existing_units
            if unit is not attack_unit and unit is not target_unit
        ]
        return self.find_path(attack_unit.position, target_unit.position, obstacles)

    def get_target_paths(
        self, attack_unit: "Unit", target_units: Sequence["Unit"], existing_units: Iterable["Unit"]
    ) -> list[list[Vector2]]:
        """Route attack_unit toward each of several targets with one search.

        Paths come back in target_units order and match what get_target_path
        returns for each target with the other targets standing as obstacles.
        """
        if not target_units:
            return []
        obstacles = [
            unit for unit in existing_units
            if unit is not attack_unit and all(unit is not target for target in target_units)
        ]
        paths = self.find_paths(
            attack_unit.position, [target.position for target in target_units], obstacles
        )
        return [paths[target.position] for target in target_units]

    def find_path(
        self, origin: Vector2, target: Vector2, obstacles: Iterable["Unit"]
    ) -> list[Vector2]:
        """Find the shortest 4-directional route from origin to target.

        Args:
            origin: Starting cell
            target: Destination cell; walkable even when occupied
            obstacles: Units whose live positions block movement

        Returns:
            Cells from origin to target, both inclusive. [origin] when
            origin == target. Empty list when the target is unreachable.

        Raises:
            ValueError: If origin or target lies outside the board
        """
        return self.find_paths(origin, [target], obstacles)[target]

    def find_paths(
        self, origin: Vector2, targets: Iterable[Vector2], obstacles: Iterable["Unit"]
    ) -> dict[Vector2, list[Vector2]]:
        """Shortest routes from origin to every target cell in one expansion.

        Target cells are walkable but never expanded, so no route passes
        through another target. The search stops once every target is
        settled.

        Raises:
            ValueError: If origin or any target lies outside the board
        """
        if not self.is_valid_position(origin):
            raise ValueError(f"Origin {origin} is outside the {self.width}x{self.height} board")
        goals = list(dict.fromkeys(targets))
        for goal in goals:
            if not self.is_valid_position(goal):
                raise ValueError(f"Target {goal} is outside the {self.width}x{self.height} board")

        blocked = self.get_blocking_mask(obstacles)
        for goal in goals:
            blocked[goal.y, goal.x] = False

        distances = np.full((self.height, self.width), UNREACHED, dtype=np.int32)
        distances[origin.y, origin.x] = 0
        visited = np.zeros((self.height, self.width), dtype=np.bool_)
        # Flat index (y * width + x) of the cell each cell was reached from
        predecessors = np.full((self.height, self.width), NO_PREDECESSOR, dtype=np.int32)

        remaining = set(goals)
        remaining.discard(origin)
        sequence = 0
        frontier: list[tuple[int, int, Vector2]] = [(0, sequence, origin)]

        while frontier and remaining:
            distance, _, current = heapq.heappop(frontier)

            if visited[current.y, current.x]:
                continue
            visited[current.y, current.x] = True

            if current in remaining:
                remaining.discard(current)
                continue

            for neighbor in current.neighbors():
                if not self.is_valid_position(neighbor) or blocked[neighbor.y, neighbor.x]:
                    continue
                new_distance = distance + 1
                if new_distance < distances[neighbor.y, neighbor.x]:
                    distances[neighbor.y, neighbor.x] = new_distance
                    predecessors[neighbor.y, neighbor.x] = current.y * self.width + current.x
                    sequence += 1
                    heapq.heappush(frontier, (new_distance, sequence, neighbor))

        return {
            goal: [origin] if goal == origin else self._construct_path(predecessors, origin, goal)
            for goal in goals
        }

    def get_blocking_mask(self, obstacles: Iterable["Unit"]) -> NDArray[np.bool_]:
        """Boolean mask of cells held by live obstacle units.

        Built fresh on every call; units outside the board are ignored.
        """
        mask = np.zeros((self.height, self.width), dtype=np.bool_)
        for unit in obstacles:
            if unit.is_alive and self.is_valid_position(unit.position):
                mask[unit.position.y, unit.position.x] = True
        return mask

    def _construct_path(
        self, predecessors: NDArray[np.int32], origin: Vector2, target: Vector2
    ) -> list[Vector2]:
        """Walk predecessor links back from target and reverse."""
        if predecessors[target.y, target.x] == NO_PREDECESSOR:
            return []

        path = []
        current = target
        while current != origin:
            path.append(current)
            y, x = divmod(int(predecessors[current.y, current.x]), self.width)
            current = Vector2(y, x)

        path.append(origin)
        path.reverse()
        return path


def find_path(
    origin: Vector2,
    target: Vector2,
    obstacles: Iterable["Unit"],
    width: Optional[int] = None,
    height: Optional[int] = None,
) -> list[Vector2]:
    """Module-level convenience wrapper around PathFinder.find_path."""
    return PathFinder(width, height).find_path(origin, target, obstacles)
