"""Grid coordinate data structures.

Vector2 is the single representation of a grid cell (an "edge" in the
combat framework's vocabulary) used by units, the battlefield and the
pathfinder.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    """Grid cell coordinate.

    Uses (y, x) ordering for direct alignment with 2D array access patterns.
    First parameter is row (y-coordinate), second is column (x-coordinate),
    so a cell indexes numpy arrays as ``array[cell.y, cell.x]``.

    Armies think in (x, y) column/row terms; use ``from_xy`` when building a
    cell from that ordering.
    """
    y: int
    x: int

    def __add__(self, other: "Vector2") -> "Vector2":
        """Vector addition."""
        return Vector2(self.y + other.y, self.x + other.x)

    def __iter__(self):
        """Make Vector2 iterable for unpacking (y, x order)."""
        yield self.y
        yield self.x

    def __repr__(self) -> str:
        return f"Vector2({self.y}, {self.x})"

    def manhattan_distance_to(self, other: "Vector2") -> int:
        """Calculate Manhattan distance to another vector."""
        return abs(self.y - other.y) + abs(self.x - other.x)

    def is_adjacent_to(self, other: "Vector2") -> bool:
        """Check whether other is one orthogonal step away."""
        return self.manhattan_distance_to(other) == 1

    def neighbors(self) -> list["Vector2"]:
        """Orthogonal neighbours in fixed order: left, right, up, down.

        Bounds are not checked.
        """
        return [self + offset for offset in DIRECTIONS]

    @classmethod
    def from_xy(cls, x: int, y: int) -> "Vector2":
        """Create Vector2 from column/row ordering."""
        return cls(y, x)


# Expansion order used by the pathfinder: left, right, up, down
DIRECTIONS: tuple[Vector2, ...] = (
    Vector2(0, -1),
    Vector2(0, 1),
    Vector2(-1, 0),
    Vector2(1, 0),
)
