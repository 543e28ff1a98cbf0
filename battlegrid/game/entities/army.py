"""Army: an owned, ordered collection of units plus the points spent on it."""

from collections.abc import Iterator
from typing import Optional

from ...core.data import Team
from .unit import Unit


class Army:
    """Ordered unit collection with a point total.

    Units are never removed; use alive_units() for the living roster.
    An army without a team takes the side of the battlefield slot it fills.
    """

    def __init__(self, units: Optional[list[Unit]] = None, points: int = 0, team: Optional[Team] = None):
        self._units: list[Unit] = list(units or [])
        self.points = points
        self.team = team

    @property
    def units(self) -> list[Unit]:
        """All units, dead ones included, in assembly order."""
        return self._units

    def add_unit(self, unit: Unit) -> None:
        """Add a unit, rejecting one already in this army."""
        if any(existing is unit for existing in self._units):
            raise ValueError(f"Unit '{unit.name}' is already in this army")
        self._units.append(unit)

    def alive_units(self) -> list[Unit]:
        """Living units derived from the authoritative collection."""
        return [unit for unit in self._units if unit.is_alive]

    def count_alive(self) -> int:
        return sum(1 for unit in self._units if unit.is_alive)

    @property
    def is_defeated(self) -> bool:
        return self.count_alive() == 0

    def __len__(self) -> int:
        return len(self._units)

    def __iter__(self) -> Iterator[Unit]:
        return iter(self._units)

    def __contains__(self, unit: object) -> bool:
        return any(existing is unit for existing in self._units)

    def __repr__(self) -> str:
        return f"Army({self.team.name if self.team else 'unassigned'}, units={len(self._units)}, alive={self.count_alive()}, points={self.points})"
