"""Flank target selection.

A unit may only be attacked in melee if it is the front-most live unit of
its row inside its army's deployment columns. For the left army that is the
unit with the largest x; for the right army, the smallest x.
"""

from collections.abc import Iterable, Sequence
from typing import TYPE_CHECKING, Optional

from ..core.config import BattleConfig

if TYPE_CHECKING:
    from .entities.unit import Unit


def group_units_by_row(units: Iterable["Unit"], height: int) -> list[list["Unit"]]:
    """Bucket units into rows by their y coordinate.

    Units whose y falls outside [0, height) are dropped.
    """
    rows: list[list["Unit"]] = [[] for _ in range(height)]
    for unit in units:
        if 0 <= unit.y < height:
            rows[unit.y].append(unit)
    return rows


class SuitableUnitsFinder:
    """Finds units eligible to be attacked from the opposing flank."""

    def __init__(self, config: Optional[BattleConfig] = None):
        self.config = config or BattleConfig()

    def get_suitable_units(
        self, units_by_row: Sequence[Sequence[Optional["Unit"]]], is_left_army_target: bool
    ) -> list["Unit"]:
        """Return the front-most live unit of every row.

        Args:
            units_by_row: Rows of units; None entries are allowed and skipped
            is_left_army_target: True when the targeted army holds the left flank

        Returns:
            At most one unit per row, in row order
        """
        columns = (
            self.config.left_flank_columns if is_left_army_target
            else self.config.right_flank_columns
        )
        suitable_units = []
        for row in units_by_row:
            unit = self._find_extreme_unit(row, columns, find_max=is_left_army_target)
            if unit is not None:
                suitable_units.append(unit)
        return suitable_units

    @staticmethod
    def _find_extreme_unit(
        row: Sequence[Optional["Unit"]], columns: range, find_max: bool
    ) -> Optional["Unit"]:
        extreme_unit = None
        for unit in row:
            if unit is None or not unit.is_alive or unit.x not in columns:
                continue
            if extreme_unit is None:
                extreme_unit = unit
            elif find_max and unit.x > extreme_unit.x:
                extreme_unit = unit
            elif not find_max and unit.x < extreme_unit.x:
                extreme_unit = unit
        return extreme_unit
