"""Army assembly under a point budget.

Templates are ranked by efficiency, (base_attack + health) / cost, and the
generator buys as many of each as the remaining budget and the per-type cap
allow, best first. Every bought unit lands on a distinct random cell of the
team's deployment columns.
"""

from collections.abc import Iterator, Sequence
from typing import Optional

import numpy as np

from ..core.config import BattleConfig
from ..core.data import Team, Vector2
from .entities.army import Army
from .entities.unit_templates import UnitTemplate


class ArmyGenerator:
    """Builds armies from a unit catalog.

    The random source is injected so placement is reproducible in tests.
    """

    def __init__(self, config: Optional[BattleConfig] = None, rng: Optional[np.random.Generator] = None):
        self.config = config or BattleConfig()
        self.rng = rng if rng is not None else np.random.default_rng()

    def generate(
        self,
        templates: Sequence[UnitTemplate],
        max_points: Optional[int] = None,
        team: Team = Team.PLAYER,
    ) -> Army:
        """Assemble an army.

        Args:
            templates: Catalog entries to buy from
            max_points: Point budget; defaults to config.max_points
            team: Side the army deploys on

        Returns:
            Army with units named "<template name> <n>" and points spent

        Raises:
            ValueError: If the budget is negative or the purchase does not
                fit in the deployment zone
        """
        budget = self.config.max_points if max_points is None else max_points
        if budget < 0:
            raise ValueError(f"Point budget cannot be negative: {budget}")

        # Stable sort keeps catalog order for equally efficient templates
        ranked = sorted(templates, key=lambda t: t.efficiency, reverse=True)

        purchases: list[tuple[UnitTemplate, int]] = []
        spent = 0
        for template in ranked:
            count = min(self.config.max_units_per_type, (budget - spent) // template.cost)
            if count > 0:
                purchases.append((template, count))
                spent += count * template.cost

        total_units = sum(count for _, count in purchases)
        cells = self._shuffled_cells(team)
        if total_units > len(cells):
            raise ValueError(
                f"{total_units} units do not fit in {len(cells)} deployment cells"
            )

        free_cells: Iterator[Vector2] = iter(cells)
        army = Army(team=team)
        for template, count in purchases:
            for index in range(count):
                army.add_unit(template.create_unit(f"{template.name} {index + 1}", next(free_cells)))
        army.points = spent
        return army

    def _shuffled_cells(self, team: Team) -> list[Vector2]:
        """All deployment cells of the team's flank in random order."""
        columns = (
            self.config.left_flank_columns if team.is_left_flank
            else self.config.right_flank_columns
        )
        cells = [
            Vector2.from_xy(x, y)
            for x in columns
            for y in range(self.config.board_height)
        ]
        order = self.rng.permutation(len(cells))
        return [cells[i] for i in order]
