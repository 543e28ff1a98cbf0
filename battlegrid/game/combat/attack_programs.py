"""Attack program strategy classes.

This module implements the Strategy design pattern for attack resolution.
Each unit carries one program; the battle simulator only ever calls
``program.attack()`` and never inspects the concrete variant.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from ...core.data import AttackType, Vector2

if TYPE_CHECKING:
    from ..battlefield import Battlefield
    from ..entities.unit import Unit
    from ..pathfinding import PathFinder
    from ..targeting import SuitableUnitsFinder
    from .battle_calculator import BattleCalculator


class AttackProgram(ABC):
    """Abstract base class for attack-resolution behaviors."""

    def __init__(self, unit: "Unit", battlefield: "Battlefield", calculator: "BattleCalculator"):
        self.unit = unit
        self.battlefield = battlefield
        self.calculator = calculator

    @abstractmethod
    def select_target(self) -> Optional["Unit"]:
        """Choose the enemy to strike this turn, or None to hold."""
        pass

    def attack(self) -> Optional["Unit"]:
        """Select a target, damage it and return it.

        Returns:
            The attacked unit, or None when no target could be engaged
        """
        target = self.select_target()
        if target is None:
            return None
        target.take_damage(self.calculator.calculate_damage(self.unit, target))
        return target

    @abstractmethod
    def get_program_name(self) -> str:
        pass


class MeleeAttackProgram(AttackProgram):
    """Strikes the nearest reachable front-line enemy.

    Candidates come from the flank target finder; the winner is the one with
    the shortest approach path around live units. Ties keep the finder's row
    order. The approach path is kept in ``last_path`` for the battle log; the
    unit itself holds its deployed cell.
    """

    def __init__(
        self,
        unit: "Unit",
        battlefield: "Battlefield",
        calculator: "BattleCalculator",
        pathfinder: "PathFinder",
        finder: "SuitableUnitsFinder",
    ):
        super().__init__(unit, battlefield, calculator)
        self.pathfinder = pathfinder
        self.finder = finder
        self.last_path: list[Vector2] = []

    def select_target(self) -> Optional["Unit"]:
        enemy_army = self.battlefield.enemies_of(self.unit)
        candidates = self.finder.get_suitable_units(
            self.battlefield.units_by_row(enemy_army),
            is_left_army_target=enemy_army.team.is_left_flank,
        )

        existing_units = self.battlefield.alive_units()
        best_target = None
        best_path: list[Vector2] = []
        paths = self.pathfinder.get_target_paths(self.unit, candidates, existing_units)
        for candidate, path in zip(candidates, paths):
            if path and (not best_path or len(path) < len(best_path)):
                best_target, best_path = candidate, path

        self.last_path = best_path
        return best_target

    def get_program_name(self) -> str:
        return "Melee"


class RangedAttackProgram(AttackProgram):
    """Shoots the nearest living enemy by Manhattan distance without moving."""

    def select_target(self) -> Optional["Unit"]:
        enemies = self.battlefield.enemies_of(self.unit).alive_units()
        if not enemies:
            return None
        return min(enemies, key=lambda enemy: self.unit.position.manhattan_distance_to(enemy.position))

    def get_program_name(self) -> str:
        return "Ranged"


def create_attack_program(
    unit: "Unit",
    battlefield: "Battlefield",
    pathfinder: "PathFinder",
    finder: "SuitableUnitsFinder",
    calculator: "BattleCalculator",
) -> AttackProgram:
    """Factory function to create the attack program for a unit's attack type."""
    if unit.attack_type == AttackType.MELEE:
        return MeleeAttackProgram(unit, battlefield, calculator, pathfinder, finder)
    elif unit.attack_type == AttackType.RANGED:
        return RangedAttackProgram(unit, battlefield, calculator)
    else:
        raise ValueError(f"Unknown attack type: {unit.attack_type}")
