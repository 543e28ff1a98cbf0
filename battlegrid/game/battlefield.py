"""Battlefield: the two armies on one board.

The battlefield holds no occupancy grid of its own. Every query derives
what it needs (live rosters, rows, obstacle sets) from the armies at call
time, so there is no state to go stale as units die.
"""

from typing import Optional

from ..core.config import BattleConfig
from ..core.data import Team
from .combat.attack_programs import create_attack_program
from .combat.battle_calculator import BattleCalculator
from .entities.army import Army
from .entities.unit import Unit
from .pathfinding import PathFinder
from .targeting import SuitableUnitsFinder, group_units_by_row


class Battlefield:
    """Both armies plus the board they fight on."""

    def __init__(self, player_army: Army, computer_army: Army, config: Optional[BattleConfig] = None):
        if player_army is computer_army:
            raise ValueError("An army cannot fight itself")
        shared = [unit for unit in player_army if unit in computer_army]
        if shared:
            raise ValueError(f"Units belong to both armies: {[u.name for u in shared]}")

        self.config = config or BattleConfig()
        self.player_army = player_army
        self.computer_army = computer_army
        self._claim(player_army, Team.PLAYER)
        self._claim(computer_army, Team.COMPUTER)

    @staticmethod
    def _claim(army: Army, team: Team) -> None:
        """Bind an army to its flank; an army deployed for the other flank is rejected."""
        if army.team is None:
            army.team = team
        elif army.team != team:
            raise ValueError(
                f"Army deployed for {army.team.name} cannot fight in the {team.name} slot"
            )

    @property
    def width(self) -> int:
        return self.config.board_width

    @property
    def height(self) -> int:
        return self.config.board_height

    def army_of(self, unit: Unit) -> Army:
        if unit in self.player_army:
            return self.player_army
        if unit in self.computer_army:
            return self.computer_army
        raise ValueError(f"Unit '{unit.name}' is not on this battlefield")

    def enemies_of(self, unit: Unit) -> Army:
        """The army opposing the unit's own."""
        return self.computer_army if self.army_of(unit) is self.player_army else self.player_army

    def all_units(self) -> list[Unit]:
        """Every unit on the field, dead included, player army first."""
        return self.player_army.units + self.computer_army.units

    def alive_units(self) -> list[Unit]:
        return self.player_army.alive_units() + self.computer_army.alive_units()

    def units_by_row(self, army: Army) -> list[list[Unit]]:
        return group_units_by_row(army.alive_units(), self.height)

    def assign_programs(
        self,
        pathfinder: Optional[PathFinder] = None,
        finder: Optional[SuitableUnitsFinder] = None,
        calculator: Optional[BattleCalculator] = None,
    ) -> None:
        """Give every unit the attack program matching its attack type."""
        pathfinder = pathfinder or PathFinder.from_config(self.config)
        finder = finder or SuitableUnitsFinder(self.config)
        calculator = calculator or BattleCalculator()
        for unit in self.all_units():
            unit.program = create_attack_program(unit, self, pathfinder, finder, calculator)

    def determine_winner(self) -> Optional[Team]:
        """Team with survivors once the other side is wiped out.

        None while both sides still stand, and on mutual elimination.
        """
        player_alive = not self.player_army.is_defeated
        computer_alive = not self.computer_army.is_defeated
        if player_alive and not computer_alive:
            return Team.PLAYER
        if computer_alive and not player_alive:
            return Team.COMPUTER
        return None
