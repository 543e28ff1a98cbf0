"""Centralized game enums and constants.

This module contains all core game enums that are used across multiple modules,
eliminating duplication and providing a single source of truth.
"""

from enum import Enum, auto


class Team(Enum):
    """Sides of a battle. The player deploys on the left flank."""
    PLAYER = 0
    COMPUTER = 1

    @property
    def opponent(self) -> "Team":
        return Team.COMPUTER if self is Team.PLAYER else Team.PLAYER

    @property
    def is_left_flank(self) -> bool:
        return self is Team.PLAYER


class UnitType(Enum):
    """Unit categories. Bonus tables in the unit catalog are keyed by these names."""
    SWORDSMAN = auto()
    PIKEMAN = auto()
    KNIGHT = auto()
    ARCHER = auto()
    CROSSBOWMAN = auto()


class AttackType(Enum):
    """Fundamental attack types for combat."""
    MELEE = auto()
    RANGED = auto()


# Convenience mappings for display
TEAM_NAMES = {
    Team.PLAYER: "Player",
    Team.COMPUTER: "Computer",
}
