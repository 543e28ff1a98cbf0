"""Core data structures and definitions.

This package contains fundamental data types and game definitions:
- data_structures.py: Vector2 grid cells
- game_enums.py: Centralized enums for teams, unit types and attack types
"""

from .data_structures import Vector2
from .game_enums import Team, UnitType, AttackType, TEAM_NAMES

__all__ = [
    "Vector2",
    "Team",
    "UnitType",
    "AttackType",
    "TEAM_NAMES",
]
