"""Combat system components.

This package contains the attack resolution used by units:
- battle_calculator.py: Damage from bonus tables (read-only)
- attack_programs.py: Per-attack-type target selection and damage application
"""

from .battle_calculator import BattleCalculator
from .attack_programs import (
    AttackProgram,
    MeleeAttackProgram,
    RangedAttackProgram,
    create_attack_program,
)

__all__ = [
    "BattleCalculator",
    "AttackProgram",
    "MeleeAttackProgram",
    "RangedAttackProgram",
    "create_attack_program",
]
