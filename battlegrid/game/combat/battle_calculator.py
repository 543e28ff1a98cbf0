"""Damage calculation from attack and defence bonus tables.

Read-only: nothing here mutates units.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..entities.unit import Unit

MIN_DAMAGE = 1


class BattleCalculator:
    """Computes the damage one unit deals to another."""

    def calculate_damage(self, attacker: "Unit", target: "Unit") -> int:
        """Damage dealt by attacker to target.

        base_attack is multiplied by the attacker's bonus against the target's
        type, then reduced by the target's defence fraction against the
        attacker's type. Always at least MIN_DAMAGE so every hit makes progress.
        """
        multiplier = attacker.attack_bonuses.get(target.unit_type, 1.0)
        reduction = min(1.0, max(0.0, target.defence_bonuses.get(attacker.unit_type, 0.0)))
        damage = round(attacker.base_attack * multiplier * (1.0 - reduction))
        return max(MIN_DAMAGE, int(damage))

    def would_defeat(self, attacker: "Unit", target: "Unit") -> bool:
        return self.calculate_damage(attacker, target) >= target.health
