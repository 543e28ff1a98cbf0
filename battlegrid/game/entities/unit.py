"""Combatant unit.

A Unit is created once at army-assembly time, mutates its health during
combat and is never removed from its army: dead units stay in the army's
collection and are skipped by every active-turn query.
"""

from typing import TYPE_CHECKING, Optional

from ...core.data import AttackType, UnitType, Vector2

if TYPE_CHECKING:
    from ..combat.attack_programs import AttackProgram


class Unit:
    """A single combatant with stats, position and attack behavior.

    Property Access Patterns:
        unit.x, unit.y, unit.position   grid coordinates
        unit.health, unit.is_alive      life state
        unit.program.attack()           attack resolution (set by the battlefield)

    Examples:
        unit = Unit("Archer 1", UnitType.ARCHER, 30, 15, 30, AttackType.RANGED,
                    {}, {}, Vector2.from_xy(0, 4))
        if unit.is_alive:
            target = unit.program.attack()
    """

    def __init__(
        self,
        name: str,
        unit_type: UnitType,
        health: int,
        base_attack: int,
        cost: int,
        attack_type: AttackType,
        attack_bonuses: dict[UnitType, float],
        defence_bonuses: dict[UnitType, float],
        position: Vector2,
    ):
        """Initialize unit.

        Args:
            name: Display name, unique within an assembled army
            unit_type: Unit category
            health: Starting hit points
            base_attack: Attack power, also the turn-order priority
            cost: Point cost paid at assembly
            attack_type: Selects the attack-resolution variant
            attack_bonuses: Damage multipliers keyed by target type
            defence_bonuses: Damage reduction fractions keyed by attacker type
            position: Initial grid cell
        """
        if cost <= 0:
            raise ValueError(f"Unit cost must be positive, got {cost} for {name}")
        self.name = name
        self.unit_type = unit_type
        self._health = max(0, health)
        self.base_attack = base_attack
        self.cost = cost
        self.attack_type = attack_type
        self.attack_bonuses = dict(attack_bonuses)
        self.defence_bonuses = dict(defence_bonuses)
        self._position = position
        self._program: Optional["AttackProgram"] = None

    # ============== Core Properties ==============

    @property
    def health(self) -> int:
        """Get current hit points."""
        return self._health

    @health.setter
    def health(self, value: int) -> None:
        self._health = max(0, value)

    @property
    def is_alive(self) -> bool:
        return self._health > 0

    @property
    def position(self) -> Vector2:
        return self._position

    @property
    def x(self) -> int:
        return self._position.x

    @property
    def y(self) -> int:
        return self._position.y

    @property
    def program(self) -> "AttackProgram":
        """Attack-resolution behavior.

        Raises:
            ValueError: If no program has been assigned yet
        """
        if self._program is None:
            raise ValueError(f"Unit '{self.name}' has no attack program assigned")
        return self._program

    @program.setter
    def program(self, program: "AttackProgram") -> None:
        self._program = program

    @property
    def has_program(self) -> bool:
        return self._program is not None

    # ============== Methods ==============

    def take_damage(self, damage: int) -> None:
        """Reduce health, never below zero."""
        if damage < 0:
            raise ValueError(f"Damage cannot be negative: {damage}")
        self.health = self._health - damage

    def clone(self, name: str, position: Vector2) -> "Unit":
        """Create a fresh unit with this unit's stats at a new position."""
        return Unit(
            name,
            self.unit_type,
            self._health,
            self.base_attack,
            self.cost,
            self.attack_type,
            self.attack_bonuses,
            self.defence_bonuses,
            position,
        )

    def __repr__(self) -> str:
        return (
            f"Unit({self.name!r}, {self.unit_type.name}, hp={self._health}, "
            f"atk={self.base_attack}, pos=({self.x}, {self.y}))"
        )
