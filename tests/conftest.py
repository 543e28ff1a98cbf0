"""
Basic test fixtures for the battlegrid test suite.

Provides unit factories, a small board and a recording battle log.
"""

import sys
import os
from typing import Optional

import numpy as np
import pytest

# Add the project root to the Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from battlegrid.core.config import BattleConfig
from battlegrid.core.data import AttackType, UnitType, Vector2
from battlegrid.game.entities import Army, Unit
from battlegrid.game.pathfinding import PathFinder


class TestDataBuilder:
    """Helper for building units without the YAML catalog."""

    @staticmethod
    def unit(
        name: str = "Unit",
        x: int = 0,
        y: int = 0,
        health: int = 10,
        base_attack: int = 5,
        unit_type: UnitType = UnitType.SWORDSMAN,
        attack_type: AttackType = AttackType.MELEE,
        cost: int = 10,
        attack_bonuses: Optional[dict] = None,
        defence_bonuses: Optional[dict] = None,
    ) -> Unit:
        return Unit(
            name,
            unit_type,
            health,
            base_attack,
            cost,
            attack_type,
            attack_bonuses or {},
            defence_bonuses or {},
            Vector2.from_xy(x, y),
        )


class ScriptedProgram:
    """Attack program that hits a fixed target list in order, recording calls."""

    def __init__(self, unit: Unit, targets: list[Unit], damage: int, journal: list):
        self.unit = unit
        self.targets = targets
        self.damage = damage
        self.journal = journal

    def attack(self) -> Optional[Unit]:
        self.journal.append(self.unit.name)
        for target in self.targets:
            if target.is_alive:
                target.take_damage(self.damage)
                return target
        return None


class RecordingBattleLog:
    """Battle log fake that keeps every (attacker, target) pair."""

    def __init__(self):
        self.attacks: list[tuple[Unit, Optional[Unit]]] = []
        self.notices: list[tuple[str, str]] = []

    def print_battle_log(self, attacker: Unit, target: Optional[Unit]) -> None:
        self.attacks.append((attacker, target))

    def log(self, text: str, category="SYSTEM") -> bool:
        self.notices.append((str(category), text))
        return True


@pytest.fixture
def builder():
    return TestDataBuilder()


@pytest.fixture
def config():
    """Reference board: 27x21 with three deployment columns."""
    return BattleConfig()


@pytest.fixture
def small_config():
    """A 9x5 board with two deployment columns per side."""
    return BattleConfig(board_width=9, board_height=5, deploy_columns=2)


@pytest.fixture
def pathfinder():
    return PathFinder(27, 21)


@pytest.fixture
def small_pathfinder():
    """Create a small 5x5 pathfinder for testing."""
    return PathFinder(width=5, height=5)


@pytest.fixture
def battle_log():
    return RecordingBattleLog()


@pytest.fixture
def rng():
    return np.random.default_rng(1234)


@pytest.fixture
def empty_army():
    return Army()
