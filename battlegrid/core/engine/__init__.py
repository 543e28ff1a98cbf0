"""Core battle engine components.

This package contains the turn scheduling systems:
- attack_queue.py: Round-scoped attack order (descending base attack)
- battle_simulator.py: Round loop alternating the two armies' attacks
"""

from .attack_queue import AttackQueue, AttackQueueEntry
from .battle_simulator import BattleLog, BattleSimulator, BattleStalemateError, NoticeLog

__all__ = [
    "AttackQueue",
    "AttackQueueEntry",
    "BattleLog",
    "BattleSimulator",
    "BattleStalemateError",
    "NoticeLog",
]
