"""Round-based battle simulation.

The simulator runs rounds until one side has no living units:

1. Snapshot each side's living units into an AttackQueue (strongest first).
2. Alternate one action from the player queue and one from the computer
   queue until both are drained. An action is the next queued unit that is
   still alive; units killed earlier in the round are skipped.
3. Rebuild the living rosters from the armies and repeat.

Attack resolution and logging are collaborators. Whatever they raise
propagates out of the simulator untouched, leaving the armies in whatever
state the completed attacks produced.
"""

import asyncio
import inspect
from collections.abc import Iterator
from typing import TYPE_CHECKING, Optional, Protocol, Union

from ..config import BattleConfig
from .attack_queue import AttackQueue

if TYPE_CHECKING:
    from ...game.entities.army import Army
    from ...game.entities.unit import Unit


class BattleLog(Protocol):
    """Receives one report per attack action."""

    def print_battle_log(self, attacker: "Unit", target: Optional["Unit"]) -> None: ...


class NoticeLog(Protocol):
    """Receives simulator notices: battle start, each round, battle end."""

    def log(self, text: str, category: Union[str, object] = ...) -> bool: ...


class BattleStalemateError(RuntimeError):
    """Raised when a battle exceeds the configured round limit."""

    def __init__(self, rounds: int):
        super().__init__(f"Battle still undecided after {rounds} rounds")
        self.rounds = rounds


class BattleSimulator:
    """Drives rounds of attacks between two armies."""

    def __init__(
        self,
        battle_log: BattleLog,
        config: Optional[BattleConfig] = None,
        notices: Optional[NoticeLog] = None,
    ):
        self.battle_log = battle_log
        self.notices = notices
        self.config = config or BattleConfig()
        self.rounds_played = 0

    def simulate(self, player_army: "Army", computer_army: "Army") -> None:
        """Run the battle to completion.

        Returns once either army has no living units. Callers inspect the
        armies to find out who survived.
        """
        for attacker in self._attack_order(player_army, computer_army):
            target = attacker.program.attack()
            self.battle_log.print_battle_log(attacker, target)
        self._log_finished(player_army, computer_army)

    async def simulate_async(self, player_army: "Army", computer_army: "Army") -> None:
        """Run the battle, suspending after every attack.

        Attack programs may return an awaitable (for example one that waits
        on a human decision); it is awaited before the next action starts, so
        attacks never overlap. Cancellation takes effect at these per-action
        suspension points.
        """
        for attacker in self._attack_order(player_army, computer_army):
            target = attacker.program.attack()
            if inspect.isawaitable(target):
                target = await target
            self.battle_log.print_battle_log(attacker, target)
            await asyncio.sleep(self.config.action_delay)
        self._log_finished(player_army, computer_army)

    def _attack_order(self, player_army: "Army", computer_army: "Army") -> Iterator["Unit"]:
        """Yield each unit at the moment it is due to attack.

        The caller performs the attack before resuming the iterator, so
        liveness checks always see the latest health.
        """
        self.rounds_played = 0
        self._notice(
            f"Battle begins: {player_army.count_alive()} vs {computer_army.count_alive()} units",
            "SYSTEM",
        )

        player_units = player_army.alive_units()
        computer_units = computer_army.alive_units()

        while player_units and computer_units:
            max_rounds = self.config.max_rounds
            if max_rounds is not None and self.rounds_played >= max_rounds:
                raise BattleStalemateError(self.rounds_played)

            self.rounds_played += 1
            self._notice(
                f"Round {self.rounds_played}: {len(player_units)} vs {len(computer_units)}",
                "ROUND",
            )

            player_queue = AttackQueue(player_units)
            computer_queue = AttackQueue(computer_units)

            while player_queue or computer_queue:
                for queue in (player_queue, computer_queue):
                    attacker = queue.pop_next_alive()
                    if attacker is not None:
                        yield attacker

            player_units = player_army.alive_units()
            computer_units = computer_army.alive_units()

    def _notice(self, text: str, category: str) -> None:
        if self.notices is not None:
            self.notices.log(text, category)

    def _log_finished(self, player_army: "Army", computer_army: "Army") -> None:
        self._notice(
            f"Battle over after {self.rounds_played} rounds: "
            f"{player_army.count_alive()} player and {computer_army.count_alive()} computer units standing",
            "SYSTEM",
        )
