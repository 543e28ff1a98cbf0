"""Round-scoped attack order.

Each round the battle simulator snapshots the living units of one side into
an AttackQueue. Units come out strongest first (descending base attack);
units with equal attack come out in the order they were added.
"""

from __future__ import annotations

import heapq
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from ...game.entities.unit import Unit


@dataclass
class AttackQueueEntry:
    """A unit waiting for its attack slot in the current round."""

    # Negated base attack so the min-heap yields the strongest unit first
    priority: int

    # Insertion counter for stable ordering when priorities are equal
    sequence_id: int

    unit: "Unit" = field(compare=False)

    def __lt__(self, other: "AttackQueueEntry") -> bool:
        """Define ordering for heap queue.

        Primary: priority (higher base attack first)
        Secondary: sequence_id (insertion order)
        """
        if self.priority != other.priority:
            return self.priority < other.priority
        return self.sequence_id < other.sequence_id


class AttackQueue:
    """Min-heap of attack entries for one side of one round."""

    def __init__(self, units: Optional[Iterable["Unit"]] = None):
        self._queue: list[AttackQueueEntry] = []
        self._sequence_counter: int = 0
        if units is not None:
            for unit in units:
                self.push(unit)

    def push(self, unit: "Unit") -> AttackQueueEntry:
        entry = AttackQueueEntry(
            priority=-unit.base_attack,
            sequence_id=self._sequence_counter,
            unit=unit,
        )
        self._sequence_counter += 1
        heapq.heappush(self._queue, entry)
        return entry

    def peek_next(self) -> Optional[AttackQueueEntry]:
        """Get the next entry without removing it."""
        return self._queue[0] if self._queue else None

    def pop_next(self) -> Optional[AttackQueueEntry]:
        """Remove and return the next entry, dead or alive."""
        if not self._queue:
            return None
        return heapq.heappop(self._queue)

    def pop_next_alive(self) -> Optional["Unit"]:
        """Pop entries until a living unit turns up.

        Units killed earlier in the round are discarded without using a slot.

        Returns:
            The next living unit, or None once the queue is drained
        """
        while self._queue:
            entry = heapq.heappop(self._queue)
            if entry.unit.is_alive:
                return entry.unit
        return None

    @property
    def is_empty(self) -> bool:
        return not self._queue

    def __len__(self) -> int:
        return len(self._queue)

    def __bool__(self) -> bool:
        return bool(self._queue)
