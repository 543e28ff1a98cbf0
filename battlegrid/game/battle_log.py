"""
Log management for battle messages and debugging.

This module provides centralized logging with categorization, level
filtering and bounded storage. The battle simulator reports every attack
through ``print_battle_log``.
"""
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from typing import TYPE_CHECKING, Optional, Union

if TYPE_CHECKING:
    from .entities.unit import Unit


class LogCategory(Enum):
    """Categories for log messages."""
    SYSTEM = auto()     # Battle start/end, setup
    BATTLE = auto()     # Attacks
    MOVEMENT = auto()   # Approach paths
    ROUND = auto()      # Round boundaries
    DEBUG = auto()      # Debug messages
    WARNING = auto()    # Warning messages
    ERROR = auto()      # Error messages


CATEGORY_TAGS = {
    LogCategory.SYSTEM: "SYS",
    LogCategory.BATTLE: "BTL",
    LogCategory.MOVEMENT: "MOV",
    LogCategory.ROUND: "RND",
    LogCategory.DEBUG: "DBG",
    LogCategory.WARNING: "WRN",
    LogCategory.ERROR: "ERR",
}


@dataclass
class LogMessage:
    """A single log message with metadata."""
    text: str
    category: LogCategory
    timestamp: datetime = field(default_factory=datetime.now)

    def format(self, include_timestamp: bool = False, include_category: bool = True) -> str:
        """Format the message for display."""
        parts = []

        if include_timestamp:
            parts.append(f"[{self.timestamp.strftime('%H:%M:%S')}]")

        if include_category:
            parts.append(f"[{CATEGORY_TAGS.get(self.category, '???')}]")

        parts.append(self.text)
        return " ".join(parts)


class LogLevel(Enum):
    """Log levels for filtering."""
    DEBUG = 0
    INFO = 1
    WARNING = 2
    ERROR = 3


class BattleLogManager:
    """Manages battle logging with categorization and filtering."""

    def __init__(
        self,
        max_messages: int = 1000,
        default_level: LogLevel = LogLevel.INFO,
        echo: Optional[Callable[[str], None]] = None,
    ):
        """Initialize the log manager.

        Args:
            max_messages: Maximum number of messages to store in the buffer
            default_level: Default log level for filtering
            echo: Optional sink receiving each accepted message, formatted
        """
        self.messages: deque[LogMessage] = deque(maxlen=max_messages)
        self.log_level = default_level
        self.enabled_categories = set(LogCategory)
        self.echo = echo
        self.attack_count = 0

        self.category_levels = {
            LogCategory.DEBUG: LogLevel.DEBUG,
            LogCategory.ROUND: LogLevel.DEBUG,
            LogCategory.MOVEMENT: LogLevel.DEBUG,
            LogCategory.WARNING: LogLevel.WARNING,
            LogCategory.ERROR: LogLevel.ERROR,
            # SYSTEM and BATTLE default to INFO
        }

    def log(self, text: str, category: Union[LogCategory, str] = LogCategory.SYSTEM) -> bool:
        """Record a message if its category is enabled and passes the level filter.

        Args:
            text: Message text
            category: LogCategory or its name ("BATTLE", "ROUND", ...)

        Returns:
            True if the message was stored

        Raises:
            KeyError: If a category name is not recognized
        """
        if isinstance(category, str):
            category = LogCategory[category.upper()]
        if category not in self.enabled_categories:
            return False
        if self.category_levels.get(category, LogLevel.INFO).value < self.log_level.value:
            return False

        message = LogMessage(text, category)
        self.messages.append(message)
        if self.echo is not None:
            self.echo(message.format())
        return True

    def print_battle_log(self, attacker: "Unit", target: Optional["Unit"]) -> None:
        """Report one attack action."""
        self.attack_count += 1
        if target is None:
            self.log(f"{attacker.name} finds no target and holds position", LogCategory.BATTLE)
            return

        outcome = "defeated" if not target.is_alive else f"{target.health} hp left"
        self.log(
            f"{attacker.name} ({attacker.x}, {attacker.y}) attacks "
            f"{target.name} ({target.x}, {target.y}): {outcome}",
            LogCategory.BATTLE,
        )

        last_path = getattr(attacker.program, "last_path", None) if attacker.has_program else None
        if last_path:
            self.log(f"{attacker.name} approach: {len(last_path) - 1} steps", LogCategory.MOVEMENT)

    # ============== Filtering ==============

    def set_log_level(self, level: LogLevel) -> None:
        self.log_level = level

    def enable_debug(self) -> None:
        self.set_log_level(LogLevel.DEBUG)

    def is_debug_enabled(self) -> bool:
        return self.log_level == LogLevel.DEBUG

    def enable_category(self, category: LogCategory) -> None:
        self.enabled_categories.add(category)

    def disable_category(self, category: LogCategory) -> None:
        self.enabled_categories.discard(category)

    # ============== Retrieval ==============

    def get_recent_messages(self, count: int = 10) -> list[LogMessage]:
        """Most recent messages, oldest first."""
        if count <= 0:
            return []
        return list(self.messages)[-count:]

    def get_messages_by_category(self, category: LogCategory) -> list[LogMessage]:
        return [msg for msg in self.messages if msg.category == category]

    def clear(self) -> None:
        self.messages.clear()
        self.attack_count = 0
