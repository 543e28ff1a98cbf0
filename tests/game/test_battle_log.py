"""
Unit tests for the BattleLogManager.
"""
import pytest

from battlegrid.game.battle_log import BattleLogManager, LogCategory, LogLevel, LogMessage
from tests.conftest import TestDataBuilder


class TestLogMessage:

    def test_format_with_category(self):
        message = LogMessage("Knight 1 attacks", LogCategory.BATTLE)
        assert message.format() == "[BTL] Knight 1 attacks"

    def test_format_without_category(self):
        message = LogMessage("plain", LogCategory.SYSTEM)
        assert message.format(include_category=False) == "plain"

    def test_format_with_timestamp(self):
        formatted = LogMessage("t", LogCategory.SYSTEM).format(include_timestamp=True)
        assert formatted.startswith("[") and formatted.endswith("[SYS] t")


class TestBattleLogManager:

    def test_info_level_hides_debug_categories(self):
        manager = BattleLogManager()

        assert manager.log("shown", LogCategory.SYSTEM)
        assert not manager.log("hidden", LogCategory.ROUND)
        assert [m.text for m in manager.messages] == ["shown"]

    def test_debug_level_shows_everything(self):
        manager = BattleLogManager()
        manager.enable_debug()

        assert manager.is_debug_enabled()
        assert manager.log("round", "ROUND")
        assert manager.get_messages_by_category(LogCategory.ROUND)[0].text == "round"

    def test_string_categories(self):
        manager = BattleLogManager()

        manager.log("hello", "system")

        assert manager.messages[0].category == LogCategory.SYSTEM
        with pytest.raises(KeyError):
            manager.log("bad", "NOT_A_CATEGORY")

    def test_disabled_category(self):
        manager = BattleLogManager()
        manager.disable_category(LogCategory.BATTLE)

        assert not manager.log("quiet", LogCategory.BATTLE)

        manager.enable_category(LogCategory.BATTLE)
        assert manager.log("loud", LogCategory.BATTLE)

    def test_bounded_buffer(self):
        manager = BattleLogManager(max_messages=3)
        for i in range(5):
            manager.log(f"m{i}")

        assert [m.text for m in manager.messages] == ["m2", "m3", "m4"]
        assert [m.text for m in manager.get_recent_messages(2)] == ["m3", "m4"]
        assert manager.get_recent_messages(0) == []

    def test_echo_receives_formatted_lines(self):
        lines: list[str] = []
        manager = BattleLogManager(echo=lines.append)

        manager.log("ready")

        assert lines == ["[SYS] ready"]

    def test_print_battle_log_reports_attack(self):
        manager = BattleLogManager()
        attacker = TestDataBuilder.unit("Knight 1", x=2, y=3)
        target = TestDataBuilder.unit("Archer 4", x=24, y=3, health=7)

        manager.print_battle_log(attacker, target)

        assert manager.attack_count == 1
        assert manager.messages[-1].text == "Knight 1 (2, 3) attacks Archer 4 (24, 3): 7 hp left"

    def test_print_battle_log_defeat_and_hold(self):
        manager = BattleLogManager()
        attacker = TestDataBuilder.unit("Knight 1")
        target = TestDataBuilder.unit("Archer 4", health=0)

        manager.print_battle_log(attacker, target)
        manager.print_battle_log(attacker, None)

        texts = [m.text for m in manager.messages]
        assert texts[0].endswith("defeated")
        assert texts[1] == "Knight 1 finds no target and holds position"
        assert manager.attack_count == 2

    def test_clear(self):
        manager = BattleLogManager()
        manager.log("x")
        manager.print_battle_log(TestDataBuilder.unit("a"), None)

        manager.clear()

        assert len(manager.messages) == 0
        assert manager.attack_count == 0

    def test_set_log_level_filters_info(self):
        manager = BattleLogManager()
        manager.set_log_level(LogLevel.WARNING)

        assert not manager.log("info", LogCategory.BATTLE)
        assert manager.log("warn", LogCategory.WARNING)
