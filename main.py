#!/usr/bin/env python3
"""Run one simulated battle between two generated armies."""

import argparse
from typing import Optional

import numpy as np

from battlegrid.core.config import load_battle_config
from battlegrid.core.data import TEAM_NAMES, Team
from battlegrid.core.engine import BattleSimulator
from battlegrid.game.army_generator import ArmyGenerator
from battlegrid.game.battle_log import BattleLogManager, LogLevel
from battlegrid.game.battlefield import Battlefield
from battlegrid.game.entities import load_unit_templates


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Simulate a battle between two generated armies")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for unit placement")
    parser.add_argument("--points", type=int, default=None, help="Point budget per army")
    parser.add_argument("--config", default=None, help="Path to a battle config YAML file")
    parser.add_argument("--catalog", default=None, help="Path to a unit catalog YAML file")
    parser.add_argument("--debug", action="store_true", help="Show round and movement messages")
    parser.add_argument("--quiet", action="store_true", help="Only print the result")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> Optional[Team]:
    args = parse_args(argv)

    config = load_battle_config(args.config)
    templates = load_unit_templates(args.catalog)
    generator = ArmyGenerator(config, np.random.default_rng(args.seed))

    player_army = generator.generate(templates, args.points, Team.PLAYER)
    computer_army = generator.generate(templates, args.points, Team.COMPUTER)

    battlefield = Battlefield(player_army, computer_army, config)
    battlefield.assign_programs()

    battle_log = BattleLogManager(
        default_level=LogLevel.DEBUG if args.debug else LogLevel.INFO,
        echo=None if args.quiet else print,
    )
    simulator = BattleSimulator(battle_log, config, notices=battle_log)
    simulator.simulate(player_army, computer_army)

    winner = battlefield.determine_winner()
    if winner is None:
        print(f"\nMutual destruction after {simulator.rounds_played} rounds")
    else:
        print(f"\n{TEAM_NAMES[winner]} wins after {simulator.rounds_played} rounds")
    return winner


if __name__ == "__main__":
    main()
