"""Battle configuration loaded from YAML.

Board size, deployment and assembly limits are configuration constants rather
than laws of the model. Defaults match the reference battlefield (27x21 grid,
three deployment columns per side).
"""

import os
from dataclasses import dataclass, fields
from typing import Optional

import yaml

DEFAULT_CONFIG_PATH = os.path.join(
    os.path.dirname(os.path.dirname(os.path.abspath(__file__))),
    "data",
    "battle_config.yaml",
)


@dataclass(frozen=True)
class BattleConfig:
    """Static battle settings.

    Attributes:
        board_width: Number of grid columns (x)
        board_height: Number of grid rows (y)
        deploy_columns: Width of each flank's deployment zone
        max_units_per_type: Cap on clones of a single template per army
        max_points: Default point budget for army assembly
        max_rounds: Round limit before the simulator gives up, None for unlimited
        action_delay: Seconds to suspend after each attack in async simulation
    """

    board_width: int = 27
    board_height: int = 21
    deploy_columns: int = 3
    max_units_per_type: int = 11
    max_points: int = 1500
    max_rounds: Optional[int] = None
    action_delay: float = 0.0

    def __post_init__(self):
        if self.board_width <= 0 or self.board_height <= 0:
            raise ValueError(
                f"Board dimensions must be positive, got {self.board_width}x{self.board_height}"
            )
        if not 0 < self.deploy_columns * 2 <= self.board_width:
            raise ValueError(
                f"deploy_columns={self.deploy_columns} does not fit two flanks on a "
                f"board of width {self.board_width}"
            )
        if self.max_units_per_type < 0:
            raise ValueError("max_units_per_type cannot be negative")
        if self.max_rounds is not None and self.max_rounds <= 0:
            raise ValueError("max_rounds must be positive or None")
        if self.action_delay < 0:
            raise ValueError("action_delay cannot be negative")

    @property
    def left_flank_columns(self) -> range:
        """Columns of the left (player) deployment zone."""
        return range(0, self.deploy_columns)

    @property
    def right_flank_columns(self) -> range:
        """Columns of the right (computer) deployment zone."""
        return range(self.board_width - self.deploy_columns, self.board_width)


def load_battle_config(path: Optional[str] = None) -> BattleConfig:
    """Load battle configuration from a YAML file.

    Args:
        path: Path to the YAML file; defaults to the packaged battle_config.yaml

    Returns:
        BattleConfig with file values overriding the defaults

    Raises:
        FileNotFoundError: If the file does not exist
        KeyError: If the file contains unknown settings
    """
    yaml_path = path or DEFAULT_CONFIG_PATH

    try:
        with open(yaml_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except FileNotFoundError:
        raise FileNotFoundError(f"Battle config file not found: {yaml_path}")

    settings = data.get("battle", {}) or {}
    known = {f.name for f in fields(BattleConfig)}
    unknown = set(settings) - known
    if unknown:
        raise KeyError(f"Unknown battle settings in {yaml_path}: {sorted(unknown)}")

    return BattleConfig(**settings)
