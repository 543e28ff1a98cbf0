"""Unit catalog templates.

This module defines the unit catalog used by army assembly. Templates are
loaded from YAML and converted to Unit prototypes that the army generator
clones onto the grid.
"""

import os
from dataclasses import dataclass, field
from typing import Optional

import yaml

from ...core.data import AttackType, UnitType, Vector2
from .unit import Unit

DEFAULT_CATALOG_PATH = os.path.join(
    os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__)))),
    "data",
    "unit_catalog.yaml",
)


@dataclass
class UnitTemplate:
    """Catalog entry describing one unit type's base stats."""

    name: str
    unit_type: UnitType
    attack_type: AttackType
    health: int
    base_attack: int
    cost: int
    attack_bonuses: dict[UnitType, float] = field(default_factory=dict)
    defence_bonuses: dict[UnitType, float] = field(default_factory=dict)

    @property
    def efficiency(self) -> float:
        """(attack + health) per point; army assembly prefers higher values."""
        return (self.base_attack + self.health) / self.cost

    def create_unit(self, name: str, position: Vector2) -> Unit:
        """Instantiate a unit from this template."""
        return Unit(
            name,
            self.unit_type,
            self.health,
            self.base_attack,
            self.cost,
            self.attack_type,
            self.attack_bonuses,
            self.defence_bonuses,
            position,
        )


def _parse_bonuses(raw: Optional[dict], yaml_path: str) -> dict[UnitType, float]:
    bonuses = {}
    for type_name, value in (raw or {}).items():
        try:
            bonuses[UnitType[type_name]] = float(value)
        except KeyError:
            raise ValueError(f"Unknown unit type '{type_name}' in bonus table of {yaml_path}")
    return bonuses


def load_unit_templates(path: Optional[str] = None) -> list[UnitTemplate]:
    """Load unit templates from a YAML file.

    Args:
        path: Catalog path; defaults to the packaged unit_catalog.yaml

    Returns:
        Templates in file order

    Raises:
        FileNotFoundError: If the catalog file does not exist
        KeyError: If a template is missing a required field or names an
            unknown unit or attack type
        ValueError: If a bonus table names an unknown unit type
    """
    yaml_path = path or DEFAULT_CATALOG_PATH

    try:
        with open(yaml_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Unit catalog file not found: {yaml_path}")

    try:
        templates = []
        for type_name, template_data in data["unit_templates"].items():
            templates.append(
                UnitTemplate(
                    name=template_data["name"],
                    unit_type=UnitType[type_name],
                    attack_type=AttackType[template_data["attack_type"]],
                    health=int(template_data["health"]),
                    base_attack=int(template_data["base_attack"]),
                    cost=int(template_data["cost"]),
                    attack_bonuses=_parse_bonuses(template_data.get("attack_bonuses"), yaml_path),
                    defence_bonuses=_parse_bonuses(template_data.get("defence_bonuses"), yaml_path),
                )
            )
    except KeyError as e:
        raise KeyError(f"Invalid template structure in {yaml_path}: {e}")

    for template in templates:
        if template.cost <= 0:
            raise ValueError(f"Template '{template.name}' in {yaml_path} has non-positive cost")

    return templates
