"""Entity definitions.

This package contains the combatants and their containers:
- unit.py: Units with stats, grid position and attack program
- army.py: Ordered unit collections with a point total
- unit_templates.py: YAML unit catalog and template instantiation
"""

from .unit import Unit
from .army import Army
from .unit_templates import UnitTemplate, load_unit_templates

__all__ = [
    "Unit",
    "Army",
    "UnitTemplate",
    "load_unit_templates",
]
