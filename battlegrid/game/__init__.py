"""Game-level systems: units, armies, pathfinding, targeting and combat."""
