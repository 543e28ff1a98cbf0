"""Core data types, configuration and the turn scheduling engine."""
