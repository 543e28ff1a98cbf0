"""battlegrid: turn-ordered combat between two armies on a fixed grid."""

__version__ = "0.1.0"
