"""Shelf Sort level engine: level generation, moves and match resolution."""

__version__ = "1.0.0"
