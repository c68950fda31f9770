"""Hedgehog Forest: a turn-based hedgehog survival game engine."""

__version__ = "0.1.0"
