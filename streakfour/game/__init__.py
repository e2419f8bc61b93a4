"""Game logic module."""

from .engine import GameEngine
from .rules import StreakRules


__all__ = [
    "GameEngine",
    "StreakRules",
]
