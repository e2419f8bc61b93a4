"""
Event definitions for the streakfour game.

The engine publishes these as its notification stream; presenters render
them without the engine knowing who listens.
"""

import time
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any


class EventType(Enum):
    """Types of notifications emitted by the engine."""

    ROUND_STARTED = auto()
    MOVE_MADE = auto()
    INVALID_MOVE = auto()
    SCORE_UPDATED = auto()
    GAME_WON = auto()
    GAME_TIED = auto()


@dataclass
class Event:
    """
    Base event structure.

    Attributes:
        type: The type of event
        data: Event-specific payload
        timestamp: When the event was created
        source: Which module created the event
    """

    type: EventType
    data: Any = None
    timestamp: float = field(default_factory=time.time)
    source: str = "unknown"

    def __str__(self) -> str:
        return f"[{self.source}] {self.type.name}: {self.data}"
