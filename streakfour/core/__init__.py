"""Core infrastructure for the streakfour game."""

from .bus import EventBus, get_event_bus, reset_event_bus
from .config import AISettings, GameSettings, LogSettings, Settings, get_settings, reset_settings
from .errors import InvalidMove
from .events import Event, EventType
from .types import (
    PLAY_COLORS,
    BoardState,
    Color,
    GameState,
    InvalidMoveReason,
    Move,
    Position,
    RoundOutcome,
    Scores,
    Streaks,
    Tally,
)


__all__ = [
    # Config
    "get_settings",
    "reset_settings",
    "Settings",
    "GameSettings",
    "AISettings",
    "LogSettings",
    # Types
    "Color",
    "PLAY_COLORS",
    "RoundOutcome",
    "InvalidMoveReason",
    "Position",
    "BoardState",
    "Move",
    "Streaks",
    "Scores",
    "Tally",
    "GameState",
    # Errors
    "InvalidMove",
    # Events
    "Event",
    "EventType",
    "EventBus",
    "get_event_bus",
    "reset_event_bus",
]
