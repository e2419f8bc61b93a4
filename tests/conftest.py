"""Shared fixtures for the streakfour test suite."""

import pytest

from streakfour.ai.interface import AIInterface
from streakfour.core.bus import EventBus, reset_event_bus
from streakfour.core.config import reset_settings
from streakfour.core.events import Event, EventType
from streakfour.core.types import Color, GameState
from streakfour.game.engine import GameEngine
from streakfour.game.rules import StreakRules


class ScriptedAI(AIInterface):
    """AI that plays a fixed list of columns and fails loudly when it runs out."""

    def __init__(self, columns):
        self.columns = list(columns)
        self.calls = 0

    def get_move(self, state: GameState) -> int:
        if self.calls >= len(self.columns):
            raise AssertionError(f"AI asked for move #{self.calls + 1} but only {len(self.columns)} scripted")
        column = self.columns[self.calls]
        self.calls += 1
        return column

    def get_name(self) -> str:
        return "Scripted AI"


class Recorder:
    """Collects every event published on a bus."""

    def __init__(self, bus: EventBus):
        self.events: list[Event] = []
        bus.subscribe_all(self.events.append)

    def of_type(self, event_type: EventType) -> list[Event]:
        return [e for e in self.events if e.type == event_type]

    @property
    def types(self) -> list[EventType]:
        return [e.type for e in self.events]

    def clear(self) -> None:
        self.events.clear()


def load_position(engine: GameEngine, grid: list[list[Color]], last_color: Color) -> None:
    """Put `grid` on the engine's board as if it had been played this round."""
    rows = engine.rules.rows
    engine._grid = [list(row) for row in grid]
    engine._next_row = []
    for col in range(engine.rules.columns):
        filled = sum(1 for row in range(rows) if grid[row][col] != Color.NONE)
        engine._next_row.append(rows - 1 - filled)
    engine._move_count = sum(1 for row in grid for cell in row if cell != Color.NONE)
    engine._last_color = last_color


@pytest.fixture(autouse=True)
def _isolated_singletons(monkeypatch):
    for key in ("GAME_ROWS", "GAME_COLUMNS", "GAME_WIN_LENGTH", "GAME_HUMAN_SYMBOL",
                "GAME_AI_SYMBOL", "AI_SEED", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    reset_settings()
    reset_event_bus()
    yield
    reset_settings()
    reset_event_bus()


@pytest.fixture
def bus():
    return EventBus()


@pytest.fixture
def recorder(bus):
    return Recorder(bus)


@pytest.fixture
def make_engine(bus):
    """Factory for engines on the shared test bus with a scripted AI."""

    def _make(ai_columns=(), rows=6, columns=7, win_length=4, ai=None):
        rules = StreakRules(rows=rows, columns=columns, win_length=win_length)
        return GameEngine(rules=rules, ai=ai or ScriptedAI(ai_columns), bus=bus)

    return _make
