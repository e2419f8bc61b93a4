"""
Shared data types for the streakfour game.

These types are the contracts between the engine, the AI and presenters.
"""

from dataclasses import dataclass, field
from enum import Enum, auto

import numpy as np


# ─────────────────────────────────────────────────────────────
# COLORS & OUTCOMES
# ─────────────────────────────────────────────────────────────


class Color(Enum):
    """Player color, also stored as the cell value."""

    HUMAN = "human"
    AI = "ai"
    NONE = "none"  # Empty cell / nothing placed yet this round

    def __str__(self) -> str:
        return self.value


PLAY_COLORS = (Color.HUMAN, Color.AI)


class RoundOutcome(Enum):
    """Result of the most recent accepted placement."""

    IN_PROGRESS = auto()
    WON = auto()
    TIED = auto()


class InvalidMoveReason(Enum):
    """Why a move was rejected."""

    COLUMN_OUT_OF_RANGE = "column_out_of_range"
    COLUMN_FULL = "column_full"
    UNKNOWN_COLOR = "unknown_color"
    OUT_OF_TURN = "out_of_turn"


# ─────────────────────────────────────────────────────────────
# BOARD REPRESENTATION
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Position:
    """Grid position (0-indexed)."""

    row: int  # 0 = top
    col: int  # 0 = left


@dataclass
class BoardState:
    """
    Snapshot of the grid.

    - grid[0] is the top row
    - grid[rows - 1] is the bottom row
    - grid[row][col] contains a Color value
    """

    grid: list[list[Color]] = field(
        default_factory=lambda: [[Color.NONE] * 7 for _ in range(6)]
    )

    @property
    def rows(self) -> int:
        return len(self.grid)

    @property
    def columns(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def as_matrix(self) -> np.ndarray:
        """Convert to a numpy matrix.

        Returns:
            numpy array where HUMAN=1, AI=-1, empty=0
        """
        mapping = {Color.HUMAN: 1, Color.AI: -1, Color.NONE: 0}
        return np.array([[mapping[cell] for cell in row] for row in self.grid], dtype=int)

    def count(self, color: Color) -> int:
        return sum(row.count(color) for row in self.grid)

    def copy(self) -> "BoardState":
        return BoardState(grid=[list(row) for row in self.grid])


# ─────────────────────────────────────────────────────────────
# MOVES, STREAKS & SCORES
# ─────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Move:
    """An accepted placement."""

    number: int  # 1-based within the round
    color: Color
    position: Position

    @property
    def column(self) -> int:
        return self.position.col

    def __str__(self) -> str:
        return f"#{self.number} {self.color} → ({self.position.row}, {self.position.col})"


@dataclass(frozen=True)
class Streaks:
    """Streak lengths in the four directions around one placed cell."""

    vertical: int
    horizontal: int
    diagonal: int
    antidiagonal: int

    @property
    def best(self) -> int:
        return max(self.vertical, self.horizontal, self.diagonal, self.antidiagonal)


@dataclass
class Scores:
    """Best streak per player for the current round."""

    human: int = 0
    ai: int = 0

    def get(self, color: Color) -> int:
        return self.human if color == Color.HUMAN else self.ai

    def set(self, color: Color, value: int) -> None:
        if color == Color.HUMAN:
            self.human = value
        elif color == Color.AI:
            self.ai = value

    def copy(self) -> "Scores":
        return Scores(human=self.human, ai=self.ai)


@dataclass
class Tally:
    """Round results accumulated over the engine's lifetime."""

    human_wins: int = 0
    ai_wins: int = 0
    ties: int = 0

    @property
    def rounds_finished(self) -> int:
        return self.human_wins + self.ai_wins + self.ties

    def copy(self) -> "Tally":
        return Tally(human_wins=self.human_wins, ai_wins=self.ai_wins, ties=self.ties)


# ─────────────────────────────────────────────────────────────
# GAME STATE
# ─────────────────────────────────────────────────────────────


@dataclass
class GameState:
    """Complete engine state snapshot."""

    board: BoardState
    next_row: list[int]
    last_color: Color = Color.NONE
    move_count: int = 0
    scores: Scores = field(default_factory=Scores)
    round_number: int = 1
    last_move: Move | None = None
    last_outcome: RoundOutcome = RoundOutcome.IN_PROGRESS
    last_winner: Color | None = None
    tally: Tally = field(default_factory=Tally)

    @property
    def legal_columns(self) -> list[int]:
        """Columns that can still take a piece."""
        return [col for col, row in enumerate(self.next_row) if row >= 0]
