"""Game engine for streakfour state management."""

import logging
import operator

from ..ai.interface import AIInterface
from ..ai.random_ai import RandomAI
from ..core.bus import EventBus
from ..core.config import Settings
from ..core.errors import InvalidMove
from ..core.events import Event, EventType
from ..core.types import (
    PLAY_COLORS,
    BoardState,
    Color,
    GameState,
    InvalidMoveReason,
    Move,
    Position,
    RoundOutcome,
    Scores,
    Tally,
)
from .rules import StreakRules


logger = logging.getLogger(__name__)


class GameEngine:
    """Owns one game and enforces its rules.

    Stateful engine that:
    - Validates moves and places pieces with gravity
    - Scores streaks around each placed piece
    - Restarts the round on a win or a full board
    - Answers every accepted human move with one AI move
    - Emits events for every notification a presenter may render

    Each instance owns its grid; engines never share state.
    """

    source = "game_engine"

    def __init__(
        self,
        rules: StreakRules | None = None,
        ai: AIInterface | None = None,
        bus: EventBus | None = None,
    ):
        """Initialize the engine and start round 1.

        Args:
            rules: Board geometry and streak rules (6x7, connect 4 if None)
            ai: Opponent picking the AI's columns (unseeded RandomAI if None)
            bus: Event bus for notifications (a private bus if None)
        """
        self.rules = rules or StreakRules()
        self.ai = ai or RandomAI()
        self.bus = bus or EventBus()

        self._grid: list[list[Color]] = []
        self._next_row: list[int] = []
        self._last_color = Color.NONE
        self._move_count = 0
        self._scores = Scores()
        self._round_number = 0
        self._tally = Tally()
        self._last_move: Move | None = None
        self._last_outcome = RoundOutcome.IN_PROGRESS
        self._last_winner: Color | None = None

        self._start_round()

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        ai: AIInterface | None = None,
        bus: EventBus | None = None,
    ) -> "GameEngine":
        """Build an engine from application settings."""
        rules = StreakRules(
            rows=settings.game.rows,
            columns=settings.game.columns,
            win_length=settings.game.win_length,
        )
        return cls(rules=rules, ai=ai or RandomAI(seed=settings.ai.seed), bus=bus)

    # ─────────────────────────────────────────────────────────
    # ROUND LIFECYCLE
    # ─────────────────────────────────────────────────────────

    def _start_round(self) -> None:
        """Reset board, pointers, scores, move count and last color together."""
        self._grid = self.rules.empty_grid()
        self._next_row = self.rules.initial_next_rows()
        self._last_color = Color.NONE
        self._move_count = 0
        self._scores = Scores()
        self._round_number += 1

        logger.info(f"Round {self._round_number} started")
        self._publish(EventType.ROUND_STARTED, {"round": self._round_number})

    # ─────────────────────────────────────────────────────────
    # MOVES
    # ─────────────────────────────────────────────────────────

    def _validate(self, color: Color, column: int) -> int:
        """Check a move without touching state.

        Returns:
            Row where the piece lands

        Raises:
            InvalidMove: If the move breaks any rule
        """
        if isinstance(column, bool):
            raise InvalidMove(InvalidMoveReason.COLUMN_OUT_OF_RANGE, color, column)
        try:
            col = operator.index(column)
        except TypeError:
            raise InvalidMove(InvalidMoveReason.COLUMN_OUT_OF_RANGE, color, column) from None

        if not 0 <= col < self.rules.columns:
            raise InvalidMove(InvalidMoveReason.COLUMN_OUT_OF_RANGE, color, column)

        row = self._next_row[col]
        if not 0 <= row < self.rules.rows:
            raise InvalidMove(InvalidMoveReason.COLUMN_FULL, color, column)

        if color not in PLAY_COLORS:
            raise InvalidMove(InvalidMoveReason.UNKNOWN_COLOR, color, column)

        if color == self._last_color:
            raise InvalidMove(InvalidMoveReason.OUT_OF_TURN, color, column)

        return row

    def play(self, color: Color, column: int) -> GameState:
        """Play a piece of `color` into `column`.

        A rejected move changes nothing and publishes INVALID_MOVE. An
        accepted HUMAN move that does not end the round is followed by one
        AI move before this call returns.

        Args:
            color: Color of the mover
            column: Column to drop the piece into

        Returns:
            Snapshot of the engine after the call
        """
        try:
            row = self._validate(color, column)
        except InvalidMove as e:
            logger.debug(str(e))
            self._publish(EventType.INVALID_MOVE, e.payload)
            return self.state

        col = operator.index(column)
        position = Position(row=row, col=col)

        # Apply move
        self._grid[row][col] = color
        self._next_row[col] -= 1
        self._last_color = color
        self._move_count += 1

        move = Move(number=self._move_count, color=color, position=position)
        self._last_move = move
        logger.debug(f"Accepted move {move}")
        self._publish(EventType.MOVE_MADE, {
            "move": move,
            "number": move.number,
            "player": color.value,
            "row": row,
            "column": col,
        })

        streaks = self.rules.streaks(self._grid, position, color)

        if self.rules.is_win(streaks):
            self._finish_with_win(color)
            return self.state

        self._scores.set(color, max(self._scores.get(color), streaks.best))
        self._last_outcome = RoundOutcome.IN_PROGRESS
        self._last_winner = None
        self._publish(EventType.SCORE_UPDATED, {
            "human": self._scores.human,
            "ai": self._scores.ai,
            "streaks": streaks,
        })

        if self._move_count == self.rules.capacity:
            self._finish_with_tie()
        elif color == Color.HUMAN:
            self.play(Color.AI, self.ai.get_move(self.state))

        return self.state

    def _finish_with_win(self, color: Color) -> None:
        self._scores.set(color, self.rules.win_length)
        self._last_outcome = RoundOutcome.WON
        self._last_winner = color
        if color == Color.HUMAN:
            self._tally.human_wins += 1
        else:
            self._tally.ai_wins += 1

        logger.info(f"Round {self._round_number} won by {color} after {self._move_count} moves")
        self._publish(EventType.GAME_WON, {
            "winner": color.value,
            "scores": self._scores.copy(),
        })
        self._start_round()

    def _finish_with_tie(self) -> None:
        self._last_outcome = RoundOutcome.TIED
        self._last_winner = None
        self._tally.ties += 1

        logger.info(f"Round {self._round_number} tied")
        self._publish(EventType.GAME_TIED, {"moves": self._move_count})
        self._start_round()

    def _publish(self, event_type: EventType, data: dict) -> None:
        self.bus.publish(Event(type=event_type, data=data, source=self.source))

    # ─────────────────────────────────────────────────────────
    # READ-ONLY ACCESS
    # ─────────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        """Get a snapshot of the current game state."""
        return GameState(
            board=self.board,
            next_row=list(self._next_row),
            last_color=self._last_color,
            move_count=self._move_count,
            scores=self._scores.copy(),
            round_number=self._round_number,
            last_move=self._last_move,
            last_outcome=self._last_outcome,
            last_winner=self._last_winner,
            tally=self._tally.copy(),
        )

    @property
    def board(self) -> BoardState:
        return BoardState(grid=self._grid).copy()

    @property
    def scores(self) -> Scores:
        return self._scores.copy()

    @property
    def tally(self) -> Tally:
        return self._tally.copy()

    @property
    def move_count(self) -> int:
        return self._move_count

    @property
    def round_number(self) -> int:
        return self._round_number

    @property
    def last_color(self) -> Color:
        return self._last_color
