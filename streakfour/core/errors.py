"""Error types for the streakfour game."""

from .types import Color, InvalidMoveReason


class InvalidMove(ValueError):
    """A move that breaks the rules. The engine absorbs it and reports it."""

    def __init__(self, reason: InvalidMoveReason, color: object, column: object):
        self.reason = reason
        self.color = color
        self.column = column
        super().__init__(f"Invalid move ({reason.value}): color={color}, column={column}")

    @property
    def payload(self) -> dict:
        """Event payload describing the rejected move."""
        color = self.color.value if isinstance(self.color, Color) else repr(self.color)
        return {"color": color, "column": self.column, "reason": self.reason.value}
