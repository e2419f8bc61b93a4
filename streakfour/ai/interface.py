"""Abstract interface for AI players."""

from abc import ABC, abstractmethod

from ..core.types import GameState


class AIInterface(ABC):
    """Abstract interface for AI players.

    Implementations pick a column given a game state. The engine plays
    whatever column comes back; a rejected pick is not retried.
    """

    @abstractmethod
    def get_move(self, state: GameState) -> int:
        """Pick a column.

        Args:
            state: Current game state

        Returns:
            Column number for the move
        """

    @abstractmethod
    def get_name(self) -> str:
        """Get AI name for display."""

    def get_move_with_explanation(self, state: GameState) -> tuple[int, str]:
        """Get move with explanation (optional override)."""
        move = self.get_move(state)
        return move, f"Selected column {move}"
