"""Console rendering of the engine's notification stream."""

from collections.abc import Callable

from ..core.events import Event, EventType
from ..core.types import BoardState, Color


INVALID_MOVE_MESSAGE = "Not a valid move! Try again :)"


def board_to_ascii(board: BoardState, human_symbol: str = "R", ai_symbol: str = "Y") -> str:
    """Convert board to ASCII display, top row first."""
    matrix = board.as_matrix
    symbols = {1: human_symbol, -1: ai_symbol, 0: "."}

    lines = [" " + " ".join(str(col % 10) for col in range(board.columns))]
    for row in matrix:
        lines.append("|" + "|".join(symbols[int(cell)] for cell in row) + "|")
    lines.append("+" + "-" * (2 * board.columns - 1) + "+")

    total = board.rows * board.columns
    lines.append(f"{total - board.count(Color.NONE)}/{total} cells filled")
    return "\n".join(lines)


class ConsolePresenter:
    """Renders engine events as console messages.

    Args:
        echo: Output callable (typer.echo in the CLI, list.append in tests)
    """

    def __init__(self, echo: Callable[[str], None] = print):
        self.echo = echo
        self._renderers = {
            EventType.ROUND_STARTED: self._round_started,
            EventType.MOVE_MADE: self._move_made,
            EventType.INVALID_MOVE: self._invalid_move,
            EventType.SCORE_UPDATED: self._score_updated,
            EventType.GAME_WON: self._game_won,
            EventType.GAME_TIED: self._game_tied,
        }

    def __call__(self, event: Event) -> None:
        renderer = self._renderers.get(event.type)
        if renderer is not None:
            renderer(event.data)

    def _round_started(self, data: dict) -> None:
        self.echo(f"--- Round {data['round']} ---")

    def _move_made(self, data: dict) -> None:
        player = "you" if data["player"] == Color.HUMAN.value else "AI"
        self.echo(
            f"For move {data['number']} {player} placed a coin "
            f"on row {data['row']} and column {data['column']}"
        )

    def _invalid_move(self, data: dict) -> None:
        self.echo(INVALID_MOVE_MESSAGE)

    def _score_updated(self, data: dict) -> None:
        self.echo(f"you have a score of {data['human']}\nAI has a score of {data['ai']}\n")

    def _game_won(self, data: dict) -> None:
        if data["winner"] == Color.HUMAN.value:
            self.echo("You win!!\n")
        else:
            self.echo("Sorry.. AI wins\n")

    def _game_tied(self, data: dict) -> None:
        self.echo("It's a tie!")
