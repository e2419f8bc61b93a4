"""
CLI for the streakfour game.

Usage:
    streakfour --help
    streakfour play --seed 7
    streakfour autoplay --turns 200 --seed 1
    python -m streakfour.cli.main play --rows 5 --columns 5
"""

import logging
from typing import Annotated

import typer

from ..ai.random_ai import RandomAI
from ..core.bus import EventBus, get_event_bus
from ..core.config import Settings, get_settings
from ..core.types import Color, GameState
from ..game.engine import GameEngine
from .presenter import ConsolePresenter, board_to_ascii


logger = logging.getLogger(__name__)

app = typer.Typer(
    name="streakfour",
    help="Connect-Four style streak game against a random AI.",
    add_completion=False,
)


@app.callback()
def configure(
    log_level: Annotated[
        str | None, typer.Option("--log-level", help="DEBUG, INFO, WARNING or ERROR (default from LOG_LEVEL)")
    ] = None,
):
    """Configure logging for every command."""
    level = (log_level or get_settings().log.level).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )


def _resolve_settings(
    rows: int | None,
    columns: int | None,
    win_length: int | None,
    seed: int | None,
) -> Settings:
    """Apply command-line overrides on top of the loaded settings."""
    settings = get_settings()
    game_overrides = {
        key: value
        for key, value in {"rows": rows, "columns": columns, "win_length": win_length}.items()
        if value is not None
    }
    game = settings.game.model_copy(update=game_overrides)
    ai = settings.ai.model_copy(update={"seed": seed}) if seed is not None else settings.ai
    return settings.model_copy(update={"game": game, "ai": ai})


def _build_engine(settings: Settings, bus: EventBus) -> GameEngine:
    try:
        return GameEngine.from_settings(settings, bus=bus)
    except ValueError as e:
        typer.echo(f"Invalid board configuration: {e}", err=True)
        raise typer.Exit(2) from e


def _complete_ai_turn(engine: GameEngine, state: GameState) -> GameState:
    """Re-prompt the AI until it lands a piece.

    The engine gives the AI a single attempt per human move; a pick into a
    full column leaves the AI owing a move, which would otherwise block the
    human forever.
    """
    while state.last_color == Color.HUMAN:
        logger.debug("AI pick was rejected, asking it again")
        state = engine.play(Color.AI, engine.ai.get_move(state))
    return state


def _print_board(settings: Settings, state: GameState) -> None:
    typer.echo(board_to_ascii(state.board, settings.game.human_symbol, settings.game.ai_symbol))
    typer.echo(f"Legal moves: {state.legal_columns}")


def _print_tally(state: GameState) -> None:
    tally = state.tally
    typer.echo(
        f"\nRounds finished: {tally.rounds_finished} "
        f"(you: {tally.human_wins}, AI: {tally.ai_wins}, ties: {tally.ties})"
    )


@app.command()
def play(
    seed: Annotated[int | None, typer.Option("--seed", "-s", help="Seed for the AI's column picks")] = None,
    rows: Annotated[int | None, typer.Option("--rows", help="Board rows")] = None,
    columns: Annotated[int | None, typer.Option("--columns", help="Board columns")] = None,
    win_length: Annotated[int | None, typer.Option("--win-length", help="Streak length that wins")] = None,
    show_board: Annotated[bool, typer.Option("--show-board/--no-show-board", help="Print the board each turn")] = True,
):
    """
    Play against the random AI.

    Enter a column number to drop a piece, 'q' to quit. If the AI's pick is
    rejected, the CLI asks it again until it lands; the engine alone never
    retries an AI move.
    """
    settings = _resolve_settings(rows, columns, win_length, seed)
    bus = get_event_bus()
    presenter = ConsolePresenter(echo=typer.echo)
    bus.subscribe_all(presenter)

    try:
        engine = _build_engine(settings, bus)
        state = engine.state
        last_column = settings.game.columns - 1

        typer.echo(f"\nAI: {engine.ai.get_name()}")
        typer.echo(f"Enter column number (0-{last_column}) to play, 'q' to quit\n")

        while True:
            if show_board:
                _print_board(settings, state)
            try:
                user_input = typer.prompt(f"\nYour move (0-{last_column})")
            except typer.Abort:
                typer.echo("\nGame quit.")
                break

            if user_input.strip().lower() == "q":
                typer.echo("Game quit.")
                break

            try:
                col = int(user_input)
            except ValueError:
                typer.echo(f"Enter a number 0-{last_column}")
                continue

            state = engine.play(Color.HUMAN, col)
            state = _complete_ai_turn(engine, state)

        _print_tally(engine.state)
    finally:
        bus.unsubscribe_all(presenter)


@app.command()
def autoplay(
    turns: Annotated[int, typer.Option("--turns", "-n", min=1, help="Number of human moves to simulate")] = 100,
    seed: Annotated[int | None, typer.Option("--seed", "-s", help="Seed for both random players")] = None,
    rows: Annotated[int | None, typer.Option("--rows", help="Board rows")] = None,
    columns: Annotated[int | None, typer.Option("--columns", help="Board columns")] = None,
    win_length: Annotated[int | None, typer.Option("--win-length", help="Streak length that wins")] = None,
    quiet: Annotated[bool, typer.Option("--quiet", "-q", help="Only print the final tally")] = False,
):
    """Watch a random human stand-in play the random AI.

    Like `play`, a rejected AI pick is re-asked by the CLI, not the engine.
    """
    settings = _resolve_settings(rows, columns, win_length, seed)
    bus = EventBus()
    if not quiet:
        bus.subscribe_all(ConsolePresenter(echo=typer.echo))

    engine = _build_engine(settings, bus)
    human = RandomAI(seed=None if settings.ai.seed is None else settings.ai.seed + 1)
    state = engine.state

    for _ in range(turns):
        state = engine.play(Color.HUMAN, human.get_move(state))
        state = _complete_ai_turn(engine, state)

    if not quiet:
        _print_board(settings, state)
    _print_tally(state)


def main():
    """Entry point."""
    app()


if __name__ == "__main__":
    main()
