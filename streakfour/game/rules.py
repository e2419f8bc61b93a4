"""Board geometry and streak detection."""

from ..core.types import Color, Position, Streaks


class StreakRules:
    """Rules for a rows x columns board.

    Win condition: `win_length` in a row (vertical, horizontal or either
    diagonal) through the piece just placed.

    Every detector scans a bounded window anchored at the new piece and
    returns the longest contiguous run of the mover's color inside it, so the
    cost per move is bounded by 2 * (win_length - 1) + 1 cells per direction.
    """

    def __init__(self, rows: int = 6, columns: int = 7, win_length: int = 4):
        """Initialize rules.

        Args:
            rows: Number of rows (6 default)
            columns: Number of columns (7 default)
            win_length: Number in a row to win (4 default)

        Raises:
            ValueError: If a dimension is not positive or win_length < 2
        """
        if rows < 1 or columns < 1:
            raise ValueError(f"Board must have at least one row and column, got {rows}x{columns}")
        if win_length < 2:
            raise ValueError(f"win_length must be at least 2, got {win_length}")
        self.rows = rows
        self.columns = columns
        self.win_length = win_length

    @property
    def reach(self) -> int:
        """How far each leg of a scan window extends from the anchor."""
        return self.win_length - 1

    @property
    def capacity(self) -> int:
        return self.rows * self.columns

    def empty_grid(self) -> list[list[Color]]:
        return [[Color.NONE] * self.columns for _ in range(self.rows)]

    def initial_next_rows(self) -> list[int]:
        """Landing row per column for an empty board (the bottom row)."""
        return [self.rows - 1] * self.columns

    # ─────────────────────────────────────────────────────────
    # STREAK DETECTION
    # ─────────────────────────────────────────────────────────

    def _longest_run(self, grid: list[list[Color]], cells, color: Color) -> int:
        """Longest run of `color` along `cells`; the anchor guarantees at least 1."""
        current = 0
        longest = 1
        for row, col in cells:
            if grid[row][col] == color:
                current += 1
                longest = max(longest, current)
            else:
                current = 0
        return longest

    def vertical_streak(self, grid: list[list[Color]], position: Position, color: Color) -> int:
        """Scan the anchor and the cells below it in the same column.

        Row indices grow downward, so these are the pieces the new one sits on.
        """
        row, col = position.row, position.col
        last = min(row + self.reach, self.rows - 1)
        return self._longest_run(grid, ((r, col) for r in range(row, last + 1)), color)

    def horizontal_streak(self, grid: list[list[Color]], position: Position, color: Color) -> int:
        row, col = position.row, position.col
        first = max(col - self.reach, 0)
        last = min(col + self.reach, self.columns - 1)
        return self._longest_run(grid, ((row, c) for c in range(first, last + 1)), color)

    def diagonal_streak(self, grid: list[list[Color]], position: Position, color: Color) -> int:
        """Scan bottom-left to top-right: row decreases as column increases."""
        row, col = position.row, position.col
        down_left = min(self.reach, col, self.rows - row - 1)
        up_right = min(self.reach, self.columns - col - 1, row)
        cells = ((row - step, col + step) for step in range(-down_left, up_right + 1))
        return self._longest_run(grid, cells, color)

    def antidiagonal_streak(self, grid: list[list[Color]], position: Position, color: Color) -> int:
        """Scan top-left to bottom-right: row and column increase together."""
        row, col = position.row, position.col
        up_left = min(self.reach, col, row)
        down_right = min(self.reach, self.columns - col - 1, self.rows - row - 1)
        cells = ((row + step, col + step) for step in range(-up_left, down_right + 1))
        return self._longest_run(grid, cells, color)

    def streaks(self, grid: list[list[Color]], position: Position, color: Color) -> Streaks:
        """Streak lengths in all four directions around `position`."""
        return Streaks(
            vertical=self.vertical_streak(grid, position, color),
            horizontal=self.horizontal_streak(grid, position, color),
            diagonal=self.diagonal_streak(grid, position, color),
            antidiagonal=self.antidiagonal_streak(grid, position, color),
        )

    def is_win(self, streaks: Streaks) -> bool:
        return streaks.best >= self.win_length
