"""Conway's Game of Life on a toroidal grid."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

Grid = list[list[bool]]

_DEFAULT_SIZE = 5
_MIN_SIZE = 3


def _copy_grid(grid: Iterable[Iterable[object]]) -> Grid:
    return [[bool(cell) for cell in row] for row in grid]


def _living_neighbours(grid: Grid, row: int, col: int) -> int:
    height = len(grid)
    width = len(grid[0])
    return sum(
        grid[(row + dr) % height][(col + dc) % width]
        for dr in (-1, 0, 1)
        for dc in (-1, 0, 1)
        if dr or dc
    )


def _step(grid: Grid) -> Grid:
    """Return the generation that follows ``grid``; edges wrap around."""
    result = _copy_grid(grid)
    for r, row in enumerate(grid):
        for c, alive in enumerate(row):
            neighbours = _living_neighbours(grid, r, c)
            if alive:
                if neighbours < 2 or neighbours > 3:
                    result[r][c] = False
            elif neighbours == 3:
                result[r][c] = True
    return result


class ConwaysLife:
    """A Life board whose edges wrap around like a torus.

    Without a grid the board is a 5x5 field of dead cells.
    """

    def __init__(self, grid: Sequence[Sequence[object]] | None = None) -> None:
        self._grid: Grid = [[False] * _DEFAULT_SIZE for _ in range(_DEFAULT_SIZE)]
        if grid is not None:
            self.set_grid(grid)

    @property
    def grid(self) -> Grid:
        """A copy of the current cells, row by row."""
        return _copy_grid(self._grid)

    def set_grid(self, grid: Sequence[Sequence[object]]) -> None:
        """Replace the cells; the grid must be a rectangle of at least 3x3."""
        rows = [list(row) for row in grid]
        if len(rows) < _MIN_SIZE:
            raise ValueError("Error! Height less three")
        width = len(rows[0])
        if any(len(row) != width for row in rows[1:]):
            raise ValueError("Error! Grid is not rectangle")
        if width < _MIN_SIZE:
            raise ValueError("Error! Width less three")
        self._grid = _copy_grid(rows)

    def copy(self) -> ConwaysLife:
        """Return an independent board with the same cells."""
        clone = ConwaysLife()
        clone._grid = _copy_grid(self._grid)
        return clone

    def is_stable(self) -> bool:
        """Return True if the next generation equals the current one."""
        return _step(self._grid) == self._grid

    def is_periodic(self, max_period: int) -> int:
        """Return the smallest period up to ``max_period``, or -1 if none."""
        if max_period < 1:
            raise ValueError("Error! Period less one")
        state = self._grid
        for period in range(1, max_period + 1):
            state = _step(state)
            if state == self._grid:
                return period
        return -1

    def next_gen(self, generations: int) -> None:
        """Advance the board by ``generations`` steps."""
        if generations < 1:
            raise ValueError("Error! Gen less one")
        state = self._grid
        for _ in range(generations):
            state = _step(state)
        self._grid = state