"""A wire automaton: electron heads (1) and tails (2) running along conductors (3).

A head becomes a tail, a tail becomes a conductor, and a conductor fires
into a head when at most two of its eight neighbours are heads.  Empty
cells (0) and the grid's rim never change.
"""

from __future__ import annotations

import numpy as np

EMPTY, HEAD, TAIL, CONDUCTOR = 0, 1, 2, 3


def count_neighbours(cells, x: int, y: int) -> int:
    """How many of the eight neighbours of interior cell (x, y) are heads."""
    grid = np.asarray(cells)
    rows, cols = grid.shape
    if not (1 <= x < cols - 1 and 1 <= y < rows - 1):
        raise IndexError(f"cell ({x}, {y}) is not an interior cell")
    window = grid[y - 1 : y + 2, x - 1 : x + 2] == HEAD
    return int(window.sum()) - int(grid[y, x] == HEAD)


class WireGrid:
    """A square grid of wire cells, indexed ``cells[y, x]``.

    The grid keeps a separate buffer for the next generation; toggling a
    cell by hand only changes the displayed generation.
    """

    def __init__(self, cells) -> None:
        grid = np.array(cells, dtype=np.int64)
        if grid.ndim != 2 or grid.shape[0] != grid.shape[1]:
            raise ValueError("cells must form a square grid")
        self.size = grid.shape[0]
        self.cells = grid
        self._next = grid.copy()

    @classmethod
    def random(cls, size: int = 300, rng: np.random.Generator | None = None) -> WireGrid:
        """A grid where each cell is empty or conductor with equal chance."""
        if rng is None:
            rng = np.random.default_rng()
        return cls(rng.integers(0, 2, size=(size, size)) * CONDUCTOR)

    def toggle(self, x: int, y: int) -> None:
        """Turn a non-empty cell empty, or an empty cell into a head."""
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise IndexError(f"cell ({x}, {y}) is outside the grid")
        self.cells[y, x] = EMPTY if self.cells[y, x] else HEAD

    def clear_upper_half(self) -> None:
        """Empty the rows between the first row and the middle."""
        span = slice(self.size, self.size * self.size // 2)
        self.cells.flat[span] = EMPTY
        self._next.flat[span] = EMPTY

    def step(self) -> None:
        """Advance the interior of the grid by one generation."""
        current = self.cells
        heads = (current == HEAD).astype(np.int64)
        counts = sum(
            heads[1 + dy : current.shape[0] - 1 + dy, 1 + dx : current.shape[1] - 1 + dx]
            for dy in (-1, 0, 1)
            for dx in (-1, 0, 1)
            if dx or dy
        )
        inner = current[1:-1, 1:-1]
        following = self._next[1:-1, 1:-1]
        following[(inner == HEAD) | (inner == TAIL)] += 1
        following[(inner == CONDUCTOR) & (counts <= 2)] = HEAD
        self.cells = self._next.copy()