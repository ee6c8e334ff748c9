"""Abelian-sandpile style cellular automata on 2D and 3D grids.

Cells on the outer rim never topple; they only collect grains, so every
toppling rule here keeps the total number of grains on the grid.
"""

from __future__ import annotations

import numpy as np


def _shifted_add(target: np.ndarray, source: np.ndarray, offset: tuple[int, ...]) -> None:
    """Add ``source`` into ``target`` moved by ``offset`` cells, dropping overflow."""
    dst = tuple(slice(max(d, 0), n + min(d, 0)) for d, n in zip(offset, target.shape))
    src = tuple(slice(max(-d, 0), n - max(d, 0)) for d, n in zip(offset, target.shape))
    target[dst] += source[src]


def _clear_upper_half(cells: np.ndarray) -> None:
    size = cells.shape[0]
    cells.flat[size : size * size // 2] = 0


class Sandpile:
    """A sandpile whose cells scatter grains up to ``reach`` cells away.

    A cell at or over the threshold gives ``i`` grains to each orthogonal
    neighbour at distance ``i`` (for ``i`` up to ``reach``) and to each
    diagonal neighbour at distance ``i`` (for ``i`` up to ``reach // 4``).
    """

    def __init__(self, size: int = 400, reach: int = 1) -> None:
        if reach < 1:
            raise ValueError("reach must be at least 1")
        if size <= 2 * reach:
            raise ValueError("grid too small for this reach")
        self.size = size
        self.reach = reach
        self.cells = np.zeros((size, size), dtype=np.int64)

    @property
    def threshold(self) -> int:
        j = self.reach
        return 4 * (j + 1) * j // 2 + (j // 4 + 1) * j // 2

    def add_grains(self, x: int, y: int, amount: int = 100_000_000) -> None:
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise IndexError(f"cell ({x}, {y}) is outside the grid")
        self.cells[y, x] += amount

    def clear_upper_half(self) -> None:
        """Empty the rows between the first row and the middle."""
        _clear_upper_half(self.cells)

    def step(self) -> int:
        """Topple every unstable interior cell once; return how many toppled."""
        j, n = self.reach, self.size
        topple = np.zeros_like(self.cells)
        topple[j : n - j, j : n - j] = self.cells[j : n - j, j : n - j] >= self.threshold
        following = self.cells - self.threshold * topple
        for i in range(1, j + 1):
            gift = i * topple
            for offset in ((i, 0), (-i, 0), (0, i), (0, -i)):
                _shifted_add(following, gift, offset)
        for i in range(1, j // 4 + 1):
            gift = i * topple
            for offset in ((i, i), (-i, -i), (-i, i), (i, -i)):
                _shifted_add(following, gift, offset)
        self.cells = following
        return int(topple.sum())


class AlternatingSandpile:
    """A sandpile that sheds two grains at a time, alternating direction.

    On even steps an unstable cell gives one grain to each horizontal
    neighbour; on odd steps one to each vertical neighbour.
    """

    threshold = 4

    def __init__(self, size: int = 100) -> None:
        if size < 3:
            raise ValueError("grid must be at least 3 cells wide")
        self.size = size
        self.cells = np.zeros((size, size), dtype=np.float64)
        self.phase = 0

    def add_grains(self, x: int, y: int, amount: float = 100_000) -> None:
        if not (0 <= x < self.size and 0 <= y < self.size):
            raise IndexError(f"cell ({x}, {y}) is outside the grid")
        self.cells[y, x] += amount

    def clear_upper_half(self) -> None:
        """Empty the rows between the first row and the middle."""
        _clear_upper_half(self.cells)

    def step(self) -> int:
        """Topple every unstable interior cell once; return how many toppled."""
        topple = np.zeros_like(self.cells)
        topple[1:-1, 1:-1] = self.cells[1:-1, 1:-1] >= self.threshold
        following = self.cells - 2 * topple
        vertical = self.phase * topple
        horizontal = (1 - self.phase) * topple
        _shifted_add(following, vertical, (1, 0))
        _shifted_add(following, vertical, (-1, 0))
        _shifted_add(following, horizontal, (0, 1))
        _shifted_add(following, horizontal, (0, -1))
        self.cells = following
        self.phase = 1 - self.phase
        return int(topple.sum())


class Sandpile3D:
    """A cubic sandpile where only a band of layers around the middle topples.

    Unstable cells (six grains or more) in the band give one grain to each
    of their six face neighbours, which may lie just outside the band.
    """

    threshold = 6

    def __init__(self, size: int = 200, band: int = 5) -> None:
        if band < 1:
            raise ValueError("band must be at least 1")
        centre = size // 2
        if size < 3 or centre - band - 1 < 0 or centre + band > size - 1:
            raise ValueError("band does not fit inside the cube")
        self.size = size
        self.band = band
        self.cells = np.zeros((size, size, size), dtype=np.int32)

    def _check_layer(self, layer: int) -> None:
        if not 0 <= layer < self.size:
            raise IndexError(f"layer {layer} is outside the cube")

    def add_grains(self, layer: int, amount: int = 1_000_000) -> None:
        """Drop grains on the centre cell of a layer."""
        self._check_layer(layer)
        centre = self.size // 2
        self.cells[layer, centre, centre] += amount

    def step(self) -> int:
        """Topple every unstable cell in the band once; return how many toppled."""
        centre = self.size // 2
        lo, hi = centre - self.band, centre + self.band
        topple = np.zeros_like(self.cells)
        topple[lo:hi, 1:-1, 1:-1] = self.cells[lo:hi, 1:-1, 1:-1] >= self.threshold
        following = self.cells - self.threshold * topple
        for offset in ((1, 0, 0), (-1, 0, 0), (0, 1, 0), (0, -1, 0), (0, 0, 1), (0, 0, -1)):
            _shifted_add(following, topple, offset)
        self.cells = following
        return int(topple.sum())

    def layer(self, index: int) -> np.ndarray:
        """A copy of one layer of the cube."""
        self._check_layer(index)
        return self.cells[index].copy()