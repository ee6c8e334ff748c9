"""A Langton-style ant on a toroidal square grid."""

from __future__ import annotations

import numpy as np


class Ant:
    """An ant walking on a ``size`` x ``size`` torus of white (0) and black (1) cells.

    The ant starts in the middle heading along +x.  On a white cell it
    paints it black, turns a quarter turn counter-clockwise and moves; then,
    if it stands on a black cell, it paints it white, turns clockwise and
    moves again.
    """

    def __init__(self, size: int = 800) -> None:
        if size < 1:
            raise ValueError("grid size must be positive")
        self.size = size
        self.grid = np.zeros((size, size), dtype=np.uint8)
        self.position = (size // 2, size // 2)
        self.direction = (1, 0)

    def _move(self) -> None:
        x, y = self.position
        dx, dy = self.direction
        self.position = ((x + dx) % self.size, (y + dy) % self.size)

    def step(self) -> tuple[int, int]:
        """Advance one tick and return the new position."""
        x, y = self.position
        if self.grid[x, y] == 0:
            self.grid[x, y] = 1
            dx, dy = self.direction
            self.direction = (-dy, dx)
            self._move()
        x, y = self.position
        if self.grid[x, y] == 1:
            self.grid[x, y] = 0
            dx, dy = self.direction
            self.direction = (dy, -dx)
            self._move()
        return self.position

    def is_set(self, x: int, y: int) -> bool:
        """Whether the cell at (x, y) is black."""
        return bool(self.grid[x % self.size, y % self.size])