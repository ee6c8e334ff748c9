"""A continuous cellular automaton driven by a ring-shaped kernel.

Each cell's neighbourhood average under the kernel feeds a bell-shaped
growth function; the cell moves by growth / time_scale and is clipped to
[0, 1].
"""

from __future__ import annotations

import math

import numpy as np


def growth(u, mu: float, sigma: float):
    """Bell curve rescaled to the range [-1, 1], peaking at ``mu``."""
    return 2 * np.exp(-(((np.asarray(u) - mu) / sigma) ** 2) / 2.0) - 1


def bell(u, mu: float, sigma: float):
    """Gaussian bell peaking at 1 when ``u == mu``."""
    return np.exp(-(((np.asarray(u) - mu) / sigma) ** 2) / 2.0)


def _wrap(index: int, size: int) -> int:
    # Past the far edge reads the first cell; before the near edge reads the last.
    if index >= size:
        return 0
    if index < 0:
        return size - 1
    return index


def _wrap_indices(size: int, delta: float) -> np.ndarray:
    idx = np.trunc(np.arange(size) + delta).astype(np.int64)
    idx = np.where(idx >= size, 0, idx)
    return np.where(idx < 0, size - 1, idx)


class Kernel:
    """Weighted offsets; convolution results are divided by the weights' sum."""

    def __init__(self, offsets, weights) -> None:
        self.offsets = np.array(offsets, dtype=np.float64).reshape(-1, 2)
        self.weights = np.array(weights, dtype=np.float64).reshape(-1)
        if len(self.offsets) != len(self.weights):
            raise ValueError("offsets and weights differ in length")
        self.max_value = float(self.weights.sum())
        if self.max_value == 0:
            raise ValueError("kernel weights must not sum to zero")

    def __len__(self) -> int:
        return len(self.weights)

    @classmethod
    def ring(cls, outer_radius: int = 5) -> Kernel:
        """Offsets strictly between half and the full radius, weighted by a bell."""
        if outer_radius < 1:
            raise ValueError("radius must be at least 1")
        offsets, weights = [], []
        for k in range(-outer_radius, outer_radius + 1):
            for l in range(-outer_radius, outer_radius + 1):
                r = math.hypot(k, l) / outer_radius
                if 0.5 < r < 1:
                    offsets.append((k, l))
                    weights.append(float(bell(r, 0.5, 0.15)))
        return cls(offsets, weights)

    def shift(self, offset) -> None:
        """Move every offset by ``offset`` (dx, dy)."""
        dx, dy = offset
        self.offsets[:, 0] += dx
        self.offsets[:, 1] += dy

    def convolve(self, grid, x: int, y: int) -> float:
        """Normalised weighted sum around cell ``grid[x, y]``."""
        cells = np.asarray(grid, dtype=np.float64)
        size = cells.shape[0]
        total = 0.0
        for (dx, dy), w in zip(self.offsets, self.weights):
            l = _wrap(int(x + dx), size)
            m = _wrap(int(y + dy), size)
            total += w * cells[l, m]
        return total / self.max_value

    def convolve_all(self, grid) -> np.ndarray:
        cells = np.asarray(grid, dtype=np.float64)
        size = cells.shape[0]
        total = np.zeros_like(cells)
        for (dx, dy), w in zip(self.offsets, self.weights):
            total += w * cells[np.ix_(_wrap_indices(size, dx), _wrap_indices(size, dy))]
        return total / self.max_value


class Lenia:
    """A square grid of values in [0, 1] evolving under a kernel."""

    def __init__(
        self,
        grid,
        kernel: Kernel | None = None,
        mu: float = 0.15,
        sigma: float = 0.015,
        time_scale: float = 20.0,
    ) -> None:
        cells = np.array(grid, dtype=np.float64)
        if cells.ndim != 2 or cells.shape[0] != cells.shape[1]:
            raise ValueError("grid must be square")
        if time_scale == 0:
            raise ValueError("time scale must not be zero")
        self.grid = cells
        self.size = cells.shape[0]
        self.kernel = kernel if kernel is not None else Kernel.ring()
        self.mu = mu
        self.sigma = sigma
        self.time_scale = time_scale

    def seed(self, x: int, y: int, rng: np.random.Generator | None = None) -> None:
        """Fill the 3x3 block around (x, y) with random values in [0, 1]."""
        if rng is None:
            rng = np.random.default_rng()
        for k in (-1, 0, 1):
            for l in (-1, 0, 1):
                if 0 <= x + k < self.size and 0 <= y + l < self.size:
                    self.grid[x + k, y + l] = int(rng.integers(0, 100)) / 99

    def step(self) -> np.ndarray:
        """Advance one generation and return the new grid."""
        u = self.kernel.convolve_all(self.grid)
        h = growth(u, self.mu, self.sigma)
        self.grid = np.clip(self.grid + h / self.time_scale, 0.0, 1.0)
        return self.grid