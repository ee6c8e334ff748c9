"""Lyapunov exponents of a logistic map whose rate cycles through three values.

Each point (a, b) of the plane, optionally rotated, drives the map
``s -> r_k * s * (1 - s)`` with ``r_k`` cycling a, b, c; the averaged
logarithm of the map's derivative gives the point's exponent.
"""

from __future__ import annotations

import math

EXPONENT_LIMIT = 4.0


def iterate(mu: float, x0: float, iterations: int) -> float:
    """Apply ``x -> mu * (1 - x)`` ``iterations`` times starting from ``x0``."""
    value = x0
    for _ in range(iterations):
        value = mu * (1 - value)
    return value


def periodic_rate(a: float, b: float, c: float, step: int) -> float:
    """The rate used at ``step``: a, b, c repeating."""
    return (a, b, c)[step % 3]


def _log_abs(value: float) -> float:
    magnitude = abs(value)
    if magnitude == 0:
        return -math.inf
    return math.log(magnitude)


def lyapunov_exponent(x0: float, iterations: int, a: float, b: float, c: float) -> float:
    """Estimated exponent, clamped to [-4, 4].

    Steps run from 2 up to ``iterations - 1``; each adds its log-derivative
    divided by ``iterations``.  The sum stops as soon as it leaves the
    clamping range.
    """
    s = x0
    total = 0.0
    for step in range(2, iterations):
        rate = periodic_rate(a, b, c, step)
        s = s * rate * (1 - s)
        total += _log_abs(rate * (1 - 2 * s)) / iterations
        if total >= EXPONENT_LIMIT:
            return EXPONENT_LIMIT
        if total <= -EXPONENT_LIMIT:
            return -EXPONENT_LIMIT
    return total


def exponent_at(
    k: float,
    l: float,
    size: int = 600,
    zoom: float = 1.0,
    horiz: float = 0.0,
    vert: float = 0.0,
    theta: float = 0.0,
    x0: float = 0.5,
    iterations: int = 200,
    c: float = 1.0,
) -> float:
    """Exponent for screen pixel (k, l) of a ``size``-wide view."""
    scale = zoom * (size // 4)
    point = complex((k + horiz) / scale, (l + vert) / scale)
    point *= complex(math.cos(theta), math.sin(theta))
    return lyapunov_exponent(x0, iterations, point.real, point.imag, c)


def exponent_colour(
    exponent: float, cr: float = 29.4, cg: float = 22.3, cb: float = -12.8
) -> tuple[int, int, int]:
    """An RGB colour for an exponent, each channel clamped to 0..255."""
    level = math.tanh(exponent / 4 + 1) * 40

    def channel(weight: float) -> int:
        return int(min(255.0, max(0.0, level * weight)))

    return channel(cr), channel(cg), channel(cb)