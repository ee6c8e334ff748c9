"""Sandpiles, cellular automata, Lenia, Lyapunov fractals, BMP reading and wavelet compression."""

__version__ = "0.1.0"