"""Crossing-count solvers."""

from .sweep_line import SweepLineSolver
from .brute_force import BruteForceSolver

__all__ = ['SweepLineSolver', 'BruteForceSolver']
