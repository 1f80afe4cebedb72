"""
Abstract base class for all crossing-count solvers.

This module defines the common interface that every solver (sweep line,
brute force) implements, plus the result export shared between them.
"""

import json
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence

import numpy as np

from .line_segment import LineSegment
from .point import Point


class IntersectionSolver(ABC):
    """
    Abstract base class for crossing-count solvers.

    Attributes:
        segments (List[Optional[LineSegment]]): Input segments indexed by
            segment id; None marks a trajectory that misses the target area
        config (Dict[str, Any]): Algorithm-specific configuration parameters
        intersections (int): Number of crossings found by the last solve()
        intersection_points (List[Point]): Locations of those crossings
        solve_time (float): Time taken by the last solve() (seconds)
    """

    def __init__(self, segments: Sequence[Optional[LineSegment]],
                 config: Optional[Dict[str, Any]] = None):
        """
        Initialize the solver.

        Args:
            segments: Segment array; None entries and zero-length segments
                are excluded from the count
            config: Dictionary of algorithm parameters loaded from YAML
        """
        self.segments: List[Optional[LineSegment]] = [
            segment if _is_usable(segment) else None for segment in segments
        ]
        self.config = config or {}
        self.intersections: int = 0
        self.intersection_points: List[Point] = []
        self.solve_time: float = 0.0
        self._initialize_algorithm()

    @property
    def parameters(self) -> Dict[str, Any]:
        return self.config.get('parameters', {})

    @abstractmethod
    def _initialize_algorithm(self) -> None:
        """
        Initialize algorithm-specific data structures.

        Called during __init__ once the segment array is in place.
        """
        pass

    @abstractmethod
    def solve(self) -> int:
        """
        Count the crossings among the segments.

        Returns:
            Number of distinct crossing points

        Example:
            >>> solver = SweepLineSolver(segments)
            >>> print(f"{solver.solve()} crossings inside the area")
        """
        pass

    @abstractmethod
    def get_metrics(self) -> Dict[str, Any]:
        """
        Get solver metrics from the last run.

        Returns:
            Dictionary containing at least:
            - algorithm (str): Solver name
            - intersections (int): Crossings counted
            - segments (int): Segments taking part
            - solve_time (float): Seconds spent in solve()
        """
        pass

    def segment_count(self) -> int:
        """Number of segments taking part in the count."""
        return sum(1 for segment in self.segments if segment is not None)

    def visualize(self, ax, area=None, **kwargs) -> None:
        """
        Draw the segments and the crossings found on a matplotlib axis.

        Args:
            ax: Matplotlib axis object to draw on
            area: Optional TargetArea outline to draw
            **kwargs: Passed through to draw_crossings
        """
        from ..utils.visualization import draw_crossings

        draw_crossings(ax, self.segments, self.intersection_points, area=area, **kwargs)
        ax.set_title(f"{self.__class__.__name__}\n"
                     f"Crossings: {self.intersections}, "
                     f"Time: {self.solve_time:.3f}s")

    def save_results(self, filename: str) -> None:
        """
        Save the crossing points found by the last run.

        Supports formats based on file extension:
        - .json: count, points and metrics
        - .csv: one x,y row per crossing point

        Args:
            filename: Output file path with extension

        Raises:
            ValueError: If the file format is unsupported

        Example:
            >>> solver.save_results('outputs/sweep_line/crossings.json')
        """
        points = [p.as_tuple() for p in self.intersection_points]

        if filename.endswith('.json'):
            with open(filename, 'w') as f:
                json.dump({
                    'intersections': self.intersections,
                    'points': points,
                    'metrics': self.get_metrics()
                }, f, indent=2)
        elif filename.endswith('.csv'):
            np.savetxt(filename, np.array(points, dtype=float).reshape(-1, 2),
                       delimiter=',', header='x,y', comments='')
        else:
            raise ValueError(f"Unsupported file format: {filename}. "
                             f"Use .json or .csv")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(config={self.config})"

    def __str__(self) -> str:
        return f"{self.__class__.__name__} ({self.segment_count()} segments)"


def _is_usable(segment: Optional[LineSegment]) -> bool:
    return segment is not None and segment.from_point != segment.to_point
