"""
Pairwise crossing count.

Tests every pair of segments directly. Quadratic in the number of segments,
which makes it a simple reference to check the sweep against.
"""

import time
from typing import Any, Dict

from ..core.solver import IntersectionSolver


class BruteForceSolver(IntersectionSolver):
    """
    Exhaustive O(N^2) crossing count.

    Attributes:
        pairs_tested (int): Number of segment pairs intersected
    """

    def _initialize_algorithm(self) -> None:
        """Initialize brute-force counters."""
        self.pairs_tested = 0

    def solve(self) -> int:
        """
        Count crossings by intersecting every pair of segments.

        Returns:
            Number of segment pairs meeting in a single point
        """
        start_time = time.time()
        self.pairs_tested = 0
        self.intersections = 0
        self.intersection_points = []

        active = [s for s in self.segments if s is not None]
        for a in range(len(active)):
            for b in range(a + 1, len(active)):
                self.pairs_tested += 1
                result = active[a].intersect(active[b])
                if result.is_point:
                    self.intersections += 1
                    self.intersection_points.append(result.point)

        self.solve_time = time.time() - start_time
        return self.intersections

    def get_metrics(self) -> Dict[str, Any]:
        return {
            'algorithm': 'Brute Force',
            'intersections': self.intersections,
            'segments': self.segment_count(),
            'pairs_tested': self.pairs_tested,
            'solve_time': self.solve_time
        }
