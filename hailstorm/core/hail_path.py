"""
Hailstone trajectory parsing.

Each input line describes one hailstone as a position and a velocity:

    19, 13, 30 @ -2,  1, -2

Only the x and y components take part in the 2D crossing count; the z
components are parsed and kept for completeness.
"""

from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from .line_segment import LineSegment
from .one_sided_line import OneSidedLine
from .point import Point
from .target_area import TargetArea


def _parse_triple(text: str, line: str) -> Tuple[float, float, float]:
    parts = [p.strip() for p in text.split(',')]
    if len(parts) != 3:
        raise ValueError(f"Expected three comma-separated values in '{text.strip()}' "
                         f"(line: '{line}')")
    try:
        return tuple(float(p) for p in parts)
    except ValueError:
        raise ValueError(f"Non-numeric co-ordinate in '{text.strip()}' (line: '{line}')")


class HailPath:
    """
    A hailstone's starting position and constant velocity.

    Attributes:
        position (Tuple[float, float, float]): (x, y, z) at time zero
        velocity (Tuple[float, float, float]): (vx, vy, vz) per time unit
    """

    def __init__(self,
                 position: Tuple[float, float, float],
                 velocity: Tuple[float, float, float]):
        self.position = position
        self.velocity = velocity

    @classmethod
    def parse(cls, line: str) -> 'HailPath':
        """
        Parse a "px, py, pz @ vx, vy, vz" line.

        Args:
            line: One trajectory description

        Returns:
            The parsed HailPath

        Raises:
            ValueError: If the line cannot be split into position and
                velocity, or a component is missing or non-numeric

        Example:
            >>> HailPath.parse("19, 13, 30 @ -2,  1, -2").velocity
            (-2.0, 1.0, -2.0)
        """
        line = line.strip()
        if line.count('@') != 1:
            raise ValueError(f"Cannot split '{line}' into position & velocity")
        position, velocity = line.split('@')
        return cls(_parse_triple(position, line), _parse_triple(velocity, line))

    def to_ray(self) -> OneSidedLine:
        """The future xy path of the hailstone as a ray."""
        return OneSidedLine(Point(self.position[0], self.position[1]),
                            Point(self.velocity[0], self.velocity[1]))

    def to_segment(self, area: TargetArea) -> Optional[LineSegment]:
        """
        Clip the hailstone's future xy path to the target area.

        Returns:
            The in-area segment, or None if the hailstone never crosses the
            area (or moves only along z)
        """
        if self.velocity[0] == 0 and self.velocity[1] == 0:
            return None
        return area.clip(self.to_ray())

    def __repr__(self) -> str:
        return f"HailPath(position={self.position}, velocity={self.velocity})"


def parse_hail_paths(text: str) -> List[HailPath]:
    """Parse every non-blank line of a trajectory listing."""
    return [HailPath.parse(line) for line in text.splitlines() if line.strip()]


def load_hail_paths(filepath: str) -> List[HailPath]:
    """
    Load trajectories from a text file.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    filepath = Path(filepath)

    if not filepath.exists():
        raise FileNotFoundError(f"Trajectory file not found: {filepath}")

    with open(filepath, 'r') as f:
        return parse_hail_paths(f.read())


def segments_in_area(paths: Iterable[HailPath], area: TargetArea) -> List[Optional[LineSegment]]:
    """Clip every path to the area, keeping None for paths that miss it."""
    return [path.to_segment(area) for path in paths]
