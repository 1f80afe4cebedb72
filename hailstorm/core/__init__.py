"""Geometric primitives, target area and trajectory parsing."""

from .point import Point
from .line import Line, Intersection, IntersectionKind
from .line_segment import LineSegment
from .one_sided_line import OneSidedLine
from .target_area import TargetArea
from .hail_path import HailPath, parse_hail_paths, load_hail_paths, segments_in_area

__all__ = [
    'Point',
    'Line',
    'Intersection',
    'IntersectionKind',
    'LineSegment',
    'OneSidedLine',
    'TargetArea',
    'HailPath',
    'parse_hail_paths',
    'load_hail_paths',
    'segments_in_area',
]
