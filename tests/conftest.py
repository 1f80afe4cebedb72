"""
Shared fixtures for the hailstorm tests.
"""

import pytest

from hailstorm.core.hail_path import parse_hail_paths, segments_in_area
from hailstorm.core.target_area import TargetArea


EXAMPLE_TRAJECTORIES = """\
19, 13, 30 @ -2,  1, -2
18, 19, 22 @ -1, -1, -2
20, 25, 34 @ -2, -2, -4
12, 31, 28 @ -1, -2, -1
20, 19, 15 @  1, -5, -3
"""


@pytest.fixture
def example_text():
    """The five example trajectories."""
    return EXAMPLE_TRAJECTORIES


@pytest.fixture
def example_area():
    """Target area for the example trajectories."""
    return TargetArea(7, 7, 27, 27)


@pytest.fixture
def example_segments(example_text, example_area):
    """The example trajectories clipped to the example area."""
    return segments_in_area(parse_hail_paths(example_text), example_area)
