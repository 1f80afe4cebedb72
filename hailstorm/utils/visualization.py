"""
Visualization utilities for the crossing-count solvers.

This module draws the target area, the clipped trajectory segments and the
crossing points found by a solver.
"""

import matplotlib.patches as patches
from typing import List, Sequence


def draw_target_area(ax, area, color: str = 'grey'):
    """
    Draw the target area as an outlined rectangle.

    Args:
        ax: Matplotlib axis to draw on
        area: TargetArea to outline
        color: Edge color of the rectangle
    """
    x_min, y_min, x_max, y_max = area.bounds
    rectangle = patches.Rectangle(
        (x_min, y_min),
        x_max - x_min,
        y_max - y_min,
        linewidth=1.5,
        edgecolor=color,
        facecolor='none',
        linestyle='--',
        label='Target area'
    )
    ax.add_patch(rectangle)


def draw_segments(ax, segments: Sequence, color: str = 'tab:blue', show_ids: bool = True):
    """
    Draw clipped trajectory segments.

    Args:
        ax: Matplotlib axis to draw on
        segments: Segment array; None entries are skipped
        color: Line color
        show_ids: Label each segment with its id at its start point
    """
    labelled = False
    for segment_id, segment in enumerate(segments):
        if segment is None:
            continue
        start, end = segment.from_point, segment.to_point
        ax.plot([start.x, end.x], [start.y, end.y], color=color, linewidth=1.5,
                label=None if labelled else 'Trajectories')
        labelled = True
        if show_ids:
            ax.annotate(str(segment_id), (start.x, start.y), fontsize=8,
                        textcoords='offset points', xytext=(-8, 4))


def draw_crossings(ax,
                   segments: Sequence,
                   points: List,
                   area=None,
                   segment_color: str = 'tab:blue',
                   crossing_color: str = 'red',
                   show_ids: bool = True):
    """
    Draw the area, the segments and the crossing points.

    Args:
        ax: Matplotlib axis to draw on
        segments: Segment array; None entries are skipped
        points: Crossing points to mark
        area: Optional TargetArea to outline
        segment_color: Color for the segments
        crossing_color: Color for the crossing markers
        show_ids: Label segments with their ids

    Example:
        >>> fig, ax = plt.subplots()
        >>> draw_crossings(ax, solver.segments, solver.intersection_points, area)
        >>> plt.show()
    """
    ax.clear()

    if area is not None:
        draw_target_area(ax, area)

    draw_segments(ax, segments, color=segment_color, show_ids=show_ids)

    if points:
        ax.scatter([p.x for p in points], [p.y for p in points],
                   color=crossing_color, s=30, marker='x', zorder=5,
                   label='Crossings')

    ax.set_aspect('equal', adjustable='datalim')
    ax.grid(True, alpha=0.3)
    ax.set_xlabel('x')
    ax.set_ylabel('y')
    if ax.get_legend_handles_labels()[0]:
        ax.legend(loc='upper right')
