"""
Wall Merger Module

Merges contiguous collinear boundary edges into maximal wall segments.
A straight wall drawn as several corner-graph edges measures as one wall.
"""

import logging
from typing import List, Sequence

from ..constants import COLLINEAR_TOLERANCE
from ..geometry.primitives import (
    Point,
    Segment,
    dot,
    is_zero_vector,
    normalize,
    points_equal,
    subtract,
    wall_segments,
)

logger = logging.getLogger(__name__)


def unit_direction(start: Point, end: Point) -> Point:
    """Unit vector from start to end, or the zero vector if they coincide."""
    return normalize(subtract(end, start))


def directions_are_collinear(direction_a: Point, direction_b: Point) -> bool:
    """
    Check if two unit directions point the same way.

    Opposite directions are not collinear here: a boundary that doubles
    back on itself is two walls.

    Args:
        direction_a: First unit direction
        direction_b: Second unit direction

    Returns:
        True if both are non-degenerate and their dot product exceeds
        1 - COLLINEAR_TOLERANCE
    """
    if is_zero_vector(direction_a) or is_zero_vector(direction_b):
        return False
    return dot(direction_a, direction_b) > (1 - COLLINEAR_TOLERANCE)


def merge_wall_segments(polygon: Sequence[Point]) -> List[Segment]:
    """
    Merge the polygon's edges into maximal straight wall runs.

    Algorithm:
    1. Walk the edges in order, extending a running segment while the next
       edge starts at its end and points the same way
    2. Otherwise flush the running segment (unless zero length) and start
       a new one at the next edge
    3. If the last run continues straight into the first across the array
       wraparound, fold the last into the first

    Args:
        polygon: Ordered polygon points

    Returns:
        List of (start, end) maximal wall segments
    """
    edges = wall_segments(polygon)
    if not edges:
        return []

    merged: List[Segment] = []

    run_start, run_end = edges[0]
    run_direction = unit_direction(run_start, run_end)

    for next_start, next_end in edges[1:]:
        next_direction = unit_direction(next_start, next_end)

        if (
            directions_are_collinear(run_direction, next_direction)
            and points_equal(run_end, next_start)
        ):
            run_end = next_end
            run_direction = unit_direction(run_start, run_end)
        else:
            if not points_equal(run_start, run_end):
                merged.append((run_start, run_end))
            run_start, run_end = next_start, next_end
            run_direction = next_direction

    if not points_equal(run_start, run_end):
        merged.append((run_start, run_end))

    # Straight run spanning the wraparound point
    if len(merged) > 1:
        first_start, first_end = merged[0]
        last_start, last_end = merged[-1]
        if points_equal(last_end, first_start) and directions_are_collinear(
            unit_direction(last_start, last_end),
            unit_direction(first_start, first_end),
        ):
            merged[0] = (last_start, first_end)
            merged.pop()

    logger.debug(f"Wall merger: {len(edges)} edges -> {len(merged)} maximal walls")

    return merged
