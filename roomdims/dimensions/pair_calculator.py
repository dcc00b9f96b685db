"""
Length/Width Pair Calculator Module

Derives candidate room dimensions from an ordered polygon. Every maximal
wall is a length candidate; its width is the chord through the room,
perpendicular to the wall, at the vertex farthest from the wall's line.

Pairs come out in wall order. Picking a "best" pair is left to the caller.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

import numpy as np

from ..constants import MIN_POLYGON_POINTS, MIN_SEGMENT_LENGTH
from ..geometry.primitives import (
    Point,
    Segment,
    is_zero_vector,
    line_polygon_intersection,
    normalize,
    segment_length,
    subtract,
)
from .wall_merger import merge_wall_segments

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LengthWidthPair:
    """A wall run and the perpendicular chord spanning the room."""
    length_seg: Segment
    width_seg: Segment

    @property
    def length(self) -> float:
        return segment_length(self.length_seg)

    @property
    def width(self) -> float:
        return segment_length(self.width_seg)

    def to_dict(self) -> Dict[str, Any]:
        """Convert pair to dictionary for JSON serialization."""
        return {
            "length_seg": [p.to_dict() for p in self.length_seg],
            "width_seg": [p.to_dict() for p in self.width_seg],
            "length": self.length,
            "width": self.width,
        }


def wall_line_coefficients(
    wall_start: Point,
    parallel: Point
) -> Tuple[float, float, float]:
    """
    Implicit line A*x + B*y + C = 0 through wall_start along a unit direction.

    With a unit direction, |A*x + B*y + C| is the perpendicular distance.
    """
    a = parallel.y
    b = -parallel.x
    c = -(a * wall_start.x + b * wall_start.y)
    return a, b, c


def find_far_vertex(
    polygon: Sequence[Point],
    a: float,
    b: float,
    c: float
) -> Optional[Point]:
    """
    Find the polygon vertex farthest from the line A*x + B*y + C = 0.

    Ties keep the first vertex in polygon order. Vertices whose distance
    is NaN are never chosen.

    Args:
        polygon: Ordered polygon points
        a, b, c: Line coefficients

    Returns:
        Farthest vertex, or None if no vertex has a defined distance
    """
    if not polygon:
        return None

    xs = np.fromiter((p.x for p in polygon), dtype=np.float64, count=len(polygon))
    ys = np.fromiter((p.y for p in polygon), dtype=np.float64, count=len(polygon))
    distances = np.abs(a * xs + b * ys + c)

    if np.isnan(distances).all():
        return None

    # nanargmax returns the first index on ties
    return polygon[int(np.nanargmax(distances))]


def calculate_pair_for_wall(
    wall: Segment,
    polygon: Sequence[Point]
) -> Optional[LengthWidthPair]:
    """
    Build the length/width pair for one maximal wall.

    Args:
        wall: (start, end) maximal wall segment
        polygon: Ordered polygon points

    Returns:
        LengthWidthPair, or None if the wall or its chord is degenerate
    """
    wall_start, wall_end = wall
    delta = subtract(wall_end, wall_start)
    wall_length = segment_length(wall)

    if wall_length < MIN_SEGMENT_LENGTH:
        logger.warning(f"L/W calc: skipping degenerate wall {wall}")
        return None

    parallel = normalize(delta)
    if is_zero_vector(parallel, 0.0):
        logger.warning(f"L/W calc: cannot normalize wall {wall}")
        return None

    perpendicular = Point(-parallel.y, parallel.x)
    a, b, c = wall_line_coefficients(wall_start, parallel)

    far_vertex = find_far_vertex(polygon, a, b, c)
    if far_vertex is None:
        logger.warning(f"L/W calc: no far vertex for wall {wall}")
        return None

    chord = line_polygon_intersection(far_vertex, perpendicular, polygon)
    if chord is None:
        logger.warning(f"L/W calc: no perpendicular chord for wall {wall}")
        return None

    chord_length = segment_length(chord)
    if wall_length <= MIN_SEGMENT_LENGTH or chord_length <= MIN_SEGMENT_LENGTH:
        logger.warning(f"L/W calc: zero-length wall or chord for wall {wall}")
        return None

    return LengthWidthPair(length_seg=(wall_start, wall_end), width_seg=chord)


def compute_pairs(polygon: Sequence[Point]) -> List[LengthWidthPair]:
    """
    Compute a length/width pair for every maximal wall of a room.

    Degenerate walls and walls without a chord are skipped, not fatal.

    Args:
        polygon: Ordered polygon points (at least 3)

    Returns:
        List of LengthWidthPair in maximal wall order (possibly empty)
    """
    if not polygon or len(polygon) < MIN_POLYGON_POINTS:
        logger.warning("L/W calc: not enough points")
        return []

    walls = merge_wall_segments(polygon)
    if not walls:
        logger.warning("L/W calc: no maximal wall segments found")
        return []

    pairs = []
    for wall in walls:
        pair = calculate_pair_for_wall(wall, polygon)
        if pair is not None:
            pairs.append(pair)

    logger.debug(f"L/W calc: {len(pairs)} pairs from {len(walls)} maximal walls")

    return pairs
