"""
Geometry Primitives Module

Vector algebra and intersection routines over 2D points.
All functions are total: missing inputs give zero values, or None for
the intersection routines, instead of raising.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..constants import (
    EPSILON,
    INTERSECTION_DEDUP_TOLERANCE,
    LINE_EXTENSION_FACTOR,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Point:
    """A 2D point. Also used as a vector for directions and deltas."""
    x: float
    y: float

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}


ZERO = Point(0.0, 0.0)

# Directed pair of points
Segment = Tuple[Point, Point]


def is_zero_vector(vector: Optional[Point], tolerance: float = EPSILON) -> bool:
    """Check whether both components are below tolerance."""
    if vector is None:
        return True
    return abs(vector.x) <= tolerance and abs(vector.y) <= tolerance


def normalize(vector: Optional[Point]) -> Point:
    """
    Scale a vector to unit length.

    Args:
        vector: Vector to normalize

    Returns:
        Unit vector, or the zero vector if the input is missing or
        shorter than EPSILON
    """
    if vector is None:
        return ZERO
    length = math.sqrt(vector.x * vector.x + vector.y * vector.y)
    if length < EPSILON:
        return ZERO
    return Point(vector.x / length, vector.y / length)


def dot(vector1: Optional[Point], vector2: Optional[Point]) -> float:
    if vector1 is None or vector2 is None:
        return 0.0
    return vector1.x * vector2.x + vector1.y * vector2.y


def subtract(point1: Optional[Point], point2: Optional[Point]) -> Point:
    """Return point1 - point2."""
    if point1 is None or point2 is None:
        return ZERO
    return Point(point1.x - point2.x, point1.y - point2.y)


def add(point1: Optional[Point], point2: Optional[Point]) -> Point:
    if point1 is None or point2 is None:
        return ZERO
    return Point(point1.x + point2.x, point1.y + point2.y)


def scale(vector: Optional[Point], scalar: float) -> Point:
    if vector is None:
        return ZERO
    return Point(vector.x * scalar, vector.y * scalar)


def points_equal(
    point1: Optional[Point],
    point2: Optional[Point],
    tolerance: float = EPSILON
) -> bool:
    """
    Tolerance-based point equality.

    Args:
        point1: First point
        point2: Second point
        tolerance: Maximum per-axis difference (exclusive)

    Returns:
        True if both axis differences are below tolerance
    """
    if point1 is None or point2 is None:
        return False
    return (
        abs(point1.x - point2.x) < tolerance
        and abs(point1.y - point2.y) < tolerance
    )


def distance(point1: Optional[Point], point2: Optional[Point]) -> float:
    """Euclidean distance between two points (0.0 on missing input)."""
    if point1 is None or point2 is None:
        logger.warning(f"distance: invalid points received: {point1}, {point2}")
        return 0.0
    dx = point2.x - point1.x
    dy = point2.y - point1.y
    return math.sqrt(dx * dx + dy * dy)


def segment_length(segment: Segment) -> float:
    return distance(segment[0], segment[1])


def wall_segments(polygon: Optional[Sequence[Point]]) -> List[Segment]:
    """
    Split an ordered polygon into its boundary edges.

    The last edge wraps from the final point back to the first.

    Args:
        polygon: Ordered polygon points

    Returns:
        List of (start, end) segments, empty for fewer than 2 points
    """
    if not polygon or len(polygon) < 2:
        return []
    count = len(polygon)
    return [(polygon[i], polygon[(i + 1) % count]) for i in range(count)]


def segment_intersection(
    p1: Optional[Point],
    p2: Optional[Point],
    p3: Optional[Point],
    p4: Optional[Point]
) -> Optional[Point]:
    """
    Intersect segment p1-p2 with segment p3-p4.

    Endpoint touches are accepted within EPSILON on each segment's
    parameter.

    Returns:
        Intersection point on p1-p2, or None if either segment is
        degenerate, the segments are parallel, or they do not meet
    """
    if p1 is None or p2 is None or p3 is None or p4 is None:
        return None

    if (
        (abs(p1.x - p2.x) < EPSILON and abs(p1.y - p2.y) < EPSILON)
        or (abs(p3.x - p4.x) < EPSILON and abs(p3.y - p4.y) < EPSILON)
    ):
        return None

    denominator = (p4.y - p3.y) * (p2.x - p1.x) - (p4.x - p3.x) * (p2.y - p1.y)
    if abs(denominator) < EPSILON:
        return None

    ua_numerator = (p4.x - p3.x) * (p1.y - p3.y) - (p4.y - p3.y) * (p1.x - p3.x)
    ub_numerator = (p2.x - p1.x) * (p1.y - p3.y) - (p2.y - p1.y) * (p1.x - p3.x)
    ua = ua_numerator / denominator
    ub = ub_numerator / denominator

    if ua < -EPSILON or ua > 1 + EPSILON or ub < -EPSILON or ub > 1 + EPSILON:
        return None

    return Point(p1.x + ua * (p2.x - p1.x), p1.y + ua * (p2.y - p1.y))


def line_polygon_intersection(
    origin: Optional[Point],
    direction: Optional[Point],
    polygon: Optional[Sequence[Point]]
) -> Optional[Segment]:
    """
    Find the chord where an infinite line crosses a polygon boundary.

    The line is approximated by a segment reaching LINE_EXTENSION_FACTOR
    times the direction vector on both sides of the origin. Every boundary
    hit is tagged with its parameter t along the direction; hits are sorted
    by t and consecutive near-duplicates (shared vertices of adjacent
    edges) are collapsed.

    Args:
        origin: Any point on the line
        direction: Line direction (need not be unit length)
        polygon: Ordered polygon points

    Returns:
        (entry, exit) segment between the smallest- and largest-t hits,
        or None if fewer than two distinct hits exist
    """
    if origin is None or direction is None or not polygon or len(polygon) < 2:
        return None

    if abs(direction.x) < EPSILON and abs(direction.y) < EPSILON:
        logger.warning("line_polygon_intersection: direction is a zero vector")
        return None

    line_start = Point(
        origin.x - direction.x * LINE_EXTENSION_FACTOR,
        origin.y - direction.y * LINE_EXTENSION_FACTOR,
    )
    line_end = Point(
        origin.x + direction.x * LINE_EXTENSION_FACTOR,
        origin.y + direction.y * LINE_EXTENSION_FACTOR,
    )

    hits: List[Tuple[float, Point]] = []
    for edge_start, edge_end in wall_segments(polygon):
        hit = segment_intersection(line_start, line_end, edge_start, edge_end)
        if hit is None:
            continue

        # Divide along whichever axis is not near zero
        if abs(direction.x) > EPSILON:
            t = (hit.x - origin.x) / direction.x
        elif abs(direction.y) > EPSILON:
            t = (hit.y - origin.y) / direction.y
        else:
            continue
        hits.append((t, hit))

    if len(hits) < 2:
        return None

    hits.sort(key=lambda item: item[0])

    unique_points = [hits[0][1]]
    for i in range(1, len(hits)):
        if not points_equal(hits[i][1], hits[i - 1][1], INTERSECTION_DEDUP_TOLERANCE):
            unique_points.append(hits[i][1])

    if len(unique_points) < 2:
        return None

    return (unique_points[0], unique_points[-1])
