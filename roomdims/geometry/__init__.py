# Geometry primitives and room measurement module

from .primitives import (
    Point,
    Segment,
    ZERO,
    is_zero_vector,
    normalize,
    dot,
    subtract,
    add,
    scale,
    points_equal,
    distance,
    segment_length,
    wall_segments,
    segment_intersection,
    line_polygon_intersection,
)

from .calculator import (
    RoomSummary,
    to_shapely_polygon,
    calculate_area,
    calculate_perimeter,
    summarize_polygon,
    validate_room_summary,
)

__all__ = [
    # Primitives
    "Point",
    "Segment",
    "ZERO",
    "is_zero_vector",
    "normalize",
    "dot",
    "subtract",
    "add",
    "scale",
    "points_equal",
    "distance",
    "segment_length",
    "wall_segments",
    "segment_intersection",
    "line_polygon_intersection",
    # Calculator
    "RoomSummary",
    "to_shapely_polygon",
    "calculate_area",
    "calculate_perimeter",
    "summarize_polygon",
    "validate_room_summary",
]
