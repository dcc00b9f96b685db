"""
Geometry Calculator Module

Functions for calculating room measurements from ordered polygons.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from shapely.geometry import Polygon

from ..constants import MIN_POLYGON_POINTS
from .primitives import Point

logger = logging.getLogger(__name__)


@dataclass
class RoomSummary:
    """Aggregate measurements of a reconstructed room polygon."""
    area: float = 0.0
    perimeter: float = 0.0
    vertex_count: int = 0
    is_simple: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert summary to dictionary for JSON serialization."""
        return {
            "area": round(self.area, 6),
            "perimeter": round(self.perimeter, 6),
            "vertex_count": self.vertex_count,
            "is_simple": self.is_simple,
        }


def to_shapely_polygon(points: Sequence[Point]) -> Optional[Polygon]:
    """
    Build a shapely Polygon from ordered room points.

    Args:
        points: Ordered polygon points (implicitly closed)

    Returns:
        Polygon, or None if there are too few points
    """
    if not points or len(points) < MIN_POLYGON_POINTS:
        return None
    return Polygon([p.as_tuple() for p in points])


def calculate_area(polygon: Polygon) -> float:
    """
    Calculate enclosed area.

    Orientation does not matter; shapely reports unsigned area.
    """
    return polygon.area


def calculate_perimeter(polygon: Polygon) -> float:
    """Calculate boundary length, including the closing edge."""
    return polygon.exterior.length


def summarize_polygon(points: Sequence[Point], room_name: str = "") -> RoomSummary:
    """
    Calculate area, perimeter and simplicity for a room.

    Self-intersecting rooms are not supported downstream; they are only
    flagged here.

    Args:
        points: Ordered polygon points
        room_name: Room name for diagnostics

    Returns:
        RoomSummary (all zero for fewer than 3 points)
    """
    polygon = to_shapely_polygon(points)
    if polygon is None:
        logger.debug(f"Room '{room_name}': too few points for a summary")
        return RoomSummary(vertex_count=len(points) if points else 0)

    summary = RoomSummary(
        area=calculate_area(polygon),
        perimeter=calculate_perimeter(polygon),
        vertex_count=len(points),
        is_simple=bool(polygon.is_valid),
    )

    if not summary.is_simple:
        logger.warning(
            f"Room '{room_name}': polygon is not simple "
            f"(self-intersecting or degenerate)"
        )

    return summary


def validate_room_summary(summary: RoomSummary) -> List[str]:
    """
    Validate room measurements and return warnings.

    Args:
        summary: RoomSummary to check

    Returns:
        List of warning messages
    """
    warnings = []

    if summary.vertex_count < MIN_POLYGON_POINTS:
        warnings.append(
            f"Room has {summary.vertex_count} points, at least "
            f"{MIN_POLYGON_POINTS} are needed"
        )
        return warnings

    if not summary.is_simple:
        warnings.append("Room polygon is not simple")

    if summary.area <= 0:
        warnings.append("Room polygon encloses no area")

    return warnings
