"""
Boundary Reconstructor Module

Recovers the ordered room polygon from the corner/wall adjacency graph.

Each corner names the walls leaving it (wall_starts) and the walls arriving
at it (wall_ends). Walking from the first corner along the first outgoing
wall of each corner yields the boundary in order. Corners with several
outgoing walls are resolved by always taking the first one; branching
rooms (e.g. T-junctions) can lose corners this way.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Hashable, List, Optional, Sequence, Set

from ..constants import DEFAULT_ROOM_NAME, TraversalStatus
from ..geometry.primitives import Point
from .corners import Corner

logger = logging.getLogger(__name__)


@dataclass
class BoundaryResult:
    """Result of boundary reconstruction."""
    points: List[Point]
    status: str                     # TraversalStatus value
    message: str = ""
    steps: int = 0                  # Loop iterations used
    visited_ids: List[Hashable] = field(default_factory=list)

    @property
    def is_closed(self) -> bool:
        return self.status == TraversalStatus.CLOSED


def _find_next_corner(
    current: Corner,
    wall_id: Hashable,
    corners: Sequence[Corner],
    corner_map: Dict[Hashable, Corner],
    initial: Corner
) -> Optional[Corner]:
    """Find the corner where wall_id ends, falling back to the initial corner."""
    for candidate in corners:
        if candidate.id == current.id:
            continue
        if wall_id in candidate.wall_ends:
            return corner_map[candidate.id]

    # Closing edge back to start
    if wall_id in initial.wall_ends:
        return initial

    return None


def reconstruct(
    corners: Sequence[Corner],
    room_name: str = DEFAULT_ROOM_NAME
) -> BoundaryResult:
    """
    Walk the corner graph into an ordered polygon.

    Never raises for graph problems. Malformed input yields the points
    collected so far together with a non-CLOSED status.

    The walk is capped at len(corners) + 1 iterations. Every iteration that
    continues visits a new corner id, so the visited check always stops the
    walk first and SAFETY_LIMIT is not expected in practice; the cap is a
    hard termination guard only.

    Args:
        corners: Corners in input order; the first is the starting corner
        room_name: Room name for diagnostics

    Returns:
        BoundaryResult with ordered points and traversal status
    """
    if not corners:
        message = f"Room '{room_name}': no corners to traverse"
        logger.warning(message)
        return BoundaryResult(points=[], status=TraversalStatus.INVALID_INPUT, message=message)

    corner_map: Dict[Hashable, Corner] = {c.id: c for c in corners}
    initial = corner_map[corners[0].id]
    max_corners = len(corners)

    points: List[Point] = []
    visited: Set[Hashable] = set()
    visited_order: List[Hashable] = []
    current = initial
    safety_count = 0
    # Only kept if the loop runs out of iterations
    status = TraversalStatus.SAFETY_LIMIT
    message = ""

    while safety_count <= max_corners:
        if current.id in visited:
            if current.id == initial.id:
                status = TraversalStatus.CLOSED
            else:
                status = TraversalStatus.INCOMPLETE_TRAVERSAL
                message = (
                    f"Room '{room_name}': revisited non-start corner {current.id!r} "
                    f"before closing the loop"
                )
            break

        points.append(Point(current.x, current.y))
        visited.add(current.id)
        visited_order.append(current.id)

        if not current.wall_starts:
            status = TraversalStatus.DEAD_END
            message = (
                f"Room '{room_name}': corner {current.id!r} "
                f"({current.x}, {current.y}) has no outgoing wall"
            )
            break

        wall_id = current.wall_starts[0]
        if len(current.wall_starts) > 1:
            logger.debug(
                f"Room '{room_name}': corner {current.id!r} has "
                f"{len(current.wall_starts)} outgoing walls, following {wall_id!r}"
            )

        next_corner = _find_next_corner(current, wall_id, corners, corner_map, initial)
        if next_corner is None:
            status = TraversalStatus.BROKEN_CHAIN
            message = (
                f"Room '{room_name}': no corner ends wall {wall_id!r} "
                f"leaving corner {current.id!r}"
            )
            break

        current = next_corner
        safety_count += 1

    if status == TraversalStatus.SAFETY_LIMIT:
        message = (
            f"Room '{room_name}': traversal stopped at safety limit, "
            f"{len(points)}/{max_corners} points"
        )

    if message:
        logger.warning(message)
    else:
        logger.debug(f"Room '{room_name}': closed boundary with {len(points)} points")

    return BoundaryResult(
        points=points,
        status=status,
        message=message,
        steps=safety_count,
        visited_ids=visited_order,
    )
