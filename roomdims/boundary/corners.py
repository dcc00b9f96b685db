"""
Room Data Module

Corner records and parsing of raw room descriptions.

A raw room record looks like:

    {
        "corners": [
            {"id": "c1", "x": 0, "y": 0,
             "wallStarts": [{"id": "w1"}], "wallEnds": [{"id": "w4"}]},
            ...
        ],
        "walls": [{"id": "w1"}, ...]
    }

Walls are never materialized: a wall links the corner listing its id in
wallStarts to the corner listing it in wallEnds.
"""

import json
import logging
import math
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Hashable, List, Tuple

from ..constants import DEFAULT_ROOM_NAME

logger = logging.getLogger(__name__)


class RoomDataError(Exception):
    """Base exception for room data errors."""
    pass


class InvalidRoomDataError(RoomDataError):
    """Raised when a room record has no usable corners."""
    pass


class RoomFileError(RoomDataError):
    """Raised when a room file cannot be read or decoded."""
    pass


@dataclass(frozen=True)
class Corner:
    """A room corner: graph node with outgoing and incoming wall ids."""
    id: Hashable
    x: float
    y: float
    wall_starts: Tuple[Hashable, ...] = field(default_factory=tuple)
    wall_ends: Tuple[Hashable, ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Corner":
        """
        Parse a raw corner dictionary.

        Wall references may be {"id": ...} objects or bare ids.

        Raises:
            InvalidRoomDataError: If id, coordinates or wall references
                are missing or malformed, or a coordinate is not finite
        """
        try:
            corner_id = data["id"]
            hash(corner_id)
            x = float(data["x"])
            y = float(data["y"])
            wall_starts = _wall_ids(data.get("wallStarts"))
            wall_ends = _wall_ids(data.get("wallEnds"))
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise InvalidRoomDataError(f"Malformed corner record {data!r}: {e}")

        if not (math.isfinite(x) and math.isfinite(y)):
            raise InvalidRoomDataError(f"Non-finite corner coordinates in {data!r}")

        return cls(
            id=corner_id,
            x=x,
            y=y,
            wall_starts=wall_starts,
            wall_ends=wall_ends,
        )


def _wall_ids(refs: Any) -> Tuple[Hashable, ...]:
    if not refs:
        return ()
    return tuple(ref["id"] if isinstance(ref, dict) else ref for ref in refs)


def parse_corners(raw_corners: List[Dict[str, Any]]) -> List[Corner]:
    """
    Convert raw corner dictionaries to Corner objects, preserving order.

    Args:
        raw_corners: List of raw corner dictionaries

    Returns:
        List of Corner objects
    """
    corners = [Corner.from_dict(c) for c in raw_corners]

    seen = set()
    for corner in corners:
        if corner.id in seen:
            logger.warning(f"Duplicate corner id {corner.id!r}; last one wins")
        seen.add(corner.id)

    return corners


def parse_room_data(raw: Any, room_name: str = DEFAULT_ROOM_NAME) -> List[Corner]:
    """
    Validate a raw room record and extract its corners.

    Only corners are required for reconstruction; a missing walls list is
    tolerated with a warning.

    Args:
        raw: Decoded room record
        room_name: Room name for diagnostics

    Returns:
        List of Corner objects in input order

    Raises:
        InvalidRoomDataError: If the record has no corner list, it is empty,
            or a corner is malformed
    """
    if not isinstance(raw, dict):
        raise InvalidRoomDataError(
            f"Room '{room_name}': expected an object, got {type(raw).__name__}"
        )

    raw_corners = raw.get("corners")
    if not raw_corners:
        raise InvalidRoomDataError(f"Room '{room_name}': missing or empty corner list")

    if not isinstance(raw_corners, list):
        raise InvalidRoomDataError(
            f"Room '{room_name}': corners must be a list, got {type(raw_corners).__name__}"
        )

    if not raw.get("walls"):
        logger.warning(f"Room '{room_name}': no walls list; using corner wall references only")

    corners = parse_corners(raw_corners)
    logger.debug(f"Room '{room_name}': parsed {len(corners)} corners")
    return corners


def load_room_file(filepath: str) -> Any:
    """
    Read and decode a room JSON file.

    Args:
        filepath: Path to the JSON file

    Returns:
        Decoded JSON data

    Raises:
        RoomFileError: If the file is missing, not UTF-8, or not valid JSON
    """
    path = Path(filepath)

    if not path.exists():
        raise RoomFileError(f"File not found: {filepath}")

    if not path.is_file():
        raise RoomFileError(f"Path is not a file: {filepath}")

    try:
        with path.open("r", encoding="utf-8") as f:
            return json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise RoomFileError(f"Cannot decode {filepath}: {e}")
