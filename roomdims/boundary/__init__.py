# Room data parsing and boundary reconstruction module

from .corners import (
    Corner,
    RoomDataError,
    InvalidRoomDataError,
    RoomFileError,
    parse_corners,
    parse_room_data,
    load_room_file,
)

from .reconstructor import (
    BoundaryResult,
    reconstruct,
)

__all__ = [
    # Corners
    "Corner",
    "RoomDataError",
    "InvalidRoomDataError",
    "RoomFileError",
    "parse_corners",
    "parse_room_data",
    "load_room_file",
    # Reconstructor
    "BoundaryResult",
    "reconstruct",
]
