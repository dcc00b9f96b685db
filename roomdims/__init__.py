# Room dimensions: boundary reconstruction and length/width pairs

from .geometry.primitives import Point
from .boundary import Corner, BoundaryResult, reconstruct, parse_room_data
from .dimensions import LengthWidthPair, compute_pairs

__version__ = "0.1.0"

__all__ = [
    "Point",
    "Corner",
    "BoundaryResult",
    "reconstruct",
    "parse_room_data",
    "LengthWidthPair",
    "compute_pairs",
]
