# Wall merging and length/width pair calculation module

from .wall_merger import (
    unit_direction,
    directions_are_collinear,
    merge_wall_segments,
)

from .pair_calculator import (
    LengthWidthPair,
    wall_line_coefficients,
    find_far_vertex,
    calculate_pair_for_wall,
    compute_pairs,
)

__all__ = [
    # Wall Merger
    "unit_direction",
    "directions_are_collinear",
    "merge_wall_segments",
    # Pair Calculator
    "LengthWidthPair",
    "wall_line_coefficients",
    "find_far_vertex",
    "calculate_pair_for_wall",
    "compute_pairs",
]
