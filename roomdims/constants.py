"""
Room Dimensions - Master Constants Reference

Tolerances differ by call site. Keep them distinct: collapsing them to one
value changes which near-degenerate walls and chords are accepted.
"""

# =============================================================================
# FLOATING-POINT TOLERANCES
# =============================================================================

# Generic epsilon for degeneracy checks (zero vectors, parallel lines)
EPSILON = 1e-9

# Unit directions with dot product above 1 - this are collinear
COLLINEAR_TOLERANCE = 1e-5

# Intersection hits closer than this are the same point (shared vertices)
INTERSECTION_DEDUP_TOLERANCE = 1e-5

# Walls and chords shorter than this are degenerate
MIN_SEGMENT_LENGTH = 1e-6

# =============================================================================
# CHORD SEARCH CONSTANTS
# =============================================================================

# Multiple of the direction vector used to stand in for an infinite line
LINE_EXTENSION_FACTOR = 1e7

# =============================================================================
# ROOM CONSTANTS
# =============================================================================

# Fewer points than this cannot enclose a room
MIN_POLYGON_POINTS = 3

# Name used in diagnostics when the caller gives none
DEFAULT_ROOM_NAME = "Unknown Room"

# =============================================================================
# TRAVERSAL STATUS
# =============================================================================

class TraversalStatus:
    CLOSED = "CLOSED"
    INVALID_INPUT = "INVALID_INPUT"
    INCOMPLETE_TRAVERSAL = "INCOMPLETE_TRAVERSAL"
    DEAD_END = "DEAD_END"
    BROKEN_CHAIN = "BROKEN_CHAIN"
    SAFETY_LIMIT = "SAFETY_LIMIT"
