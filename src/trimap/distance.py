#!/usr/bin/env python3
"""
Edge distances around the selected triangle.
"""

from typing import List, NamedTuple, Sequence
import logging

from .errors import InvalidInputError
from .geometry import Position, haversine_distance, validate_position

logger = logging.getLogger(__name__)


class EdgeDistance(NamedTuple):
    """Great-circle length of one triangle edge."""

    from_index: int
    to_index: int
    meters: float


def compute_cycle_distances(points: Sequence[Position]) -> List[EdgeDistance]:
    """
    Compute the distances of the closed cycle through three points.

    Edges are (0 -> 1), (1 -> 2) and (2 -> 0), in that order.

    Args:
        points: Exactly three positions in selection order

    Returns:
        List of three EdgeDistance values in meters

    Raises:
        InvalidInputError: If points does not hold exactly three positions
        OutOfRangeError: If any position is outside valid bounds
    """
    if len(points) != 3:
        raise InvalidInputError(
            f"Cycle distances need exactly 3 points, got {len(points)}"
        )

    for point in points:
        validate_position(point)

    edges = []
    for i in range(3):
        next_index = (i + 1) % 3
        meters = haversine_distance(points[i], points[next_index])
        edges.append(EdgeDistance(from_index=i, to_index=next_index, meters=meters))

    logger.debug(
        "Cycle distances: " + ", ".join(f"{e.from_index}->{e.to_index}={e.meters:.1f}m" for e in edges)
    )
    return edges


def format_distance(meters: float) -> str:
    """Format a distance for an edge label, e.g. '33.36 km'."""
    return f"{meters / 1000:.2f} km"
