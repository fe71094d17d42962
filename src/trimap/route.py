#!/usr/bin/env python3
"""
Placeholder for route generation through the selected points.
"""

from typing import Sequence
import logging
import string

from .geometry import Position

logger = logging.getLogger(__name__)


def point_labels(count: int) -> str:
    """Return the closed cycle of point letters, e.g. 'A → B → C → A'."""
    if count == 0:
        return ""
    letters = list(string.ascii_uppercase[:count])
    return " → ".join(letters + [letters[0]])


def generate_route(points: Sequence[Position]) -> None:
    """
    Request a route through the selected points.

    No routing is performed yet; the request is only logged.

    Args:
        points: Selected positions in selection order
    """
    logger.info(f"Generating route {point_labels(len(points)) or 'with no points'}")
    logger.debug(
        "Route waypoints: "
        + ", ".join(f"({pos.latitude:.5f}, {pos.longitude:.5f})" for pos in points)
    )
