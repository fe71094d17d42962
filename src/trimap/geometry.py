#!/usr/bin/env python3
"""
Geographic and screen-space primitives for the trimap kernel.

This module provides the coordinate types shared by the rest of the
package (geographic positions, viewport pixels and visible regions),
boundary validation for synthetic inputs, and the great-circle distance
used for both proximity checks and edge labels.
"""

from typing import NamedTuple
import logging
import math

from .errors import OutOfRangeError

logger = logging.getLogger(__name__)

# Mean Earth radius in meters
EARTH_RADIUS = 6371000.0


class Position(NamedTuple):
    """Represents a geographic position with latitude and longitude."""

    latitude: float
    longitude: float


class PixelPoint(NamedTuple):
    """A point in viewport pixels; y grows downward."""

    x: float
    y: float


class ViewportSize(NamedTuple):
    """Pixel dimensions of the viewport the map is drawn into."""

    width: float
    height: float


class ViewportRegion(NamedTuple):
    """The visible geographic window mapped onto the viewport rectangle."""

    center: Position
    latitude_span: float
    longitude_span: float


def validate_position(position: Position) -> Position:
    """
    Check that a position lies within valid geographic bounds.

    Args:
        position: Position to check

    Returns:
        The same position, for chaining

    Raises:
        OutOfRangeError: If latitude is outside [-90, 90] or longitude
                         is outside [-180, 180]
    """
    if not -90.0 <= position.latitude <= 90.0:
        raise OutOfRangeError(
            f"Latitude {position.latitude} is outside the range [-90, 90]"
        )
    if not -180.0 <= position.longitude <= 180.0:
        raise OutOfRangeError(
            f"Longitude {position.longitude} is outside the range [-180, 180]"
        )
    return position


def wrap_longitude(longitude: float) -> float:
    """Wrap a longitude or longitude difference into [-180, 180)."""
    return (longitude + 180.0) % 360.0 - 180.0


def validate_viewport_size(size: ViewportSize) -> ViewportSize:
    """Raise ValueError unless both viewport dimensions are positive."""
    if size.width <= 0 or size.height <= 0:
        raise ValueError(
            f"Viewport dimensions must be positive, got {size.width}x{size.height}"
        )
    return size


def validate_region(region: ViewportRegion) -> ViewportRegion:
    """
    Check a viewport region's center and spans.

    Raises:
        OutOfRangeError: If the center is not a valid position
        ValueError: If either span is not positive
    """
    validate_position(region.center)
    if region.latitude_span <= 0 or region.longitude_span <= 0:
        raise ValueError(
            f"Region spans must be positive, got "
            f"({region.latitude_span}, {region.longitude_span})"
        )
    return region


def haversine_distance(pos1: Position, pos2: Position) -> float:
    """
    Calculate the great-circle distance between two positions.

    Uses the haversine formula on a sphere of mean Earth radius.

    Args:
        pos1: First position
        pos2: Second position

    Returns:
        Distance in meters
    """
    lat1, lon1 = math.radians(pos1.latitude), math.radians(pos1.longitude)
    lat2, lon2 = math.radians(pos2.latitude), math.radians(pos2.longitude)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    )
    # Rounding can push a just above 1.0 for antipodal points
    a = min(a, 1.0)

    return 2 * EARTH_RADIUS * math.asin(math.sqrt(a))
