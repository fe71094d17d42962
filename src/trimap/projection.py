#!/usr/bin/env python3
"""
Linear mapping between viewport pixels and geographic coordinates.

The visible region is treated as an equirectangular window: the pixel
offset from the viewport center scales by span / size and is added to
the region center, with the vertical axis inverted because pixel y grows
downward while latitude grows upward.
"""

import logging

from .geometry import (
    PixelPoint,
    Position,
    ViewportRegion,
    ViewportSize,
    validate_position,
    validate_region,
    validate_viewport_size,
    wrap_longitude,
)

logger = logging.getLogger(__name__)


def screen_to_geo(
    pixel: PixelPoint, viewport_size: ViewportSize, region: ViewportRegion
) -> Position:
    """
    Convert a viewport tap location to a geographic coordinate.

    Args:
        pixel: Tap location in viewport pixels
        viewport_size: Width and height of the viewport in pixels
        region: Geographic region currently shown in the viewport

    Returns:
        Position under the tapped pixel

    Raises:
        ValueError: If the viewport size or region spans are not positive
        OutOfRangeError: If the tap maps beyond a pole
    """
    validate_viewport_size(viewport_size)
    validate_region(region)

    dx = pixel.x - viewport_size.width / 2
    dy = pixel.y - viewport_size.height / 2

    # Regions may straddle the antimeridian
    longitude = wrap_longitude(
        region.center.longitude + dx * region.longitude_span / viewport_size.width
    )
    latitude = region.center.latitude - dy * region.latitude_span / viewport_size.height

    position = Position(latitude=latitude, longitude=longitude)
    logger.debug(
        f"Pixel ({pixel.x:.1f}, {pixel.y:.1f}) -> ({latitude:.6f}, {longitude:.6f})"
    )
    return validate_position(position)


def geo_to_screen(
    coordinate: Position, viewport_size: ViewportSize, region: ViewportRegion
) -> PixelPoint:
    """
    Project a geographic coordinate onto the viewport.

    This is the exact inverse of screen_to_geo. Coordinates outside the
    visible region yield pixels outside the viewport rectangle.

    Args:
        coordinate: Position to project
        viewport_size: Width and height of the viewport in pixels
        region: Geographic region currently shown in the viewport

    Returns:
        PixelPoint in viewport pixels
    """
    validate_viewport_size(viewport_size)
    validate_region(region)
    validate_position(coordinate)

    x = (
        viewport_size.width
        * wrap_longitude(coordinate.longitude - region.center.longitude)
        / region.longitude_span
        + viewport_size.width / 2
    )
    y = (
        viewport_size.height
        * (region.center.latitude - coordinate.latitude)
        / region.latitude_span
        + viewport_size.height / 2
    )
    return PixelPoint(x=x, y=y)
