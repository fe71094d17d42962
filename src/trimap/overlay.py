#!/usr/bin/env python3
"""
Screen-space triangle overlay for the selected points.

Builds the plain data a renderer needs to draw the triangle: projected
vertices in insertion order, one label per edge placed at the edge's
midpoint, the pixel-space polygon, and the geodesic area enclosed by the
geographic triangle.
"""

from typing import List, NamedTuple, Sequence
import logging
import pyproj
from shapely.geometry import LineString, Polygon

from .distance import EdgeDistance, format_distance
from .errors import InvalidInputError
from .geometry import PixelPoint, Position, ViewportRegion, ViewportSize
from .projection import geo_to_screen

logger = logging.getLogger(__name__)

_GEOD = pyproj.Geod(ellps="WGS84")


class EdgeLabel(NamedTuple):
    """Distance label anchored at the midpoint of a projected edge."""

    from_index: int
    to_index: int
    position: PixelPoint
    text: str


class TriangleOverlay(NamedTuple):
    """Everything needed to draw the triangle over the map."""

    vertices: List[PixelPoint]
    labels: List[EdgeLabel]
    polygon: Polygon  # in viewport pixels
    area_m2: float


def geodesic_area(points: Sequence[Position]) -> float:
    """
    Calculate the area enclosed by a geographic polygon.

    Args:
        points: Polygon vertices; the ring is closed implicitly

    Returns:
        Area in square meters on the WGS84 ellipsoid (always non-negative)
    """
    ring = Polygon([(pos.longitude, pos.latitude) for pos in points])
    area, _perimeter = _GEOD.geometry_area_perimeter(ring)
    return abs(area)


def build_triangle_overlay(
    points: Sequence[Position],
    distances: Sequence[EdgeDistance],
    viewport_size: ViewportSize,
    region: ViewportRegion,
) -> TriangleOverlay:
    """
    Project the selected triangle onto the viewport and label its edges.

    Args:
        points: Exactly three positions in selection order
        distances: The three cycle distances for those points
        viewport_size: Width and height of the viewport in pixels
        region: Geographic region currently shown in the viewport

    Returns:
        TriangleOverlay in viewport pixel coordinates

    Raises:
        InvalidInputError: If there are not exactly three points and three distances
    """
    if len(points) != 3:
        raise InvalidInputError(f"Overlay needs exactly 3 points, got {len(points)}")
    if len(distances) != 3:
        raise InvalidInputError(
            f"Overlay needs exactly 3 edge distances, got {len(distances)}"
        )

    vertices = [geo_to_screen(pos, viewport_size, region) for pos in points]

    labels = []
    for edge in distances:
        segment = LineString([vertices[edge.from_index], vertices[edge.to_index]])
        midpoint = segment.interpolate(0.5, normalized=True)
        labels.append(
            EdgeLabel(
                from_index=edge.from_index,
                to_index=edge.to_index,
                position=PixelPoint(x=midpoint.x, y=midpoint.y),
                text=format_distance(edge.meters),
            )
        )

    polygon = Polygon(vertices)
    area_m2 = geodesic_area(points)

    logger.debug(
        f"Triangle overlay: {polygon.area:.1f} px^2 on screen, {area_m2 / 1e6:.2f} km^2 on the ground"
    )
    return TriangleOverlay(
        vertices=vertices, labels=labels, polygon=polygon, area_m2=area_m2
    )
