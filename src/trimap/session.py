#!/usr/bin/env python3
"""
Interactive session state for the triangle map screen.

MapSession is the single mutable aggregate a UI collaborator talks to:
it turns taps into selections, keeps the derived edge distances in step
with the selection, and notifies subscribers after every change.
"""

from typing import Callable, List, Optional
import logging

from .config import TrimapConfig
from .distance import EdgeDistance, compute_cycle_distances, format_distance
from .geometry import (
    PixelPoint,
    Position,
    ViewportRegion,
    ViewportSize,
    validate_region,
    validate_viewport_size,
)
from .overlay import TriangleOverlay, build_triangle_overlay
from .point_set import (
    DEFAULT_PROXIMITY_THRESHOLD,
    MAX_POINTS,
    GeoPointSet,
    SelectedPoint,
    ToggleAction,
    ToggleResult,
)
from .projection import screen_to_geo
from .route import generate_route

logger = logging.getLogger(__name__)

Listener = Callable[["MapSession"], None]


class MapSession:
    """Selection state for one map screen."""

    def __init__(
        self,
        region: ViewportRegion,
        viewport_size: ViewportSize,
        proximity_threshold: float = DEFAULT_PROXIMITY_THRESHOLD,
        max_points: int = MAX_POINTS,
    ):
        """Initializes a MapSession.

        Args:
            region: Geographic region initially shown in the viewport.
            viewport_size: Viewport dimensions in pixels.
            proximity_threshold: Distance in meters below which a tap
                selects an existing point instead of adding one.
            max_points: Maximum number of selected points.

        Raises:
            ValueError: If the region, viewport size or threshold is invalid.
        """
        if proximity_threshold < 0:
            raise ValueError(
                f"Proximity threshold must be non-negative, got {proximity_threshold}"
            )
        self.region = validate_region(region)
        self.viewport_size = validate_viewport_size(viewport_size)
        self.proximity_threshold = proximity_threshold
        self.point_set = GeoPointSet(capacity=max_points)
        self._distances: List[EdgeDistance] = []
        self._listeners: List[Listener] = []

    @classmethod
    def from_config(cls, config: TrimapConfig) -> "MapSession":
        """Create a session from a TrimapConfig."""
        region = ViewportRegion(
            center=Position(config.center_latitude, config.center_longitude),
            latitude_span=config.latitude_span,
            longitude_span=config.longitude_span,
        )
        size = ViewportSize(config.viewport_width, config.viewport_height)
        return cls(
            region,
            size,
            proximity_threshold=config.proximity_threshold,
            max_points=config.max_points,
        )

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a callback invoked with the session after each change.

        Returns:
            A function that removes the listener again
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)

    def _update_distances(self) -> None:
        # Partial selections never keep stale distances
        if len(self.point_set) == 3:
            self._distances = compute_cycle_distances(self.point_set.coordinates())
        else:
            self._distances = []

    def handle_tap(self, pixel: PixelPoint) -> ToggleResult:
        """
        Process a tap on the map.

        Args:
            pixel: Tap location in viewport pixels

        Returns:
            ToggleResult from the underlying point set

        Raises:
            OutOfRangeError: If the tap maps outside valid coordinates
        """
        coordinate = screen_to_geo(pixel, self.viewport_size, self.region)
        result = self.point_set.toggle_or_add(coordinate, self.proximity_threshold)
        logger.debug(
            f"Tap at ({pixel.x:.1f}, {pixel.y:.1f}): {result.action} "
            f"(now {len(self.point_set)} points)"
        )

        if result.action != ToggleAction.IGNORED:
            self._update_distances()
            self._notify()
        return result

    def set_region(self, region: ViewportRegion) -> None:
        """Pan or zoom the map; selections are kept."""
        self.region = validate_region(region)
        self._notify()

    def set_viewport_size(self, viewport_size: ViewportSize) -> None:
        self.viewport_size = validate_viewport_size(viewport_size)
        self._notify()

    def clear(self) -> None:
        self.point_set.clear()
        self._distances = []
        self._notify()

    def points(self) -> List[SelectedPoint]:
        return self.point_set.points_in_order()

    def distances(self) -> List[EdgeDistance]:
        return list(self._distances)

    def distance_labels(self) -> List[str]:
        """Formatted edge lengths, empty unless a full triangle is selected."""
        return [format_distance(edge.meters) for edge in self._distances]

    def overlay(self) -> Optional[TriangleOverlay]:
        """
        Build the triangle overlay for the current viewport.

        Returns:
            TriangleOverlay, or None while fewer than three points are selected
        """
        if len(self.point_set) != 3:
            return None
        return build_triangle_overlay(
            self.point_set.coordinates(),
            self._distances,
            self.viewport_size,
            self.region,
        )

    def show_route(self) -> None:
        generate_route(self.point_set.coordinates())
