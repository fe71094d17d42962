#!/usr/bin/env python3
"""Ordered set of up to three selected map points."""

from typing import List, NamedTuple, Optional
from enum import Enum
import logging
import uuid

from .geometry import Position, haversine_distance, validate_position

logger = logging.getLogger(__name__)

DEFAULT_PROXIMITY_THRESHOLD = 500.0  # meters
MAX_POINTS = 3


class ToggleAction(Enum):
    """Outcome of a tap against the point set."""

    ADDED = "added"
    REMOVED = "removed"
    IGNORED = "ignored"

    def __str__(self) -> str:
        return self.value


class ToggleResult(NamedTuple):
    """What toggle_or_add did and at which index (None when ignored)."""

    action: ToggleAction
    index: Optional[int] = None


class SelectedPoint(NamedTuple):
    """A selected map point with a stable identifier assigned on insertion."""

    id: uuid.UUID
    coordinate: Position


class GeoPointSet:
    """
    Holds the selected points in insertion order.

    Insertion order is significant: it determines the triangle edges and
    the A -> B -> C -> A labelling.
    """

    def __init__(self, capacity: int = MAX_POINTS):
        """Initializes an empty point set.

        Args:
            capacity: Maximum number of points held at once.

        Raises:
            ValueError: If capacity is not between 1 and MAX_POINTS.
        """
        if not 1 <= capacity <= MAX_POINTS:
            raise ValueError(
                f"Capacity must be between 1 and {MAX_POINTS}, got {capacity}"
            )
        self.capacity = capacity
        self._points: List[SelectedPoint] = []

    def __len__(self) -> int:
        return len(self._points)

    def size(self) -> int:
        return len(self._points)

    def points_in_order(self) -> List[SelectedPoint]:
        """Return a copy of the selected points in insertion order."""
        return list(self._points)

    def coordinates(self) -> List[Position]:
        """Return the coordinates of the selected points in insertion order."""
        return [point.coordinate for point in self._points]

    def find_near(
        self,
        coordinate: Position,
        proximity_threshold: float = DEFAULT_PROXIMITY_THRESHOLD,
    ) -> Optional[int]:
        """
        Find the first point closer than the threshold to a coordinate.

        Args:
            coordinate: Position to test against
            proximity_threshold: Distance in meters; a point must be strictly
                                 closer than this to match

        Returns:
            Index of the first matching point in insertion order, or None
        """
        for index, point in enumerate(self._points):
            if haversine_distance(point.coordinate, coordinate) < proximity_threshold:
                return index
        return None

    def toggle_or_add(
        self,
        coordinate: Position,
        proximity_threshold: float = DEFAULT_PROXIMITY_THRESHOLD,
    ) -> ToggleResult:
        """
        Remove the point near a tapped coordinate, or add a new point.

        If an existing point lies within proximity_threshold of the
        coordinate, the first such point is removed. Otherwise a new point
        is appended while there is room; a tap on a full set that is not
        near any existing point leaves the set unchanged.

        Args:
            coordinate: Tapped position
            proximity_threshold: Distance in meters below which a tap
                                 selects an existing point

        Returns:
            ToggleResult describing the action taken

        Raises:
            OutOfRangeError: If the coordinate is not a valid position
        """
        validate_position(coordinate)

        index = self.find_near(coordinate, proximity_threshold)
        if index is not None:
            removed = self._points.pop(index)
            logger.debug(f"Removed point {index} ({removed.id}) near {coordinate}")
            return ToggleResult(ToggleAction.REMOVED, index)

        if len(self._points) < self.capacity:
            point = SelectedPoint(id=uuid.uuid4(), coordinate=coordinate)
            self._points.append(point)
            logger.debug(
                f"Added point {len(self._points) - 1} ({point.id}) at {coordinate}"
            )
            return ToggleResult(ToggleAction.ADDED, len(self._points) - 1)

        logger.debug(f"Ignored tap at {coordinate}: set already holds {self.capacity} points")
        return ToggleResult(ToggleAction.IGNORED)

    def clear(self) -> None:
        self._points.clear()
