#!/usr/bin/env python3
"""
Trimap - measure the triangle between points tapped on a map.

This package provides the geometry behind a single-screen map demo:
converting taps to coordinates, keeping up to three selected points,
measuring the great-circle edges between them and projecting the
triangle back onto the screen.
"""
import importlib.metadata

__version__ = importlib.metadata.version("trimap")

# Import main classes for public API
from .errors import InvalidInputError, OutOfRangeError
from .geometry import Position, PixelPoint, ViewportRegion, ViewportSize
from .point_set import GeoPointSet, SelectedPoint, ToggleAction, ToggleResult
from .distance import EdgeDistance, compute_cycle_distances
from .projection import geo_to_screen, screen_to_geo
from .session import MapSession

__all__ = [
    "InvalidInputError",
    "OutOfRangeError",
    "Position",
    "PixelPoint",
    "ViewportRegion",
    "ViewportSize",
    "GeoPointSet",
    "SelectedPoint",
    "ToggleAction",
    "ToggleResult",
    "EdgeDistance",
    "compute_cycle_distances",
    "geo_to_screen",
    "screen_to_geo",
    "MapSession",
]
