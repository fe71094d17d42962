import logging
from unittest.mock import MagicMock, patch

import pytest
from trimap.config import TrimapConfig
from trimap.errors import OutOfRangeError
from trimap.geometry import PixelPoint, Position, ViewportRegion, ViewportSize
from trimap.point_set import ToggleAction, ToggleResult
from trimap.session import MapSession

# Pixels of (43.70, -79.40), (44.00, -79.40) and (43.70, -79.00)
# on a 300x300 viewport showing 2x2 degrees around Toronto
A = PixelPoint(150, 150)
B = PixelPoint(150, 105)
C = PixelPoint(210, 150)
D = PixelPoint(60, 240)


@pytest.fixture
def session():
    return MapSession.from_config(TrimapConfig())


@pytest.fixture
def triangle_session(session):
    for pixel in (A, B, C):
        session.handle_tap(pixel)
    return session


def test_from_config_defaults(session):
    assert session.region == ViewportRegion(Position(43.7, -79.4), 2.0, 2.0)
    assert session.viewport_size == ViewportSize(300.0, 300.0)
    assert session.proximity_threshold == 500.0
    assert session.points() == []


def test_taps_add_points_at_tapped_location(session):
    assert session.handle_tap(A) == ToggleResult(ToggleAction.ADDED, 0)
    assert session.handle_tap(PixelPoint(225, 75)) == ToggleResult(ToggleAction.ADDED, 1)
    second = session.points()[1].coordinate
    assert second.latitude == pytest.approx(44.20)
    assert second.longitude == pytest.approx(-78.90)


def test_no_distances_before_third_point(session):
    session.handle_tap(A)
    session.handle_tap(B)
    assert session.distances() == []
    assert session.distance_labels() == []
    assert session.overlay() is None


def test_third_point_computes_distances(triangle_session):
    distances = triangle_session.distances()
    assert len(distances) == 3
    assert distances[0].meters == pytest.approx(33_358, abs=5)
    assert triangle_session.distance_labels()[0] == "33.36 km"


def test_removing_point_clears_distances(triangle_session):
    result = triangle_session.handle_tap(B)
    assert result == ToggleResult(ToggleAction.REMOVED, 1)
    assert triangle_session.distances() == []
    assert triangle_session.overlay() is None


def test_fourth_distant_tap_is_ignored(triangle_session):
    before = triangle_session.points()
    distances = triangle_session.distances()
    assert triangle_session.handle_tap(D).action == ToggleAction.IGNORED
    assert triangle_session.points() == before
    assert triangle_session.distances() == distances


def test_overlay_for_full_triangle(triangle_session):
    overlay = triangle_session.overlay()
    assert overlay is not None
    assert overlay.vertices[1].y == pytest.approx(105)


def test_overlay_follows_region_changes(triangle_session):
    triangle_session.set_region(ViewportRegion(Position(43.70, -79.40), 4.0, 4.0))
    overlay = triangle_session.overlay()
    # Zooming out halves the on-screen offsets from the center
    assert overlay.vertices[1].y == pytest.approx(127.5)
    assert overlay.vertices[2].x == pytest.approx(180)
    assert len(triangle_session.points()) == 3


def test_listeners_are_notified(session):
    listener = MagicMock()
    session.subscribe(listener)
    session.handle_tap(A)
    listener.assert_called_once_with(session)


def test_listeners_not_notified_for_ignored_taps(triangle_session):
    listener = MagicMock()
    triangle_session.subscribe(listener)
    triangle_session.handle_tap(D)
    listener.assert_not_called()


def test_unsubscribe(session):
    listener = MagicMock()
    unsubscribe = session.subscribe(listener)
    unsubscribe()
    unsubscribe()
    session.handle_tap(A)
    listener.assert_not_called()


def test_clear(triangle_session):
    listener = MagicMock()
    triangle_session.subscribe(listener)
    triangle_session.clear()
    assert triangle_session.points() == []
    assert triangle_session.distances() == []
    listener.assert_called_once()


def test_set_viewport_size_keeps_selection(triangle_session):
    triangle_session.set_viewport_size(ViewportSize(600, 600))
    assert len(triangle_session.points()) == 3
    assert triangle_session.overlay().vertices[0].x == pytest.approx(300)


def test_invalid_settings_are_rejected(session):
    with pytest.raises(ValueError):
        session.set_viewport_size(ViewportSize(-1, 300))
    with pytest.raises(ValueError):
        MapSession(session.region, session.viewport_size, proximity_threshold=-5)


def test_tap_off_the_globe_raises():
    session = MapSession(
        ViewportRegion(Position(89.5, 0.0), 2.0, 2.0), ViewportSize(300, 300)
    )
    with pytest.raises(OutOfRangeError):
        session.handle_tap(PixelPoint(150, 0))
    assert session.points() == []


def test_show_route_passes_coordinates(triangle_session):
    with patch("trimap.session.generate_route") as mock_generate_route:
        triangle_session.show_route()
    mock_generate_route.assert_called_once_with(
        [point.coordinate for point in triangle_session.points()]
    )


def test_show_route_does_not_change_state(triangle_session, caplog):
    before = triangle_session.points()
    with caplog.at_level(logging.INFO, logger="trimap.route"):
        triangle_session.show_route()
    assert "A → B → C → A" in caplog.text
    assert triangle_session.points() == before


def test_tap_across_antimeridian_adds_point():
    session = MapSession(
        ViewportRegion(Position(-17.0, 179.0), 4.0, 4.0), ViewportSize(300, 300)
    )
    assert session.handle_tap(PixelPoint(290, 150)) == ToggleResult(ToggleAction.ADDED, 0)
    assert session.points()[0].coordinate.longitude == pytest.approx(-179.13333, abs=1e-5)


def test_triangle_across_antimeridian():
    session = MapSession(
        ViewportRegion(Position(-17.0, 179.0), 4.0, 4.0), ViewportSize(300, 300)
    )
    for pixel in (PixelPoint(75, 150), PixelPoint(225, 150), PixelPoint(150, 75)):
        session.handle_tap(pixel)
    overlay = session.overlay()
    # 2 degrees of longitude at 17°S is roughly 213 km
    assert session.distances()[0].meters == pytest.approx(212_700, rel=0.01)
    assert overlay.vertices[1].x == pytest.approx(225)
