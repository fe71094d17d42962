#!/usr/bin/env python3
"""
Triangle map demo driver.

Replays a sequence of viewport taps against a map region, then prints the
selected points, the labelled triangle edges and the overlay vertices the
map screen would draw.
"""

from typing import List, Optional, Tuple
import argparse
import logging
import sys

from . import __version__
from .config import TrimapConfig
from .geometry import PixelPoint, Position, ViewportRegion, ViewportSize
from .route import point_labels
from .session import MapSession

# Configure logging
logger = logging.getLogger("trimap")


def parse_pair(value: str) -> Tuple[float, float]:
    """
    Parse 'A,B' (or 'AxB') into a pair of floats.

    Raises:
        argparse.ArgumentTypeError: If the value is not two comma- or
                                    x-separated numbers
    """
    separator = "," if "," in value else "x"
    parts = value.split(separator)
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"Expected two numbers, got '{value}'")
    try:
        return float(parts[0]), float(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected two numbers, got '{value}'")


def create_argument_parser(
    config: Optional[TrimapConfig] = None,
) -> argparse.ArgumentParser:
    """
    Create and configure the command-line argument parser.

    Args:
        config: Source of default values (TrimapConfig() if None)

    Returns:
        Configured ArgumentParser instance
    """
    config = config or TrimapConfig()
    parser = argparse.ArgumentParser(
        description="Tap up to three points on a map and measure the triangle",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--tap",
        type=parse_pair,
        action="append",
        default=[],
        metavar="X,Y",
        help="Viewport pixel tapped; repeat to replay several taps in order",
    )
    parser.add_argument(
        "--center",
        type=parse_pair,
        default=(config.center_latitude, config.center_longitude),
        metavar="LAT,LON",
        help=f"Map center (default: {config.center_latitude},{config.center_longitude})",
    )
    parser.add_argument(
        "--span",
        type=parse_pair,
        default=(config.latitude_span, config.longitude_span),
        metavar="LAT,LON",
        help=f"Visible span in degrees (default: {config.latitude_span},{config.longitude_span})",
    )
    parser.add_argument(
        "--viewport",
        type=parse_pair,
        default=(config.viewport_width, config.viewport_height),
        metavar="WxH",
        help=f"Viewport size in pixels (default: {config.viewport_width:g}x{config.viewport_height:g})",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=config.proximity_threshold,
        help=f"Tap distance in meters that selects an existing point (default: {config.proximity_threshold:g})",
    )
    parser.add_argument(
        "--show-route",
        action="store_true",
        help="Request a route through the selected points",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=config.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help=f"Set logging level (default: {config.log_level})",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"trimap {__version__}",
    )
    return parser


def setup_logging(args: argparse.Namespace) -> None:
    """Setup logging configuration."""
    # Printed labels contain → and km²
    if hasattr(sys.stdout, "reconfigure") and sys.stdout.encoding != "utf-8":
        try:
            sys.stdout.reconfigure(encoding="utf-8")
            if hasattr(sys.stderr, "reconfigure") and sys.stderr.encoding != "utf-8":
                sys.stderr.reconfigure(encoding="utf-8")
            logger.debug("Reconfigured stdout and stderr to UTF-8 encoding.")
        except Exception as e:
            logger.debug(f"Could not reconfigure stdout/stderr to UTF-8: {e}")
    level = getattr(logging, args.log_level)

    # Create formatter
    formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s", datefmt="%H:%M:%S"
    )

    # Create console handler
    console_handler = logging.StreamHandler()
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)

    # Configure the root logger so all modules inherit the configuration
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.addHandler(console_handler)


def build_session(args: argparse.Namespace) -> MapSession:
    """
    Create a MapSession from parsed arguments.

    Raises:
        ValueError: If the region, viewport or threshold is invalid
    """
    region = ViewportRegion(
        center=Position(*args.center),
        latitude_span=args.span[0],
        longitude_span=args.span[1],
    )
    return MapSession(
        region, ViewportSize(*args.viewport), proximity_threshold=args.threshold
    )


def print_session(session: MapSession) -> None:
    """Print the selected points, edge labels and overlay vertices."""
    points = session.points()
    if not points:
        print("No points selected")
        return

    letters = point_labels(len(points)).split(" → ")
    print(f"Selected points ({len(points)}):")
    for letter, point in zip(letters, points):
        print(
            f"  {letter}: {point.coordinate.latitude:.5f}, {point.coordinate.longitude:.5f}"
        )

    overlay = session.overlay()
    if overlay is None:
        return

    print(f"Triangle {point_labels(len(points))}:")
    for label in overlay.labels:
        print(
            f"  {letters[label.from_index]}-{letters[label.to_index]}: {label.text} "
            f"at ({label.position.x:.1f}, {label.position.y:.1f})"
        )
    vertices = ", ".join(f"({v.x:.1f}, {v.y:.1f})" for v in overlay.vertices)
    print(f"  vertices: {vertices}")
    print(f"  area: {overlay.area_m2 / 1e6:.2f} km²")


def main(argv: Optional[List[str]] = None) -> None:
    """
    Parses command-line arguments, replays the taps and prints the result.
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    setup_logging(args)

    try:
        session = build_session(args)
    except ValueError as e:
        logger.error(f"Invalid map settings: {e}")
        sys.exit(1)

    for x, y in args.tap:
        try:
            result = session.handle_tap(PixelPoint(x, y))
        except ValueError as e:
            logger.error(f"Cannot process tap at ({x}, {y}): {e}")
            sys.exit(1)
        logger.info(f"Tap ({x:g}, {y:g}): {result.action}")

    print_session(session)

    if args.show_route:
        session.show_route()


if __name__ == "__main__":
    main()
