from dataclasses import dataclass


@dataclass
class TrimapConfig:
    """Configuration for a trimap session and the demo CLI."""

    center_latitude: float = 43.7
    center_longitude: float = -79.4
    latitude_span: float = 2.0
    longitude_span: float = 2.0
    viewport_width: float = 300.0
    viewport_height: float = 300.0
    proximity_threshold: float = 500.0
    max_points: int = 3
    log_level: str = "WARNING"
