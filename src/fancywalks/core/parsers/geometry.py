"""
Placemark geometry.

A walk only needs its start point, so only <Point> is turned into a shapely
geometry. Other KML geometry kinds are recognised and recorded by type.
"""

from enum import Enum
from typing import Tuple

from shapely.geometry import Point


class GeometryType(str, Enum):
    """KML geometry elements a placemark may carry."""

    POINT = "Point"
    LINE_STRING = "LineString"
    LINEAR_RING = "LinearRing"
    POLYGON = "Polygon"
    MULTI_GEOMETRY = "MultiGeometry"


def parse_point_coordinates(text: str) -> Tuple[float, float]:
    """
    Read the single ``lon,lat[,alt]`` tuple of a <Point>.

    A coordinate outside -180..180 longitude or -90..90 latitude counts as
    malformed, the same as non-numeric text, so the placemark ends up with
    no point at all.

    Args:
        text: Content of the <coordinates> element

    Returns:
        (longitude, latitude); altitude is dropped

    Raises:
        ValueError: If the text is empty, holds more than one tuple, or a
            value is not a number in range

    Example:
        >>> parse_point_coordinates(" -0.243409,51.097848,0 ")
        (-0.243409, 51.097848)
    """
    tuples = text.split()
    if not tuples:
        raise ValueError("Empty coordinate string")
    if len(tuples) > 1:
        raise ValueError(f"Point must have exactly 1 coordinate, got {len(tuples)}")

    values = tuples[0].split(",")
    if len(values) < 2:
        raise ValueError(f"Invalid coordinate {tuples[0]!r}: need at least lon,lat")

    try:
        longitude, latitude = float(values[0]), float(values[1])
    except ValueError as e:
        raise ValueError(f"Failed to parse coordinate {tuples[0]!r}") from e

    if abs(longitude) > 180:
        raise ValueError(f"Longitude out of range: {longitude}")
    if abs(latitude) > 90:
        raise ValueError(f"Latitude out of range: {latitude}")

    return longitude, latitude


def point_from_kml(text: str) -> Point:
    """Build a shapely Point (x=longitude, y=latitude) from <Point> coordinates."""
    return Point(parse_point_coordinates(text))
