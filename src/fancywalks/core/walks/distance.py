"""
Distance from home to a walk's start point.
"""

import math

from pyproj import Geod

from fancywalks.models.walk import HomeLocation

WGS84 = Geod(ellps="WGS84")

METERS_TO_MILES = 0.0006213712


def geodesic_distance_m(home: HomeLocation, latitude: float, longitude: float) -> float:
    """
    Geodesic distance on the WGS84 ellipsoid in meters.

    Args:
        home: Point to measure from
        latitude: Target latitude in decimal degrees
        longitude: Target longitude in decimal degrees

    Returns:
        Distance in meters
    """
    # Geod.inv takes lon, lat order
    _, _, meters = WGS84.inv(home.longitude, home.latitude, longitude, latitude)
    return float(meters)


def meters_to_miles(meters: float) -> float:
    """Convert meters to statute miles."""
    return meters * METERS_TO_MILES


def round_to_tenth(value: float) -> float:
    """
    Round to the nearest 0.1, halves away from zero.

    Unlike ``round``, which gives 0.2 for 0.25.
    """
    return math.copysign(math.floor(abs(value) * 10 + 0.5), value) / 10


def distance_from_home_miles(home: HomeLocation, latitude: float, longitude: float) -> float:
    """
    Miles from home to a point, to the nearest tenth of a mile.

    Args:
        home: Point to measure from
        latitude: Target latitude in decimal degrees
        longitude: Target longitude in decimal degrees

    Returns:
        Distance in miles rounded to one decimal place
    """
    return round_to_tenth(meters_to_miles(geodesic_distance_m(home, latitude, longitude)))
