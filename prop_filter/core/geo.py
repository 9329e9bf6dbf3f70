"""Geographic calculations - Pure functions.

This module provides distance calculations between a user location and
property locations. All functions are pure with no side effects.
"""

import math
from typing import Iterable

from prop_filter.core.property import Property


# One degree of arc is 60 nautical miles
NAUTICAL_MILES_PER_DEGREE = 60.0

# Conversion factor from nautical miles to statute miles
STATUTE_MILES_PER_NAUTICAL_MILE = 1.1515


def calculate_distance(
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
) -> float:
    """Calculate distance between two points using the spherical law of cosines.

    Pure function.

    The cosine term is clamped to [-1, 1] so rounding error for coincident
    or antipodal points cannot push acos out of its domain, and identical
    points return exactly 0.0. NaN inputs propagate to a NaN result.

    Args:
        lat1: Latitude of first point
        lon1: Longitude of first point
        lat2: Latitude of second point
        lon2: Longitude of second point

    Returns:
        Distance in statute miles
    """
    # sin^2 + cos^2 can round to just below 1.0
    if lat1 == lat2 and lon1 == lon2:
        return 0.0

    lat1_rad = math.radians(lat1)
    lat2_rad = math.radians(lat2)
    theta_rad = math.radians(lon1 - lon2)

    cos_angle = (
        math.sin(lat1_rad) * math.sin(lat2_rad)
        + math.cos(lat1_rad) * math.cos(lat2_rad) * math.cos(theta_rad)
    )
    # Comparisons are False for NaN, so NaN passes through unclamped
    if cos_angle > 1.0:
        cos_angle = 1.0
    elif cos_angle < -1.0:
        cos_angle = -1.0

    degrees = math.degrees(math.acos(cos_angle))

    return degrees * NAUTICAL_MILES_PER_DEGREE * STATUTE_MILES_PER_NAUTICAL_MILE


def distance_to_property(
    prop: Property,
    latitude: float,
    longitude: float,
) -> float:
    """Calculate distance from a point to a property.

    Pure function.

    Returns:
        Distance in statute miles
    """
    return calculate_distance(latitude, longitude, prop.latitude, prop.longitude)


def is_within_radius(
    prop: Property,
    latitude: float,
    longitude: float,
    max_miles: float,
) -> bool:
    """Check if a property is within a radius of a point.

    Pure function. The boundary is inclusive.

    Args:
        prop: Property to check
        latitude: Center point latitude
        longitude: Center point longitude
        max_miles: Radius in miles

    Returns:
        True if property is within radius
    """
    return distance_to_property(prop, latitude, longitude) <= max_miles


def filter_by_distance(
    properties: Iterable[Property],
    origin: tuple[float, float],
    max_miles: float,
) -> list[Property]:
    """Filter properties to those within max_miles of origin.

    Pure function.

    Args:
        properties: Properties to filter
        origin: (latitude, longitude) of the user
        max_miles: Maximum distance in miles (inclusive)

    Returns:
        Matching properties in original order
    """
    latitude, longitude = origin
    return [
        p for p in properties
        if is_within_radius(p, latitude, longitude, max_miles)
    ]
