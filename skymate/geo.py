"""Great-circle distance, unit conversion, and flight-time estimates."""

import math

from .config import (
    EARTH_RADIUS_MILES,
    KM_PER_MILE,
    MILES_PER_KM,
    CRUISE_SPEED_MPH,
    GROUND_OVERHEAD_MINUTES,
)
from .models.airport import Airport


def calculate_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> int:
    """
    Haversine distance between two points.

    Args:
        lat1: Latitude of the first point in degrees
        lon1: Longitude of the first point in degrees
        lat2: Latitude of the second point in degrees
        lon2: Longitude of the second point in degrees

    Returns:
        Distance in miles, rounded to the nearest integer
    """
    # abs() keeps the result bit-identical when the points are swapped
    d_lat = math.radians(abs(lat2 - lat1))
    d_lon = math.radians(abs(lon2 - lon1))
    a = (
        math.sin(d_lat / 2) ** 2
        + math.cos(math.radians(lat1)) * math.cos(math.radians(lat2)) * math.sin(d_lon / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return round(EARTH_RADIUS_MILES * c)


def distance_between(origin: Airport, destination: Airport) -> int:
    """Distance in miles between two airports."""
    return calculate_distance(origin.lat, origin.lng, destination.lat, destination.lng)


def miles_to_km(miles: float) -> int:
    return round(miles * KM_PER_MILE)


def km_to_miles(km: float) -> float:
    return km * MILES_PER_KM


def flight_duration_minutes(miles: float) -> int:
    """
    Estimated block time for a flight.

    Cruise at CRUISE_SPEED_MPH plus a fixed GROUND_OVERHEAD_MINUTES for taxi,
    climb, and descent.

    Args:
        miles: Flight distance in miles

    Returns:
        Total minutes, rounded
    """
    return round(miles / CRUISE_SPEED_MPH * 60 + GROUND_OVERHEAD_MINUTES)


def calculate_flight_duration(miles: float) -> str:
    """
    Format the estimated flight time.

    Args:
        miles: Flight distance in miles

    Returns:
        "{h}h {m}m" for an hour or more, otherwise "{m}m"

    Examples:
        >>> calculate_flight_duration(597)
        '1h 58m'
        >>> calculate_flight_duration(100)
        '53m'
    """
    hours, minutes = divmod(flight_duration_minutes(miles), 60)
    if hours > 0:
        return f"{hours}h {minutes}m"
    return f"{minutes}m"
