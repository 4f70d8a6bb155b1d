"""Tests for geo module."""

import pytest
from skymate.geo import (
    calculate_distance,
    calculate_flight_duration,
    distance_between,
    flight_duration_minutes,
    km_to_miles,
    miles_to_km,
)
from skymate.airport_graph import load_default_graph


HND = (35.5494, 139.7798)
CTS = (42.7752, 141.6923)


def test_distance_hnd_to_cts():
    """Test haversine distance between Haneda and New Chitose."""
    distance = calculate_distance(*HND, *CTS)

    assert isinstance(distance, int)
    assert 505 <= distance <= 515


def test_distance_same_point_is_zero():
    """Test distance from a point to itself."""
    assert calculate_distance(*HND, *HND) == 0


def test_distance_one_degree_of_latitude():
    """Test one degree along a meridian is about 69 miles."""
    assert calculate_distance(0.0, 0.0, 1.0, 0.0) == 69


def test_distance_is_symmetric_for_all_airports():
    """Test distance(A, B) == distance(B, A) across the whole network."""
    airports = load_default_graph().all()

    for a in airports:
        for b in airports:
            assert distance_between(a, b) == distance_between(b, a)


def test_distance_symmetric_across_antimeridian():
    """Test symmetry for points on either side of the antimeridian."""
    assert calculate_distance(10.0, 179.5, -5.0, -179.5) == calculate_distance(-5.0, -179.5, 10.0, 179.5)


def test_miles_to_km():
    """Test miles to km conversion rounds to an integer."""
    assert miles_to_km(100) == 161
    assert miles_to_km(0) == 0
    assert miles_to_km(510) == 821


def test_km_to_miles():
    """Test km to miles conversion."""
    assert km_to_miles(50) == pytest.approx(31.06855)


def test_flight_duration_minutes():
    """Test flight time is cruise time plus 40 minutes overhead."""
    assert flight_duration_minutes(0) == 40
    assert flight_duration_minutes(460) == 100
    assert flight_duration_minutes(597) == round(597 / 460 * 60 + 40)


def test_flight_duration_format_hours_and_minutes():
    """Test flights of an hour or more format as hours and minutes."""
    assert calculate_flight_duration(597) == "1h 58m"
    assert calculate_flight_duration(460) == "1h 40m"


def test_flight_duration_format_minutes_only():
    """Test short flights format as minutes only."""
    assert calculate_flight_duration(100) == "53m"
    assert calculate_flight_duration(0) == "40m"


def test_flight_duration_exactly_one_hour():
    """Test a 60 minute flight shows zero minutes."""
    # 153 / 460 * 60 + 40 = 59.96
    assert calculate_flight_duration(153) == "1h 0m"


def test_hnd_to_cts_flight_time_matches_formula():
    """Test HND -> CTS flight time is consistent with the duration formula."""
    distance = calculate_distance(*HND, *CTS)
    minutes = round(distance / 460 * 60 + 40)

    assert calculate_flight_duration(distance) == f"{minutes // 60}h {minutes % 60}m"
