"""Tests for airport graph and data loader modules."""

import pytest
from pydantic import ValidationError
from skymate.airport_graph import AirportGraph, load_default_graph
from skymate.data_loader import load_airports
from skymate.models.airport import Airport, AirportSize


@pytest.fixture
def sample_airports():
    """Create sample airports for testing."""
    return [
        Airport(iata="AAA", name="Alpha", lat=35.0, lng=139.0, size=AirportSize.BIG, connections=("BBB", "ZZZ")),
        Airport(iata="BBB", name="Bravo", lat=36.0, lng=139.0, size=AirportSize.SMALL, connections=("AAA",)),
    ]


def test_graph_get(sample_airports):
    """Test looking up airports by IATA code."""
    graph = AirportGraph.from_airports(sample_airports)

    assert graph.get("AAA").name == "Alpha"
    assert graph.get("ZZZ") is None
    assert "BBB" in graph
    assert "ZZZ" not in graph
    assert len(graph) == 2


def test_graph_neighbors_are_raw_connections(sample_airports):
    """Test neighbors returns connection codes unresolved."""
    graph = AirportGraph.from_airports(sample_airports)

    assert graph.neighbors("AAA") == ("BBB", "ZZZ")
    assert graph.neighbors("ZZZ") == ()


def test_graph_all_keeps_order(sample_airports):
    """Test all() returns airports in insertion order."""
    graph = AirportGraph.from_airports(sample_airports)

    assert [a.iata for a in graph.all()] == ["AAA", "BBB"]
    assert graph.codes() == ["AAA", "BBB"]


def test_graph_is_read_only(sample_airports):
    """Test the airport mapping cannot be mutated."""
    graph = AirportGraph.from_airports(sample_airports)

    with pytest.raises(TypeError):
        graph.airports["CCC"] = sample_airports[0]


def test_graph_duplicate_keeps_last(sample_airports):
    """Test a repeated IATA code replaces the earlier record."""
    replacement = Airport(iata="AAA", name="Alpha 2", lat=35.0, lng=139.0, size=AirportSize.SMALL)
    graph = AirportGraph.from_airports(sample_airports + [replacement])

    assert len(graph) == 2
    assert graph.get("AAA").name == "Alpha 2"


def test_airport_is_immutable(sample_airports):
    """Test airport records are frozen."""
    with pytest.raises(ValidationError):
        sample_airports[0].name = "Changed"


def test_load_airports_from_rows():
    """Test building airports from table rows."""
    airports = load_airports([
        ("aaa", "Alpha", 35.0, 139.0, "BIG", ["bbb"]),
        ("BBB", "Bravo", 36.0, 139.0, "SMALL", []),
    ])

    assert list(airports) == ["AAA", "BBB"]
    assert airports["AAA"].connections == ("BBB",)
    assert airports["AAA"].size == AirportSize.BIG


def test_load_airports_skips_invalid_rows():
    """Test invalid rows are skipped instead of failing the load."""
    airports = load_airports([
        ("AAA", "Alpha", 35.0, 139.0, "BIG", []),
        ("BAD", "Bad size", 35.0, 139.0, "HUGE", []),
        ("SHORT", "Missing fields"),
    ])

    assert list(airports) == ["AAA"]


def test_load_airports_empty_table():
    """Test loading an empty table."""
    assert load_airports([]) == {}


def test_default_graph_contents():
    """Test the compiled-in network."""
    graph = load_default_graph()

    assert len(graph) == 57
    assert graph.get("HND").size == AirportSize.BIG
    assert graph.get("HND").lat == pytest.approx(35.5494)
    assert len(graph.neighbors("HND")) == 36
    assert graph.get("TRA").connections == ("MMY",)


def test_default_graph_is_shared():
    """Test the default graph is built once per process."""
    assert load_default_graph() is load_default_graph()


def test_default_graph_connections_resolve():
    """Test every route in the compiled-in network points at a known airport."""
    graph = load_default_graph()

    for airport in graph:
        for code in airport.connections:
            assert code in graph, f"{airport.iata} -> {code}"


def test_default_graph_big_airports():
    """Test the hub classification of the compiled-in network."""
    graph = load_default_graph()
    big = {a.iata for a in graph if a.size == AirportSize.BIG}

    assert big == {"HND", "NRT", "ITM", "KIX", "NGO", "CTS", "FUK", "OKA", "KOJ"}
