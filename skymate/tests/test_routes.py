"""Tests for API routes."""

import random

import pytest
from fastapi.testclient import TestClient
from skymate.airport_graph import AirportGraph
from skymate.config import Config
from skymate.models.airport import Airport, AirportSize
from skymate.services import singleton
from skymate.services.game_service import GameService
from skymate.main import app


@pytest.fixture
def client(monkeypatch):
    """Create a test client backed by a fresh service over a small network."""
    graph = AirportGraph.from_airports([
        Airport(iata="AAA", name="Alpha", lat=35.0, lng=139.0, size=AirportSize.BIG,
                connections=("BBB", "CCC")),
        Airport(iata="BBB", name="Bravo", lat=35.0, lng=140.0, size=AirportSize.BIG, connections=("AAA",)),
        Airport(iata="CCC", name="Charlie", lat=36.0, lng=139.0, size=AirportSize.SMALL, connections=("AAA",)),
    ])
    config = Config(STARTING_AIRPORT="AAA", LOG_FILE=None)
    service = GameService(config=config, graph=graph, rng=random.Random(11))
    monkeypatch.setattr(singleton, "_game_service", service)
    return TestClient(app)


def test_root(client):
    """Test root endpoint."""
    response = client.get("/")

    assert response.status_code == 200
    assert response.json()["status"] == "running"


def test_status(client):
    """Test status endpoint."""
    response = client.get("/api/status")

    assert response.status_code == 200
    data = response.json()
    assert data["phase"] == "IDLE"
    assert data["current_airport"]["iata"] == "AAA"
    assert data["valid_destinations"] == ["BBB", "CCC"]


def test_spin_complete_history(client):
    """Test spinning and completing appends history."""
    response = client.post("/api/spin")
    assert response.status_code == 200
    target = response.json()["target_airport"]["iata"]

    response = client.post("/api/spin/complete")
    assert response.status_code == 200
    assert response.json()["current_airport"]["iata"] == target

    history = client.get("/api/history").json()
    assert history["total_flights"] == 1
    assert history["flights"][0]["from"] == "AAA"
    assert history["flights"][0]["to"] == target


def test_double_spin_conflict(client):
    """Test a second spin returns 409."""
    client.post("/api/spin")

    response = client.post("/api/spin")

    assert response.status_code == 409


def test_confirm_without_pending_conflict(client):
    """Test confirm without a pending result returns 409."""
    assert client.post("/api/confirm").status_code == 409
    assert client.post("/api/retry").status_code == 409
    assert client.post("/api/spin/complete").status_code == 409


def test_dead_end_conflict(client):
    """Test spinning from a dead end returns 409 with a dead end message."""
    client.patch("/api/settings", json={"exclude_radius_km": 500})

    response = client.post("/api/spin")

    assert response.status_code == 409
    assert "Dead end" in response.json()["detail"]


def test_retry_mode_flow(client):
    """Test the pending confirmation flow over HTTP."""
    assert client.patch("/api/settings", json={"retry_mode": True}).status_code == 200
    client.post("/api/spin")

    data = client.post("/api/spin/complete").json()
    assert data["phase"] == "PENDING_CONFIRMATION"
    assert data["pending_airport"] is not None

    assert client.patch("/api/settings", json={"retry_mode": False}).status_code == 409

    data = client.post("/api/confirm").json()
    assert data["phase"] == "IDLE"
    assert data["flight_count"] == 1


def test_settings_roundtrip(client):
    """Test reading and updating settings."""
    data = client.get("/api/settings").json()
    assert data["settings"]["big_airport_ratio"] == 0.6

    response = client.patch("/api/settings", json={"big_airport_ratio": 0.2})

    assert response.status_code == 200
    assert response.json()["settings"]["big_airport_ratio"] == 0.2
    assert response.json()["settings"]["exclude_radius_km"] == 50


def test_settings_invalid_value(client):
    """Test an out of range setting returns 422."""
    response = client.patch("/api/settings", json={"big_airport_ratio": 3})

    assert response.status_code == 422


def test_settings_unknown_field_rejected(client):
    """Test a patch naming a field that is not a setting returns 422 and changes nothing."""
    response = client.patch("/api/settings", json={"accrual_rate": 2.0})

    assert response.status_code == 422
    assert client.get("/api/settings").json()["settings"]["big_airport_ratio"] == 0.6


def test_airports(client):
    """Test airport listing and lookup."""
    assert len(client.get("/api/airports").json()) == 3
    assert client.get("/api/airports/BBB").json()["name"] == "Bravo"
    assert client.get("/api/airports/XYZ").status_code == 404


def test_destinations(client):
    """Test destinations endpoint."""
    data = client.get("/api/destinations").json()

    assert data["origin"] == "AAA"
    assert [d["iata"] for d in data["destinations"]] == ["BBB", "CCC"]


def test_reset(client):
    """Test reset endpoint."""
    client.post("/api/spin")
    client.post("/api/spin/complete")

    data = client.post("/api/reset").json()

    assert data["current_airport"]["iata"] == "AAA"
    assert data["flight_count"] == 0
