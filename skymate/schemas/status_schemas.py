"""Schemas for status, history, and airport endpoints."""

from pydantic import BaseModel, Field
from typing import Dict, List, Any, Optional


class AirportResponse(BaseModel):
    """Response model for one airport."""

    iata: str
    name: str
    lat: float
    lng: float
    size: str
    connections: List[str]


class DestinationResponse(AirportResponse):
    """Airport plus the hop from the current location."""

    distance: int
    distance_km: int
    flight_time: str


class DestinationsResponse(BaseModel):
    """Response model for the current candidate set."""

    origin: str
    destinations: List[DestinationResponse]


class StatusResponse(BaseModel):
    """Response model for session status."""

    phase: str
    current_airport: AirportResponse
    is_spinning: bool
    target_airport: Optional[AirportResponse] = None
    pending_airport: Optional[AirportResponse] = None
    pending_preview: Optional[Dict[str, Any]] = None
    settings: Dict[str, Any]
    settings_locked: bool
    total_miles: int
    total_miles_formatted: Optional[str] = Field(None, description="Total miles with thousand separators")
    total_earned_miles: int
    flight_count: int
    valid_destinations: List[str]
    dead_end: bool


class HistoryResponse(BaseModel):
    """Response model for travel history."""

    flights: List[Dict[str, Any]]
    total_flights: int
    total_miles: int
    total_earned_miles: int
