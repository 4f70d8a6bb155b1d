"""Routes for status, history, and airport endpoints."""

import logging
from typing import List, Optional
from fastapi import APIRouter, HTTPException
from ..schemas.status_schemas import (
    AirportResponse,
    DestinationsResponse,
    HistoryResponse,
    StatusResponse,
)
from ..services.singleton import get_game_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["status"])


@router.get("/status", response_model=StatusResponse)
async def get_status():
    """
    Get current session status.

    Returns:
        Current airport, spin phase, totals, and valid destinations
    """
    game_service = get_game_service()
    return StatusResponse(**game_service.get_status())


@router.get("/history", response_model=HistoryResponse)
async def get_history(limit: Optional[int] = None):
    """
    Get travel history.

    Args:
        limit: Number of most recent flights to return (omit or 0 for all)

    Returns:
        Flights oldest first, with totals
    """
    game_service = get_game_service()
    history_data = game_service.get_history(limit=limit if limit and limit > 0 else None)
    return HistoryResponse(**history_data)


@router.get("/airports", response_model=List[AirportResponse])
async def get_airports():
    """List every airport in the network."""
    return get_game_service().get_airports()


@router.get("/airports/{iata}", response_model=AirportResponse)
async def get_airport(iata: str):
    """Get one airport by IATA code."""
    airport = get_game_service().get_airport(iata)
    if airport is None:
        raise HTTPException(status_code=404, detail=f"Unknown airport {iata}")
    return airport


@router.get("/destinations", response_model=DestinationsResponse)
async def get_destinations():
    """
    Get the destinations the next spin can land on.

    Returns:
        Candidate airports with distance and flight time from the current airport
    """
    return DestinationsResponse(**get_game_service().get_destinations())
