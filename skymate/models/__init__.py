"""Roulette models package."""

from .airport import Airport, AirportSize
from .settings import AppSettings, SettingsUpdate
from .history import TravelHistoryItem, FlightPreview
from .session import SpinPhase, SpinState

__all__ = [
    "Airport",
    "AirportSize",
    "AppSettings",
    "SettingsUpdate",
    "TravelHistoryItem",
    "FlightPreview",
    "SpinPhase",
    "SpinState",
]
