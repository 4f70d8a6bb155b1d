"""API schemas for request/response models."""

from .status_schemas import (
    AirportResponse,
    DestinationResponse,
    DestinationsResponse,
    StatusResponse,
    HistoryResponse,
)
from .settings_schemas import SettingsUpdateRequest, SettingsResponse

__all__ = [
    "AirportResponse",
    "DestinationResponse",
    "DestinationsResponse",
    "StatusResponse",
    "HistoryResponse",
    "SettingsUpdateRequest",
    "SettingsResponse",
]
