"""Schemas for settings endpoints."""

from pydantic import BaseModel, Field
from typing import Any, Dict, Optional


class SettingsUpdateRequest(BaseModel):
    """Request model for a partial settings update."""

    model_config = {"extra": "forbid"}

    big_airport_ratio: Optional[float] = Field(None, description="Chance of drawing a big airport, 0 to 1")
    exclude_radius_km: Optional[float] = Field(None, description="Minimum distance for a candidate, in km")
    retry_mode: Optional[bool] = Field(None, description="Ask for confirmation before committing a spin")


class SettingsResponse(BaseModel):
    """Response model for current settings."""

    settings: Dict[str, Any]
    locked: bool
    exclude_radius_miles: float
    bounds: Dict[str, Dict[str, float]]
