"""Settings models."""

from typing import Optional
from pydantic import BaseModel, Field


class AppSettings(BaseModel):
    """Roulette settings the user can tune between spins."""

    big_airport_ratio: float = Field(0.6, ge=0.0, le=1.0)
    exclude_radius_km: float = Field(50.0, ge=0.0)
    retry_mode: bool = False

    model_config = {"frozen": True}


class SettingsUpdate(BaseModel):
    """Partial settings patch. Unset fields keep their current value."""

    big_airport_ratio: Optional[float] = Field(None, ge=0.0, le=1.0)
    exclude_radius_km: Optional[float] = Field(None, ge=0.0)
    retry_mode: Optional[bool] = None

    model_config = {"extra": "forbid"}

    def apply_to(self, settings: AppSettings) -> AppSettings:
        """
        Return a copy of settings with this patch applied.

        Args:
            settings: Settings to patch

        Returns:
            New AppSettings instance
        """
        changes = self.model_dump(exclude_none=True)
        return settings.model_copy(update=changes)
