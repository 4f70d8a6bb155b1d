"""Configuration module for constants, game rules, and settings."""

from typing import List, Optional
from pydantic_settings import BaseSettings

from .models.settings import AppSettings


# Game constants
STARTING_AIRPORT = "HND"

# Geo constants
EARTH_RADIUS_MILES = 3958.8
KM_PER_MILE = 1.60934
MILES_PER_KM = 0.621371

# Flight duration model: fixed taxi/takeoff/landing overhead plus cruise
CRUISE_SPEED_MPH = 460
GROUND_OVERHEAD_MINUTES = 40

# Mileage accrual (earned miles per flown mile). Fixed policy.
ACCRUAL_RATE = 1.0


# Default settings restored by a reset
DEFAULT_BIG_AIRPORT_RATIO = 0.6
DEFAULT_EXCLUDE_RADIUS_KM = 50
DEFAULT_RETRY_MODE = False

# Slider hints for the presentation layer
BIG_AIRPORT_RATIO_STEP = 0.1
EXCLUDE_RADIUS_MAX_KM = 500
EXCLUDE_RADIUS_STEP_KM = 50

SETTINGS_BOUNDS = {
    "big_airport_ratio": {"min": 0.0, "max": 1.0, "step": BIG_AIRPORT_RATIO_STEP},
    "exclude_radius_km": {"min": 0, "max": EXCLUDE_RADIUS_MAX_KM, "step": EXCLUDE_RADIUS_STEP_KM},
}


class Config(BaseSettings):
    """Application configuration with environment variable support."""

    # Session
    STARTING_AIRPORT: str = STARTING_AIRPORT
    DEFAULT_BIG_AIRPORT_RATIO: float = DEFAULT_BIG_AIRPORT_RATIO
    DEFAULT_EXCLUDE_RADIUS_KM: float = DEFAULT_EXCLUDE_RADIUS_KM
    DEFAULT_RETRY_MODE: bool = DEFAULT_RETRY_MODE

    # Seed for the roulette random source (None = system entropy)
    RANDOM_SEED: Optional[int] = None

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = "skymate.log"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    CORS_ORIGINS: List[str] = ["*"]

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }

    def default_settings(self) -> AppSettings:
        """
        Build the settings a fresh or reset session starts with.

        Returns:
            AppSettings populated from the configured defaults
        """
        return AppSettings(
            big_airport_ratio=self.DEFAULT_BIG_AIRPORT_RATIO,
            exclude_radius_km=self.DEFAULT_EXCLUDE_RADIUS_KM,
            retry_mode=self.DEFAULT_RETRY_MODE,
        )
