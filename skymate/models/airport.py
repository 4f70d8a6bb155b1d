"""Airport model."""

from enum import Enum
from typing import Tuple
from pydantic import BaseModel, Field


class AirportSize(str, Enum):
    """Size class used by the roulette's two-stage draw."""

    BIG = "BIG"  # hubs / major airports
    SMALL = "SMALL"  # regional and island airports


class Airport(BaseModel):
    """Represents an airport node and its outgoing routes."""

    iata: str
    name: str
    lat: float
    lng: float
    size: AirportSize
    connections: Tuple[str, ...] = Field(default_factory=tuple)  # IATA codes, directed

    @property
    def is_big(self) -> bool:
        """Whether this airport belongs to the BIG draw category."""
        return self.size == AirportSize.BIG

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "iata": "HND",
                "name": "Tokyo (Haneda)",
                "lat": 35.5494,
                "lng": 139.7798,
                "size": "BIG",
                "connections": ["CTS", "ITM", "FUK", "OKA"],
            }
        },
    }
