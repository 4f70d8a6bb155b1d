"""Travel history models."""

from pydantic import BaseModel, Field


class TravelHistoryItem(BaseModel):
    """A completed flight. Created only by a commit and never modified."""

    from_iata: str = Field(..., alias="from")
    to_iata: str = Field(..., alias="to")
    distance: int  # miles
    earned_miles: int
    flight_time: str
    flight_number: int = Field(..., ge=1)

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {
                "from": "HND",
                "to": "CTS",
                "distance": 510,
                "earned_miles": 510,
                "flight_time": "1h 47m",
                "flight_number": 1,
            }
        },
    }


class FlightPreview(BaseModel):
    """Distance and duration of a prospective hop, shown before committing."""

    from_iata: str = Field(..., alias="from")
    to_iata: str = Field(..., alias="to")
    distance: int  # miles
    distance_km: int
    flight_time: str

    model_config = {"frozen": True, "populate_by_name": True}
