"""Data loader module for building airport records from the static table."""

import logging
from typing import Dict, Iterable, Sequence

from pydantic import ValidationError

from .airport_data import AIRPORT_TABLE
from .models.airport import Airport

logger = logging.getLogger(__name__)


def load_airports(table: Iterable[Sequence] = AIRPORT_TABLE) -> Dict[str, Airport]:
    """
    Parse airport table rows and produce Airport instances.

    Rows that fail validation are skipped with a warning. A repeated IATA code
    replaces the earlier row.

    Args:
        table: Rows of (iata, name, lat, lng, size, connections)

    Returns:
        Dictionary mapping IATA code to Airport instance
    """
    airports = {}

    for row in table:
        try:
            iata, name, lat, lng, size, connections = row
            airport = Airport(
                iata=str(iata).upper(),
                name=name,
                lat=lat,
                lng=lng,
                size=size,
                connections=tuple(str(code).upper() for code in connections),
            )
        except (ValueError, TypeError, ValidationError) as e:
            logger.warning(f"Skipping invalid airport row {row!r}: {e}")
            continue

        if airport.iata in airports:
            logger.warning(f"Duplicate airport {airport.iata} in table, keeping the last row")
        airports[airport.iata] = airport

    logger.info(f"Loaded {len(airports)} airports")
    return airports
