"""Read-only directed airport graph."""

import logging
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from .data_loader import load_airports
from .models.airport import Airport

logger = logging.getLogger(__name__)


class AirportGraph:
    """
    Airports keyed by IATA code, with routes as directed edges.

    The mapping is fixed at construction. Edges are the raw `connections` of
    each airport: they are not required to be symmetric and may name codes
    that are not in the graph.
    """

    def __init__(self, airports: Mapping[str, Airport]):
        self._airports: Mapping[str, Airport] = MappingProxyType(dict(airports))
        logger.debug(f"AirportGraph built with {len(self._airports)} airports")

    @classmethod
    def from_airports(cls, airports: Iterable[Airport]) -> "AirportGraph":
        """
        Build a graph from airport records.

        Args:
            airports: Airport records; a repeated IATA code replaces the earlier one

        Returns:
            AirportGraph
        """
        by_code: Dict[str, Airport] = {}
        for airport in airports:
            if airport.iata in by_code:
                logger.warning(f"Duplicate airport {airport.iata}, keeping the last record")
            by_code[airport.iata] = airport
        return cls(by_code)

    def get(self, iata: str) -> Optional[Airport]:
        return self._airports.get(iata)

    def neighbors(self, iata: str) -> Tuple[str, ...]:
        """Raw outgoing connection codes (empty for an unknown airport)."""
        airport = self._airports.get(iata)
        if airport is None:
            return ()
        return airport.connections

    def all(self) -> List[Airport]:
        return list(self._airports.values())

    def codes(self) -> List[str]:
        return list(self._airports.keys())

    @property
    def airports(self) -> Mapping[str, Airport]:
        """Read-only IATA -> Airport mapping."""
        return self._airports

    def __contains__(self, iata: object) -> bool:
        return iata in self._airports

    def __len__(self) -> int:
        return len(self._airports)

    def __iter__(self) -> Iterator[Airport]:
        return iter(self._airports.values())


@lru_cache(maxsize=1)
def load_default_graph() -> AirportGraph:
    """Process-wide graph for the compiled-in airport table, built once."""
    return AirportGraph(load_airports())
