"""Candidate derivation and weighted roulette draw."""

import logging
import random
from typing import List, Optional, Sequence

from .airport_graph import AirportGraph
from .errors import NoCandidatesError
from .geo import distance_between, miles_to_km
from .models.airport import Airport
from .models.settings import AppSettings

logger = logging.getLogger(__name__)


class CandidateSelector:
    """Derives eligible destinations and draws one of them."""

    def __init__(self, graph: AirportGraph, rng: Optional[random.Random] = None):
        """
        Initialize candidate selector.

        Args:
            graph: Airport graph used to resolve connection codes
            rng: Random source with random() and choice(); a fresh
                random.Random when omitted
        """
        self.graph = graph
        self.rng = rng if rng is not None else random.Random()

    def select_candidates(self, current: Airport, settings: AppSettings) -> List[Airport]:
        """
        Resolve the current airport's connections into eligible destinations.

        Unresolved codes are dropped, repeated codes are kept once, and any
        airport strictly closer than `settings.exclude_radius_km` is excluded.
        An airport exactly at the radius stays eligible.

        Args:
            current: Airport the traveler is at
            settings: Active settings

        Returns:
            Eligible airports in connection order (may be empty)
        """
        candidates = []
        seen = set()

        for code in current.connections:
            if code in seen:
                continue
            seen.add(code)

            airport = self.graph.get(code)
            if airport is None:
                logger.debug(f"Connection {current.iata} -> {code} does not resolve, skipping")
                continue

            distance_km = miles_to_km(distance_between(current, airport))
            if distance_km < settings.exclude_radius_km:
                logger.debug(
                    f"Excluding {airport.iata}: {distance_km} km from {current.iata} "
                    f"is inside the {settings.exclude_radius_km} km radius"
                )
                continue

            candidates.append(airport)

        return candidates

    def choose_destination(
        self,
        candidates: Sequence[Airport],
        settings: AppSettings,
        origin: Optional[str] = None,
    ) -> Airport:
        """
        Draw the next destination.

        The draw has two stages: a size class is picked first, then an
        airport uniformly within it. When both classes are present BIG wins
        with probability `settings.big_airport_ratio` no matter how many
        airports each class holds.

        Args:
            candidates: Eligible airports
            settings: Active settings
            origin: IATA code of the current airport, for error reporting

        Returns:
            Chosen airport

        Raises:
            NoCandidatesError: If candidates is empty
        """
        if not candidates:
            raise NoCandidatesError(origin)

        big = [a for a in candidates if a.is_big]
        small = [a for a in candidates if not a.is_big]

        if not big:
            pool = small
        elif not small:
            pool = big
        else:
            roll = self.rng.random()
            pool = big if roll < settings.big_airport_ratio else small

        selected = self.rng.choice(pool)
        logger.debug(
            f"Roulette picked {selected.iata} from {len(big)} big / {len(small)} small candidates"
        )
        return selected
