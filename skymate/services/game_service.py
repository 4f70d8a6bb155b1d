"""Service for the roulette session."""

import logging
import random
import threading
from typing import Any, Dict, List, Optional

from ..airport_graph import AirportGraph, load_default_graph
from ..config import Config, SETTINGS_BOUNDS
from ..errors import InvalidTransitionError, NoCandidatesError
from ..geo import km_to_miles
from ..models.airport import Airport
from ..spin_engine import SpinEngine
from ..utils import format_miles

logger = logging.getLogger(__name__)


def _airport_dict(airport: Optional[Airport]) -> Optional[Dict[str, Any]]:
    if airport is None:
        return None
    return airport.model_dump(mode="json")


class GameService:
    """Wraps one SpinEngine and turns rejected commands into errors."""

    def __init__(
        self,
        config: Optional[Config] = None,
        graph: Optional[AirportGraph] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize game service.

        Args:
            config: Application configuration (Config() if omitted)
            graph: Airport graph (the compiled-in network if omitted)
            rng: Random source (seeded from config.RANDOM_SEED if omitted)
        """
        self.config = config if config is not None else Config()
        self.graph = graph if graph is not None else load_default_graph()
        if rng is None:
            rng = random.Random(self.config.RANDOM_SEED)
        self.engine = SpinEngine(
            self.graph,
            starting_airport=self.config.STARTING_AIRPORT,
            default_settings=self.config.default_settings(),
            rng=rng,
        )
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def get_status(self) -> Dict:
        """
        Get current session status.

        Returns:
            Status dictionary with location, spin state, totals, and candidates
        """
        with self._lock:
            return self._status()

    def get_history(self, limit: Optional[int] = None) -> Dict:
        """
        Get completed flights and totals.

        Args:
            limit: Number of most recent flights to return (None for all)

        Returns:
            History dictionary
        """
        with self._lock:
            items = list(self.engine.history)
            total_flights = len(items)
            if limit is not None and limit > 0:
                items = items[-limit:]

            flights = []
            for item in items:
                entry = item.model_dump(by_alias=True)
                # best-effort names; an unknown code just has no name
                origin = self.graph.get(item.from_iata)
                destination = self.graph.get(item.to_iata)
                entry["from_name"] = origin.name if origin else None
                entry["to_name"] = destination.name if destination else None
                flights.append(entry)

            return {
                "flights": flights,
                "total_flights": total_flights,
                "total_miles": self.engine.total_miles,
                "total_earned_miles": self.engine.total_earned_miles,
            }

    def get_airports(self) -> List[Dict]:
        return [_airport_dict(a) for a in self.graph.all()]

    def get_airport(self, iata: str) -> Optional[Dict]:
        return _airport_dict(self.graph.get(iata.upper()))

    def get_destinations(self) -> Dict:
        """
        Get the current candidate set with a preview of each hop.

        Returns:
            Dictionary with origin code and destination entries
        """
        with self._lock:
            engine = self.engine
            destinations = []
            for airport in engine.valid_destinations:
                entry = _airport_dict(airport)
                preview = engine.preview(airport)
                entry["distance"] = preview.distance
                entry["distance_km"] = preview.distance_km
                entry["flight_time"] = preview.flight_time
                destinations.append(entry)
            return {"origin": engine.current_airport.iata, "destinations": destinations}

    def get_settings(self) -> Dict:
        with self._lock:
            return self._settings_payload()

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def update_settings(self, changes: Dict[str, Any]) -> Dict:
        """
        Apply a partial settings update.

        Args:
            changes: Fields to change

        Returns:
            Updated settings payload

        Raises:
            InvalidTransitionError: If a spin or pending result is outstanding
            pydantic.ValidationError: If a value is out of range
        """
        with self._lock:
            if not self.engine.update_settings(changes):
                raise InvalidTransitionError(
                    "update settings",
                    self.engine.phase.value,
                    "finish or discard the current spin first",
                )
            return self._settings_payload()

    def start_spin(self) -> Dict:
        """
        Start a spin.

        Raises:
            NoCandidatesError: If the current airport is a dead end
            InvalidTransitionError: If a spin or pending result is outstanding
        """
        with self._lock:
            if self.engine.settings_locked:
                raise InvalidTransitionError("start a spin", self.engine.phase.value)
            if not self.engine.start_spin():
                raise NoCandidatesError(self.engine.current_airport.iata)
            return self._status()

    def complete_spin(self) -> Dict:
        with self._lock:
            if not self.engine.complete_spin():
                raise InvalidTransitionError("complete a spin", self.engine.phase.value)
            return self._status()

    def confirm(self) -> Dict:
        with self._lock:
            if not self.engine.confirm():
                raise InvalidTransitionError("confirm", self.engine.phase.value, "no pending result")
            return self._status()

    def retry(self) -> Dict:
        with self._lock:
            if not self.engine.retry():
                raise InvalidTransitionError("retry", self.engine.phase.value, "no pending result")
            return self._status()

    def reset(self) -> Dict:
        with self._lock:
            self.engine.reset()
            return self._status()

    # ------------------------------------------------------------------
    # Payloads (caller holds the lock)
    # ------------------------------------------------------------------

    def _status(self) -> Dict:
        engine = self.engine
        destinations = engine.valid_destinations
        pending_preview = engine.pending_preview
        return {
            "phase": engine.phase.value,
            "current_airport": _airport_dict(engine.current_airport),
            "is_spinning": engine.is_spinning,
            "target_airport": _airport_dict(engine.target_airport),
            "pending_airport": _airport_dict(engine.pending_airport),
            "pending_preview": pending_preview.model_dump(by_alias=True) if pending_preview else None,
            "settings": engine.settings.model_dump(),
            "settings_locked": engine.settings_locked,
            "total_miles": engine.total_miles,
            "total_miles_formatted": format_miles(engine.total_miles),
            "total_earned_miles": engine.total_earned_miles,
            "flight_count": len(engine.history),
            "valid_destinations": [a.iata for a in destinations],
            "dead_end": not destinations,
        }

    def _settings_payload(self) -> Dict:
        settings = self.engine.settings
        return {
            "settings": settings.model_dump(),
            "locked": self.engine.settings_locked,
            "exclude_radius_miles": round(km_to_miles(settings.exclude_radius_km), 1),
            "bounds": SETTINGS_BOUNDS,
        }
