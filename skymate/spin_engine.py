"""Spin lifecycle state machine: spin, reveal, optional confirmation, commit."""

import logging
import random
from typing import Any, Dict, List, Optional, Tuple, Union

from .airport_graph import AirportGraph
from .candidate_selector import CandidateSelector
from .config import ACCRUAL_RATE, STARTING_AIRPORT
from .geo import calculate_flight_duration, distance_between, miles_to_km
from .history_ledger import HistoryLedger
from .models.airport import Airport
from .models.history import FlightPreview, TravelHistoryItem
from .models.session import SpinPhase, SpinState
from .models.settings import AppSettings, SettingsUpdate

logger = logging.getLogger(__name__)


class SpinEngine:
    """
    Owns the roulette session: location, spin state, settings, and history.

    Every command is synchronous. A command issued in a phase that does not
    define it leaves the session untouched and returns False.

        IDLE --start_spin--> SPINNING
        SPINNING --complete_spin--> IDLE (commit)
        SPINNING --complete_spin, retry mode--> PENDING_CONFIRMATION
        PENDING_CONFIRMATION --confirm--> IDLE (commit)
        PENDING_CONFIRMATION --retry--> IDLE
        any --reset--> IDLE at the starting airport
    """

    def __init__(
        self,
        graph: AirportGraph,
        starting_airport: str = STARTING_AIRPORT,
        default_settings: Optional[AppSettings] = None,
        selector: Optional[CandidateSelector] = None,
        rng: Optional[random.Random] = None,
    ):
        """
        Initialize the engine at the starting airport.

        Args:
            graph: Airport graph
            starting_airport: IATA code the session starts (and resets) at
            default_settings: Settings restored by reset (AppSettings() if omitted)
            selector: Candidate selector (built from graph and rng if omitted)
            rng: Random source for a selector built here

        Raises:
            ValueError: If the starting airport is not in the graph
        """
        start = graph.get(starting_airport)
        if start is None:
            raise ValueError(f"Starting airport {starting_airport} is not in the airport graph")

        self.graph = graph
        self.selector = selector if selector is not None else CandidateSelector(graph, rng)
        self.starting_airport = start
        self.default_settings = default_settings if default_settings is not None else AppSettings()

        self._current = start
        self._settings = self.default_settings
        self._state = SpinState.idle()
        self._ledger = HistoryLedger()
        self._destinations_key: Optional[Tuple[str, float]] = None
        self._destinations: List[Airport] = []

        logger.info(f"SpinEngine initialized at {start.iata}")

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------

    @property
    def current_airport(self) -> Airport:
        return self._current

    @property
    def state(self) -> SpinState:
        return self._state

    @property
    def phase(self) -> SpinPhase:
        return self._state.phase

    @property
    def is_spinning(self) -> bool:
        return self._state.is_spinning

    @property
    def target_airport(self) -> Optional[Airport]:
        return self._state.target_airport

    @property
    def pending_airport(self) -> Optional[Airport]:
        return self._state.pending_airport

    @property
    def settings(self) -> AppSettings:
        return self._settings

    @property
    def history(self) -> Tuple[TravelHistoryItem, ...]:
        return self._ledger.all()

    @property
    def total_miles(self) -> int:
        return self._ledger.total_distance()

    @property
    def total_earned_miles(self) -> int:
        return self._ledger.total_earned()

    @property
    def valid_destinations(self) -> List[Airport]:
        """Candidates from the current airport, recomputed when location or radius changes."""
        key = (self._current.iata, self._settings.exclude_radius_km)
        if key != self._destinations_key:
            self._destinations = self.selector.select_candidates(self._current, self._settings)
            self._destinations_key = key
        return list(self._destinations)

    @property
    def is_dead_end(self) -> bool:
        return not self.valid_destinations

    @property
    def settings_locked(self) -> bool:
        """Settings cannot change while a spin or pending result is outstanding."""
        return self._state.phase != SpinPhase.IDLE

    def preview(self, destination: Airport) -> FlightPreview:
        """
        Distance and flight time from the current airport to a destination.

        Args:
            destination: Prospective destination

        Returns:
            FlightPreview
        """
        distance = distance_between(self._current, destination)
        return FlightPreview(
            from_iata=self._current.iata,
            to_iata=destination.iata,
            distance=distance,
            distance_km=miles_to_km(distance),
            flight_time=calculate_flight_duration(distance),
        )

    @property
    def pending_preview(self) -> Optional[FlightPreview]:
        pending = self.pending_airport
        if pending is None:
            return None
        return self.preview(pending)

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def start_spin(self) -> bool:
        """
        Pick the next destination and hold it for the client's reveal.

        Returns:
            True if a spin started; False if one is already outstanding or
            there are no valid destinations
        """
        if self._state.phase != SpinPhase.IDLE:
            logger.debug(f"start_spin ignored in phase {self._state.phase.value}")
            return False

        candidates = self.valid_destinations
        if not candidates:
            logger.warning(
                f"No valid destinations from {self._current.iata} "
                f"with {self._settings.exclude_radius_km} km exclusion radius"
            )
            return False

        target = self.selector.choose_destination(candidates, self._settings, origin=self._current.iata)
        self._state = SpinState.spinning(target)
        logger.info(f"Spin started from {self._current.iata}, target {target.iata}")
        return True

    def complete_spin(self) -> bool:
        """
        Signal that the client's reveal has finished.

        Commits the target directly, or parks it for confirmation in retry mode.

        Returns:
            True if a spin was resolved
        """
        if not self._state.is_spinning:
            logger.debug(f"complete_spin ignored in phase {self._state.phase.value}")
            return False

        target = self._state.airport
        if self._settings.retry_mode:
            self._state = SpinState.pending(target)
            logger.info(f"Spin result {target.iata} awaiting confirmation")
        else:
            self._commit(target)
            self._state = SpinState.idle()
        return True

    def confirm(self) -> bool:
        """
        Accept the pending result.

        Returns:
            True if a pending result was committed
        """
        if not self._state.is_pending:
            logger.debug(f"confirm ignored in phase {self._state.phase.value}")
            return False

        self._commit(self._state.airport)
        self._state = SpinState.idle()
        return True

    def retry(self) -> bool:
        """
        Discard the pending result. Does not start a new spin.

        Returns:
            True if a pending result was discarded
        """
        if not self._state.is_pending:
            logger.debug(f"retry ignored in phase {self._state.phase.value}")
            return False

        logger.info(f"Pending result {self._state.airport.iata} discarded")
        self._state = SpinState.idle()
        return True

    def update_settings(self, update: Union[SettingsUpdate, Dict[str, Any]]) -> bool:
        """
        Apply a partial settings update.

        Args:
            update: SettingsUpdate or dict of fields to change

        Returns:
            True if applied; False while a spin or pending result is outstanding

        Raises:
            pydantic.ValidationError: If a value is out of range
        """
        if self.settings_locked:
            logger.warning(f"Settings update rejected in phase {self._state.phase.value}")
            return False

        if not isinstance(update, SettingsUpdate):
            update = SettingsUpdate(**update)

        self._settings = update.apply_to(self._settings)
        logger.info(f"Settings updated: {self._settings.model_dump()}")
        return True

    def reset(self) -> None:
        """Return to the starting airport with empty history and default settings."""
        self._current = self.starting_airport
        self._ledger = HistoryLedger()
        self._state = SpinState.idle()
        self._settings = self.default_settings
        self._destinations_key = None
        logger.info(f"Session reset to {self.starting_airport.iata}")

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _commit(self, destination: Airport) -> TravelHistoryItem:
        """
        Record the flight to destination and move there.

        The item is built before either mutation, so the ledger and current
        airport change together.
        """
        distance = distance_between(self._current, destination)
        item = TravelHistoryItem(
            from_iata=self._current.iata,
            to_iata=destination.iata,
            distance=distance,
            earned_miles=round(distance * ACCRUAL_RATE),
            flight_time=calculate_flight_duration(distance),
            flight_number=self._ledger.next_flight_number(),
        )

        self._ledger.append(item)
        self._current = destination

        logger.info(
            f"Flight {item.flight_number}: {item.from_iata} -> {item.to_iata}, "
            f"{item.distance} miles, {item.flight_time}"
        )
        return item
