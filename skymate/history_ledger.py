"""Append-only travel history."""

from typing import Iterator, List, Tuple

from .models.history import TravelHistoryItem


class HistoryLedger:
    """Completed flights in order, oldest first. Totals are always derived."""

    def __init__(self):
        self._items: List[TravelHistoryItem] = []

    def append(self, item: TravelHistoryItem) -> None:
        """
        Append a completed flight.

        Args:
            item: Flight to record; its flight_number must be the next in sequence

        Raises:
            ValueError: If the flight number is out of sequence
        """
        expected = self.next_flight_number()
        if item.flight_number != expected:
            raise ValueError(
                f"Flight number {item.flight_number} out of sequence, expected {expected}"
            )
        self._items.append(item)

    def all(self) -> Tuple[TravelHistoryItem, ...]:
        return tuple(self._items)

    def next_flight_number(self) -> int:
        return len(self._items) + 1

    def total_distance(self) -> int:
        return sum(item.distance for item in self._items)

    def total_earned(self) -> int:
        return sum(item.earned_miles for item in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[TravelHistoryItem]:
        return iter(tuple(self._items))
