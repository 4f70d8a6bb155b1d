"""SkyMate Roulette: a randomized next-destination travel game engine."""

from .airport_graph import AirportGraph, load_default_graph
from .candidate_selector import CandidateSelector
from .errors import InvalidTransitionError, NoCandidatesError, SkymateError
from .history_ledger import HistoryLedger
from .spin_engine import SpinEngine

__version__ = "1.0.0"

__all__ = [
    "AirportGraph",
    "load_default_graph",
    "CandidateSelector",
    "HistoryLedger",
    "SpinEngine",
    "SkymateError",
    "NoCandidatesError",
    "InvalidTransitionError",
]
