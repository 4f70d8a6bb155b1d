"""Spin session state model."""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, model_validator

from .airport import Airport


class SpinPhase(str, Enum):
    """Phases of the spin lifecycle."""

    IDLE = "IDLE"
    SPINNING = "SPINNING"
    PENDING_CONFIRMATION = "PENDING_CONFIRMATION"


class SpinState(BaseModel):
    """
    Tagged spin state.

    `airport` is the reveal target while SPINNING and the unconfirmed result
    while PENDING_CONFIRMATION. It is always None while IDLE, so a target and
    a pending result can never coexist.
    """

    phase: SpinPhase = SpinPhase.IDLE
    airport: Optional[Airport] = None

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_airport_matches_phase(self) -> "SpinState":
        if self.phase == SpinPhase.IDLE and self.airport is not None:
            raise ValueError("IDLE state cannot carry an airport")
        if self.phase != SpinPhase.IDLE and self.airport is None:
            raise ValueError(f"{self.phase.value} state requires an airport")
        return self

    @classmethod
    def idle(cls) -> "SpinState":
        return cls(phase=SpinPhase.IDLE)

    @classmethod
    def spinning(cls, target: Airport) -> "SpinState":
        return cls(phase=SpinPhase.SPINNING, airport=target)

    @classmethod
    def pending(cls, airport: Airport) -> "SpinState":
        return cls(phase=SpinPhase.PENDING_CONFIRMATION, airport=airport)

    @property
    def is_spinning(self) -> bool:
        return self.phase == SpinPhase.SPINNING

    @property
    def is_pending(self) -> bool:
        return self.phase == SpinPhase.PENDING_CONFIRMATION

    @property
    def target_airport(self) -> Optional[Airport]:
        return self.airport if self.is_spinning else None

    @property
    def pending_airport(self) -> Optional[Airport]:
        return self.airport if self.is_pending else None
