"""Exceptions raised by the roulette engine and service layer."""

from typing import Optional


class SkymateError(Exception):
    """Base class for all roulette errors."""


class NoCandidatesError(SkymateError):
    """Raised when a destination is requested from an empty candidate set."""

    def __init__(self, origin: Optional[str] = None):
        self.origin = origin
        if origin:
            message = f"No valid destinations from {origin}"
        else:
            message = "No valid destinations"
        super().__init__(message)


class InvalidTransitionError(SkymateError, ValueError):
    """Raised when a command is not defined in the current spin phase."""

    def __init__(self, command: str, phase: str, reason: Optional[str] = None):
        self.command = command
        self.phase = phase
        self.reason = reason
        message = f"Cannot {command} while {phase}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
