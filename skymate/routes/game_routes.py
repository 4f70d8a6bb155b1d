"""Routes for spin lifecycle commands."""

import logging
from fastapi import APIRouter, HTTPException
from ..errors import InvalidTransitionError, NoCandidatesError
from ..schemas.status_schemas import StatusResponse
from ..services.singleton import get_game_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["game"])


def _run_command(command):
    try:
        return StatusResponse(**command())
    except NoCandidatesError as e:
        raise HTTPException(status_code=409, detail=f"Dead end: {e}")
    except InvalidTransitionError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except Exception as e:
        logger.error(f"Error running {command.__name__}: {e}")
        raise HTTPException(status_code=500, detail=str(e))


@router.post("/spin", response_model=StatusResponse)
async def start_spin():
    """
    Start a spin. The destination is decided now; the client reveals it and
    then calls /spin/complete.

    Returns:
        Session status with the target airport set
    """
    return _run_command(get_game_service().start_spin)


@router.post("/spin/complete", response_model=StatusResponse)
async def complete_spin():
    """
    Signal that the reveal animation finished.

    Returns:
        Session status after the commit, or with a pending result in retry mode
    """
    return _run_command(get_game_service().complete_spin)


@router.post("/confirm", response_model=StatusResponse)
async def confirm():
    """Commit the pending result."""
    return _run_command(get_game_service().confirm)


@router.post("/retry", response_model=StatusResponse)
async def retry():
    """Discard the pending result."""
    return _run_command(get_game_service().retry)


@router.post("/reset", response_model=StatusResponse)
async def reset():
    """Reset location, history, and settings."""
    return _run_command(get_game_service().reset)
