"""Routes for roulette settings."""

import logging
from fastapi import APIRouter, HTTPException
from pydantic import ValidationError
from ..errors import InvalidTransitionError
from ..schemas.settings_schemas import SettingsResponse, SettingsUpdateRequest
from ..services.singleton import get_game_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["settings"])


@router.get("/settings", response_model=SettingsResponse)
async def get_settings():
    """Get current settings and slider bounds."""
    return SettingsResponse(**get_game_service().get_settings())


@router.patch("/settings", response_model=SettingsResponse)
async def update_settings(request: SettingsUpdateRequest):
    """
    Update settings. Rejected while a spin or pending result is outstanding.

    Args:
        request: Fields to change

    Returns:
        Updated settings
    """
    game_service = get_game_service()

    try:
        settings_data = game_service.update_settings(request.model_dump(exclude_none=True))
        return SettingsResponse(**settings_data)
    except InvalidTransitionError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except ValidationError as e:
        raise HTTPException(
            status_code=422,
            detail=e.errors(include_url=False, include_context=False, include_input=False),
        )
    except Exception as e:
        logger.error(f"Error updating settings: {e}")
        raise HTTPException(status_code=500, detail=str(e))
