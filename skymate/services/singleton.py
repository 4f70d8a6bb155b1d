"""Singleton pattern for shared service instances."""

from .game_service import GameService

# Global service instance (singleton pattern)
_game_service: GameService = None


def get_game_service() -> GameService:
    """
    Get or create the singleton game service instance.

    Returns:
        GameService instance
    """
    global _game_service
    if _game_service is None:
        _game_service = GameService()
    return _game_service
