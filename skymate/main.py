"""FastAPI application exposing the roulette engine to a presentation client."""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .config import Config
from .logger import configure_logging
from .routes import game_router, settings_router, status_router

config = Config()

# Configure logging
configure_logging(config.LOG_LEVEL, config.LOG_FILE)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(title="SkyMate Roulette API", version=__version__)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(status_router)
app.include_router(game_router)
app.include_router(settings_router)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": "SkyMate Roulette API", "status": "running"}


def run() -> None:
    """Serve the API with uvicorn."""
    import uvicorn
    logger.info(f"Starting server on {config.HOST}:{config.PORT}")
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
