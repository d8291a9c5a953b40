"""FastAPI application entry point."""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_settings
from .api.routes import games, simulate

# Get settings
settings = get_settings()

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(levelname)s - %(message)s",
)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Mahjong Solitaire board engine: layered tiles, free-tile rules, hints and reshuffles",
    docs_url="/docs",
    redoc_url="/redoc",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(games.router)
app.include_router(simulate.router)


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Mahjong Solitaire API",
        "endpoints": {
            "games": "/api/games",
            "select": "/api/games/{game_id}/select",
            "reshuffle": "/api/games/{game_id}/reshuffle",
            "hint": "/api/games/{game_id}/hint",
            "simulate": "/api/simulate",
            "docs": "/docs",
        },
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": settings.app_version,
    }


if __name__ == "__main__":
    import uvicorn

    # Sessions live in process memory, so a single worker
    uvicorn.run(
        "solitaire.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
