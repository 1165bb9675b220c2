"""FastAPI application entry point."""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Settings, get_settings
from .api.routes import levels, play, sessions


def configure_logging(settings: Settings) -> None:
    """Configure root logging from settings."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


# Get settings
settings = get_settings()
configure_logging(settings)

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Level generation and match resolution engine for the Shelf Sort puzzle game",
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
app.include_router(levels.router)
app.include_router(play.router)
app.include_router(sessions.router)


@app.get("/")
async def root():
    """Root endpoint with API information."""
    return {
        "name": settings.app_name,
        "version": settings.app_version,
        "description": "Shelf Sort Level Engine API",
        "endpoints": {
            "difficulty": "/api/difficulty/{level}",
            "generate": "/api/levels/generate",
            "items": "/api/items",
            "move": "/api/moves",
            "matches": "/api/matches",
            "sessions": "/api/sessions",
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

    # Sessions live in process memory, so a single worker only
    uvicorn.run(
        "shelfsort.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
