"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from team_builder.config import settings
from team_builder.api.routes.teams import router as teams_router
from team_builder.constants import GAME_CONSTANTS, GameConstants, load_game_constants
from team_builder.repositories.catalog_repository import CatalogRepository
from team_builder.services.team_calculator import TeamCalculator

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Set the root log level from settings."""
    level = "DEBUG" if settings.debug else settings.log_level.upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def get_game_constants() -> GameConstants:
    """Default constants, or the override file from settings."""
    if settings.game_constants_path:
        path = settings.resolve_path(settings.game_constants_path)
        logger.info(f"Loading game constants from {path}")
        return load_game_constants(path)
    return GAME_CONSTANTS


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown events."""
    configure_logging()
    # Startup: load reference data once per process
    if not hasattr(app.state, "catalog_repository"):
        app.state.catalog_repository = CatalogRepository(settings.resolve_path(settings.knowledge_dir))
    if not hasattr(app.state, "calculator"):
        app.state.calculator = TeamCalculator(
            app.state.catalog_repository.synergies,
            get_game_constants(),
        )
    yield


app = FastAPI(
    title="Team Builder",
    description="Team scoring and best-team search for champion rosters",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS for frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy", "service": "team-builder"}


@app.get("/")
async def root():
    """Root endpoint with API info."""
    return {
        "name": "Team Builder API",
        "version": "0.1.0",
        "docs": "/docs",
    }


# Register routers
app.include_router(teams_router)
