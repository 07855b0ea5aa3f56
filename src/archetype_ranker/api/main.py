"""
FastAPI application for the archetype ranker.

The archetype model is loaded and normalized once during startup, before
the first request is accepted. Every request reads the same immutable
classifier and builds its own ranking.
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from .errors import APIError, api_error_handler, archetype_error_handler
from .routers import classify
from ..classifier import Classifier
from ..core.config import Settings, get_settings
from ..core.errors import ArchetypeError

logger = logging.getLogger(__name__)


def load_classifier(settings: Settings) -> Classifier | None:
    """
    Build the classifier from the configured model file.

    Returns None (and logs) when the model cannot be loaded, so the API
    still starts and reports 503 on classification routes.
    """
    try:
        classifier = Classifier.from_file(
            settings.archetypes_path,
            settings.archetypes_format,
            degenerate_policy=settings.degenerate_angle_policy,
        )
    except (ArchetypeError, FileNotFoundError, ValueError) as e:
        logger.error("Failed to load archetypes from %s: %s", settings.archetypes_path, e)
        return None

    logger.info(
        "Loaded %d archetypes from %s", len(classifier), settings.archetypes_path
    )
    return classifier


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        settings: Settings to use instead of the cached environment settings

    Returns:
        Configured FastAPI application instance
    """
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting %s...", settings.app_name)
        app.state.classifier = load_classifier(settings)
        yield
        logger.info("Shutting down %s...", settings.app_name)
        app.state.classifier = None

    app = FastAPI(
        title=settings.app_name,
        description="Rank archetypes by similarity to a profile",
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.classifier = None
    app.dependency_overrides[get_settings] = lambda: settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Accept", "Content-Type"],
    )

    app.add_exception_handler(APIError, api_error_handler)
    app.add_exception_handler(ArchetypeError, archetype_error_handler)

    app.include_router(classify.router, tags=["classification"])

    @app.get("/health", tags=["health"])
    async def health(request: Request) -> dict[str, Any]:
        """Liveness plus the number of loaded archetypes."""
        classifier = request.app.state.classifier
        return {
            "status": "healthy" if classifier is not None else "degraded",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "archetypes": len(classifier) if classifier is not None else 0,
        }

    return app


app = create_app()
