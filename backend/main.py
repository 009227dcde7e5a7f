"""
FastAPI application for exercise name normalization and plate math.

`create_app()` builds a fresh app per call so tests can pin their own
Settings; the module-level `app` is what uvicorn serves.

    from backend.main import create_app
    from backend.settings import Settings

    app = create_app(Settings(environment="test", _env_file=None))
"""

import logging
from typing import Optional

import sentry_sdk
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.deps import get_settings as settings_dependency
from backend.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the normalization API.

    Args:
        settings: Settings to run with. Defaults to get_settings(), i.e. the
                  environment and .env file.

    Returns:
        FastAPI app with all routers mounted.
    """
    explicit_settings = settings is not None
    if settings is None:
        settings = get_settings()

    _init_sentry(settings)

    app = FastAPI(
        title="Exercise Normalization API",
        description="Exercise name matching and barbell plate math",
        version="1.0.0",
    )

    # Routers resolve settings through DI; pin them to the ones given here
    if explicit_settings:
        app.dependency_overrides[settings_dependency] = lambda: settings

    _configure_cors(app, settings)
    _include_routers(app)
    _log_feature_flags(settings)

    return app


def _init_sentry(settings: Settings) -> None:
    """Start Sentry when a DSN is set; no-op otherwise."""
    if settings.sentry_dsn:
        sentry_sdk.init(
            dsn=settings.sentry_dsn,
            environment=settings.environment,
            traces_sample_rate=0.1,
        )
        logger.info("Sentry initialized for exercise normalization API")


def _configure_cors(app: FastAPI, settings: Settings) -> None:
    origins = ["http://localhost:3000", "http://localhost:3001"]
    origins.extend(settings.cors_origins)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )


def _include_routers(app: FastAPI) -> None:
    from api.routers import (
        exercises_router,
        health_router,
        plates_router,
        workouts_router,
    )

    # /health and /health/ready sit at the root; the rest carry their own prefix
    for router in (health_router, exercises_router, workouts_router, plates_router):
        app.include_router(router)


def _log_feature_flags(settings: Settings) -> None:
    if settings.remote_matching_enabled:
        logger.info(f"Remote catalog matching enabled (model: {settings.catalog_match_model})")
    else:
        logger.info("Remote catalog matching disabled (OPENAI_API_KEY not set), local matching only")


# uvicorn backend.main:app
app = create_app()
