"""
FastAPI Dependency Providers for the exercise normalization service.

Settings and the catalog are cached per-process (lru_cache). The remote
matcher is optional: without an OpenAI key the pipeline runs local matching
only.

Testing:
    # Override dependencies in tests
    app.dependency_overrides[get_catalog_matcher] = lambda: FakeCatalogMatcher()
"""

import logging
from functools import lru_cache
from typing import Optional

from fastapi import Depends

from application.ports import CatalogMatcher
from backend.core.catalog import ExerciseCatalog, load_catalog
from backend.settings import Settings, get_settings as _get_settings

logger = logging.getLogger(__name__)


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    """
    return _get_settings()


# =============================================================================
# Catalog Provider
# =============================================================================


def get_catalog(settings: Settings = Depends(get_settings)) -> ExerciseCatalog:
    """Get the canonical exercise catalog (loaded once per path)."""
    return load_catalog(settings.exercise_catalog_path)


# =============================================================================
# Remote Matcher Provider
# =============================================================================


@lru_cache
def _build_catalog_matcher(api_key: str, model: str, timeout: float) -> CatalogMatcher:
    from backend.services.llm import OpenAICatalogMatcher

    logger.info(f"Remote catalog matching enabled (model: {model})")
    return OpenAICatalogMatcher(api_key=api_key, model=model, timeout=timeout)


def get_catalog_matcher(settings: Settings = Depends(get_settings)) -> Optional[CatalogMatcher]:
    """
    Get the remote catalog matcher, or None when no OpenAI key is configured.
    """
    if not settings.remote_matching_enabled:
        return None
    return _build_catalog_matcher(
        settings.openai_api_key,
        settings.catalog_match_model,
        settings.catalog_match_timeout,
    )
