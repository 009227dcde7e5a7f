"""
API package for the exercise normalization service.

This package contains:
- deps.py: FastAPI dependency providers for DI
- routers/: API route handlers
"""

# Re-export dependency providers for convenient access
from api.deps import (
    get_settings,
    get_catalog,
    get_catalog_matcher,
)

__all__ = [
    # Settings
    "get_settings",
    # Catalog and matching
    "get_catalog",
    "get_catalog_matcher",
]
