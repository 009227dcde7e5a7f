"""
Service Interfaces (Ports) for the exercise normalization service.

Ports decouple the normalization pipeline from the external services it
calls. Implementations live with their provider (backend/services/llm) and
in-memory fakes live under tests/fakes.

Usage:
    from application.ports import CatalogMatcher, CatalogMatcherError

    async def resolve(names, catalog, matcher: CatalogMatcher):
        try:
            return await matcher.match_batch(names, catalog.names)
        except CatalogMatcherError:
            ...
"""

from application.ports.catalog_matcher import CatalogMatcher, CatalogMatcherError

__all__ = [
    "CatalogMatcher",
    "CatalogMatcherError",
]
