"""
LLM integration for remote catalog matching.

Provides the OpenAI-backed CatalogMatcher used for names the local fuzzy
matcher cannot resolve.
"""

from backend.services.llm.client import OpenAICatalogMatcher
from backend.services.llm.schemas import (
    CatalogMatchEntry,
    CatalogMatchRequest,
    CatalogMatchResponse,
)

__all__ = [
    "OpenAICatalogMatcher",
    "CatalogMatchEntry",
    "CatalogMatchRequest",
    "CatalogMatchResponse",
]
