"""
Catalog Matcher Interface (Port).

Resolves exercise names the local matcher could not place, using an external
name-matching service (a hosted language model in production).
"""

from typing import TYPE_CHECKING, Iterable, Protocol, Sequence

if TYPE_CHECKING:
    from backend.services.llm.schemas import CatalogMatchResponse


class CatalogMatcherError(Exception):
    """The external matcher failed; callers treat the whole batch as unresolved."""


class CatalogMatcher(Protocol):
    """Abstract interface for batched remote catalog matching."""

    async def match_batch(
        self,
        names: Iterable[str],
        catalog: Sequence[str],
    ) -> "CatalogMatchResponse":
        """
        Match every name against the catalog in a single call.

        Args:
            names: Deduplicated, non-empty set of raw exercise names
            catalog: Full ordered canonical catalog

        Returns:
            One entry per input name; `match` is a catalog member or None

        Raises:
            CatalogMatcherError: On transport, timeout or response format failure
        """
        ...
