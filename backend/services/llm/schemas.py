"""
Wire schemas for the remote catalog matcher.

Pydantic models for the batched match request and the structured LLM
response.
"""

from typing import List, Optional

from pydantic import BaseModel, Field


class CatalogMatchRequest(BaseModel):
    """Names the local matcher could not resolve, plus the full catalog."""

    names: List[str] = Field(min_length=1, description="Deduplicated raw exercise names")
    catalog: List[str] = Field(description="Canonical exercise names, in catalog order")


class CatalogMatchEntry(BaseModel):
    """Resolution of one input name."""

    input: str = Field(description="The raw name exactly as it was sent")
    match: Optional[str] = Field(
        default=None, description="A catalog member, or null when nothing fits"
    )


class CatalogMatchResponse(BaseModel):
    """One entry per input name; missing entries count as unresolved."""

    matches: List[CatalogMatchEntry] = Field(default_factory=list)

    def resolved(self) -> dict[str, str]:
        """input -> match for every entry that has a match."""
        return {m.input: m.match for m in self.matches if m.match}
