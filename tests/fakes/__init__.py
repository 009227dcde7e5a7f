"""
Fake implementations for testing.

In-memory stand-ins for the external collaborators of the normalization
pipeline. No network or API keys required.

Usage:
    from tests.fakes import FakeCatalogMatcher

    matcher = FakeCatalogMatcher({"Skullcrushers": "Skull Crusher"})
    plan = await normalize_extracted_workout(tree, catalog, matcher)
    assert matcher.call_count == 1
"""

from tests.fakes.catalog_matcher import FakeCatalogMatcher

__all__ = [
    "FakeCatalogMatcher",
]
