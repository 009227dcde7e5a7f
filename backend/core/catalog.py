"""
Canonical exercise catalog.

The catalog is an ordered list of unique exercise names, loaded once and
treated as immutable. Lookup tables used by the matcher are built at load time.
"""
import logging
import pathlib
from functools import lru_cache
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

import yaml

from .normalize import normalize_exercise_name

logger = logging.getLogger(__name__)

ROOT = pathlib.Path(__file__).resolve().parents[2]

DEFAULT_CATALOG_PATH = ROOT / "shared/dictionaries/exercise_catalog.yaml"


class CatalogError(ValueError):
    """Raised when a catalog cannot be loaded."""


class ExerciseCatalog:
    """Immutable, ordered set of canonical exercise names."""

    def __init__(self, names: Sequence[str]):
        names = tuple(names)
        seen = set()
        for name in names:
            if not isinstance(name, str) or not name.strip():
                raise CatalogError(f"Invalid catalog entry: {name!r}")
            if name in seen:
                raise CatalogError(f"Duplicate catalog entry: {name!r}")
            seen.add(name)

        self._names: Tuple[str, ...] = names
        self._name_set = frozenset(names)
        self._normalized: Tuple[str, ...] = tuple(normalize_exercise_name(n) for n in names)

        # lowercase form -> first entry with that form
        self._by_lower: Dict[str, str] = {}
        for name in names:
            self._by_lower.setdefault(name.lower(), name)

        # normalized form -> entry; a later entry overwrites an earlier collision
        self._by_normalized: Dict[str, str] = dict(zip(self._normalized, names))

    @property
    def names(self) -> Tuple[str, ...]:
        return self._names

    @property
    def normalized_names(self) -> Tuple[str, ...]:
        return self._normalized

    def __len__(self) -> int:
        return len(self._names)

    def __iter__(self) -> Iterator[str]:
        return iter(self._names)

    def __contains__(self, name: object) -> bool:
        return name in self._name_set

    def entries(self) -> Iterator[Tuple[str, str]]:
        """Yield (canonical, normalized) pairs in catalog order."""
        return zip(self._names, self._normalized)

    def lookup_lower(self, lowered: str) -> Optional[str]:
        return self._by_lower.get(lowered)

    def lookup_normalized(self, normalized: str) -> Optional[str]:
        return self._by_normalized.get(normalized)

    def canonical(self, value: str) -> Optional[str]:
        """
        Return the catalog entry `value` refers to, or None.

        Accepts exact members and case/whitespace variants of a member, so
        loosely echoed names from an external matcher map back to the
        catalog's own spelling.
        """
        if value in self._name_set:
            return value
        return self._by_lower.get(value.lower().strip())

    @classmethod
    def from_yaml(cls, path: pathlib.Path) -> "ExerciseCatalog":
        try:
            data = yaml.safe_load(pathlib.Path(path).read_text())
        except (OSError, yaml.YAMLError) as e:
            raise CatalogError(f"Could not read exercise catalog {path}: {e}") from e

        if not isinstance(data, list):
            raise CatalogError(f"Exercise catalog {path} must be a YAML list of names")

        catalog = cls(data)
        logger.info(f"Loaded {len(catalog)} canonical exercises from {path}")
        return catalog


@lru_cache
def load_catalog(path: Optional[str] = None) -> ExerciseCatalog:
    """Load (and cache) the catalog at `path`, or the bundled one."""
    return ExerciseCatalog.from_yaml(pathlib.Path(path) if path else DEFAULT_CATALOG_PATH)
