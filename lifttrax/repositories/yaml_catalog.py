"""YAML-backed exercise catalog.

The catalog file is a mapping with a single ``exercises`` list::

    exercises:
      - name: Safety Bar Squat
        region: lower
        pattern: squat
        muscles: [quad, glute]
        notes: Keep the chest up.

``pattern`` may be omitted for untagged exercises. Muscles and patterns are
parsed case-insensitively (``Bench Press``, ``bench_press`` and
``BENCH-PRESS`` are equivalent).
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from lifttrax.core.exceptions import ConflictError, ValidationError
from lifttrax.core.logging import get_logger
from lifttrax.models.exercise import Exercise
from lifttrax.repositories.catalog_repository import InMemoryExerciseCatalog

logger = get_logger(__name__)


class CatalogLoadError(ValidationError):
    """Raised when a catalog file cannot be parsed into exercises."""

    def __init__(self, message: str, path: str | Path | None = None):
        details = {"field": "catalog"}
        if path is not None:
            details["path"] = str(path)
        super().__init__("catalog", message, details)
        self.path = str(path) if path is not None else None


class CatalogNotFoundError(CatalogLoadError):
    """Raised when the catalog file does not exist."""


def parse_catalog(document: Any, path: str | Path | None = None) -> InMemoryExerciseCatalog:
    """Build a catalog from an already-parsed YAML/JSON document."""
    if not isinstance(document, dict) or not isinstance(document.get("exercises"), list):
        raise CatalogLoadError("expected a mapping with an 'exercises' list", path)

    catalog = InMemoryExerciseCatalog()
    for index, raw in enumerate(document["exercises"]):
        if not isinstance(raw, dict):
            raise CatalogLoadError(f"exercise #{index} is not a mapping", path)
        try:
            exercise = Exercise.create(
                name=str(raw["name"]),
                region=raw["region"],
                pattern=raw.get("pattern"),
                muscles=raw.get("muscles") or (),
                notes=raw.get("notes") or "",
            )
        except KeyError as e:
            raise CatalogLoadError(f"exercise #{index} is missing {e.args[0]!r}", path) from e
        except ValueError as e:
            raise CatalogLoadError(f"exercise #{index}: {e}", path) from e

        try:
            catalog.add(exercise)
        except ConflictError as e:
            raise CatalogLoadError(e.message, path) from e

    return catalog


def load_catalog(path: str | Path) -> InMemoryExerciseCatalog:
    """Load an exercise catalog from a YAML file.

    Args:
        path: Location of the catalog document

    Returns:
        In-memory catalog snapshot

    Raises:
        CatalogNotFoundError: If the file does not exist
        CatalogLoadError: If the YAML is malformed or an entry is invalid
    """
    path = Path(path)
    if not path.is_file():
        raise CatalogNotFoundError(f"catalog file not found: {path}", path)

    try:
        with path.open("r", encoding="utf-8") as f:
            document = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise CatalogLoadError(f"invalid YAML: {e}", path) from e

    catalog = parse_catalog(document, path)
    logger.info("catalog_loaded", path=str(path), exercises=len(catalog))
    return catalog
