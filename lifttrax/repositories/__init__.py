"""Repositories package."""
from lifttrax.repositories.catalog_repository import ExerciseCatalog, InMemoryExerciseCatalog
from lifttrax.repositories.yaml_catalog import (
    CatalogLoadError,
    CatalogNotFoundError,
    load_catalog,
    parse_catalog,
)

__all__ = [
    "ExerciseCatalog",
    "InMemoryExerciseCatalog",
    "CatalogLoadError",
    "CatalogNotFoundError",
    "load_catalog",
    "parse_catalog",
]
