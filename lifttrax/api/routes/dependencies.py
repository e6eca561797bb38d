"""Shared dependencies for API routes."""
from fastapi import Depends

from lifttrax.config.settings import Settings, get_settings
from lifttrax.repositories.catalog_repository import ExerciseCatalog
from lifttrax.repositories.yaml_catalog import load_catalog


def get_catalog(settings: Settings = Depends(get_settings)) -> ExerciseCatalog:
    """Load a fresh catalog snapshot from the configured YAML file.

    Raises:
        CatalogNotFoundError: If ``catalog_path`` does not exist
        CatalogLoadError: If the file is not a valid catalog
    """
    return load_catalog(settings.resolved_catalog_path())
