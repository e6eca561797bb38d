"""Application configuration settings."""
from functools import lru_cache
from pathlib import Path
from typing import Final

from pydantic_settings import BaseSettings, SettingsConfigDict

# Repository root; relative catalog paths fall back to it
PROJECT_ROOT: Final[Path] = Path(__file__).resolve().parent.parent.parent


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="LIFTTRAX_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "LiftTrax Wave Generator"
    debug: bool = False

    # Logging
    log_json: bool = True  # JSON lines in production, console renderer otherwise

    # Exercise catalog (YAML document, see data/exercise_catalog.yaml)
    catalog_path: str = "data/exercise_catalog.yaml"

    # Wave generation
    default_week_count: int = 7
    max_week_count: int = 52

    # Skip interactive lift pickers (CI, servers, piped stdin)
    headless: bool = False

    def resolved_catalog_path(self) -> Path:
        """Catalog location independent of the working directory.

        Absolute paths and relative paths that exist from the current
        directory are used as given; other relative paths are resolved
        against ``PROJECT_ROOT``.
        """
        path = Path(self.catalog_path).expanduser()
        if path.is_absolute() or path.exists():
            return path
        return PROJECT_ROOT / path


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
