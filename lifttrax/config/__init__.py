"""Application configuration module.

This module organizes configuration into specialized files:

- **settings.py**: Environment-based settings (Pydantic BaseSettings)
  - Catalog location, logging format, week limits, headless mode
  - Loaded from .env file via pydantic-settings (``LIFTTRAX_`` prefix)

- **wave_policy.py**: Fixed conjugate periodization constants
  - Percent ramp, set/rep schemes, circuit structure, canonical lift names
  - Not configurable per generation call
"""
from lifttrax.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
