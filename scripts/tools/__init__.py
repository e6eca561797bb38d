"""
Wave Generation Tools Package

Command-line tools for working with the exercise catalog and generating
conjugate training waves outside the HTTP API.

Core modules:
- wave_cli: Command-line interface for wave generation and catalog listing
"""

__version__ = "1.0.0"
