"""
Configuration management: models, loading, and validation.

Handles:
- ErrorHandlingConfig: classification and metrics settings
- Exception taxonomy loading from YAML/JSON (file, bytes or packaged default)
- Environment variable overrides

The loader module performs file I/O; models are pure Pydantic classes.
"""

from faultline.infrastructure.config.loader import (
    load_error_handling_config,
    load_taxonomy_bytes,
    load_taxonomy_config,
)
from faultline.infrastructure.config.models import ErrorHandlingConfig

__all__ = [
    "ErrorHandlingConfig",
    "load_error_handling_config",
    "load_taxonomy_config",
    "load_taxonomy_bytes",
]
