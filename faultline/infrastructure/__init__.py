"""
Infrastructure layer: External dependencies and I/O boundaries.

Contains adapters for:
- Error counter backends (OpenTelemetry, in-memory)
- Configuration loading (YAML, environment)
- Observability (logging)

This is the only layer that performs I/O operations.
"""

# Most commonly used - exposed at top level for convenience
from faultline.infrastructure.config import (
    ErrorHandlingConfig,
    load_error_handling_config,
    load_taxonomy_config,
)
from faultline.infrastructure.metrics import ErrorCounter, InMemoryErrorCounter, make_error_counter

__all__ = [
    # Error counters (most commonly used)
    "make_error_counter",
    "ErrorCounter",
    "InMemoryErrorCounter",
    # Configuration (most commonly used)
    "load_error_handling_config",
    "load_taxonomy_config",
    "ErrorHandlingConfig",
]
