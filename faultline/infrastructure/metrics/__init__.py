"""
Error counter backends.

Implements the collaborator that receives one increment per observed error:
- OpenTelemetry (global or injected meter)
- In-memory (for tests and the CLI)

All backends implement the ErrorCounter interface.
"""

from faultline.infrastructure.metrics.base import LABEL_NAMES, ErrorCounter
from faultline.infrastructure.metrics.factory import make_error_counter
from faultline.infrastructure.metrics.memory import InMemoryErrorCounter
from faultline.infrastructure.metrics.otel import OtelErrorCounter

__all__ = [
    # Abstract base
    "ErrorCounter",
    "LABEL_NAMES",
    # Concrete implementations
    "OtelErrorCounter",
    "InMemoryErrorCounter",
    # Factory (most commonly used)
    "make_error_counter",
]
