"""Factory for creating error counter backends."""

import logging

from opentelemetry import metrics

from faultline.infrastructure.config.models import ErrorHandlingConfig

from .base import ErrorCounter
from .memory import InMemoryErrorCounter
from .otel import OtelErrorCounter

logger = logging.getLogger(__name__)


def make_error_counter(
    cfg: ErrorHandlingConfig,
    *,
    use_memory: bool = False,
    meter: metrics.Meter | None = None,
) -> ErrorCounter:
    """
    Factory function to create the error counter backend.
    Args:
        cfg: Error handling configuration (metric and meter names)
        use_memory: If True, use the InMemoryErrorCounter instead of OpenTelemetry
        meter: Optional meter for the OpenTelemetry counter (defaults to the global provider)
    Returns:
        An ErrorCounter instance.
    """
    if use_memory:
        logger.info("Using in-memory error counter (%s)", cfg.metric_name)
        return InMemoryErrorCounter(name=cfg.metric_name)
    return OtelErrorCounter.from_cfg(cfg, meter=meter)
