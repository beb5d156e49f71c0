"""OpenTelemetry-backed error counter."""

from __future__ import annotations

import logging

from opentelemetry import metrics

from faultline.infrastructure.config.models import ErrorHandlingConfig
from faultline.infrastructure.metrics.base import ErrorCounter

logger = logging.getLogger(__name__)


class OtelErrorCounter(ErrorCounter):
    """
    Error counter exported through an OpenTelemetry meter.

    Uses the global meter provider unless a meter is given; without an
    initialized SDK the global provider is a no-op.
    """

    def __init__(
        self,
        *,
        name: str = "engine_error_total",
        description: str = "Count errors in the engine",
        meter: metrics.Meter | None = None,
        meter_name: str = "faultline",
    ) -> None:
        self.name = name
        self.meter = meter if meter is not None else metrics.get_meter(meter_name)
        self.counter = self.meter.create_counter(name, unit="{error}", description=description)
        logger.debug("Created OTel counter %s", name)

    @classmethod
    def from_cfg(cls, cfg: ErrorHandlingConfig, *, meter: metrics.Meter | None = None) -> OtelErrorCounter:
        return cls(
            name=cfg.metric_name,
            description=cfg.metric_description,
            meter=meter,
            meter_name=cfg.meter_name,
        )

    def increment_error_counter(self, label: str, category: str, source: str, service: str) -> None:
        self.counter.add(1, attributes=self.attributes(label, category, source, service))
