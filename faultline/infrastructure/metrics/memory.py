"""In-process error counter for tests and the CLI."""

import logging
import threading
from collections import Counter

from faultline.infrastructure.metrics.base import ErrorCounter

logger = logging.getLogger(__name__)

Series = tuple[str, str, str, str]


class InMemoryErrorCounter(ErrorCounter):
    """Error counter that keeps samples in a dict keyed by (label, category, source, service)."""

    def __init__(self, name: str = "engine_error_total") -> None:
        self.name = name
        self._samples: Counter[Series] = Counter()
        self._lock = threading.Lock()

    def increment_error_counter(self, label: str, category: str, source: str, service: str) -> None:
        with self._lock:
            self._samples[(label, category, source, service)] += 1
        logger.debug("%s{%s,%s,%s,%s} += 1", self.name, label, category, source, service)

    def get_sample_value(self, label: str, category: str, source: str, service: str) -> int:
        """Current value of one series (0 if never incremented)."""
        with self._lock:
            return self._samples[(label, category, source, service)]

    def samples(self) -> dict[Series, int]:
        with self._lock:
            return dict(self._samples)

    def total(self) -> int:
        with self._lock:
            return sum(self._samples.values())

    def clear(self) -> None:
        with self._lock:
            self._samples.clear()
