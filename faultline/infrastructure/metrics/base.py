"""Base interface for error counter backends."""

from abc import ABC, abstractmethod

# Dimension names of the error counter, in increment_error_counter() argument order.
LABEL_NAMES: tuple[str, str, str, str] = ("exceptionLabel", "category", "source", "serviceName")


class ErrorCounter(ABC):
    """
    Abstract base class for the error counter collaborator.

    All concrete counters must implement:
    - increment_error_counter(): add one to the (label, category, source, service) series
    """

    name: str

    @abstractmethod
    def increment_error_counter(self, label: str, category: str, source: str, service: str) -> None:
        """Increment the four-dimensional error counter by one. Must be safe to call concurrently."""
        raise NotImplementedError

    @staticmethod
    def attributes(label: str, category: str, source: str, service: str) -> dict[str, str]:
        return dict(zip(LABEL_NAMES, (label, category, source, service)))
