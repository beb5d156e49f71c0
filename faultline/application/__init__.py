"""
Application layer: Use cases and workflow orchestration.

This layer coordinates between domain logic and infrastructure: it combines
explicit categories, the pattern classifier and the label deriver, and
hands the result to the error counter.
"""

from faultline.application.constants import SERVICE_NOT_APPLICABLE
from faultline.application.observer import ErrorObservation, ErrorObserver, build_error_observer

__all__ = [
    # Main workflow
    "ErrorObserver",
    "ErrorObservation",
    "build_error_observer",
    # Constants
    "SERVICE_NOT_APPLICABLE",
]
