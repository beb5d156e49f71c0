"""
faultline: classify runtime failures into operator-facing categories and
record them on a bounded-cardinality error counter.

Typical use::

    observer = build_error_observer(load_error_handling_config())
    try:
        ...
    except Exception as e:
        observer.observe_error(ErrorOrigin.SERVICE_EXECUTE, e, "service/path")
        raise
"""

from faultline.application import ErrorObservation, ErrorObserver, build_error_observer
from faultline.domain import (
    EngineError,
    EngineErrorType,
    ErrorOrigin,
    ExceptionCategory,
    Taxonomy,
    TaxonomyConfigError,
)
from faultline.infrastructure import (
    ErrorCounter,
    ErrorHandlingConfig,
    InMemoryErrorCounter,
    load_error_handling_config,
    load_taxonomy_config,
    make_error_counter,
)

__version__ = "0.1.0"

__all__ = [
    "ErrorObserver",
    "ErrorObservation",
    "build_error_observer",
    "EngineError",
    "EngineErrorType",
    "ErrorOrigin",
    "ExceptionCategory",
    "Taxonomy",
    "TaxonomyConfigError",
    "ErrorCounter",
    "InMemoryErrorCounter",
    "make_error_counter",
    "ErrorHandlingConfig",
    "load_error_handling_config",
    "load_taxonomy_config",
]
