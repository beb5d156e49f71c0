"""Error observation workflow: classify an exception and record it on the error counter."""

import logging
import threading
from collections.abc import Callable

from pydantic import BaseModel, ConfigDict

from faultline.application.constants import ERROR_LOG_TEMPLATE, SERVICE_NOT_APPLICABLE
from faultline.domain.chain import CATEGORIZATION_DEPTH_LIMIT
from faultline.domain.classifier import UNKNOWN_CATEGORY, CategoryClassifier, find_explicit_category
from faultline.domain.errors import TaxonomyConfigError
from faultline.domain.labels import derive_label, exception_to_pretty_string
from faultline.domain.origins import ErrorOrigin, Origin, origin_source
from faultline.domain.taxonomy.models import Taxonomy
from faultline.infrastructure.config.loader import load_taxonomy_config
from faultline.infrastructure.config.models import ErrorHandlingConfig
from faultline.infrastructure.metrics.base import ErrorCounter
from faultline.infrastructure.metrics.factory import make_error_counter
from faultline.infrastructure.observability.logging import reset_log_context, set_log_context

logger = logging.getLogger(__name__)

TaxonomyLoader = Callable[[], Taxonomy]


class ErrorObservation(BaseModel):
    """Values recorded on the error counter for one observed exception."""

    model_config = ConfigDict(frozen=True)

    label: str
    category: str
    source: str
    service: str


class ErrorObserver:
    """
    Classifies observed exceptions and records them on an ErrorCounter.

    The taxonomy is either given up front or loaded lazily, exactly once, by
    ``taxonomy_loader`` on first use. A loading failure is itself recorded
    (category ConfigurationError) and raised as TaxonomyConfigError; it is
    sticky, so later calls raise the same error without reloading.

    Category resolution: an explicit category on an EngineError anywhere in
    the cause chain wins; otherwise the pattern classifier walks the chain.
    """

    def __init__(
        self,
        counter: ErrorCounter,
        *,
        taxonomy: Taxonomy | None = None,
        taxonomy_loader: TaxonomyLoader | None = None,
        depth_limit: int = CATEGORIZATION_DEPTH_LIMIT,
        categorisation_enabled: bool = True,
    ) -> None:
        if taxonomy is None and taxonomy_loader is None:
            raise ValueError("Either taxonomy or taxonomy_loader is required")
        if depth_limit < 1:
            raise ValueError(f"depth_limit must be >= 1, got {depth_limit}")

        self.counter = counter
        self.depth_limit = depth_limit
        self.categorisation_enabled = categorisation_enabled

        self._taxonomy_loader = taxonomy_loader
        self._classifier: CategoryClassifier | None = (
            CategoryClassifier(taxonomy, depth_limit=depth_limit) if taxonomy is not None else None
        )
        self._init_error: TaxonomyConfigError | None = None
        # Re-entrant: observe_error() holds it while calling initialize().
        self._lock = threading.RLock()

    @classmethod
    def from_cfg(cls, cfg: ErrorHandlingConfig, counter: ErrorCounter) -> "ErrorObserver":
        return cls(
            counter,
            taxonomy_loader=lambda: load_taxonomy_config(cfg.taxonomy_file),
            depth_limit=cfg.depth_limit,
            categorisation_enabled=cfg.categorisation_enabled,
        )

    @property
    def initialized(self) -> bool:
        return self._classifier is not None

    def initialize(self) -> CategoryClassifier:
        """Load the taxonomy if needed and return the classifier."""
        with self._lock:
            if self._classifier is not None:
                return self._classifier
            if self._init_error is not None:
                raise self._init_error

            try:
                taxonomy = self._taxonomy_loader()  # type: ignore[misc]
            except Exception as e:
                logger.warning("Error reading exception categorisation data: %s", exception_to_pretty_string(e))
                error = TaxonomyConfigError(f"Cannot read exception data: {e}")
                error.__cause__ = e
                self._init_error = error
                self._record(ErrorOrigin.ERROR_MANAGEMENT, error, None, classifier=None)
                raise error

            self._classifier = CategoryClassifier(taxonomy, depth_limit=self.depth_limit)
            return self._classifier

    def classify(self, origin: Origin, exception: BaseException, service: str | None = None) -> ErrorObservation:
        """Compute the counter values for an exception without recording them."""
        self._check_arguments(origin, exception)
        with self._lock:
            classifier = self.initialize() if self.categorisation_enabled else None
            return self._observation(origin, exception, service, classifier)

    def observe_error(self, origin: Origin, exception: BaseException, service: str | None = None) -> None:
        """
        Record an exception on the error counter.

        Args:
            origin: Call site that observed the failure (any Enum member, or an object with ``name``)
            exception: The non-null exception to classify
            service: Service path whose execution raised it, if any

        Raises:
            ValueError: If origin or exception is None
            TypeError: If exception is not an exception instance
            TaxonomyConfigError: If the taxonomy could not be loaded
        """
        self._check_arguments(origin, exception)
        with self._lock:
            classifier = self.initialize() if self.categorisation_enabled else None
            self._record(origin, exception, service, classifier=classifier)

    @staticmethod
    def _check_arguments(origin: Origin, exception: BaseException) -> None:
        if origin is None:
            raise ValueError("Exception origin must not be None")
        if exception is None:
            raise ValueError("Exception must not be None")
        if not isinstance(exception, BaseException):
            raise TypeError(f"Expected an exception instance, got {type(exception).__name__}")

    def _observation(
        self,
        origin: Origin,
        exception: BaseException,
        service: str | None,
        classifier: CategoryClassifier | None,
    ) -> ErrorObservation:
        source = origin_source(origin)
        category = find_explicit_category(exception, self.depth_limit)
        if category is None:
            category = classifier.classify(exception) if classifier is not None else UNKNOWN_CATEGORY
        return ErrorObservation(
            label=derive_label(exception, source),
            category=category,
            source=source,
            service=SERVICE_NOT_APPLICABLE if service is None else service,
        )

    def _record(
        self,
        origin: Origin,
        exception: BaseException,
        service: str | None,
        *,
        classifier: CategoryClassifier | None,
    ) -> ErrorObservation:
        obs = self._observation(origin, exception, service, classifier)
        tokens = set_log_context(origin=obs.source, service=obs.service)
        try:
            self.counter.increment_error_counter(obs.label, obs.category, obs.source, obs.service)
            logger.error(
                ERROR_LOG_TEMPLATE,
                obs.label,
                obs.category,
                obs.source,
                obs.service,
                exception_to_pretty_string(exception),
            )
        finally:
            reset_log_context(tokens)
        return obs


def build_error_observer(
    cfg: ErrorHandlingConfig | None = None,
    *,
    counter: ErrorCounter | None = None,
    use_memory: bool = False,
) -> ErrorObserver:
    """
    Wire an ErrorObserver from configuration.

    Args:
        cfg: Error handling configuration (defaults to ErrorHandlingConfig())
        counter: Error counter to record on; built by make_error_counter() if omitted
        use_memory: Build an InMemoryErrorCounter instead of the OpenTelemetry one
    """
    cfg = cfg or ErrorHandlingConfig()
    if counter is None:
        counter = make_error_counter(cfg, use_memory=use_memory)
    logger.info(
        "Error observer configured (metric=%s, categorisation=%s, depth_limit=%d)",
        counter.name,
        cfg.categorisation_enabled,
        cfg.depth_limit,
    )
    return ErrorObserver.from_cfg(cfg, counter)
