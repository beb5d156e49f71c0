"""Map an exception and its cause chain to a single taxonomy category."""

import logging

from faultline.domain.chain import CATEGORIZATION_DEPTH_LIMIT, iter_cause_chain
from faultline.domain.errors import EngineError, ExceptionCategory
from faultline.domain.matching import MatchingMethod, describe_exception, matches
from faultline.domain.taxonomy.models import Taxonomy

logger = logging.getLogger(__name__)

UNKNOWN_CATEGORY = ExceptionCategory.UNKNOWN_ERROR.value


def extract_explicit_category(exc: BaseException) -> str | None:
    """Category explicitly assigned on a structured EngineError, ignoring UnknownError."""
    if isinstance(exc, EngineError) and exc.has_explicit_category:
        return ExceptionCategory(exc.category).value
    return None


def find_explicit_category(
    exc: BaseException,
    depth_limit: int = CATEGORIZATION_DEPTH_LIMIT,
) -> str | None:
    """First explicit category anywhere in the (bounded) cause chain."""
    for current in iter_cause_chain(exc, depth_limit):
        category = extract_explicit_category(current)
        if category is not None:
            return category
    return None


class CategoryClassifier:
    """
    Pattern-based classifier over an immutable taxonomy.

    For each exception in the chain, every category is tried under outline
    matching, then under keyword matching, then under type-name matching
    before the walk moves on to the cause.
    """

    def __init__(self, taxonomy: Taxonomy, *, depth_limit: int = CATEGORIZATION_DEPTH_LIMIT) -> None:
        if depth_limit < 1:
            raise ValueError(f"depth_limit must be >= 1, got {depth_limit}")
        self.taxonomy = taxonomy
        self.depth_limit = depth_limit

    def match(self, exc: BaseException) -> str | None:
        """Match a single exception (no cause walk). Returns the category name or None."""
        name, message = describe_exception(exc)
        for method in MatchingMethod:
            for category in self.taxonomy.categories:
                if matches(category, name, message, method):
                    logger.debug("Matched %s to %s via %s", name, category.name, method.name)
                    return category.name
        return None

    def classify(self, exc: BaseException) -> str:
        """Return the first category found along the cause chain, or UnknownError."""
        for current in iter_cause_chain(exc, self.depth_limit):
            category = extract_explicit_category(current) or self.match(current)
            if category is not None:
                return category
        return UNKNOWN_CATEGORY
