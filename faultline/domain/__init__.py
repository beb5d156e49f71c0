"""
Domain layer: classification logic with minimal external dependencies.

Contains:
- taxonomy: immutable category/type/outline models and their parser
- matching: the three matching strategies
- classifier: priority-ordered, depth-bounded walk over the cause chain
- labels: metric label derivation
- origins: call-site tokens
- errors: structured EngineError and the category vocabulary
"""

from faultline.domain.chain import CATEGORIZATION_DEPTH_LIMIT, get_cause, iter_cause_chain
from faultline.domain.classifier import (
    UNKNOWN_CATEGORY,
    CategoryClassifier,
    extract_explicit_category,
    find_explicit_category,
)
from faultline.domain.errors import EngineError, EngineErrorType, ExceptionCategory, TaxonomyConfigError
from faultline.domain.labels import derive_label, remove_error_suffix, to_camel_case
from faultline.domain.matching import MatchingMethod, matches, matches_any
from faultline.domain.origins import ErrorOrigin, Origin, origin_friendly_name, origin_source
from faultline.domain.taxonomy import Category, ErrorType, ExceptionOutline, Taxonomy, parse_taxonomy_config

__all__ = [
    # Taxonomy
    "Taxonomy",
    "Category",
    "ErrorType",
    "ExceptionOutline",
    "parse_taxonomy_config",
    # Matching / classification
    "MatchingMethod",
    "matches",
    "matches_any",
    "CategoryClassifier",
    "extract_explicit_category",
    "find_explicit_category",
    "UNKNOWN_CATEGORY",
    # Cause chain
    "CATEGORIZATION_DEPTH_LIMIT",
    "get_cause",
    "iter_cause_chain",
    # Labels / origins
    "derive_label",
    "remove_error_suffix",
    "to_camel_case",
    "ErrorOrigin",
    "Origin",
    "origin_friendly_name",
    "origin_source",
    # Errors
    "EngineError",
    "EngineErrorType",
    "ExceptionCategory",
    "TaxonomyConfigError",
]
