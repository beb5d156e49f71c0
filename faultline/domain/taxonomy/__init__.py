"""
Exception taxonomy: categories, types and exception outlines.

The taxonomy is built once from configuration data and never mutated.
All functions in this module are pure (no file I/O).
"""

from faultline.domain.taxonomy.loader import parse_taxonomy_config
from faultline.domain.taxonomy.models import Category, ErrorType, ExceptionOutline, Taxonomy

__all__ = [
    "Taxonomy",
    "Category",
    "ErrorType",
    "ExceptionOutline",
    "parse_taxonomy_config",
]
