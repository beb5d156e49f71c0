"""Parse taxonomy configuration from a YAML/JSON dict."""

from typing import Any

from faultline.domain.taxonomy.models import Taxonomy


def parse_taxonomy_config(data: dict[str, Any] | list[Any]) -> Taxonomy:
    """
    Parse pre-loaded exception data into a Taxonomy object.

    This is a pure function - it does NOT perform file I/O.
    The YAML loading happens in faultline.infrastructure.config.loader.

    Accepts either a mapping with a ``categories`` list or the bare list of
    categories used by the exception data file.

    Args:
        data: Result of yaml.safe_load() / json.load()

    Returns:
        Taxonomy with categories in declaration order

    Raises:
        ValueError: If the document shape is wrong or an entry is invalid
            (pydantic.ValidationError is a ValueError)
    """
    if isinstance(data, dict):
        if "categories" not in data:
            raise ValueError("exception data must define a 'categories' list")
        categories = data["categories"]
    else:
        categories = data

    if not isinstance(categories, list):
        raise ValueError(f"categories must be a list, got {type(categories).__name__}")

    for i, entry in enumerate(categories):
        if not isinstance(entry, dict):
            raise ValueError(f"category #{i} must be a mapping, got {type(entry).__name__}")

    return Taxonomy(categories=categories)
