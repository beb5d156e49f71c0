"""Pattern matching between an exception and a taxonomy category."""

from enum import Enum

from faultline.domain.taxonomy.models import Category


class MatchingMethod(Enum):
    """Matching strategies, declared in priority order."""

    EXCEPTION_OUTLINE_MATCHING = "exception_outline"
    KEYWORDS_MATCHING = "keywords"
    TYPE_NAME_MATCHING = "type_name"


def describe_exception(exc: BaseException) -> tuple[str, str]:
    """Return the (simple class name, message) pair used for matching."""
    try:
        message = str(exc)
    except Exception:  # noqa: BLE001
        message = ""
    return type(exc).__name__, message or ""


def matches_keyword(category: Category, name: str, message: str) -> bool:
    """Any keyword found in the message or in the class name."""
    return any(p.search(message) or p.search(name) for p in category.keyword_patterns)


def matches_outline(category: Category, name: str, message: str) -> bool:
    """Any outline with this exact class name whose regex is found in the message."""
    return any(t.has_matching_exception_outline(name, message) for t in category.types)


def matches_type_name(category: Category, name: str) -> bool:
    """Any non-empty type name regex found in the class name."""
    return any(t.has_matching_type_name(name) for t in category.types)


def matches(category: Category, name: str, message: str | None, method: MatchingMethod) -> bool:
    message = message or ""
    if method is MatchingMethod.EXCEPTION_OUTLINE_MATCHING:
        return matches_outline(category, name, message)
    if method is MatchingMethod.KEYWORDS_MATCHING:
        return matches_keyword(category, name, message)
    if method is MatchingMethod.TYPE_NAME_MATCHING:
        return matches_type_name(category, name)
    raise ValueError(f"Invalid matching method: {method!r}")


def matches_any(category: Category, name: str, message: str | None) -> bool:
    return any(matches(category, name, message, method) for method in MatchingMethod)
