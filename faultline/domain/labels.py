"""Metric label derivation and string helpers for pretty printing."""

from enum import Enum

from faultline.domain.chain import get_cause
from faultline.domain.errors import EngineError

# Wrappers that say nothing about the failure itself; the label comes from their cause.
GENERIC_EXCEPTION_CLASSES: tuple[type[BaseException], ...] = (Exception, RuntimeError, EngineError)

# Still anonymous after unwrapping: prefixed with the origin.
_ANONYMOUS_EXCEPTION_CLASSES: tuple[type[BaseException], ...] = (Exception, RuntimeError)

_EXCEPTION_SUFFIX = "Exception"
_ERROR_SUFFIX = "Error"


def to_camel_case(value: Enum | str) -> str:
    """
    Convert a SNAKE_CASE enum name (or string) to CamelCase.

    Examples:
        >>> to_camel_case("PURE_QUERY_EXECUTION_ERROR")
        'PureQueryExecutionError'
    """
    raw = value.name if isinstance(value, Enum) else str(value)
    return "".join(part[:1].upper() + part[1:] for part in raw.lower().split("_") if part)


def remove_error_suffix(value: str) -> str:
    """Drop a trailing "Error" if present."""
    return value[: -len(_ERROR_SUFFIX)] if value.endswith(_ERROR_SUFFIX) else value


def pretty_label(label: str) -> str:
    """Capitalize and normalize the suffix so every label ends in a single "Error"."""
    label = label[:1].upper() + label[1:]
    if label.endswith(_EXCEPTION_SUFFIX):
        label = label[: -len(_EXCEPTION_SUFFIX)]
    return remove_error_suffix(label) + _ERROR_SUFFIX


def derive_label(exc: BaseException, origin_token: str) -> str:
    """
    Derive the bounded-cardinality metric label for an exception.

    A generic wrapper (Exception, RuntimeError, EngineError) with a cause is
    replaced by its cause, once. Exceptions that remain anonymous are prefixed
    with the origin token; an EngineError is prefixed with its error type, or
    the origin token when it has none.

    Args:
        exc: The observed exception
        origin_token: Pretty-printed call-site name (e.g. "Unrecognised")

    Returns:
        Label such as "ZeroDivisionError", "UnrecognisedRuntimeError" or
        "CompilationEngineError"
    """
    if type(exc) in GENERIC_EXCEPTION_CLASSES:
        cause = get_cause(exc)
        if cause is not None:
            exc = cause

    name = type(exc).__name__
    if type(exc) in _ANONYMOUS_EXCEPTION_CLASSES:
        label = origin_token + name
    elif isinstance(exc, EngineError):
        error_type = exc.error_type
        prefix = origin_token if error_type is None else str(getattr(error_type, "value", error_type)).lower()
        label = prefix + name
    else:
        label = name
    return pretty_label(label)


def exception_to_pretty_string(exc: BaseException) -> str:
    """One-line description of an exception for log output."""
    cause = get_cause(exc)
    return "Exception: {}. Message: {}. Cause: {}".format(
        type(exc).__name__,
        str(exc) or None,
        "None" if cause is None else repr(cause),
    )
