"""Bounded iteration over an exception's cause chain."""

from collections.abc import Iterator

CATEGORIZATION_DEPTH_LIMIT = 5


def get_cause(exc: BaseException) -> BaseException | None:
    """
    Return the exception that caused ``exc``.

    Follows Python's chaining rules: an explicit ``__cause__`` (``raise ... from``)
    wins, otherwise the implicit ``__context__`` unless it was suppressed.
    """
    if exc.__cause__ is not None:
        return exc.__cause__
    if exc.__suppress_context__:
        return None
    return exc.__context__


def iter_cause_chain(
    exc: BaseException,
    depth_limit: int = CATEGORIZATION_DEPTH_LIMIT,
) -> Iterator[BaseException]:
    """
    Yield ``exc`` and its causes, at most ``depth_limit`` of them.

    Stops at the first exception already yielded (compared by identity, not
    equality), so self-referential and cyclic chains terminate.
    """
    seen: set[int] = set()
    current: BaseException | None = exc
    depth = 0
    while current is not None and depth < depth_limit and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = get_cause(current)
        depth += 1
