"""Shared test fixtures."""

from collections.abc import Callable

import pytest

from faultline.application import ErrorObserver
from faultline.domain import CategoryClassifier, Taxonomy
from faultline.infrastructure.config import load_taxonomy_bytes, load_taxonomy_config
from faultline.infrastructure.metrics import InMemoryErrorCounter

PRIORITY_TAXONOMY_YAML = """
categories:
  - CategoryName: KeywordFirst
    Keywords: ["boom"]
    Types:
      - TypeName: Names
        TypeExceptionRegex: "^Value"
  - CategoryName: OutlineSecond
    Types:
      - TypeName: Outlines
        Exceptions:
          - ExceptionName: ValueError
            MessageRegex: "boom"
  - CategoryName: TypeNameThird
    Types:
      - TypeName: Names
        TypeExceptionRegex: "^Lookup"
  - CategoryName: KeywordFourth
    Keywords: ["bang"]
"""


@pytest.fixture(scope="session")
def default_taxonomy() -> Taxonomy:
    return load_taxonomy_config()


@pytest.fixture
def priority_taxonomy() -> Taxonomy:
    return load_taxonomy_bytes(PRIORITY_TAXONOMY_YAML)


@pytest.fixture
def classifier(default_taxonomy: Taxonomy) -> CategoryClassifier:
    return CategoryClassifier(default_taxonomy)


@pytest.fixture
def counter() -> InMemoryErrorCounter:
    return InMemoryErrorCounter()


@pytest.fixture
def observer(counter: InMemoryErrorCounter, default_taxonomy: Taxonomy) -> ErrorObserver:
    return ErrorObserver(counter, taxonomy=default_taxonomy)


@pytest.fixture
def make_chain() -> Callable[..., BaseException]:
    """Link exceptions so each one is the __cause__ of the previous; returns the first."""

    def _chain(*excs: BaseException) -> BaseException:
        for outer, inner in zip(excs, excs[1:]):
            outer.__cause__ = inner
        return excs[0]

    return _chain
