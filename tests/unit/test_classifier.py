import pytest

from faultline.domain import (
    UNKNOWN_CATEGORY,
    CategoryClassifier,
    EngineError,
    ExceptionCategory,
    Taxonomy,
    extract_explicit_category,
    find_explicit_category,
)


def test_outline_beats_keyword_declared_earlier(priority_taxonomy: Taxonomy) -> None:
    assert CategoryClassifier(priority_taxonomy).classify(ValueError("boom")) == "OutlineSecond"


def test_keyword_beats_type_name_declared_earlier(priority_taxonomy: Taxonomy) -> None:
    assert CategoryClassifier(priority_taxonomy).classify(LookupError("bang")) == "KeywordFourth"


def test_type_name_is_the_last_resort(priority_taxonomy: Taxonomy) -> None:
    classifier = CategoryClassifier(priority_taxonomy)

    assert classifier.classify(ValueError("nothing")) == "KeywordFirst"
    assert classifier.classify(LookupError("nothing")) == "TypeNameThird"


def test_current_exception_is_tried_before_its_cause(priority_taxonomy: Taxonomy, make_chain) -> None:
    exc = make_chain(LookupError("x"), ValueError("boom"))

    assert CategoryClassifier(priority_taxonomy).classify(exc) == "TypeNameThird"


def test_cause_is_inspected_when_outer_does_not_match(priority_taxonomy: Taxonomy, make_chain) -> None:
    exc = make_chain(Exception("plain"), RuntimeError("plain"), ValueError("boom"))

    assert CategoryClassifier(priority_taxonomy).classify(exc) == "OutlineSecond"


def test_depth_limit(priority_taxonomy: Taxonomy, make_chain) -> None:
    exc = make_chain(*[Exception("plain") for _ in range(5)], ValueError("boom"))

    assert CategoryClassifier(priority_taxonomy).classify(exc) == UNKNOWN_CATEGORY
    assert CategoryClassifier(priority_taxonomy, depth_limit=7).classify(exc) == "OutlineSecond"


def test_depth_limit_must_be_positive(priority_taxonomy: Taxonomy) -> None:
    with pytest.raises(ValueError):
        CategoryClassifier(priority_taxonomy, depth_limit=0)


def test_cycles_terminate_with_unknown(priority_taxonomy: Taxonomy, make_chain) -> None:
    a, b, c = Exception("a"), Exception("b"), Exception("c")
    make_chain(a, b, c, a)

    assert CategoryClassifier(priority_taxonomy).classify(a) == UNKNOWN_CATEGORY


def test_empty_taxonomy_classifies_everything_as_unknown() -> None:
    assert CategoryClassifier(Taxonomy()).classify(ValueError("boom")) == UNKNOWN_CATEGORY


def test_explicit_category_on_current_exception_wins(priority_taxonomy: Taxonomy) -> None:
    exc = EngineError("boom", category=ExceptionCategory.OTHER_ERROR)

    assert CategoryClassifier(priority_taxonomy).classify(exc) == "OtherError"


def test_pattern_match_on_outer_wins_over_explicit_cause(default_taxonomy: Taxonomy, make_chain) -> None:
    exc = make_chain(Exception("kerberos"), EngineError(category=ExceptionCategory.INTERNAL_SERVER_ERROR))

    assert CategoryClassifier(default_taxonomy).classify(exc) == "UserAuthenticationError"


def test_extract_explicit_category_ignores_unknown_and_plain_exceptions() -> None:
    assert extract_explicit_category(EngineError(category=ExceptionCategory.UNKNOWN_ERROR)) is None
    assert extract_explicit_category(EngineError()) is None
    assert extract_explicit_category(ValueError()) is None
    assert extract_explicit_category(EngineError(category=ExceptionCategory.USER_EXECUTION_ERROR)) == (
        "UserExecutionError"
    )


def test_find_explicit_category_searches_the_chain(make_chain) -> None:
    exc = make_chain(
        Exception(),
        EngineError(category=ExceptionCategory.UNKNOWN_ERROR),
        EngineError(category=ExceptionCategory.INTERNAL_SERVER_ERROR),
    )

    assert find_explicit_category(exc) == "InternalServerError"
    assert find_explicit_category(exc, depth_limit=2) is None
