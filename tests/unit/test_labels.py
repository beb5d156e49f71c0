import pytest

from faultline.domain import EngineError, EngineErrorType, ErrorOrigin, derive_label, remove_error_suffix, to_camel_case
from faultline.domain.labels import exception_to_pretty_string, pretty_label


@pytest.mark.parametrize(
    "value, expected",
    [
        ("PURE_QUERY_EXECUTION_ERROR", "PureQueryExecutionError"),
        ("service_execute", "ServiceExecute"),
        ("UNRECOGNISED", "Unrecognised"),
        (ErrorOrigin.DSB_EXECUTE, "DsbExecute"),
    ],
)
def test_to_camel_case(value, expected: str) -> None:
    assert to_camel_case(value) == expected


def test_remove_error_suffix() -> None:
    assert remove_error_suffix("ServiceExecuteError") == "ServiceExecute"
    assert remove_error_suffix("ServiceExecute") == "ServiceExecute"
    assert remove_error_suffix("ErrorError") == "Error"


@pytest.mark.parametrize(
    "label, expected",
    [
        ("compilationEngineError", "CompilationEngineError"),
        ("JsonGenerationException", "JsonGenerationError"),
        ("UnrecognisedException", "UnrecognisedError"),
        ("KeyboardInterrupt", "KeyboardInterruptError"),
    ],
)
def test_pretty_label(label: str, expected: str) -> None:
    assert pretty_label(label) == expected


def test_generic_wrapper_is_replaced_by_its_cause(make_chain) -> None:
    assert derive_label(make_chain(RuntimeError(), ZeroDivisionError()), "Unrecognised") == "ZeroDivisionError"
    assert derive_label(make_chain(Exception(), KeyError()), "Unrecognised") == "KeyError"
    assert derive_label(make_chain(EngineError(), ValueError()), "Unrecognised") == "ValueError"


def test_only_one_wrapper_is_peeled(make_chain) -> None:
    exc = make_chain(Exception(), RuntimeError(), TimeoutError())

    assert derive_label(exc, "Unrecognised") == "UnrecognisedRuntimeError"


def test_specific_exception_keeps_its_own_name_despite_cause(make_chain) -> None:
    assert derive_label(make_chain(ValueError(), KeyError()), "Unrecognised") == "ValueError"


def test_subclass_of_generic_is_not_peeled(make_chain) -> None:
    class WrapperError(RuntimeError):
        pass

    assert derive_label(make_chain(WrapperError(), KeyError()), "Unrecognised") == "WrapperError"


def test_anonymous_exceptions_get_the_origin_prefix() -> None:
    assert derive_label(RuntimeError(), "Unrecognised") == "UnrecognisedRuntimeError"
    assert derive_label(Exception(), "ServiceTestExecute") == "ServiceTestExecuteError"


def test_engine_error_prefix() -> None:
    assert derive_label(EngineError(error_type=EngineErrorType.COMPILATION), "Unrecognised") == (
        "CompilationEngineError"
    )
    assert derive_label(EngineError("x", error_type=EngineErrorType.PARSER), "DsbExecute") == "ParserEngineError"
    assert derive_label(EngineError(), "CompileModel") == "CompileModelEngineError"


def test_exception_to_pretty_string(make_chain) -> None:
    exc = make_chain(ValueError("bad"), KeyError("k"))

    assert exception_to_pretty_string(exc) == "Exception: ValueError. Message: bad. Cause: KeyError('k')"
    assert exception_to_pretty_string(RuntimeError()) == "Exception: RuntimeError. Message: None. Cause: None"
