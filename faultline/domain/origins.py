"""Call-site origins passed alongside an observed exception."""

from enum import Enum
from typing import Protocol, runtime_checkable

from faultline.domain.labels import remove_error_suffix, to_camel_case


@runtime_checkable
class Origin(Protocol):
    """
    Anything with a stable ``name`` can be an origin; every Enum member qualifies.

    An origin may also expose ``friendly_name`` (attribute, property or
    zero-argument method) to control how it is printed.
    """

    @property
    def name(self) -> str: ...


class ErrorOrigin(Enum):
    """Known engine call sites."""

    PURE_QUERY_EXECUTION = "pure_query_execution"
    GENERATE_PLAN = "generate_plan"
    LAMBDA_RETURN_TYPE = "lambda_return_type"

    COMPILE_MODEL = "compile_model"
    MODEL_RESOLVE = "model_resolve"

    SERVICE_TEST_EXECUTE = "service_test_execute"
    SERVICE_EXECUTE = "service_execute"

    TDS_PROTOCOL = "tds_protocol"
    TDS_EXECUTE = "tds_execute"
    TDS_GENERATE_CODE = "tds_generate_code"
    TDS_SCHEMA = "tds_schema"
    TDS_LAMBDA = "tds_lambda"
    TDS_METADATA = "tds_metadata"
    TDS_INPUTS = "tds_inputs"

    DSB_EXECUTE = "dsb_execute"

    ERROR_MANAGEMENT = "error_management"
    UNRECOGNISED = "unrecognised"

    @property
    def friendly_name(self) -> str:
        return to_camel_case(self)


def origin_friendly_name(origin: Origin) -> str:
    friendly = getattr(origin, "friendly_name", None)
    if callable(friendly):
        friendly = friendly()
    if isinstance(friendly, str) and friendly:
        return friendly
    name = getattr(origin, "name", None)
    if not isinstance(name, str) or not name:
        raise TypeError(f"origin must have a non-empty 'name', got {origin!r}")
    return to_camel_case(name)


def origin_source(origin: Origin) -> str:
    """Metric ``source`` value for an origin, e.g. SERVICE_EXECUTE_ERROR -> "ServiceExecute"."""
    return remove_error_suffix(origin_friendly_name(origin))
