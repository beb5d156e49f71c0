"""Structured engine exceptions and the operator-facing category vocabulary."""

from enum import Enum


class ExceptionCategory(str, Enum):
    """Operator-facing error categories (value is the friendly metric name)."""

    USER_AUTHENTICATION_ERROR = "UserAuthenticationError"
    USER_EXECUTION_ERROR = "UserExecutionError"
    INTERNAL_SERVER_ERROR = "InternalServerError"
    SERVER_EXECUTION_ERROR = "ServerExecutionError"
    OTHER_ERROR = "OtherError"
    CONFIGURATION_ERROR = "ConfigurationError"
    UNKNOWN_ERROR = "UnknownError"


class EngineErrorType(str, Enum):
    """Engine phase in which a structured error was raised."""

    COMPILATION = "COMPILATION"
    PARSER = "PARSER"
    EXECUTION = "EXECUTION"


class EngineError(Exception):
    """
    Structured engine exception.

    Carries an optional explicit category (which takes precedence over any
    pattern-matched category) and an optional error type used when deriving
    the metric label. Without a cause it is treated like a generic wrapper.
    """

    def __init__(
        self,
        message: str | None = None,
        *,
        category: ExceptionCategory | str | None = None,
        error_type: EngineErrorType | str | None = None,
    ) -> None:
        super().__init__(*(() if message is None else (message,)))
        self.category = None if category is None else ExceptionCategory(category)
        self.error_type = None if error_type is None else EngineErrorType(error_type)

    @property
    def has_explicit_category(self) -> bool:
        return self.category is not None and self.category is not ExceptionCategory.UNKNOWN_ERROR


class TaxonomyConfigError(EngineError):
    """The exception taxonomy could not be loaded, parsed or validated."""

    def __init__(self, message: str) -> None:
        super().__init__(message, category=ExceptionCategory.CONFIGURATION_ERROR)
