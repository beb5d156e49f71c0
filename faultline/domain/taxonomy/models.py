"""Exception taxonomy models: categories, types and exception outlines."""

import re
from functools import cached_property

from pydantic import BaseModel, ConfigDict, Field, field_validator

_MODEL_CONFIG = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")


def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.IGNORECASE)


def _check_pattern(value: str) -> str:
    try:
        _compile(value)
    except re.error as e:
        raise ValueError(f"invalid regular expression {value!r}: {e}") from e
    return value


def _none_as_empty(value: object) -> object:
    return () if value is None else value


class ExceptionOutline(BaseModel):
    """Exact exception class name paired with a message regex."""

    model_config = _MODEL_CONFIG

    exception_name: str = Field(..., alias="ExceptionName", min_length=1)
    message_regex: str = Field(default="", alias="MessageRegex")

    @field_validator("message_regex", mode="before")
    @classmethod
    def _message_regex(cls, v: object) -> object:
        return "" if v is None else v

    @field_validator("message_regex")
    @classmethod
    def _valid_message_regex(cls, v: str) -> str:
        return _check_pattern(v)

    @cached_property
    def message_pattern(self) -> re.Pattern[str]:
        return _compile(self.message_regex)

    def matches(self, name: str, message: str) -> bool:
        """Class name must be identical; the message only has to contain the regex."""
        return name == self.exception_name and self.message_pattern.search(message) is not None


class ErrorType(BaseModel):
    """Sub-grouping of patterns within a category."""

    model_config = _MODEL_CONFIG

    type_name: str = Field(default="", alias="TypeName")
    type_name_regex: str | None = Field(default=None, alias="TypeExceptionRegex")
    exceptions: tuple[ExceptionOutline, ...] = Field(default=(), alias="Exceptions")

    _none_as_empty = field_validator("exceptions", mode="before")(_none_as_empty)

    @field_validator("type_name_regex")
    @classmethod
    def _valid_type_name_regex(cls, v: str | None) -> str | None:
        return None if v is None else _check_pattern(v)

    @cached_property
    def type_name_pattern(self) -> re.Pattern[str] | None:
        # An empty pattern would match every class name, so it never matches instead.
        if not self.type_name_regex:
            return None
        return _compile(self.type_name_regex)

    def has_matching_exception_outline(self, name: str, message: str) -> bool:
        return any(outline.matches(name, message) for outline in self.exceptions)

    def has_matching_type_name(self, name: str) -> bool:
        pattern = self.type_name_pattern
        return pattern is not None and pattern.search(name) is not None


class Category(BaseModel):
    """Operator-facing error category and the patterns that select it."""

    model_config = _MODEL_CONFIG

    name: str = Field(..., alias="CategoryName", min_length=1)
    keywords: tuple[str, ...] = Field(default=(), alias="Keywords")
    types: tuple[ErrorType, ...] = Field(default=(), alias="Types")

    _none_as_empty = field_validator("keywords", "types", mode="before")(_none_as_empty)

    @field_validator("keywords")
    @classmethod
    def _valid_keywords(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        for keyword in v:
            _check_pattern(keyword)
        return v

    @cached_property
    def keyword_patterns(self) -> tuple[re.Pattern[str], ...]:
        return tuple(_compile(k) for k in self.keywords)


class Taxonomy(BaseModel):
    """Ordered, immutable list of categories; declaration order breaks ties."""

    model_config = _MODEL_CONFIG

    categories: tuple[Category, ...] = Field(default=())

    @field_validator("categories")
    @classmethod
    def _unique_names(cls, v: tuple[Category, ...]) -> tuple[Category, ...]:
        names = [c.name for c in v]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueError(f"duplicate category names: {duplicates}")
        return v

    @property
    def category_names(self) -> list[str]:
        return [c.name for c in self.categories]

    def get(self, name: str) -> Category | None:
        return next((c for c in self.categories if c.name == name), None)
