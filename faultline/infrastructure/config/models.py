"""Configuration models (Pydantic classes)."""

import logging
from pathlib import Path

from pydantic import BaseModel, Field, field_validator

from faultline.domain.chain import CATEGORIZATION_DEPTH_LIMIT


class ErrorHandlingConfig(BaseModel):
    """
    Error handling configuration.
    - Loaded from error_handling.yaml (optional) and FAULTLINE_* env vars
    - Consumed by build_error_observer() and the CLI
    """

    taxonomy_file: Path | None = Field(
        default=None,
        description="Exception data file (YAML or JSON). None uses the packaged default.",
    )
    categorisation_enabled: bool = Field(
        default=True,
        description="If false, skip pattern matching; only explicit EngineError categories are reported.",
    )
    depth_limit: int = Field(
        default=CATEGORIZATION_DEPTH_LIMIT,
        ge=1,
        description="Maximum number of exceptions inspected along a cause chain.",
    )

    # Metrics
    metric_name: str = Field(default="engine_error_total", min_length=1)
    metric_description: str = "Count errors in the engine"
    meter_name: str = Field(default="faultline", min_length=1)

    log_level: str = "INFO"

    @field_validator("log_level")
    @classmethod
    def _valid_log_level(cls, v: str) -> str:
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v!r}")
        return level
