"""Configuration loading from YAML files."""

import logging
import os
from collections.abc import Mapping
from importlib.resources import files
from pathlib import Path
from typing import Any

import yaml

from faultline.domain.taxonomy.loader import parse_taxonomy_config
from faultline.domain.taxonomy.models import Taxonomy
from faultline.infrastructure.config.models import ErrorHandlingConfig
from faultline.infrastructure.constants import (
    DEFAULT_TAXONOMY_RESOURCE,
    ENV_PREFIX,
    ERROR_HANDLING_FILE,
    RESOURCES_PACKAGE,
)

logger = logging.getLogger(__name__)

# ErrorHandlingConfig field -> env var suffix
_ENV_OVERRIDES = {
    "taxonomy_file": "TAXONOMY_FILE",
    "categorisation_enabled": "CATEGORISATION_ENABLED",
    "depth_limit": "DEPTH_LIMIT",
    "metric_name": "METRIC_NAME",
    "log_level": "LOG_LEVEL",
}


def _parse_yaml(text: str | bytes, source: str) -> Any:
    data = yaml.safe_load(text)
    if data is None:
        raise ValueError(f"Empty document: {source}")
    return data


def _load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML file and return as dict."""
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    with path.open("r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Expected YAML dict in {path}, got {type(data)}")

    return data


def load_taxonomy_bytes(data: str | bytes, *, source: str = "<bytes>") -> Taxonomy:
    """Parse exception data (YAML, or JSON which is a YAML subset) into a Taxonomy."""
    return parse_taxonomy_config(_parse_yaml(data, source))


def load_taxonomy_config(path: Path | None = None) -> Taxonomy:
    """
    Load the exception taxonomy.

    This function handles file I/O, then delegates parsing to domain layer.

    Args:
        path: Exception data file. None loads the copy packaged with faultline.

    Raises:
        FileNotFoundError: If the file does not exist
        yaml.YAMLError: If the file is not valid YAML/JSON
        ValueError: If the document does not describe a valid taxonomy
    """
    if path is None:
        resource = files(RESOURCES_PACKAGE).joinpath(DEFAULT_TAXONOMY_RESOURCE)
        source = f"{RESOURCES_PACKAGE}:{DEFAULT_TAXONOMY_RESOURCE}"
        text = resource.read_text(encoding="utf-8")
    else:
        if not path.exists():
            raise FileNotFoundError(f"Exception data file not found: {path}")
        source = str(path)
        text = path.read_text(encoding="utf-8")

    taxonomy = load_taxonomy_bytes(text, source=source)
    logger.info("Successfully read exception data from %s (%d categories)", source, len(taxonomy.categories))
    return taxonomy


def load_error_handling_config(
    path: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> ErrorHandlingConfig:
    """
    Load error_handling.yaml (if any) and apply FAULTLINE_* environment overrides.

    Conventions:
    - An explicit path must exist; the default configs/error_handling.yaml is optional.
    - Env vars win over file values, e.g. FAULTLINE_DEPTH_LIMIT=3.
    """
    if path is not None:
        data = _load_yaml(path)
    elif ERROR_HANDLING_FILE.exists():
        data = _load_yaml(ERROR_HANDLING_FILE)
    else:
        data = {}

    env = os.environ if environ is None else environ
    for field_name, suffix in _ENV_OVERRIDES.items():
        value = env.get(ENV_PREFIX + suffix)
        if value is not None and value.strip():
            data[field_name] = value.strip()

    return ErrorHandlingConfig(**data)
