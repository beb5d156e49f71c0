from pathlib import Path

# Repo-root conventional directories/files (overrideable via env / error_handling.yaml)
CONFIG_DIR = Path("configs")
ERROR_HANDLING_FILE = CONFIG_DIR / "error_handling.yaml"

# Exception data shipped inside the package
RESOURCES_PACKAGE = "faultline"
DEFAULT_TAXONOMY_RESOURCE = "resources/exception_data.yaml"

# Environment overrides
ENV_PREFIX = "FAULTLINE_"
