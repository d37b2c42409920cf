"""Fixed registry endpoints and project file names."""

# Primary registry serving registry.json and component sources
REGISTRY_URL = "https://ui.your-library.com"

# Raw GitHub mirror used when the primary registry is unreachable
FALLBACK_REGISTRY_URL = "https://raw.githubusercontent.com/your-org/your-repo/main"

REGISTRY_INDEX_PATH = "registry.json"
FALLBACK_INDEX_PATH = "registry/registry.json"
ARTIFACT_PATH_PREFIX = "components"
FALLBACK_ARTIFACT_PATH_PREFIX = "packages/components"

# Seconds before an HTTP request to either registry is abandoned
REGISTRY_TIMEOUT = 30.0

CONFIG_FILENAME = "myui.config.json"
DEFAULT_COMPONENTS_DIR = "components/ui"

# Registry kind for components offered by `add` and `list`
UI_COMPONENT_KIND = "components:ui"

DEBUG_ENV_VAR = "UI_SCAFFOLD_DEBUG"
