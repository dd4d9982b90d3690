"""
Service Constants (Single Source of Truth)

Static values fixed at build time. Runtime knobs live in `core.config`.
"""

# Service Identity
SERVICE_NAME = "starwars-api"
SERVICE_VERSION = "1.0.0"

# Logging Constants (12-Factor App Compliance)
ENV_KEY_ENVIRONMENT = "ENVIRONMENT"
ENV_KEY_LOG_LEVEL = "LOG_LEVEL"
ENV_KEY_LOG_FORMAT = "LOG_FORMAT"

DEFAULT_ENVIRONMENT = "dev"
DEFAULT_LOG_LEVEL = "INFO"
DEFAULT_LOG_FORMAT = "json"

ECS_VERSION = "8.11.0"

EXCLUDED_LOG_RECORD_ATTRS = frozenset(
    {
        "name",
        "msg",
        "args",
        "created",
        "filename",
        "funcName",
        "levelname",
        "levelno",
        "lineno",
        "module",
        "msecs",
        "pathname",
        "process",
        "processName",
        "relativeCreated",
        "stack_info",
        "exc_info",
        "exc_text",
        "thread",
        "threadName",
        "taskName",
        "message",
    }
)

# Connection strings in log labels are rendered with the password hidden
URL_SCHEME_SEPARATOR = "://"

# ─────────────────────────────────────────────────────────────────────────────
# Catalog Business Logic Constants
# ─────────────────────────────────────────────────────────────────────────────

# Pagination
DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100

# Field bounds (mirrors the VARCHAR sizes in the schema)
MIN_NAME_LENGTH = 1
MAX_NAME_LENGTH = 255
MIN_EPISODE_CODE_LENGTH = 1
MAX_EPISODE_CODE_LENGTH = 50
