"""Transport-level building blocks: config, auth, session, params, errors."""

from .auth import API_KEY_HEADER, SWITCH_USER_HEADER, AuthMode, ResolvedAuth, resolve_auth
from .config import (
    DEFAULT_MAX_UPLOAD_SIZE,
    ClientConfig,
    config_from_env,
    load_env_config,
)
from .errors import (
    ErrorKind,
    RedmineApiError,
    RedmineBodyTooLargeError,
    RedmineClientError,
    RedmineModelValidationError,
    RedmineParseError,
    translate,
)
from .logging import LogfmtFormatter, setup_logging
from .observability import log_event
from .outcomes import HttpFailure, NoResponse, Other, Success
from .params import normalize, query_items
from .transport import Session

__all__ = [
    # Config
    "ClientConfig",
    "DEFAULT_MAX_UPLOAD_SIZE",
    "config_from_env",
    "load_env_config",
    # Auth
    "AuthMode",
    "ResolvedAuth",
    "resolve_auth",
    "API_KEY_HEADER",
    "SWITCH_USER_HEADER",
    # Transport
    "Session",
    "Success",
    "NoResponse",
    "HttpFailure",
    "Other",
    # Params
    "normalize",
    "query_items",
    # Exceptions
    "ErrorKind",
    "RedmineClientError",
    "RedmineApiError",
    "RedmineBodyTooLargeError",
    "RedmineParseError",
    "RedmineModelValidationError",
    "translate",
    # Logging
    "setup_logging",
    "LogfmtFormatter",
    "log_event",
]
