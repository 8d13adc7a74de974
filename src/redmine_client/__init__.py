"""redmine_client package exports."""

from . import resources
from .client import RedmineClient, create_client_from_env
from .core.auth import AuthMode
from .core.config import ClientConfig
from .core.errors import (
    ErrorKind,
    RedmineApiError,
    RedmineBodyTooLargeError,
    RedmineClientError,
    RedmineModelValidationError,
    RedmineParseError,
)
from .core.logging import setup_logging
from .core.params import normalize

__all__ = [
    # Client
    "RedmineClient",
    "ClientConfig",
    "AuthMode",
    "create_client_from_env",
    "resources",
    # Exceptions
    "ErrorKind",
    "RedmineClientError",
    "RedmineApiError",
    "RedmineBodyTooLargeError",
    "RedmineParseError",
    "RedmineModelValidationError",
    # Helpers
    "normalize",
    "setup_logging",
]
