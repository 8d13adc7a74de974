from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

from dotenv import load_dotenv

DEFAULT_MAX_UPLOAD_SIZE = 5 * 1024 * 1024  # 5 MB
DEFAULT_TIMEOUT_SECONDS = 10.0

ENV_BASE_URL = "REDMINE_BASE_URL"
ENV_API_KEY = "REDMINE_API_KEY"
ENV_USERNAME = "REDMINE_USERNAME"
ENV_PASSWORD = "REDMINE_PASSWORD"
ENV_IMPERSONATE_USER = "REDMINE_IMPERSONATE_USER"
ENV_MAX_UPLOAD_SIZE = "REDMINE_MAX_UPLOAD_SIZE"


@dataclass(frozen=True)
class ClientConfig:
    """
    Connection settings for one Redmine instance.

    Credentials are layered: api_key wins over username/password, and
    impersonate_user is added on top of whichever one is used.
    """

    base_url: str
    api_key: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    impersonate_user: Optional[str] = None
    max_upload_size: Optional[int] = None
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS

    def __post_init__(self) -> None:
        base_url = (self.base_url or "").strip().rstrip("/")
        if not base_url:
            raise ValueError("base_url must be provided.")
        object.__setattr__(self, "base_url", base_url)

        if self.max_upload_size is not None and self.max_upload_size <= 0:
            raise ValueError("max_upload_size must be a positive number of bytes.")

    @property
    def body_size_limit(self) -> int:
        return self.max_upload_size or DEFAULT_MAX_UPLOAD_SIZE


def _env(name: str) -> Optional[str]:
    val = os.getenv(name, "").strip()
    return val or None


def load_env_config(*, use_dotenv: bool = True) -> Dict[str, Any]:
    """Read client settings from the environment (optionally from .env)."""
    if use_dotenv:
        load_dotenv()

    max_upload_size: Optional[int] = None
    raw_size = _env(ENV_MAX_UPLOAD_SIZE)
    if raw_size is not None:
        try:
            max_upload_size = int(raw_size)
        except ValueError as exc:
            raise ValueError(
                f"{ENV_MAX_UPLOAD_SIZE} must be an integer, got {raw_size!r}"
            ) from exc

    return {
        "base_url": _env(ENV_BASE_URL) or "",
        "api_key": _env(ENV_API_KEY),
        "username": _env(ENV_USERNAME),
        "password": _env(ENV_PASSWORD),
        "impersonate_user": _env(ENV_IMPERSONATE_USER),
        "max_upload_size": max_upload_size,
    }


def config_from_env(*, use_dotenv: bool = True, **overrides: Any) -> ClientConfig:
    settings = load_env_config(use_dotenv=use_dotenv)
    settings.update({k: v for k, v in overrides.items() if v is not None})
    if not settings["base_url"]:
        raise ValueError(f"Missing {ENV_BASE_URL} in environment.")
    return ClientConfig(**settings)


__all__ = [
    "ClientConfig",
    "DEFAULT_MAX_UPLOAD_SIZE",
    "DEFAULT_TIMEOUT_SECONDS",
    "config_from_env",
    "load_env_config",
]
