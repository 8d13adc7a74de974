from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Dict, Optional

import httpx

from .config import ClientConfig

API_KEY_HEADER = "X-Redmine-API-Key"
SWITCH_USER_HEADER = "X-Redmine-Switch-User"


class AuthMode(str, enum.Enum):
    API_KEY = "api_key"
    BASIC = "basic"
    NONE = "none"


@dataclass(frozen=True)
class ResolvedAuth:
    mode: AuthMode
    headers: Dict[str, str] = field(default_factory=dict)
    auth: Optional[httpx.BasicAuth] = None


def resolve_auth(config: ClientConfig) -> ResolvedAuth:
    """
    Pick exactly one credential mechanism for the session.

    - api_key present           -> X-Redmine-API-Key header
    - username and password     -> HTTP basic auth
    - nothing                   -> anonymous (public projects still readable)

    impersonate_user adds X-Redmine-Switch-User on top of any of the above.
    Credentials are not checked here; a bad key surfaces as a 401 later.
    """
    headers: Dict[str, str] = {}
    auth: Optional[httpx.BasicAuth] = None

    if config.api_key:
        mode = AuthMode.API_KEY
        headers[API_KEY_HEADER] = config.api_key
    elif config.username and config.password:
        mode = AuthMode.BASIC
        auth = httpx.BasicAuth(config.username, config.password)
    else:
        mode = AuthMode.NONE

    if config.impersonate_user:
        headers[SWITCH_USER_HEADER] = config.impersonate_user

    return ResolvedAuth(mode=mode, headers=headers, auth=auth)


__all__ = [
    "API_KEY_HEADER",
    "SWITCH_USER_HEADER",
    "AuthMode",
    "ResolvedAuth",
    "resolve_auth",
]
