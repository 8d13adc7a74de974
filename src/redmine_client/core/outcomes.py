"""
Result of one transport call.

The session never raises for network or HTTP problems; it returns one of
these variants and the client decides what to raise.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Union

import httpx


@dataclass(frozen=True)
class Success:
    response: httpx.Response


@dataclass(frozen=True)
class NoResponse:
    """Request never got an answer (refused, unreachable, timed out)."""

    error_code: str
    error: httpx.TransportError


@dataclass(frozen=True)
class HttpFailure:
    status_code: int
    reason: str
    path: str
    body: Optional[Any]
    error: httpx.HTTPStatusError


@dataclass(frozen=True)
class Other:
    error: Exception


Failure = Union[NoResponse, HttpFailure, Other]
Outcome = Union[Success, NoResponse, HttpFailure, Other]


__all__ = ["Success", "NoResponse", "HttpFailure", "Other", "Failure", "Outcome"]
