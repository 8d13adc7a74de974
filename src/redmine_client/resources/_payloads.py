"""
Shared helpers for building resource paths and payloads.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional, Type
from urllib.parse import quote

from redmine_client.core.errors import RedmineModelValidationError
from redmine_client.models import P, coerce_params


def segment(value: Any) -> str:
    """Render an id, identifier or wiki title as one URL path segment."""
    text = str(value).strip()
    if not text:
        raise ValueError("Path segment must not be empty.")
    return quote(text, safe="")


def query(
    model: Type[P], params: Optional[P | Mapping[str, Any]], **extra: Any
) -> Optional[Dict[str, Any]]:
    """Wrap validated read parameters as {"params": {...}} (None when empty)."""
    dumped = coerce_params(model, params) or {}
    dumped.update({k: v for k, v in extra.items() if v is not None})
    return {"params": dumped} if dumped else None


def body(key: str, model: Type[P], value: P | Mapping[str, Any]) -> Dict[str, Any]:
    """Wrap a validated write payload under its singular resource key."""
    if value is None:
        raise RedmineModelValidationError(f"{model.__name__} payload is required.")
    return {key: coerce_params(model, value, keep_null=True)}
