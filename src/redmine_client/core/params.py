"""
Query-string parameter normalization.

Redmine reads list filters (``include``, ``issue_id``, ...) as a single
comma-separated value, so every sequence in a GET parameter tree is joined
before it reaches the transport. JSON bodies never go through here.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Tuple

Scalar = str | int | float | bool | None

SEQUENCE_DELIMITER = ","


def _is_sequence(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def _scalar_text(value: Any) -> str:
    # Match httpx rendering of scalar booleans in query strings.
    if value is True:
        return "true"
    if value is False:
        return "false"
    return str(value)


def join_sequence(values: Any) -> str:
    return SEQUENCE_DELIMITER.join(_scalar_text(v) for v in values)


def normalize(value: Any) -> Any:
    """
    Return a copy of ``value`` with every list/tuple collapsed into a
    comma-joined string, at any depth.

    - mapping  -> new dict, values normalized
    - sequence -> "a,b,c" ("" when empty)
    - scalar   -> unchanged
    """
    if isinstance(value, Mapping):
        return {key: normalize(item) for key, item in value.items()}
    if _is_sequence(value):
        return join_sequence(value)
    return value


def query_items(params: Mapping[str, Any], prefix: str = "") -> List[Tuple[str, Scalar]]:
    """
    Flatten normalized params into (key, value) pairs.

    Nested mappings become Rails bracket keys: {"a": {"b": 1}} -> [("a[b]", 1)].
    None values are dropped.
    """
    items: List[Tuple[str, Scalar]] = []
    for key, value in normalize(params).items():
        name = f"{prefix}[{key}]" if prefix else str(key)
        if value is None:
            continue
        if isinstance(value, Mapping):
            items.extend(query_items(value, prefix=name))
        else:
            items.append((name, value))
    return items


__all__ = ["normalize", "query_items", "join_sequence", "SEQUENCE_DELIMITER"]
