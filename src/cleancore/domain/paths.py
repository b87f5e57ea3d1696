"""Dotted-path lookup into nested mappings."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

PATH_SEPARATOR = "."


def join_path(prefix: str, key: object) -> str:
    """Append *key* to a dotted *prefix*.

    Examples:
        >>> join_path("", "user")
        'user'
        >>> join_path("user", "account")
        'user.account'
    """
    return f"{prefix}{PATH_SEPARATOR}{key}" if prefix else str(key)


def get_path(data: Mapping[str, Any], path: str, default: Any = None) -> Any:
    """Walk *data* along the ``.``-separated *path*.

    Returns *default* as soon as a segment is absent, holds ``None``, or
    the value reached so far is not a mapping. Never raises.

    Examples:
        >>> get_path({"user": {"name": "Ada"}}, "user.name")
        'Ada'
        >>> get_path({"user": {"name": "Ada"}}, "user.email", "n/a")
        'n/a'
    """
    current: Any = data
    for segment in path.split(PATH_SEPARATOR):
        if not isinstance(current, Mapping) or current.get(segment) is None:
            return default
        current = current[segment]
    return current
