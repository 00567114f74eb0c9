"""Helpers for safe debug logging.

Login bodies and responses carry passwords and bearer tokens. Everything
that goes into a DEBUG log line passes through :func:`redact_for_log`
first.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

# Keys in the login body, the login response and the request headers.
_SECRET_KEYS: frozenset[str] = frozenset({"password", "token", "authorization"})

_REDACTED = "<redacted>"
_MAX_DEPTH = 20


def redact_for_log(value: Any, *, max_string: int = 512, _depth: int = 0) -> Any:
    """Return a copy of a JSON-like *value* with secrets masked and long strings cut."""
    if _depth > _MAX_DEPTH:
        return "<max-depth>"

    if isinstance(value, str):
        return value if len(value) <= max_string else f"{value[:max_string]}…<truncated>"

    if value is None or isinstance(value, (bool, int, float)):
        return value

    if isinstance(value, Mapping):
        return {
            str(key): _REDACTED
            if str(key).lower() in _SECRET_KEYS
            else redact_for_log(item, max_string=max_string, _depth=_depth + 1)
            for key, item in value.items()
        }

    if isinstance(value, (list, tuple)):
        return [redact_for_log(item, max_string=max_string, _depth=_depth + 1) for item in value]

    return repr(value)
