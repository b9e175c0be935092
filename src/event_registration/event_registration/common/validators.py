from __future__ import annotations

from typing import Any

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} must not be empty")
    return value


def require_type(value: Any, expected: type, field_name: str) -> Any:
    # bool is a subclass of int but never a valid column value.
    if isinstance(value, bool) or not isinstance(value, expected):
        raise ValidationError(
            f"{field_name} expects {expected.__name__}, got {type(value).__name__}"
        )
    return value
