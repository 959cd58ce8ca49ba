from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..core.exceptions import ValidationError


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def require_fields(values: Mapping[str, Any], fields: Sequence[str], *, message: str) -> None:
    """Raise ValidationError(message) if any of `fields` is blank in `values`."""
    missing = [f for f in fields if is_blank(values.get(f))]
    if missing:
        raise ValidationError(message)
