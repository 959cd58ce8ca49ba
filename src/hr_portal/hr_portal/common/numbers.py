from __future__ import annotations

from decimal import Decimal
from typing import Any, Union

Number = Union[int, float]


def as_number(value: Any, default: Number = 0) -> Number:
    """Coerce a numeric column to int when integral, else float.

    mysql-connector returns DECIMAL columns as Decimal, PostgREST returns JSON numbers.
    """
    if value is None or value == "":
        return default
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, (float, Decimal)):
        return int(value) if value == int(value) else float(value)
    text = str(value).strip()
    number = float(text)
    return int(number) if number.is_integer() else number


def as_int(value: Any, default: int = 0) -> int:
    if value is None or value == "":
        return default
    return int(value)
