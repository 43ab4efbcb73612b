"""Answer value coercion helpers shared by visibility and validation."""

from __future__ import annotations

import math
import re
from decimal import Decimal

_DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def answer_as_text(value: object) -> str:
    """Render an answer the way a browser would stringify it.

    Args:
        value (object): Raw answer.

    Returns:
        str: Text form, e.g. `True -> "true"`, `20.0 -> "20"`, `["a", "b"] -> "a,b"`.
    """
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, list | tuple):
        return ",".join(answer_as_text(item) for item in value)
    return str(value)


def answer_as_number(value: object) -> Decimal | None:
    """Parse an answer as a decimal number.

    Args:
        value (object): Raw answer.

    Returns:
        Decimal | None: Parsed number, or None when the value is not numeric.
    """
    if isinstance(value, bool):
        return Decimal(int(value))
    if isinstance(value, int):
        return Decimal(value)
    if isinstance(value, float):
        if math.isnan(value):
            return None
        return Decimal(repr(value))
    if isinstance(value, str):
        stripped = value.strip()
        if _DECIMAL_PATTERN.fullmatch(stripped):
            return Decimal(stripped)
    return None


def is_blank(value: object) -> bool:
    """Return whether an answer carries no data (None, empty string or empty sequence)."""
    if value is None:
        return True
    if isinstance(value, str | list | tuple):
        return len(value) == 0
    return False
