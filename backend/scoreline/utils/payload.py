"""Tolerant lookups over provider JSON.

Every accessor collapses to a default instead of raising: one malformed
record must not fail a whole scoreboard.
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Sequence

_MISSING = object()


def dig(data: Any, *path: str | int, default: Any = None) -> Any:
    """Walk dict keys / list indexes; any miss (or a None leaf) yields ``default``."""
    cur = data
    for part in path:
        if isinstance(part, int):
            if not isinstance(cur, list) or not -len(cur) <= part < len(cur):
                return default
            cur = cur[part]
        else:
            if not isinstance(cur, dict):
                return default
            cur = cur.get(part, _MISSING)
            if cur is _MISSING:
                return default
        if cur is None:
            return default
    return cur


def first_of(data: Any, paths: Iterable[Sequence[str | int]], default: Any = None) -> Any:
    """First non-empty value along an ordered chain of paths."""
    for path in paths:
        value = dig(data, *path)
        if value not in (None, ""):
            return value
    return default


def as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


def as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def to_float(value: Any) -> float | None:
    """Number or numeric string -> finite float, else None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        num = float(value)
    except (TypeError, ValueError):
        return None
    return num if math.isfinite(num) else None


def to_int(value: Any, default: int = 0) -> int:
    num = to_float(value)
    return int(num) if num is not None else default


def score_value(raw: Any) -> float:
    """Score as a number from a bare number, a numeric string or ``{value|displayValue}``."""
    if isinstance(raw, dict):
        raw = raw.get("value") if raw.get("value") is not None else raw.get("displayValue")
    num = to_float(raw)
    return num if num is not None else 0
