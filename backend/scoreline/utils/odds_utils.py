"""Price conversions for bookmaker odds."""

from __future__ import annotations

import math
from typing import Any


def parse_number(value: Any) -> float | None:
    """Permissive numeric parse: numbers pass through, strings accept ``,`` as decimal separator."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        num = float(value)
    else:
        try:
            num = float(str(value).strip().replace(",", "."))
        except ValueError:
            return None
    return num if math.isfinite(num) else None


def _round_half_up(x: float) -> int:
    return math.floor(x + 0.5)


def to_american(decimal_odd: Any) -> int | None:
    """Decimal odds -> American odds.

    ``d >= 2`` gives a positive price ``round((d - 1) * 100)``; ``1 < d < 2``
    a negative one ``round(-100 / (d - 1))``. ``d <= 1`` and anything
    unparseable has no American equivalent and returns None.
    """
    d = parse_number(decimal_odd)
    if d is None or d <= 1:
        return None
    if d >= 2:
        return _round_half_up((d - 1) * 100)
    return _round_half_up(-100 / (d - 1))
