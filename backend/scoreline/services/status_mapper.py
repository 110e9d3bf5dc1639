"""
backend/scoreline/services/status_mapper.py

Purpose:
    Collapse provider lifecycle vocabularies into GameStatus. Callers extract
    (state, period, detail) from their own payload shape first, so the mapping
    itself never looks at a provider payload.

Dependencies:
    - scoreline.models.games
"""

from __future__ import annotations

import re
from typing import Any

from scoreline.models.games import GameStatus

_FINAL_RE = re.compile(r"final", re.IGNORECASE)

_PERIODS = {
    1: GameStatus.PERIOD_1,
    2: GameStatus.PERIOD_2,
    3: GameStatus.PERIOD_3,
    4: GameStatus.PERIOD_4,
}


def mentions_final(*details: Any) -> bool:
    return any(_FINAL_RE.search(str(d)) for d in details if d)


def map_status(state: str | None, period: int | None, *details: str | None) -> GameStatus:
    """Map (lifecycle state, period, free-text detail...) to a canonical status.

    ``pre`` -> NS, ``in`` -> Q1..Q4 / OT, ``post`` -> FT. An unknown state is
    FT only when a detail mentions "final"; otherwise NS, never ambiguous.
    """
    normalized = (state or "").strip().lower()
    if normalized == "pre":
        return GameStatus.NOT_STARTED
    if normalized == "post":
        return GameStatus.FINAL
    if normalized == "in":
        p = period or 0
        if p >= 5:
            return GameStatus.OVERTIME
        return _PERIODS.get(p, GameStatus.PERIOD_1)
    if mentions_final(*details):
        return GameStatus.FINAL
    return GameStatus.NOT_STARTED
