"""
backend/scoreline/services/season_service.py

Purpose:
    Calendar arithmetic for season labels, season kickoff anchors and week
    numbers. Pure functions of their explicit inputs; no provider knowledge.

Dependencies:
    - scoreline.utils
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone
from enum import Enum
from numbers import Real

from scoreline.utils import ensure_utc, utcnow

SEPTEMBER = 9
MONDAY = 0  # datetime.weekday()
_SEASON_LABEL_BOUNDARY_MONTH = 8  # August

MIN_WEEK = 1
MAX_WEEK = 25
NFL_REGULAR_SEASON_WEEKS = 18


class SeasonRules(str, Enum):
    """How a league labels a season that straddles New Year.

    Basketball labels by the year the season ends (2025-26 -> 2026);
    football by the year it starts (2025-26 -> 2025).
    """
    BASKETBALL = "basketball"
    FOOTBALL = "football"


def season_label(now: datetime | None = None, rules: SeasonRules = SeasonRules.BASKETBALL) -> int:
    """Season label ESPN uses for ``now``.

    >>> season_label(datetime(2025, 7, 1), SeasonRules.BASKETBALL)
    2025
    >>> season_label(datetime(2025, 9, 1), SeasonRules.BASKETBALL)
    2026
    """
    current = ensure_utc(now) if now is not None else utcnow()
    after_boundary = current.month >= _SEASON_LABEL_BOUNDARY_MONTH
    if rules is SeasonRules.BASKETBALL:
        return current.year + 1 if after_boundary else current.year
    return current.year if after_boundary else current.year - 1


def first_weekday_of_september(year: int, weekday: int) -> datetime:
    first = datetime(year, SEPTEMBER, 1, tzinfo=timezone.utc)
    offset = (weekday - first.weekday() + 7) % 7
    return first + timedelta(days=offset)


def labor_day(year: int) -> datetime:
    """First Monday in September, 00:00 UTC."""
    return first_weekday_of_september(year, MONDAY)


def season_start_date(year: int) -> datetime:
    """Thursday-night opener: Labor Day + 3 days, midnight UTC."""
    return labor_day(year) + timedelta(days=3)


def week_dates(season: int, week: int) -> list[datetime]:
    """The seven calendar days of ``week``, starting on that week's Thursday opener."""
    start = season_start_date(season) + timedelta(days=7 * max(0, week - 1))
    return [start + timedelta(days=i) for i in range(7)]


def scoreboard_season_year(now: datetime | None = None) -> int:
    """Season year of the football scoreboard.

    January and February still belong to the previous season (playoffs);
    March through December look ahead to this year's kickoff.
    """
    current = ensure_utc(now) if now is not None else utcnow()
    return current.year - 1 if current.month <= 2 else current.year


def current_week(now: datetime | None = None) -> int:
    """Week number of the football season containing ``now``; 0 before kickoff."""
    current = ensure_utc(now) if now is not None else utcnow()
    start = season_start_date(scoreboard_season_year(current))
    if current < start:
        return 0
    return (current - start) // timedelta(days=7) + 1


def clamp_week(value: object, min_week: int = MIN_WEEK, max_week: int = MAX_WEEK) -> int:
    """Coerce a requested week into ``[min_week, max_week]``.

    Missing, non-numeric or non-finite input yields ``min_week``; fractional
    input truncates toward zero.
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        return min_week
    num = float(value)
    if not math.isfinite(num) or num < min_week:
        return min_week
    if num > max_week:
        return max_week
    return math.trunc(num)


def resolve_season_param(raw: str | None, now: datetime | None = None) -> int:
    """Interpret a football ``season`` query value: ``current``, ``last`` or a year."""
    current = scoreboard_season_year(now)
    if not raw or raw == "current":
        return current
    if raw == "last":
        return current - 1
    try:
        parsed = int(raw)
    except ValueError:
        return current
    return parsed if parsed > 1900 else current
