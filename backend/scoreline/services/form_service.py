"""
backend/scoreline/services/form_service.py

Purpose:
    Reduce a team's schedule to recent-form statistics: points for/against
    averages and the win-loss record over the last N completed games.

    Wins come from the competitor's own ``winner`` flag rather than a score
    comparison; ESPN sets it for overtime and forfeit outcomes that a naive
    comparison of the two scores would get wrong.

Dependencies:
    - scoreline.services.schedule_service (is_completed_event)
    - scoreline.utils.payload
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Iterable, Optional

from scoreline.models.form import OpponentRef, RecentGame, TeamFormSummary
from scoreline.services.schedule_service import is_completed_event
from scoreline.utils.payload import as_list, dig, first_of, score_value, to_int

DEFAULT_LIMIT = 5

_TENTH = Decimal("0.1")


def _average(total: float, n: int) -> float:
    """Mean to one decimal, exact halves rounded up (108.25 -> 108.3)."""
    return float(Decimal(total / n).quantize(_TENTH, rounding=ROUND_HALF_UP))


def _competitor_team_id(competitor: Any) -> str:
    return str(first_of(competitor, (("team", "id"), ("id",)), default=""))


def split_competitors(event: dict[str, Any], team_id: int | str) -> tuple[dict, dict]:
    """(our competitor, opponent) for ``team_id``.

    Falls back to positions 0/1 when ids are missing from the payload.
    """
    competitors = [c for c in as_list(dig(event, "competitions", 0, "competitors")) if isinstance(c, dict)]
    wanted = str(team_id)

    me = next((c for c in competitors if _competitor_team_id(c) == wanted), None)
    if me is None:
        me = competitors[0] if competitors else {}
    opp = next((c for c in competitors if c is not me), None)
    if opp is None:
        opp = competitors[1] if len(competitors) > 1 else {}
    return me, opp


def _recent_game(event: dict[str, Any], team_id: int | str) -> RecentGame:
    me, opp = split_competitors(event, team_id)
    return RecentGame(
        id=to_int(dig(event, "id")),
        date=dig(event, "date"),
        home_away=str(dig(me, "homeAway", default="home")),
        opponent=OpponentRef(
            id=to_int(dig(opp, "team", "id")),
            name=first_of(opp, (("team", "displayName"), ("team", "name"))),
            logo=first_of(opp, (("team", "logo"), ("team", "logos", 0, "href"))),
        ),
        pf=score_value(dig(me, "score")),
        pa=score_value(dig(opp, "score")),
        won=bool(dig(me, "winner", default=False)),
    )


def summarize(
    events: Iterable[dict[str, Any]],
    team_id: int,
    limit: int = DEFAULT_LIMIT,
    *,
    season: Optional[int] = None,
    season_type: Optional[int] = None,
) -> TeamFormSummary:
    """Form over the last ``limit`` completed events, most recent last."""
    finals = [e for e in events if isinstance(e, dict) and is_completed_event(e)]
    window = finals[-limit:] if limit > 0 else []
    games = [_recent_game(e, team_id) for e in window]

    pf = sum(g.pf for g in games)
    pa = sum(g.pa for g in games)
    wins = sum(1 for g in games if g.won)
    n = max(1, len(games))

    return TeamFormSummary(
        team_id=team_id,
        season=season,
        season_type=season_type,
        sample=len(games),
        pf_avg=_average(pf, n),
        pa_avg=_average(pa, n),
        record_last_n=f"{wins}-{len(games) - wins}",
        games=games,
    )
