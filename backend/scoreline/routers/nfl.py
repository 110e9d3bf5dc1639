"""
backend/scoreline/routers/nfl.py

Purpose:
    NFL week scoreboard, standings and team form. The week board falls back
    to day-by-day scoreboard requests when ESPN rejects the week query for a
    reason other than "not published" (404).

Dependencies:
    - scoreline.providers.espn
    - scoreline.services.season_service
    - scoreline.services.scoreboard_service
"""

import logging
from typing import Any, Optional

from fastapi import APIRouter, Path, Query

from scoreline.models.form import TeamFormSummary
from scoreline.models.games import WeekScoreboardResponse
from scoreline.models.standings import StandingsResponse
from scoreline.providers.espn import espn_provider
from scoreline.providers.http_client import UpstreamError
from scoreline.services.intel_service import load_team_form
from scoreline.services.schedule_service import SEASON_TYPE_REGULAR, collect_events
from scoreline.services.scoreboard_service import map_events
from scoreline.services.season_service import (
    NFL_REGULAR_SEASON_WEEKS,
    SeasonRules,
    clamp_week,
    current_week,
    resolve_season_param,
    season_label,
    week_dates,
)
from scoreline.services.standings_service import flatten_standings
from scoreline.utils import to_espn_date
from scoreline.utils.payload import to_float

logger = logging.getLogger("scoreline.nfl")

router = APIRouter(prefix="/api/nfl", tags=["nfl"])

DEFAULT_LIMIT = 200


async def _fetch_week_by_dates(
    season: int, week: int, limit: int, seasontype: int
) -> tuple[list[dict[str, Any]], int]:
    """Events of the week's seven days, deduplicated by id, plus how many days answered."""
    events: list[dict[str, Any]] = []
    seen: set[str] = set()
    answered = 0
    for day in week_dates(season, week):
        try:
            payload = await espn_provider.get_scoreboard(
                "nfl", dates=to_espn_date(day.date()), limit=limit, year=season, seasontype=seasontype,
            )
        except UpstreamError as exc:
            logger.warning("NFL scoreboard for %s unavailable: %s", day.date(), exc)
            continue
        answered += 1
        for event in collect_events(payload):
            event_id = str(event.get("id") or "")
            if not event_id or event_id in seen:
                continue
            seen.add(event_id)
            events.append(event)
    return events, answered


@router.get("/scores", response_model=WeekScoreboardResponse, response_model_exclude_none=True)
async def nfl_scores(
    season: Optional[str] = Query(None, description="'current', 'last' or a year"),
    week: Optional[str] = Query(None, description="1-18; anything else means the current week"),
    seasontype: int = Query(SEASON_TYPE_REGULAR, ge=1, le=3),
    limit: int = Query(DEFAULT_LIMIT, description="Non-positive values fall back to 200"),
):
    """NFL scoreboard for one week, with TV and gamecast links."""
    season_year = resolve_season_param(season)
    limit = limit if limit > 0 else DEFAULT_LIMIT
    requested_week = to_float(week)
    target_week = clamp_week(
        requested_week if requested_week is not None and requested_week > 0 else current_week(),
        1,
        NFL_REGULAR_SEASON_WEEKS,
    )

    events: list[dict[str, Any]] = []
    note: Optional[str] = None
    try:
        payload = await espn_provider.get_scoreboard(
            "nfl", week=target_week, limit=limit, year=season_year, seasontype=seasontype,
        )
        events = collect_events(payload)
    except UpstreamError as exc:
        if exc.status_code == 404:
            note = f"No NFL scoreboard data for season {season_year}, week {target_week}."
        else:
            events, answered = await _fetch_week_by_dates(season_year, target_week, limit, seasontype)
            if not answered:
                raise
            note = (
                f"Week {target_week} ({season_year}) fetched via date-based fallback"
                if events
                else f"Week {target_week} ({season_year}) not published on ESPN scoreboard."
            )

    return WeekScoreboardResponse(
        season=season_year,
        week=target_week,
        seasontype=seasontype,
        data=map_events(events, with_extras=True),
        note=note,
    )


@router.get("/standings", response_model=StandingsResponse)
async def nfl_standings(
    season: Optional[int] = Query(None, ge=1900),
    seasontype: int = Query(SEASON_TYPE_REGULAR, ge=1, le=3),
):
    season = season or season_label(rules=SeasonRules.FOOTBALL)
    payload = await espn_provider.get_standings("nfl", season, seasontype)
    return StandingsResponse(
        season=season,
        seasontype=seasontype,
        data=flatten_standings(payload, prefer_row_rank=True),
    )


@router.get("/team/{team_id}/recent", response_model=TeamFormSummary)
async def nfl_team_recent(
    team_id: int = Path(..., ge=1),
    season: Optional[int] = Query(None, ge=1900),
    seasontype: int = Query(SEASON_TYPE_REGULAR, ge=1, le=3),
    limit: int = Query(5, ge=1, le=25),
):
    """Last N completed NFL games; season labels follow the football (start-year) rule."""
    return await load_team_form(
        espn_provider.schedule_fetch("nfl"),
        team_id,
        season,
        seasontype,
        limit,
        rules=SeasonRules.FOOTBALL,
    )
