"""
backend/scoreline/routers/scores.py

Purpose:
    NBA scoreboard API: today's (or a given date's) games normalized to the
    canonical Game schema, optionally filtered to games in progress.

Dependencies:
    - scoreline.providers.espn
    - scoreline.services.scoreboard_service
    - scoreline.services.schedule_service (collect_events)
"""

import logging
import re
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fastapi import APIRouter, HTTPException, Query

from scoreline.config import settings
from scoreline.models.games import ScoreboardResponse
from scoreline.providers.espn import espn_provider
from scoreline.services.schedule_service import collect_events
from scoreline.services.scoreboard_service import filter_live, map_events
from scoreline.utils import to_espn_date, today_in_tz
from scoreline.utils.payload import as_list, dig

logger = logging.getLogger("scoreline.scores")

router = APIRouter(prefix="/api", tags=["scores"])

_DATE_RE = re.compile(r"^\d{4}-?\d{2}-?\d{2}$")


def _espn_date(date: Optional[str], tz: str) -> str:
    if date:
        if not _DATE_RE.match(date):
            raise HTTPException(status_code=400, detail="date must be YYYY-MM-DD.")
        return to_espn_date(date)
    try:
        ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError):
        raise HTTPException(status_code=400, detail=f"Unknown timezone: {tz}")
    return to_espn_date(today_in_tz(tz))


@router.get("/scores", response_model=ScoreboardResponse)
async def scores(
    date: Optional[str] = Query(None, description="YYYY-MM-DD; defaults to today in tz"),
    tz: str = Query(settings.DEFAULT_TIMEZONE, description="IANA timezone for 'today'"),
    live: Optional[str] = Query(None, description="'all' keeps only games in progress"),
):
    """NBA games for a date, gathered from every event shape ESPN returns."""
    espn_date = _espn_date(date, tz)
    payload = await espn_provider.get_scoreboard("nba", dates=espn_date, limit=300)
    games = map_events(collect_events(payload))
    if live == "all":
        games = filter_live(games)
    return ScoreboardResponse(data=games)


@router.get("/espn/scoreboard", response_model=ScoreboardResponse)
async def espn_scoreboard(
    date: Optional[str] = Query(None, description="YYYY-MM-DD; defaults to today (UTC)"),
):
    """Plain ESPN NBA scoreboard adapter (root ``events`` only)."""
    espn_date = _espn_date(date, "UTC")
    payload = await espn_provider.get_scoreboard("nba", dates=espn_date)
    return ScoreboardResponse(data=map_events(as_list(dig(payload, "events"))))
