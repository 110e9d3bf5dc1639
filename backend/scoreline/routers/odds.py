"""
backend/scoreline/routers/odds.py

Purpose:
    API-Sports backed endpoints: best-price odds per game, team head-to-head,
    and a connectivity check.

Dependencies:
    - scoreline.providers.apisports
    - scoreline.services.odds_service
    - scoreline.services.h2h_service
"""

import asyncio
import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from scoreline.models.odds import GameOdds
from scoreline.providers.apisports import apisports_provider
from scoreline.providers.http_client import UpstreamError
from scoreline.services.h2h_service import HeadToHeadResponse, head_to_head, team_averages
from scoreline.services.odds_service import normalize_odds_response
from scoreline.utils import utcnow
from scoreline.utils.payload import to_int

logger = logging.getLogger("scoreline.odds")

router = APIRouter(prefix="/api", tags=["odds"])


@router.get("/odds", response_model=list[GameOdds])
async def odds(
    season: Optional[int] = Query(None, ge=1900, description="Defaults to the current calendar year"),
    page: int = Query(1, ge=1),
):
    """Best available price per (market, side, point) for every listed game."""
    rows = await apisports_provider.get_odds(season or utcnow().year, page)
    return normalize_odds_response(rows)


@router.get("/h2h", response_model=HeadToHeadResponse)
async def h2h(
    a: Optional[str] = Query(None, description="API-Sports team id"),
    b: Optional[str] = Query(None, description="API-Sports team id"),
    season: Optional[int] = Query(None, ge=1900),
):
    """Season scoring averages for both teams and the last-10 meeting split."""
    team_a, team_b = to_int(a), to_int(b)
    if team_a <= 0 or team_b <= 0:
        raise HTTPException(status_code=400, detail="missing team ids a & b")
    season = season or utcnow().year

    games_a, games_b = await asyncio.gather(
        apisports_provider.get_team_games(team_a, season),
        apisports_provider.get_team_games(team_b, season),
    )
    meetings = await apisports_provider.get_head_to_head(team_a, team_b)
    return HeadToHeadResponse(
        a=team_averages(games_a, team_a),
        b=team_averages(games_b, team_b),
        recent=head_to_head(meetings, team_a),
    )


@router.get("/ping")
async def ping():
    """API-Sports reachability; reports the error instead of failing."""
    try:
        return await apisports_provider.ping()
    except UpstreamError as exc:
        logger.warning("API-Sports ping failed: %s", exc)
        return {"error": str(exc)}
