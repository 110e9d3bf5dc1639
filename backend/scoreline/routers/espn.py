"""NBA team form and standings API (ESPN)."""

from typing import Optional

from fastapi import APIRouter, Path, Query

from scoreline.models.form import TeamFormSummary
from scoreline.models.standings import StandingsResponse
from scoreline.providers.espn import espn_provider
from scoreline.services.intel_service import load_team_form
from scoreline.services.schedule_service import SEASON_TYPE_REGULAR
from scoreline.services.season_service import SeasonRules, season_label
from scoreline.services.standings_service import flatten_standings

router = APIRouter(prefix="/api/espn", tags=["espn"])


@router.get("/team/{team_id}/recent", response_model=TeamFormSummary)
async def team_recent(
    team_id: int = Path(..., ge=1),
    season: Optional[int] = Query(None, ge=1900, description="Season label; defaults to current"),
    seasontype: int = Query(SEASON_TYPE_REGULAR, ge=1, le=3, description="1=pre, 2=regular, 3=post"),
    limit: int = Query(5, ge=1, le=82),
):
    """Last N completed games with PF/PA averages and W-L.

    ``season`` on the response is the label that actually answered, which may
    be the previous season when the requested one is not published yet.
    """
    return await load_team_form(
        espn_provider.schedule_fetch("nba"),
        team_id,
        season,
        seasontype,
        limit,
        rules=SeasonRules.BASKETBALL,
    )


@router.get("/standings", response_model=StandingsResponse)
async def standings(
    season: Optional[int] = Query(None, ge=1900),
    seasontype: int = Query(SEASON_TYPE_REGULAR, ge=1, le=3),
):
    """Minimal standings map: teamId -> conf rank, wins, losses."""
    season = season or season_label(rules=SeasonRules.BASKETBALL)
    payload = await espn_provider.get_standings("nba", season, seasontype)
    return StandingsResponse(season=season, seasontype=seasontype, data=flatten_standings(payload))
