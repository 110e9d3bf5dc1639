"""NBA game intel and matchup probability API."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Path, Query

from scoreline.models.probability import GameIntelResponse, MatchupResponse
from scoreline.providers.espn import espn_provider
from scoreline.services import intel_service
from scoreline.services.team_ids import to_espn_team_id

router = APIRouter(prefix="/api/nba", tags=["nba"])


def _require_team_ids(home: Optional[str], away: Optional[str]) -> tuple[int, int]:
    home_id = to_espn_team_id(home)
    away_id = to_espn_team_id(away)
    if home_id is None or away_id is None:
        raise HTTPException(
            status_code=400,
            detail="Missing or invalid ESPN team IDs: ?home=X&away=Y",
        )
    return home_id, away_id


@router.get("/game/{game_id}/intel", response_model=GameIntelResponse)
async def game_intel(
    game_id: int = Path(...),
    home: Optional[str] = Query(None, description="ESPN or NBA stats team id"),
    away: Optional[str] = Query(None, description="ESPN or NBA stats team id"),
    limit: int = Query(5, ge=1, le=82),
):
    """Recent form for both teams (fetched concurrently) and a point-differential edge."""
    home_id, away_id = _require_team_ids(home, away)
    return await intel_service.game_intel(
        espn_provider.schedule_fetch("nba"), game_id, home_id, away_id, limit,
    )


@router.get("/matchup", response_model=MatchupResponse)
async def matchup(
    home: Optional[str] = Query(None),
    away: Optional[str] = Query(None),
    limit: int = Query(5, ge=1, le=82),
):
    """Season win%, last-N win% and PF-PA form blended into a home win probability."""
    home_id, away_id = _require_team_ids(home, away)

    async def _standings(season: int, season_type: int):
        return await espn_provider.get_standings("nba", season, season_type)

    return await intel_service.matchup(
        espn_provider.schedule_fetch("nba"), _standings, home_id, away_id, limit,
    )
