"""Single-game boxscore and watch-link API."""

from fastapi import APIRouter, HTTPException, Path, Query

from scoreline.config import settings
from scoreline.models.boxscore import Boxscore
from scoreline.providers.nba_cdn import nba_cdn_provider
from scoreline.services.boxscore_service import normalize_boxscore
from scoreline.services.watch_service import build_watch_url

router = APIRouter(prefix="/api", tags=["games"])


@router.get("/game/{game_id}/boxscore", response_model=Boxscore)
async def boxscore(game_id: str = Path(..., pattern=r"^\d{10}$", description="NBA game id")):
    payload = await nba_cdn_provider.get_boxscore(game_id)
    result = normalize_boxscore(payload)
    if result is None:
        raise HTTPException(status_code=404, detail="No game data found")
    return result


@router.get("/watch")
async def watch(
    sport: str = Query("nba"),
    team: str = Query(""),
):
    url = build_watch_url(settings.WATCH_BASE_URL, sport, team)
    if not url:
        raise HTTPException(status_code=500, detail="WATCH_BASE_URL not configured")
    return {"url": url}
