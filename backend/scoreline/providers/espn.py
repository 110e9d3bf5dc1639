import logging
from typing import Any, Optional

from scoreline.config import settings
from scoreline.providers.http_client import ResilientClient

logger = logging.getLogger("scoreline.espn")

PROVIDER_NAME = "espn"

# ESPN public API, no auth needed
SPORT_TO_ESPN = {
    "nba": "basketball/nba",
    "nfl": "football/nfl",
}


class ESPNProvider:
    """ESPN public site API: scoreboards, team schedules, standings.

    Returns raw payloads; mapping to canonical models happens in services.
    Non-success answers raise UpstreamError.
    """

    def __init__(self):
        self._client = ResilientClient(
            PROVIDER_NAME,
            timeout=settings.HTTP_TIMEOUT_SECONDS,
            max_retries=settings.HTTP_MAX_RETRIES,
            base_delay=settings.HTTP_BASE_DELAY_SECONDS,
        )

    def _path(self, sport: str) -> str:
        espn_path = SPORT_TO_ESPN.get(sport)
        if not espn_path:
            raise ValueError(f"Unsupported sport: {sport}")
        return espn_path

    async def get_scoreboard(
        self,
        sport: str,
        dates: Optional[str] = None,
        **params: Any,
    ) -> dict[str, Any]:
        """Scoreboard payload; ``dates`` is YYYYMMDD, extra params pass through (week, year, ...)."""
        query = {k: str(v) for k, v in params.items() if v is not None}
        if dates:
            query["dates"] = dates
        return await self._client.get_json(
            f"{settings.ESPN_SITE_BASE_URL}/{self._path(sport)}/scoreboard",
            params=query,
        )

    async def get_team_schedule(
        self, sport: str, team_id: int, season: int, season_type: int
    ) -> dict[str, Any]:
        """One season label, one attempt: the season fallback decides what to try next."""
        logger.debug("ESPN %s schedule team=%s season=%s type=%s", sport, team_id, season, season_type)
        return await self._client.get_json(
            f"{settings.ESPN_SITE_BASE_URL}/{self._path(sport)}/teams/{team_id}/schedule",
            params={"season": str(season), "seasontype": str(season_type)},
            retry=False,
        )

    async def get_standings(self, sport: str, season: int, season_type: int) -> dict[str, Any]:
        # The "site" API has no usable standings; the v2 web API does.
        return await self._client.get_json(
            f"{settings.ESPN_WEB_BASE_URL}/{self._path(sport)}/standings",
            params={
                "season": str(season),
                "seasontype": str(season_type),
                "type": "0",
                "level": "3",
            },
        )

    def schedule_fetch(self, sport: str):
        """Bind ``sport`` for ``schedule_service.fetch_schedule``."""
        async def _fetch(team_id: int, season: int, season_type: int) -> dict[str, Any]:
            return await self.get_team_schedule(sport, team_id, season, season_type)
        return _fetch

    async def aclose(self) -> None:
        await self._client.aclose()


# Singleton
espn_provider = ESPNProvider()
