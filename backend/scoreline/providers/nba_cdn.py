from typing import Any

from scoreline.config import settings
from scoreline.providers.http_client import ResilientClient


class NBACdnProvider:
    """Boxscores by NBA game id from the cdn.nba.com live data feed (no key)."""

    def __init__(self):
        self._client = ResilientClient(
            "nba-cdn",
            timeout=settings.HTTP_TIMEOUT_SECONDS,
            max_retries=settings.HTTP_MAX_RETRIES,
            base_delay=settings.HTTP_BASE_DELAY_SECONDS,
        )

    async def get_boxscore(self, game_id: str) -> dict[str, Any]:
        return await self._client.get_json(
            f"{settings.NBA_CDN_BASE_URL}/boxscore/boxscore_{game_id}.json"
        )

    async def aclose(self) -> None:
        await self._client.aclose()


# Singleton
nba_cdn_provider = NBACdnProvider()
