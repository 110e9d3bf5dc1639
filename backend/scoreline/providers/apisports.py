"""
backend/scoreline/providers/apisports.py

Purpose:
    Adapter for the API-Sports basketball API (direct host or via RapidAPI):
    odds, games, head-to-head and connectivity check.

Dependencies:
    - scoreline.providers.http_client
    - scoreline.config
"""

import logging
from typing import Any, Optional

from scoreline.config import settings
from scoreline.providers.http_client import ResilientClient

logger = logging.getLogger("scoreline.apisports")

PROVIDER_NAME = "api-sports"


def build_headers(host: str, api_key: str) -> dict[str, str]:
    """RapidAPI hosts authenticate with x-rapidapi-*, direct hosts with x-apisports-key."""
    if "rapidapi" in host:
        return {"x-rapidapi-host": host, "x-rapidapi-key": api_key}
    return {"x-apisports-key": api_key}


class ApiSportsProvider:
    """API-Sports REST client. Responses come wrapped as ``{"response": [...], "errors": ...}``."""

    def __init__(self, host: Optional[str] = None, api_key: Optional[str] = None):
        self._host = host or settings.APISPORTS_HOST
        self._client = ResilientClient(
            PROVIDER_NAME,
            timeout=settings.HTTP_TIMEOUT_SECONDS,
            max_retries=settings.HTTP_MAX_RETRIES,
            base_delay=settings.HTTP_BASE_DELAY_SECONDS,
            headers=build_headers(self._host, api_key or settings.APISPORTS_KEY),
        )

    @property
    def base_url(self) -> str:
        return f"https://{self._host}"

    async def _get(self, path: str, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        query = {k: str(v) for k, v in (params or {}).items() if v is not None}
        data = await self._client.get_json(f"{self.base_url}{path}", params=query)
        errors = data.get("errors") if isinstance(data, dict) else None
        if errors:
            # API-Sports answers 200 with an errors object for quota/plan problems
            logger.warning("API-Sports %s reported errors: %s", path, errors)
        return data if isinstance(data, dict) else {}

    async def _response_list(self, path: str, params: Optional[dict[str, Any]] = None) -> list[dict]:
        data = await self._get(path, params)
        response = data.get("response")
        return response if isinstance(response, list) else []

    async def get_odds(self, season: int, page: int = 1) -> list[dict]:
        return await self._response_list("/odds", {
            "league": settings.APISPORTS_LEAGUE_ID,
            "season": season,
            "page": page,
        })

    async def get_team_games(self, team_id: int, season: int) -> list[dict]:
        return await self._response_list("/games", {
            "season": season,
            "league": settings.APISPORTS_LEAGUE_ID,
            "team": team_id,
            "per_page": 200,
        })

    async def get_head_to_head(self, team_a: int, team_b: int) -> list[dict]:
        return await self._response_list("/games/headtohead", {
            "h2h": f"{team_a}-{team_b}",
            "league": settings.APISPORTS_LEAGUE_ID,
        })

    async def ping(self) -> dict[str, Any]:
        return await self._get("/timezone")

    async def aclose(self) -> None:
        await self._client.aclose()


# Singleton
apisports_provider = ApiSportsProvider()
