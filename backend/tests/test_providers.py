"""
backend/tests/test_providers.py

Purpose:
    Provider request shapes (paths, query params, auth headers) against a
    mocked transport.
"""

from __future__ import annotations

from datetime import datetime, timezone

import httpx
import pytest

from scoreline.providers.apisports import ApiSportsProvider, build_headers
from scoreline.providers.espn import ESPNProvider
from scoreline.providers.http_client import UpstreamError
from scoreline.providers.nba_cdn import NBACdnProvider
from scoreline.services import schedule_service

JULY_2025 = datetime(2025, 7, 1, tzinfo=timezone.utc)


def _mock(provider, handler, headers=None):
    provider._client._client = httpx.AsyncClient(
        transport=httpx.MockTransport(handler), headers=headers,
    )
    return provider


def test_build_headers_by_host():
    assert build_headers("api-basketball.p.rapidapi.com", "k") == {
        "x-rapidapi-host": "api-basketball.p.rapidapi.com",
        "x-rapidapi-key": "k",
    }
    assert build_headers("v1.basketball.api-sports.io", "k") == {"x-apisports-key": "k"}


@pytest.mark.asyncio
async def test_espn_team_schedule_request():
    seen = []

    async def _handler(request):
        seen.append(request)
        return httpx.Response(200, json={"events": []})

    espn = _mock(ESPNProvider(), _handler)
    await espn.get_team_schedule("nba", 13, 2025, 2)

    url = seen[0].url
    assert url.path.endswith("/basketball/nba/teams/13/schedule")
    assert url.params["season"] == "2025"
    assert url.params["seasontype"] == "2"


@pytest.mark.asyncio
async def test_espn_schedule_is_not_retried():
    calls = []

    async def _handler(request):
        calls.append(request)
        return httpx.Response(500, text="boom")

    espn = _mock(ESPNProvider(), _handler)
    fetch = espn.schedule_fetch("nfl")
    with pytest.raises(UpstreamError):
        await fetch(6, 2025, 2)
    assert len(calls) == 1
    assert "/football/nfl/" in str(calls[0].url)


@pytest.mark.asyncio
async def test_espn_scoreboard_and_standings_params():
    seen = []

    async def _handler(request):
        seen.append(request)
        return httpx.Response(200, json={})

    espn = _mock(ESPNProvider(), _handler)
    await espn.get_scoreboard("nfl", week=3, year=2024, seasontype=2, limit=None)
    await espn.get_standings("nba", 2026, 2)

    board, standings = seen
    assert board.url.path.endswith("/football/nfl/scoreboard")
    assert dict(board.url.params) == {"week": "3", "year": "2024", "seasontype": "2"}
    assert standings.url.host == "site.web.api.espn.com"
    assert standings.url.params["level"] == "3"


@pytest.mark.asyncio
async def test_espn_rejects_unknown_sport():
    with pytest.raises(ValueError):
        await ESPNProvider().get_scoreboard("mlb")


@pytest.mark.asyncio
async def test_apisports_unwraps_response_list():
    seen = []

    async def _handler(request):
        seen.append(request)
        return httpx.Response(200, json={"errors": [], "results": 1, "response": [{"game": {"id": 1}}]})

    api = ApiSportsProvider(host="v1.basketball.api-sports.io", api_key="secret")
    _mock(api, _handler, headers=build_headers("v1.basketball.api-sports.io", "secret"))
    rows = await api.get_odds(2025, page=2)

    assert rows == [{"game": {"id": 1}}]
    request = seen[0]
    assert request.url.host == "v1.basketball.api-sports.io"
    assert request.url.path == "/odds"
    assert request.url.params["league"] == "12"
    assert request.url.params["page"] == "2"
    assert request.headers["x-apisports-key"] == "secret"


@pytest.mark.asyncio
async def test_apisports_error_payload_yields_empty_list():
    async def _handler(request):
        return httpx.Response(200, json={"errors": {"token": "invalid"}, "response": []})

    api = _mock(ApiSportsProvider(host="v1.basketball.api-sports.io", api_key="x"), _handler)
    assert await api.get_head_to_head(133, 134) == []


@pytest.mark.asyncio
async def test_nba_cdn_boxscore_path():
    seen = []

    async def _handler(request):
        seen.append(request)
        return httpx.Response(200, json={"game": {}})

    cdn = _mock(NBACdnProvider(), _handler)
    assert await cdn.get_boxscore("0022400061") == {"game": {}}
    assert seen[0].url.path.endswith("/boxscore/boxscore_0022400061.json")


@pytest.mark.asyncio
async def test_failing_team_schedule_never_blocks_another_team():
    async def _handler(request):
        if "/teams/1/" in request.url.path:
            return httpx.Response(503, text="unavailable")
        return httpx.Response(200, json={"events": []})

    espn = _mock(ESPNProvider(), _handler)
    fetch = espn.schedule_fetch("nba")

    for _ in range(5):
        with pytest.raises(UpstreamError):
            await schedule_service.fetch_schedule(fetch, 1, None, now=JULY_2025)

    result = await schedule_service.fetch_schedule(fetch, 2, None, now=JULY_2025)
    assert result.season == 2025
    assert result.events == []
