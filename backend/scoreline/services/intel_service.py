"""
backend/scoreline/services/intel_service.py

Purpose:
    Request-scoped orchestration over the engine: team form with season
    fallback, game intel (both teams concurrently + edge), and the blended
    matchup probability. Home and away fetches run concurrently; a failure on
    one side is reported on that side and never hides the other side's form.

Dependencies:
    - scoreline.services.schedule_service
    - scoreline.services.form_service
    - scoreline.services.standings_service
    - scoreline.services.win_probability_service
"""

from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from typing import Optional

from scoreline.models.form import TeamFormSummary
from scoreline.models.probability import GameIntelResponse, MatchupResponse, SideForm
from scoreline.models.standings import StandingRow
from scoreline.providers.http_client import UpstreamError
from scoreline.services import form_service
from scoreline.services.schedule_service import SEASON_TYPE_REGULAR, ScheduleFetch, fetch_schedule
from scoreline.services.season_service import SeasonRules, season_label
from scoreline.services.standings_service import flatten_standings
from scoreline.services.win_probability_service import estimate_edge, estimate_from_forms

logger = logging.getLogger("scoreline.intel")


async def load_team_form(
    fetch: ScheduleFetch,
    team_id: int,
    season: Optional[int],
    season_type: int = SEASON_TYPE_REGULAR,
    limit: int = form_service.DEFAULT_LIMIT,
    *,
    rules: SeasonRules = SeasonRules.BASKETBALL,
    now: Optional[datetime] = None,
) -> TeamFormSummary:
    """Schedule with season fallback, summarized; ``season`` on the result is the effective one."""
    schedule = await fetch_schedule(fetch, team_id, season, season_type, rules=rules, now=now)
    return form_service.summarize(
        schedule.events,
        team_id,
        limit,
        season=schedule.season,
        season_type=season_type,
    )


def _side(team_id: int, result: TeamFormSummary | BaseException) -> SideForm:
    if isinstance(result, UpstreamError):
        logger.warning("Form for team %s unavailable: %s", team_id, result)
        return SideForm(team_id=team_id, error=str(result))
    if isinstance(result, BaseException):
        raise result
    return SideForm(team_id=team_id, form=result)


async def _both_forms(
    fetch: ScheduleFetch,
    home_id: int,
    away_id: int,
    season: Optional[int],
    limit: int,
    now: Optional[datetime],
) -> tuple[SideForm, SideForm]:
    home_result, away_result = await asyncio.gather(
        load_team_form(fetch, home_id, season, SEASON_TYPE_REGULAR, limit, now=now),
        load_team_form(fetch, away_id, season, SEASON_TYPE_REGULAR, limit, now=now),
        return_exceptions=True,
    )
    return _side(home_id, home_result), _side(away_id, away_result)


async def game_intel(
    fetch: ScheduleFetch,
    game_id: int,
    home_id: int,
    away_id: int,
    limit: int = form_service.DEFAULT_LIMIT,
    *,
    now: Optional[datetime] = None,
) -> GameIntelResponse:
    """Recent form for both teams plus the point-differential edge (when both are known)."""
    home, away = await _both_forms(fetch, home_id, away_id, None, limit, now)
    edge = None
    if home.form and away.form:
        edge = estimate_edge(home.form.point_differential, away.form.point_differential)
    return GameIntelResponse(game_id=game_id, home=home, away=away, edge=edge)


async def matchup(
    fetch: ScheduleFetch,
    fetch_standings,
    home_id: int,
    away_id: int,
    limit: int = form_service.DEFAULT_LIMIT,
    *,
    now: Optional[datetime] = None,
) -> MatchupResponse:
    """Blended win probability from standings and last-N form.

    ``fetch_standings(season, season_type)`` returns the raw ESPN standings
    payload. Anything unavailable enters the blend as neutral.
    """
    season = season_label(now, SeasonRules.BASKETBALL)
    standings_result, forms = await asyncio.gather(
        fetch_standings(season, SEASON_TYPE_REGULAR),
        _both_forms(fetch, home_id, away_id, season, limit, now),
        return_exceptions=True,
    )
    if isinstance(forms, BaseException):
        raise forms
    if isinstance(standings_result, BaseException) and not isinstance(standings_result, UpstreamError):
        raise standings_result
    home, away = forms

    table: dict[str, StandingRow] = {}
    if isinstance(standings_result, UpstreamError):
        logger.warning("Standings for season %s unavailable: %s", season, standings_result)
    else:
        table = flatten_standings(standings_result)

    home_pct = _season_win_pct(table, home_id)
    away_pct = _season_win_pct(table, away_id)
    probability = estimate_from_forms(home_pct, away_pct, home.form, away.form)
    return MatchupResponse(
        home=home,
        away=away,
        season=season,
        home_season_win_pct=home_pct if home_pct is not None else 0.5,
        away_season_win_pct=away_pct if away_pct is not None else 0.5,
        probability=probability,
    )


def _season_win_pct(table: dict[str, StandingRow], team_id: int) -> Optional[float]:
    row = table.get(str(team_id))
    return row.win_pct if row else None
