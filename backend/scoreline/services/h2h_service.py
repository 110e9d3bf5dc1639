"""
backend/scoreline/services/h2h_service.py

Purpose:
    Season scoring averages and head-to-head record from API-Sports ``/games``
    rows. Unlike recent form, head-to-head wins are a plain score comparison:
    API-Sports game rows carry no winner flag.

Dependencies:
    - scoreline.utils.payload
"""

from __future__ import annotations

from typing import Any, Iterable

from pydantic import BaseModel

from scoreline.utils.payload import dig, to_int

HEAD_TO_HEAD_WINDOW = 10


class TeamAverages(BaseModel):
    team_id: int
    ppg: float
    oppg: float
    pace_proxy: float


class HeadToHeadRecord(BaseModel):
    games: int
    a_wins: int
    b_wins: int


class HeadToHeadResponse(BaseModel):
    a: TeamAverages
    b: TeamAverages
    recent: HeadToHeadRecord


def _totals(game: dict[str, Any]) -> tuple[int, int]:
    return (
        to_int(dig(game, "scores", "home", "total")),
        to_int(dig(game, "scores", "away", "total")),
    )


def _is_home(game: dict[str, Any], team_id: int) -> bool:
    return to_int(dig(game, "teams", "home", "id")) == team_id


def team_averages(games: Iterable[dict[str, Any]], team_id: int) -> TeamAverages:
    scored = allowed = n = 0
    for game in games:
        home_total, away_total = _totals(game)
        home = _is_home(game, team_id)
        scored += home_total if home else away_total
        allowed += away_total if home else home_total
        n += 1
    n = n or 1
    return TeamAverages(
        team_id=team_id,
        ppg=scored / n,
        oppg=allowed / n,
        pace_proxy=(scored + allowed) / n,
    )


def head_to_head(games: list[dict[str, Any]], team_a: int) -> HeadToHeadRecord:
    """Win split over the last HEAD_TO_HEAD_WINDOW meetings, from team A's side."""
    window = games[-HEAD_TO_HEAD_WINDOW:]
    a_wins = 0
    for game in window:
        home_total, away_total = _totals(game)
        if _is_home(game, team_a):
            a_wins += home_total > away_total
        else:
            a_wins += away_total > home_total
    return HeadToHeadRecord(games=len(window), a_wins=a_wins, b_wins=len(window) - a_wins)
