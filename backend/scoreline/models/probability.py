from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

from scoreline.models.form import TeamFormSummary


class WinProbabilityEstimate(BaseModel):
    home_probability: float
    away_probability: float


class EdgeEstimate(BaseModel):
    home_win_prob: float
    away_win_prob: float
    favored: Literal["home", "away"]
    reason: str


class SideForm(BaseModel):
    """Form for one side of a matchup, or the error that prevented it."""
    team_id: int
    form: TeamFormSummary | None = None
    error: str | None = None


class GameIntelResponse(BaseModel):
    game_id: int
    home: SideForm
    away: SideForm
    edge: EdgeEstimate | None = None


class MatchupResponse(BaseModel):
    home: SideForm
    away: SideForm
    season: int
    home_season_win_pct: float
    away_season_win_pct: float
    probability: WinProbabilityEstimate
