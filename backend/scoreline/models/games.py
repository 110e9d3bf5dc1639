"""
backend/scoreline/models/games.py

Purpose:
    Canonical scoreboard models shared by every provider adapter. Teams are
    rebuilt from each response; nothing here carries identity across requests.

Dependencies:
    - pydantic
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class GameStatus(str, Enum):
    NOT_STARTED = "NS"
    PERIOD_1 = "Q1"
    PERIOD_2 = "Q2"
    PERIOD_3 = "Q3"
    PERIOD_4 = "Q4"
    OVERTIME = "OT"
    FINAL = "FT"

    @property
    def is_live(self) -> bool:
        return self not in (GameStatus.NOT_STARTED, GameStatus.FINAL)


class Team(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    code: str | None = None
    logo: str | None = None


class GameSide(BaseModel):
    team: Team
    score: int = Field(default=0, ge=0)


class Game(BaseModel):
    id: int
    date: str                      # ISO-8601, as supplied by the provider
    season: int | None = None
    status: GameStatus
    period: int | None = None      # only while in progress
    clock: str | None = None
    home: GameSide
    away: GameSide
    tv: list[str] | None = None
    game_url: str | None = None


class ScoreboardResponse(BaseModel):
    data: list[Game]


class WeekScoreboardResponse(BaseModel):
    season: int
    week: int
    seasontype: int
    data: list[Game]
    note: str | None = None
