from __future__ import annotations

from pydantic import BaseModel


class PlayerLine(BaseModel):
    person_id: int | None = None
    name: str | None = None
    position: str | None = None
    starter: bool = False
    minutes: str | None = None
    pts: int = 0
    reb: int = 0
    ast: int = 0
    stl: int = 0
    blk: int = 0
    fgm: int = 0
    fga: int = 0
    tpm: int = 0
    tpa: int = 0
    ftm: int = 0
    fta: int = 0


class BoxscoreTeam(BaseModel):
    team_id: int | None = None
    name: str | None = None
    code: str | None = None
    score: int = 0
    players: list[PlayerLine] = []


class Boxscore(BaseModel):
    game_id: str | None = None
    game_status: str | None = None
    period: int | None = None
    game_clock: str | None = None
    home: BoxscoreTeam
    away: BoxscoreTeam
