from __future__ import annotations

from pydantic import BaseModel


class StandingRow(BaseModel):
    team_id: int
    conf_rank: int | None = None
    wins: int = 0
    losses: int = 0

    @property
    def win_pct(self) -> float | None:
        total = self.wins + self.losses
        return self.wins / total if total > 0 else None


class StandingsResponse(BaseModel):
    season: int
    seasontype: int
    data: dict[str, StandingRow]
