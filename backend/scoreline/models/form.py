from __future__ import annotations

from pydantic import BaseModel


class OpponentRef(BaseModel):
    id: int = 0
    name: str | None = None
    logo: str | None = None


class RecentGame(BaseModel):
    """One completed game from a team's point of view."""
    id: int = 0
    date: str | None = None
    home_away: str = "home"
    opponent: OpponentRef = OpponentRef()
    pf: float = 0
    pa: float = 0
    won: bool = False


class TeamFormSummary(BaseModel):
    """Averages over the most recent N completed games.

    ``wins + losses == sample`` always holds, where the losses are read off
    ``record_last_n``.
    """
    team_id: int
    season: int | None = None
    season_type: int | None = None
    sample: int
    pf_avg: float
    pa_avg: float
    record_last_n: str
    games: list[RecentGame] = []

    @property
    def wins(self) -> int:
        return int(self.record_last_n.split("-", 1)[0])

    @property
    def losses(self) -> int:
        return int(self.record_last_n.split("-", 1)[1])

    @property
    def win_pct(self) -> float | None:
        """Share of the sample won, or None when no completed games were found."""
        if self.sample <= 0:
            return None
        return self.wins / self.sample

    @property
    def point_differential(self) -> float:
        return self.pf_avg - self.pa_avg
