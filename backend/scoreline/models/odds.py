from __future__ import annotations

from typing import Literal

from pydantic import BaseModel

Market = Literal["h2h", "spreads", "totals"]


class OddsQuote(BaseModel):
    """A single bookmaker price in American-odds convention."""
    bookmaker: str
    market: Market
    label: str                    # side: "Home", "Away", "Over 221.5", ...
    price: int
    point: float | None = None    # handicap/total line, spreads and totals only

    @property
    def key(self) -> tuple[str, str, float | None]:
        return (self.market, self.label, self.point)


class GameOdds(BaseModel):
    game_id: int
    home: str
    away: str
    best: list[OddsQuote]
