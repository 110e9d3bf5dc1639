"""
backend/scoreline/services/scoreboard_service.py

Purpose:
    Map ESPN scoreboard events to canonical Game records, and the live-only
    filter used by the scores endpoint.

Dependencies:
    - scoreline.services.status_mapper
    - scoreline.utils.payload
"""

from __future__ import annotations

import re
from typing import Any, Iterable, Optional

from scoreline.models.games import Game, GameSide, Team
from scoreline.services.status_mapper import map_status
from scoreline.utils import parse_utc, utcnow
from scoreline.utils.payload import as_list, dig, first_of, score_value, to_int

_GAMECAST_RE = re.compile(r"gamecast", re.IGNORECASE)

_LOGO_PATHS = (("team", "logo"), ("team", "logos", 0, "href"))
_NAME_PATHS = (("team", "displayName"), ("team", "name"))


def pick_sides(competition: dict[str, Any]) -> tuple[dict, dict]:
    """(home, away) competitor records; positional 0/1 when ``homeAway`` is missing."""
    competitors = [c for c in as_list(dig(competition, "competitors")) if isinstance(c, dict)]
    home = next((c for c in competitors if c.get("homeAway") == "home"), None)
    away = next((c for c in competitors if c.get("homeAway") == "away"), None)
    if home is None:
        home = competitors[0] if competitors else {}
    if away is None:
        away = competitors[1] if len(competitors) > 1 else {}
    return home, away


def map_team(side: dict[str, Any], fallback_name: str = "Team") -> Team:
    return Team(
        id=to_int(dig(side, "team", "id")),
        name=str(first_of(side, _NAME_PATHS, default=fallback_name)),
        code=dig(side, "team", "abbreviation"),
        logo=first_of(side, _LOGO_PATHS),
    )


def _score(side: dict[str, Any]) -> int:
    return max(0, int(score_value(dig(side, "score"))))


def _season_year(event: dict[str, Any]) -> Optional[int]:
    year = to_int(dig(event, "season", "year"))
    if year:
        return year
    raw_date = dig(event, "date")
    if raw_date:
        try:
            return parse_utc(str(raw_date)).year
        except ValueError:
            return None
    return None


def pick_gamecast_url(event: dict[str, Any]) -> Optional[str]:
    links = [link for link in as_list(dig(event, "links")) if isinstance(link, dict)]
    for link in links:
        if isinstance(link.get("text"), str) and _GAMECAST_RE.search(link["text"]) and link.get("href"):
            return link["href"]
    for link in links:
        rels = as_list(link.get("rel"))
        if any(isinstance(rel, str) and _GAMECAST_RE.search(rel) for rel in rels):
            return link.get("href")
    return None


def _broadcast_name(broadcast: Any) -> str:
    return str(first_of(broadcast, (
        ("media", "shortName"),
        ("media", "name"),
        ("type", "shortName"),
        ("type", "description"),
        ("market", "name"),
    ), default=""))


def collect_broadcasts(competition: dict[str, Any]) -> list[str]:
    """Geo broadcasts first; the generic list only when there are none."""
    geo = [n for n in map(_broadcast_name, as_list(dig(competition, "geoBroadcasts"))) if n]
    if geo:
        return geo
    names: list[str] = []
    for broadcast in as_list(dig(competition, "broadcasts")):
        name = _broadcast_name(broadcast)
        if not name:
            # site API variant: {"market": "national", "names": ["ESPN"]}
            name = ", ".join(str(n) for n in as_list(dig(broadcast, "names")) if n)
        if name:
            names.append(name)
    return names


def map_espn_event(event: dict[str, Any], *, with_extras: bool = False) -> Game:
    """One ESPN event -> Game. ``with_extras`` adds TV and gamecast link (NFL board)."""
    competition = dig(event, "competitions", 0, default={})
    home, away = pick_sides(competition)

    status = dig(competition, "status") or dig(event, "status", default={})
    state = str(dig(status, "type", "state", default="")).lower()
    period = to_int(dig(status, "period"))
    short_detail = first_of(status, (("type", "shortDetail"), ("shortDetail",)), default="")
    detail = first_of(status, (("type", "detail"), ("detail",)), default="")
    canonical = map_status(state, period, short_detail, detail)

    live = state == "in"
    clock = str(first_of(status, (("displayClock",), ("clock",)), default="")) if live else None

    game = Game(
        id=to_int(first_of(event, (("id",), ("competitions", 0, "id")))),
        date=str(dig(competition, "date") or dig(event, "date") or utcnow().isoformat()),
        season=_season_year(event),
        status=canonical,
        period=period if live and period > 0 else None,
        clock=clock,
        home=GameSide(team=map_team(home, "Home"), score=_score(home)),
        away=GameSide(team=map_team(away, "Away"), score=_score(away)),
    )
    if with_extras:
        tv = collect_broadcasts(competition)
        game.tv = tv or None
        game.game_url = pick_gamecast_url(event)
    return game


def map_events(events: Iterable[dict[str, Any]], *, with_extras: bool = False) -> list[Game]:
    return [map_espn_event(e, with_extras=with_extras) for e in events if isinstance(e, dict)]


def filter_live(games: list[Game]) -> list[Game]:
    """Games in progress; the full slate when ESPN has not flipped any game to live yet."""
    live = [g for g in games if g.status.is_live]
    return live or games