"""NBA CDN live boxscore -> Boxscore."""

from __future__ import annotations

from typing import Any, Optional

from scoreline.models.boxscore import Boxscore, BoxscoreTeam, PlayerLine
from scoreline.utils.payload import as_dict, as_list, dig, to_int

# PlayerLine field -> key under player["statistics"]
_STAT_KEYS = {
    "pts": "points",
    "reb": "reboundsTotal",
    "ast": "assists",
    "stl": "steals",
    "blk": "blocks",
    "fgm": "fieldGoalsMade",
    "fga": "fieldGoalsAttempted",
    "tpm": "threePointersMade",
    "tpa": "threePointersAttempted",
    "ftm": "freeThrowsMade",
    "fta": "freeThrowsAttempted",
}


def _player_line(player: dict[str, Any]) -> PlayerLine:
    stats = as_dict(player.get("statistics"))
    return PlayerLine(
        person_id=player.get("personId"),
        name=player.get("name"),
        position=player.get("position"),
        starter=str(player.get("starter", "")) in ("1", "True", "true"),
        minutes=stats.get("minutes"),
        **{field: to_int(stats.get(key)) for field, key in _STAT_KEYS.items()},
    )


def _team(raw: Any) -> BoxscoreTeam:
    team = as_dict(raw)
    return BoxscoreTeam(
        team_id=team.get("teamId"),
        name=team.get("teamName"),
        code=team.get("teamTricode"),
        score=to_int(team.get("score")),
        players=[_player_line(p) for p in as_list(team.get("players")) if isinstance(p, dict)],
    )


def normalize_boxscore(payload: Any) -> Optional[Boxscore]:
    """None when the payload has no ``game`` object."""
    game = dig(payload, "game")
    if not isinstance(game, dict):
        return None
    return Boxscore(
        game_id=game.get("gameId"),
        game_status=game.get("gameStatusText"),
        period=game.get("period"),
        game_clock=game.get("gameClock"),
        home=_team(game.get("homeTeam")),
        away=_team(game.get("awayTeam")),
    )
