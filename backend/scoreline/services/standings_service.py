"""Flatten ESPN standings (conference -> division -> entries) to a map by team id."""

from __future__ import annotations

from typing import Any

from scoreline.models.standings import StandingRow
from scoreline.utils.payload import as_list, dig, to_float, to_int


def _stats_by_name(entry: dict[str, Any]) -> dict[str, Any]:
    stats: dict[str, Any] = {}
    for stat in as_list(dig(entry, "stats")):
        name = dig(stat, "name")
        if name:
            value = dig(stat, "value")
            stats[name] = value if value is not None else dig(stat, "displayValue")
    return stats


def _entries(payload: Any):
    # Some seasons nest divisions under conferences, others list entries on the conference.
    for conference in as_list(dig(payload, "children")):
        divisions = as_list(dig(conference, "children"))
        if not divisions:
            yield from as_list(dig(conference, "standings", "entries"))
        for division in divisions:
            yield from as_list(dig(division, "standings", "entries"))


def flatten_standings(payload: Any, *, prefer_row_rank: bool = False) -> dict[str, StandingRow]:
    """``teamId -> StandingRow``; rank from playoffSeed, then rank stat / entry rank.

    The football table prefers the entry-level rank over the ``rank`` stat.
    """
    table: dict[str, StandingRow] = {}
    for entry in _entries(payload):
        team_id = str(dig(entry, "team", "id", default=""))
        if not team_id:
            continue
        stats = _stats_by_name(entry)
        rank_chain = (
            (stats.get("playoffSeed"), dig(entry, "rank"), stats.get("rank"))
            if prefer_row_rank
            else (stats.get("playoffSeed"), stats.get("rank"), dig(entry, "rank"))
        )
        rank = next((r for r in map(to_float, rank_chain) if r is not None), None)
        table[team_id] = StandingRow(
            team_id=to_int(team_id),
            conf_rank=int(rank) if rank is not None else None,
            wins=to_int(stats.get("wins")),
            losses=to_int(stats.get("losses")),
        )
    return table
