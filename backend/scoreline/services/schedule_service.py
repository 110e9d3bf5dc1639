"""
backend/scoreline/services/schedule_service.py

Purpose:
    Team schedule retrieval with season-label fallback, plus the event-level
    predicates shared by every ESPN-shaped feed (completion, event collection).

    ESPN publishes schedules under varying labels near season boundaries: a
    not-yet-populated upcoming season answers with an error, so the fetch walks
    an ordered, deduplicated list of candidate labels and keeps the first one
    that answers. Attempts are sequential; each is only needed if the previous
    one failed.

Dependencies:
    - scoreline.services.season_service
    - scoreline.services.status_mapper
    - scoreline.providers.http_client (UpstreamError)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Awaitable, Callable, Optional

from scoreline.providers.http_client import UpstreamError
from scoreline.services.season_service import SeasonRules, season_label
from scoreline.services.status_mapper import mentions_final
from scoreline.utils.payload import as_list, dig

logger = logging.getLogger("scoreline.schedule")

MIN_SEASON = 2000

SEASON_TYPE_PRE = 1
SEASON_TYPE_REGULAR = 2
SEASON_TYPE_POST = 3

# (team_id, season, season_type) -> raw schedule payload; raises UpstreamError
ScheduleFetch = Callable[[int, int, int], Awaitable[dict[str, Any]]]


class ScheduleUnavailableError(UpstreamError):
    """Every candidate season failed; carries the last transport status/body."""

    def __init__(self, provider: str, status_code: Optional[int], body: str, seasons: list[int]):
        self.seasons = seasons
        super().__init__(provider, status_code, body or "schedule unavailable")


@dataclass
class ScheduleResult:
    events: list[dict[str, Any]] = field(default_factory=list)
    season: int = 0


def season_candidates(
    requested: Optional[int],
    now: Optional[datetime] = None,
    rules: SeasonRules = SeasonRules.BASKETBALL,
) -> list[int]:
    """Ordered, deduplicated season labels to try.

    The requested label is capped at the current real-world label; then the
    current label if the request ran ahead of it; then the season before the
    primary (never below MIN_SEASON).
    """
    current = season_label(now, rules)
    primary = current if requested is None else min(requested, current)
    raw = [primary]
    if requested is not None and requested > current:
        raw.append(current)
    raw.append(max(primary - 1, MIN_SEASON))

    candidates: list[int] = []
    for season in raw:
        season = max(season, MIN_SEASON)
        if season not in candidates:
            candidates.append(season)
    return candidates


async def fetch_schedule(
    fetch: ScheduleFetch,
    team_id: int,
    requested_season: Optional[int],
    season_type: int = SEASON_TYPE_REGULAR,
    *,
    rules: SeasonRules = SeasonRules.BASKETBALL,
    now: Optional[datetime] = None,
) -> ScheduleResult:
    """Fetch a team schedule, falling back across season labels.

    The first candidate with a successful transport response wins and its
    label becomes the effective season of everything derived from it.
    """
    candidates = season_candidates(requested_season, now, rules)
    last_error: Optional[UpstreamError] = None

    for season in candidates:
        try:
            payload = await fetch(team_id, season, season_type)
        except UpstreamError as exc:
            last_error = exc
            logger.warning(
                "Schedule for team %s season %s (type %s) unavailable: %s",
                team_id, season, season_type, exc,
            )
            continue
        if season != candidates[0]:
            logger.info("Team %s schedule served from fallback season %s", team_id, season)
        return ScheduleResult(events=collect_events(payload), season=season)

    raise ScheduleUnavailableError(
        last_error.provider if last_error else "espn",
        last_error.status_code if last_error else None,
        last_error.body if last_error else "",
        candidates,
    )


def collect_events(payload: Any) -> list[dict[str, Any]]:
    """Events from every shape ESPN uses, first occurrence per id wins.

    Root ``events``, ``leagues[0].events`` and ``sports[].leagues[].events``
    all show up depending on endpoint and season. Events without an id are
    kept as they come.
    """
    sources: list[Any] = list(as_list(dig(payload, "events")))
    sources.extend(as_list(dig(payload, "leagues", 0, "events")))
    for sport in as_list(dig(payload, "sports")):
        for league in as_list(dig(sport, "leagues")):
            sources.extend(as_list(dig(league, "events")))

    seen: set[str] = set()
    events: list[dict[str, Any]] = []
    for event in sources:
        if not isinstance(event, dict):
            continue
        event_id = str(event.get("id") or "")
        if event_id:
            if event_id in seen:
                continue
            seen.add(event_id)
        events.append(event)
    return events


def is_completed_event(event: dict[str, Any]) -> bool:
    """True when the event is over, whichever level the provider put status on."""
    comp_status = dig(event, "competitions", 0, "status", "type", default={})
    event_status = dig(event, "status", "type", default={})

    for status in (comp_status, event_status):
        if not isinstance(status, dict):
            continue
        if status.get("completed") or str(status.get("state") or "").lower() == "post":
            return True

    return mentions_final(
        dig(comp_status, "description"),
        dig(event_status, "description"),
        dig(comp_status, "detail"),
        dig(event_status, "detail"),
    )
