"""
backend/tests/test_scoreboard_service.py

Purpose:
    ESPN scoreboard event -> Game mapping and the live filter.
"""

from __future__ import annotations

from scoreline.models.games import GameStatus
from scoreline.services import scoreboard_service


def test_final_game_maps_teams_scores_and_status(make_event):
    event = make_event(401, home_id=13, away_id=2, home_score="118", away_score="109")
    game = scoreboard_service.map_espn_event(event)

    assert game.id == 401
    assert game.status is GameStatus.FINAL
    assert game.home.team.id == 13
    assert game.home.team.name == "Team 13"
    assert game.home.team.code == "T13"
    assert game.home.score == 118
    assert game.away.score == 109
    assert game.period is None
    assert game.clock is None
    assert game.season == 2025
    assert game.tv is None


def test_live_game_carries_period_and_clock(make_event):
    event = make_event(402, state="in", period=3)
    event["competitions"][0]["status"]["displayClock"] = "4:12"
    game = scoreboard_service.map_espn_event(event)

    assert game.status is GameStatus.PERIOD_3
    assert game.period == 3
    assert game.clock == "4:12"


def test_overtime_and_event_level_status(make_event):
    event = make_event(403, state="in", period=5, status_level="event")
    game = scoreboard_service.map_espn_event(event)
    assert game.status is GameStatus.OVERTIME
    assert game.period == 5


def test_missing_home_away_uses_positions():
    event = {
        "id": "7",
        "date": "2025-03-01T00:00Z",
        "competitions": [{
            "competitors": [
                {"team": {"id": "10", "name": "Tenth"}, "score": {"value": 99}},
                {"team": {"id": "11"}, "score": -3},
            ],
        }],
    }
    game = scoreboard_service.map_espn_event(event)

    assert game.home.team.id == 10
    assert game.home.team.name == "Tenth"
    assert game.home.score == 99
    assert game.away.team.name == "Away"
    assert game.away.score == 0
    assert game.status is GameStatus.NOT_STARTED


def test_season_year_prefers_payload_season(make_event):
    event = make_event(404, date="2026-01-05T00:00Z")
    event["season"] = {"year": 2025, "type": 2}
    assert scoreboard_service.map_espn_event(event).season == 2025
    event.pop("season")
    assert scoreboard_service.map_espn_event(event).season == 2026


def test_extras_include_broadcasts_and_gamecast(make_event):
    event = make_event(405, state="pre")
    competition = event["competitions"][0]
    competition["geoBroadcasts"] = [
        {"type": {"shortName": "TV"}, "media": {"shortName": "CBS"}},
        {"media": {"shortName": "Paramount+"}},
    ]
    competition["broadcasts"] = [{"market": "national", "names": ["ESPN"]}]
    event["links"] = [
        {"rel": ["summary", "desktop", "event"], "href": "https://espn.test/summary"},
        {"text": "Gamecast", "href": "https://espn.test/gamecast"},
    ]

    game = scoreboard_service.map_espn_event(event, with_extras=True)
    assert game.tv == ["CBS", "Paramount+"]
    assert game.game_url == "https://espn.test/gamecast"

    plain = scoreboard_service.map_espn_event(event)
    assert plain.tv is None
    assert plain.game_url is None


def test_broadcast_names_fallback_and_rel_gamecast():
    competition = {"broadcasts": [{"market": {"name": "Local"}}, {}]}
    assert scoreboard_service.collect_broadcasts(competition) == ["Local"]

    competition = {"broadcasts": [{"names": ["ESPN", "ABC"]}]}
    assert scoreboard_service.collect_broadcasts(competition) == ["ESPN, ABC"]

    event = {"links": [{"rel": ["gamecast"], "href": "https://espn.test/g"}]}
    assert scoreboard_service.pick_gamecast_url(event) == "https://espn.test/g"
    assert scoreboard_service.pick_gamecast_url({}) is None


def test_filter_live_falls_back_to_whole_slate(make_event):
    games = scoreboard_service.map_events([
        make_event(1, state="post"),
        make_event(2, state="in", period=2),
        make_event(3, state="pre"),
    ])
    assert [g.id for g in scoreboard_service.filter_live(games)] == [2]

    not_live = [g for g in games if g.id != 2]
    assert scoreboard_service.filter_live(not_live) == not_live
