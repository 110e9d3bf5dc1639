"""
backend/tests/conftest.py

Purpose:
    Shared pytest bootstrap: import path for the backend package, placeholder
    provider credentials (settings validate at import), and ESPN-shaped
    payload builders used across test modules.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

_THIS_FILE = Path(__file__).resolve()
_BACKEND_DIR = _THIS_FILE.parents[1]

if str(_BACKEND_DIR) not in sys.path:
    sys.path.insert(0, str(_BACKEND_DIR))

os.environ.setdefault("APISPORTS_KEY", "test-key")
os.environ.setdefault("APISPORTS_HOST", "v1.basketball.api-sports.io")


def espn_event(
    event_id: int,
    *,
    home_id: int = 1,
    away_id: int = 2,
    home_score=0,
    away_score=0,
    home_winner: bool | None = None,
    state: str = "post",
    completed: bool | None = None,
    period: int = 4,
    date: str = "2025-01-10T00:30Z",
    status_level: str = "competition",
) -> dict:
    """Minimal ESPN event: one competition, two competitors, nested status."""
    status = {
        "period": period,
        "displayClock": "0:00",
        "type": {
            "state": state,
            "completed": state == "post" if completed is None else completed,
            "description": "Final" if state == "post" else "In Progress",
            "shortDetail": "Final" if state == "post" else f"Q{period}",
        },
    }
    if home_winner is None:
        home_winner = float(home_score) > float(away_score) if state == "post" else False
    competition = {
        "id": str(event_id),
        "competitors": [
            {
                "homeAway": "home",
                "team": {"id": str(home_id), "displayName": f"Team {home_id}", "abbreviation": f"T{home_id}"},
                "score": home_score,
                "winner": home_winner,
            },
            {
                "homeAway": "away",
                "team": {"id": str(away_id), "displayName": f"Team {away_id}", "abbreviation": f"T{away_id}"},
                "score": away_score,
                "winner": not home_winner if state == "post" else False,
            },
        ],
    }
    event = {"id": str(event_id), "date": date, "competitions": [competition]}
    if status_level == "competition":
        competition["status"] = status
    else:
        event["status"] = status
    return event


@pytest.fixture
def make_event():
    return espn_event
