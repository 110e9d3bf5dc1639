"""Watch-link URLs: ``{base}/{sport}/stream-{team-slug}-live``."""

from __future__ import annotations

import re
import unicodedata
from typing import Optional

_NON_SLUG_RE = re.compile(r"[^a-z0-9]+")


def slugify(raw: str) -> str:
    """Lowercase ASCII slug with single dashes (``"Indiana Pacers"`` -> ``indiana-pacers``)."""
    text = unicodedata.normalize("NFKD", str(raw or "")).encode("ascii", "ignore").decode("ascii")
    return _NON_SLUG_RE.sub("-", text.lower()).strip("-")


def build_watch_url(base: str, sport: str, team: str = "") -> Optional[str]:
    """None when no base URL is configured; sport page when no team is given."""
    root = (base or "").rstrip("/")
    if not root:
        return None
    sport_slug = slugify(sport)
    team_slug = slugify(team)
    if not team_slug:
        return f"{root}/{sport_slug}"
    return f"{root}/{sport_slug}/stream-{team_slug}-live"
