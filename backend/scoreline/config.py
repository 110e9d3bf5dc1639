"""
backend/scoreline/config.py

Purpose:
    Central settings loading for the API process. Validated once at import;
    a missing provider credential aborts startup with a readable
    pydantic ValidationError instead of failing on the first request.

Dependencies:
    - pydantic-settings
    - pathlib
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

# Prefer backend/.env, fallback to project-root .env.
_BACKEND_ENV_FILE = Path(__file__).resolve().parent.parent / ".env"
_ROOT_ENV_FILE = Path(__file__).resolve().parent.parent.parent / ".env"


class Settings(BaseSettings):
    # API-Sports (odds, games, head-to-head)
    APISPORTS_KEY: str = Field(min_length=1)
    APISPORTS_HOST: str = Field(min_length=1)  # v1.basketball.api-sports.io or a RapidAPI host
    APISPORTS_LEAGUE_ID: int = 12  # NBA

    # ESPN public API, no auth needed
    ESPN_SITE_BASE_URL: str = "https://site.api.espn.com/apis/site/v2/sports"
    ESPN_WEB_BASE_URL: str = "https://site.web.api.espn.com/apis/v2/sports"

    # NBA live data CDN (boxscores)
    NBA_CDN_BASE_URL: str = "https://cdn.nba.com/static/json/liveData"

    WATCH_BASE_URL: str = ""
    BACKEND_CORS_ORIGINS: str = "http://localhost:3000"

    # Transport
    HTTP_TIMEOUT_SECONDS: float = 15.0
    HTTP_MAX_RETRIES: int = 2
    HTTP_BASE_DELAY_SECONDS: float = 1.0

    DEFAULT_TIMEZONE: str = "America/New_York"
    LOG_LEVEL: str = "INFO"

    model_config = {
        "env_file": (str(_BACKEND_ENV_FILE), str(_ROOT_ENV_FILE)),
        "extra": "ignore",
    }


settings = Settings()
