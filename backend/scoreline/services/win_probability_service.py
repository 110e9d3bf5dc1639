"""Closed-form win-probability blends.

Two estimators exist on purpose: the full blend feeds the matchup view, the
point-differential edge feeds the lighter game-intel endpoint.
"""

from __future__ import annotations

import math
from typing import Optional

from scoreline.models.form import TeamFormSummary
from scoreline.models.probability import EdgeEstimate, WinProbabilityEstimate

NEUTRAL_WIN_PCT = 0.5

SEASON_WEIGHT = 1.4
RECENT_WEIGHT = 1.0
POINTS_WEIGHT = 0.04
HOME_BIAS = 0.12
STEEPNESS = 3.0

PROBABILITY_FLOOR = 0.02
PROBABILITY_CEILING = 0.98

EDGE_SCALE = 5.0


def _logistic(x: float) -> float:
    # exp overflows past ~709; the limit is exact enough there
    if x < -700:
        return 0.0
    if x > 700:
        return 1.0
    return 1 / (1 + math.exp(-x))


def _neutral(value: Optional[float]) -> float:
    if value is None or not math.isfinite(value):
        return NEUTRAL_WIN_PCT
    return value


def estimate_win_probability(
    home_season_win_pct: Optional[float],
    away_season_win_pct: Optional[float],
    home_last5_win_pct: Optional[float],
    away_last5_win_pct: Optional[float],
    home_pf_minus_pa: float = 0.0,
    away_pf_minus_pa: float = 0.0,
) -> WinProbabilityEstimate:
    """Blend season record, recent record and scoring margin into P(home wins).

    z = 1.4*seasonDiff + 1.0*recentDiff + 0.04*formPts + 0.12 (home bias),
    p = logistic(3z) clamped to [0.02, 0.98]. Unknown win percentages count
    as 0.5.
    """
    season_diff = _neutral(home_season_win_pct) - _neutral(away_season_win_pct)
    recent_diff = _neutral(home_last5_win_pct) - _neutral(away_last5_win_pct)
    form_pts = (home_pf_minus_pa or 0.0) - (away_pf_minus_pa or 0.0)

    z = SEASON_WEIGHT * season_diff + RECENT_WEIGHT * recent_diff + POINTS_WEIGHT * form_pts + HOME_BIAS
    p = min(PROBABILITY_CEILING, max(PROBABILITY_FLOOR, _logistic(STEEPNESS * z)))
    return WinProbabilityEstimate(home_probability=p, away_probability=1 - p)


def estimate_from_forms(
    home_season_win_pct: Optional[float],
    away_season_win_pct: Optional[float],
    home_form: Optional[TeamFormSummary],
    away_form: Optional[TeamFormSummary],
) -> WinProbabilityEstimate:
    """Full blend where a missing form contributes neutral record and zero margin."""
    return estimate_win_probability(
        home_season_win_pct,
        away_season_win_pct,
        home_form.win_pct if home_form else None,
        away_form.win_pct if away_form else None,
        home_form.point_differential if home_form else 0.0,
        away_form.point_differential if away_form else 0.0,
    )


def estimate_edge(home_pf_minus_pa: float, away_pf_minus_pa: float) -> EdgeEstimate:
    """Point-differential-only variant: p = logistic(diff / 5), no clamp."""
    diff = home_pf_minus_pa - away_pf_minus_pa
    p = _logistic(diff / EDGE_SCALE)
    favored = "home" if p >= 0.5 else "away"
    return EdgeEstimate(
        home_win_prob=round(p, 3),
        away_win_prob=round(1 - p, 3),
        favored=favored,
        reason=f"{favored.capitalize()} team holds the edge based on recent performance trends.",
    )
