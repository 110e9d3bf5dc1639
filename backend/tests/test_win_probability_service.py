from __future__ import annotations

import math

import pytest

from scoreline.models.form import TeamFormSummary
from scoreline.services import win_probability_service as wp


def _form(pf_avg, pa_avg, record, sample=5):
    return TeamFormSummary(
        team_id=1, sample=sample, pf_avg=pf_avg, pa_avg=pa_avg, record_last_n=record,
    )


def test_even_teams_lean_home():
    est = wp.estimate_win_probability(0.5, 0.5, 0.5, 0.5)
    expected = 1 / (1 + math.exp(-3 * 0.12))
    assert est.home_probability == pytest.approx(expected)
    assert est.home_probability > 0.5
    assert est.home_probability + est.away_probability == pytest.approx(1.0)


def test_unknown_inputs_count_as_neutral():
    assert wp.estimate_win_probability(None, None, None, None) == wp.estimate_win_probability(0.5, 0.5, 0.5, 0.5)
    assert wp.estimate_win_probability(float("nan"), None, None, None).home_probability == pytest.approx(
        wp.estimate_win_probability(0.5, 0.5, 0.5, 0.5).home_probability
    )


def test_probability_is_clamped():
    high = wp.estimate_win_probability(1.0, 0.0, 1.0, 0.0, 20.0, -20.0)
    low = wp.estimate_win_probability(0.0, 1.0, 0.0, 1.0, -1e6, 1e6)
    assert high.home_probability == wp.PROBABILITY_CEILING
    assert low.home_probability == wp.PROBABILITY_FLOOR
    assert low.away_probability == pytest.approx(0.98)


def test_monotone_in_season_record():
    weaker = wp.estimate_win_probability(0.4, 0.5, 0.5, 0.5)
    stronger = wp.estimate_win_probability(0.6, 0.5, 0.5, 0.5)
    assert stronger.home_probability > weaker.home_probability


def test_estimate_from_forms_uses_record_and_margin():
    home = _form(112.0, 104.0, "4-1")
    away = _form(101.0, 108.0, "1-4")
    est = wp.estimate_from_forms(0.6, 0.45, home, away)
    direct = wp.estimate_win_probability(0.6, 0.45, 0.8, 0.2, 8.0, -7.0)
    assert est == direct


def test_estimate_from_forms_missing_form_is_neutral():
    est = wp.estimate_from_forms(None, None, None, None)
    assert est == wp.estimate_win_probability(0.5, 0.5, 0.5, 0.5, 0.0, 0.0)


def test_edge_even_favors_home():
    edge = wp.estimate_edge(0.0, 0.0)
    assert edge.home_win_prob == 0.5
    assert edge.favored == "home"
    assert edge.reason == "Home team holds the edge based on recent performance trends."


def test_edge_follows_point_differential():
    edge = wp.estimate_edge(-4.0, 6.0)
    assert edge.home_win_prob == pytest.approx(0.119)
    assert edge.away_win_prob == pytest.approx(0.881)
    assert edge.favored == "away"
    assert edge.reason.startswith("Away team")


def test_edge_is_not_clamped():
    edge = wp.estimate_edge(80.0, -80.0)
    assert edge.home_win_prob == 1.0
