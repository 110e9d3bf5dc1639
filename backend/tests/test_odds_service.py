"""
backend/tests/test_odds_service.py

Purpose:
    Decimal -> American conversion, market classification and best-price
    selection over API-Sports bookmaker payloads.
"""

from __future__ import annotations

import pytest

from scoreline.models.odds import OddsQuote
from scoreline.services import odds_service
from scoreline.utils.odds_utils import parse_number, to_american


@pytest.mark.parametrize(
    ("decimal_odd", "expected"),
    [
        (2.0, 100),
        ("2.00", 100),
        (2.5, 150),
        (3.1, 210),
        (1.5, -200),
        (1.83, -120),
        ("1,91", -110),
        (1.0, None),
        (0.5, None),
        (-3, None),
        ("abc", None),
        (None, None),
        (True, None),
        (float("nan"), None),
    ],
)
def test_to_american(decimal_odd, expected):
    assert to_american(decimal_odd) == expected


def test_to_american_sign_follows_even_money_boundary():
    assert to_american(1.999) < 0
    assert to_american(2.0) > 0
    assert to_american(2.001) > 0


def test_parse_number_accepts_comma_decimal():
    assert parse_number("-5,5") == -5.5
    assert parse_number(" 221.5 ") == 221.5
    assert parse_number("") is None


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Home/Away", None),
        ("Moneyline", "h2h"),
        ("3Way Result Moneyline", "h2h"),
        ("Winner", "h2h"),
        ("Winner (incl. OT)", None),
        ("Asian Handicap", "spreads"),
        ("Point Spread", "spreads"),
        ("Over/Under", "totals"),
        ("Total Points", "totals"),
        ("", None),
        (None, None),
    ],
)
def test_classify_market(name, expected):
    assert odds_service.classify_market(name) == expected


def _book(name, *bets):
    return {"id": 1, "name": name, "bets": list(bets)}


def _bet(name, *values):
    return {"id": 1, "name": name, "values": list(values)}


def test_best_price_keeps_largest_absolute_american_price():
    bookmakers = [
        _book("Book A", _bet("Moneyline", {"value": "Home", "odd": "1.5"})),
        _book("Book B", _bet("Moneyline", {"value": "Home", "odd": "1.83"})),
    ]
    best = odds_service.normalize(bookmakers)

    assert len(best) == 1
    assert best[0].price == -200
    assert best[0].bookmaker == "Book A"
    assert best[0].market == "h2h"
    assert best[0].point is None


def test_points_split_lines_and_only_apply_to_spreads_and_totals():
    bookmakers = [
        _book(
            "Book A",
            _bet("Asian Handicap", {"value": "Home", "odd": "1.9", "handicap": "-5,5"}),
            _bet("Over/Under", {"value": "Over", "odd": "1.87", "handicap": "221.5"}),
            _bet("Moneyline", {"value": "Away", "odd": "2.4", "handicap": "3"}),
        ),
        _book(
            "Book B",
            _bet("Asian Handicap", {"value": "Home", "odd": "2.05", "handicap": "-6.5"}),
        ),
    ]
    best = {q.key: q for q in odds_service.normalize(bookmakers)}

    assert set(best) == {
        ("spreads", "Home", -5.5),
        ("spreads", "Home", -6.5),
        ("totals", "Over", 221.5),
        ("h2h", "Away", None),
    }
    assert best[("h2h", "Away", None)].price == 140


def test_invalid_prices_and_unknown_markets_are_dropped():
    bookmakers = [
        _book(
            "Book A",
            _bet("Moneyline", {"value": "Home", "odd": "1.00"}, {"value": "Away", "odd": "n/a"}),
            _bet("Odd/Even", {"value": "Odd", "odd": "1.9"}),
        ),
    ]
    assert odds_service.normalize_bookmakers(bookmakers) == []


def test_ties_keep_first_seen():
    quotes = [
        OddsQuote(bookmaker="A", market="h2h", label="Home", price=-110),
        OddsQuote(bookmaker="B", market="h2h", label="Home", price=-110),
        OddsQuote(bookmaker="C", market="h2h", label="Home", price=110),
    ]
    assert odds_service.select_best_prices(quotes)[0].bookmaker == "A"


def test_best_price_selection_is_idempotent():
    bookmakers = [
        _book("A", _bet("Moneyline", {"value": "Home", "odd": "1.7"}, {"value": "Away", "odd": "2.2"})),
        _book("B", _bet("Moneyline", {"value": "Home", "odd": "1.65"}, {"value": "Away", "odd": "2.3"})),
    ]
    once = odds_service.normalize(bookmakers)
    assert odds_service.select_best_prices(once) == once


def test_normalize_odds_response_reads_game_rows():
    rows = [
        {
            "game": {"id": 4321},
            "teams": {"home": {"name": "Boston Celtics"}, "away": {"name": "Miami Heat"}},
            "bookmakers": [_book("A", _bet("Moneyline", {"value": "Home", "odd": "1.4"}))],
        },
        {"game": {"id": 9}},
        "garbage",
    ]
    games = odds_service.normalize_odds_response(rows)

    assert [g.game_id for g in games] == [4321, 9]
    assert games[0].home == "Boston Celtics"
    assert games[0].best[0].price == -250
    assert games[1].home == "Home"
    assert games[1].best == []
