"""
backend/scoreline/services/odds_service.py

Purpose:
    Normalize API-Sports bookmaker offers into canonical OddsQuote rows
    (h2h / spreads / totals, American prices) and keep the best price per
    (market, side, point).

Dependencies:
    - scoreline.utils.odds_utils
    - scoreline.utils.payload
    - scoreline.models.odds
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

from scoreline.models.odds import GameOdds, Market, OddsQuote
from scoreline.utils.odds_utils import parse_number, to_american
from scoreline.utils.payload import as_list, dig, to_int

logger = logging.getLogger("scoreline.odds")

_POINT_MARKETS = {"spreads", "totals"}


def classify_market(name: str | None) -> Optional[Market]:
    """Bucket a bookmaker bet name, or None when it has no canonical market.

    Case-insensitive substring match, except "winner" which must be the
    whole name.
    """
    key = str(name or "").strip().lower()
    if not key:
        return None
    if "moneyline" in key or key == "winner":
        return "h2h"
    if "spread" in key or "handicap" in key:
        return "spreads"
    if "total" in key or "over/under" in key:
        return "totals"
    return None


def normalize_bookmakers(bookmakers: Iterable[dict[str, Any]] | None) -> list[OddsQuote]:
    """Flatten ``bookmakers[].bets[].values[]`` into quotes, in encounter order."""
    quotes: list[OddsQuote] = []
    dropped = 0
    for bookmaker in bookmakers or []:
        book_name = str(dig(bookmaker, "name", default="") or "")
        for bet in as_list(dig(bookmaker, "bets")):
            market = classify_market(dig(bet, "name"))
            if market is None:
                continue
            for value in as_list(dig(bet, "values")):
                price = to_american(dig(value, "odd"))
                if price is None:
                    dropped += 1
                    continue
                point = parse_number(dig(value, "handicap")) if market in _POINT_MARKETS else None
                quotes.append(OddsQuote(
                    bookmaker=book_name,
                    market=market,
                    label=str(dig(value, "value", default="")),
                    price=price,
                    point=point,
                ))
    if dropped:
        logger.debug("Dropped %d quotes without a valid decimal price", dropped)
    return quotes


def select_best_prices(quotes: Iterable[OddsQuote]) -> list[OddsQuote]:
    """Keep the largest |price| per (market, label, point); ties keep the first seen."""
    best: dict[tuple, OddsQuote] = {}
    for quote in quotes:
        current = best.get(quote.key)
        if current is None or abs(quote.price) > abs(current.price):
            best[quote.key] = quote
    return list(best.values())


def normalize(bookmakers: Iterable[dict[str, Any]] | None) -> list[OddsQuote]:
    return select_best_prices(normalize_bookmakers(bookmakers))


def normalize_game_odds(entry: dict[str, Any]) -> GameOdds:
    """One API-Sports ``/odds`` response row -> GameOdds."""
    return GameOdds(
        game_id=to_int(dig(entry, "game", "id")),
        home=str(dig(entry, "teams", "home", "name", default="Home")),
        away=str(dig(entry, "teams", "away", "name", default="Away")),
        best=normalize(as_list(dig(entry, "bookmakers"))),
    )


def normalize_odds_response(rows: Iterable[dict[str, Any]] | None) -> list[GameOdds]:
    return [normalize_game_odds(row) for row in rows or [] if isinstance(row, dict)]
