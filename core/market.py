"""
market.py — Market Price Queries & Trends
------------------------------------------

Backs the market prices view: price entries are grouped by produce name, each
group gets an average price and a trend computed from its earliest and latest
observation.

Dependencies:
- SQLAlchemy ORM session (callers own the transaction)
- pandas for the chart frame

"""

import logging
from typing import Iterable, Optional

import pandas as pd

from core.schemas import NewMarketPrice
from db.market_model import MarketPrice

logger = logging.getLogger(__name__)


def list_prices(session) -> list[MarketPrice]:
    return session.query(MarketPrice).order_by(MarketPrice.recorded_at.desc()).all()


def add_price(session, payload: NewMarketPrice) -> MarketPrice:
    price = MarketPrice(**payload.model_dump())
    session.add(price)
    session.flush()
    logger.info("Recorded %s at %s: %.2f/kg", price.produce_name, price.market_name, price.price_per_kg)
    return price


def group_by_produce(prices: Iterable[MarketPrice]) -> dict[str, list[MarketPrice]]:
    """Group rows by produce name; groups and rows keep their input order."""
    grouped: dict[str, list[MarketPrice]] = {}
    for price in prices:
        grouped.setdefault(price.produce_name, []).append(price)
    return grouped


def average_price(prices: list[MarketPrice]) -> float:
    return round(sum(float(p.price_per_kg) for p in prices) / len(prices), 2)


def price_trend(prices: list[MarketPrice]) -> Optional[str]:
    """'up', 'down' or 'stable' from the earliest to the latest entry; None below two entries."""
    if len(prices) < 2:
        return None
    ordered = sorted(prices, key=lambda p: p.recorded_at)
    old_price = float(ordered[0].price_per_kg)
    new_price = float(ordered[-1].price_per_kg)
    if new_price > old_price:
        return "up"
    if new_price < old_price:
        return "down"
    return "stable"


def price_history_frame(prices: Iterable[MarketPrice]) -> pd.DataFrame:
    df = pd.DataFrame(
        [
            {
                "Recorded": p.recorded_at,
                "Market": p.market_name,
                "Price per kg": float(p.price_per_kg),
            }
            for p in prices
        ],
        columns=["Recorded", "Market", "Price per kg"],
    )
    return df.sort_values("Recorded").reset_index(drop=True)
