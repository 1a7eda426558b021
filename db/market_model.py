"""
market_model.py — Market Price ORM Model
-----------------------------------------

Table:
- `market_prices`: price-per-kilogram observations for a produce name at a named market

Dependencies:
- SQLAlchemy ORM

"""

from sqlalchemy import Column, DateTime, Float, String, Text

from db.db import Base, new_id, utcnow


class MarketPrice(Base):
    __tablename__ = "market_prices"

    id = Column(String(36), primary_key=True, default=new_id)
    produce_name = Column(Text, nullable=False, index=True)
    price_per_kg = Column(Float, nullable=False)
    market_name = Column(Text, nullable=False)
    location = Column(Text, nullable=False)
    recorded_at = Column(DateTime(timezone=True), default=utcnow, index=True)
