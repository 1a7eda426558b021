"""
market_ui.py — Market Prices
-----------------------------

Mandi price board: one card per produce with the average price per kg, the
price trend, the individual market entries and a small history chart.

Dependencies:
- Streamlit for UI
- plotly for the price history chart

"""

import plotly.express as px
import streamlit as st

from config.settings import CURRENCY_SYMBOL
from core.market import add_price, average_price, group_by_produce, list_prices, price_history_frame, price_trend
from core.schemas import NewMarketPrice
from db.db import SessionLocal
from tools.ui_tools import (
    format_timestamp,
    read_only_notice,
    run_mutation,
    show_page_error,
    show_pending_toast,
)

show_pending_toast()

st.subheader("Market Prices")
st.caption("Real-time mandi price information")

TREND_TEXT = {
    # Rising prices are bad news for buyers, hence red
    "up": ":red[📈 Price increasing]",
    "down": ":green[📉 Price decreasing]",
    "stable": ":gray[➖ Price stable]",
}

# --- Add Price Entry ---
with st.expander("➕ Add Price Entry", expanded=False):
    if not read_only_notice():
        with st.form("add_price", clear_on_submit=True):
            produce_name = st.text_input("Produce Name", placeholder="e.g., Tomatoes")
            price_per_kg = st.number_input(f"Price per kg ({CURRENCY_SYMBOL})", min_value=0.0, step=0.5,
                                           format="%.2f")
            market_name = st.text_input("Market Name", placeholder="e.g., Azadpur Mandi")
            location = st.text_input("Location", placeholder="e.g., Delhi")
            if st.form_submit_button("Add Price Entry", use_container_width=True):
                run_mutation(
                    lambda db: add_price(db, NewMarketPrice(
                        produce_name=produce_name,
                        price_per_kg=price_per_kg,
                        market_name=market_name,
                        location=location,
                    )),
                    success="Market price added successfully",
                    failure="Failed to add market price",
                )


try:
    with SessionLocal() as db:
        grouped = group_by_produce(list_prices(db))

    if not grouped:
        st.info("No market prices available. Add the first price entry above.")
        st.stop()

    for produce_name, prices in grouped.items():
        with st.container(border=True):
            title, avg = st.columns([3, 1])
            title.markdown(f"### {produce_name}")
            avg.metric("avg. per kg", f"{CURRENCY_SYMBOL}{average_price(prices):.2f}")

            trend = price_trend(prices)
            if trend:
                st.markdown(TREND_TEXT[trend])

            for price in prices:
                left, right = st.columns([3, 1])
                left.markdown(
                    f"**{price.market_name}**  \n"
                    f"📍 {price.location}  \n"
                    f":gray[{format_timestamp(price.recorded_at)}]"
                )
                right.markdown(f"**{CURRENCY_SYMBOL}{price.price_per_kg:.2f}**  \nper kg")

            if len(prices) > 1:
                with st.expander("📈 Price History"):
                    fig = px.line(price_history_frame(prices), x="Recorded", y="Price per kg",
                                  color="Market", markers=True)
                    fig.update_layout(height=260, margin=dict(l=0, r=0, t=10, b=0))
                    st.plotly_chart(fig, use_container_width=True, key=f"history_{produce_name}")

except Exception as e:
    show_page_error(e)
