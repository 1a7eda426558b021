"""
overview_ui.py — Dashboard Overview
------------------------------------

Landing view of the AgriLink dashboard:

- Headline cards: active storage units, produce batches, expiring stock, alerts
- Most recent unread alerts
- Quick actions jumping to the storage, produce and transport views

Dependencies:
- Streamlit for UI
- core.overview for the live counts

"""

import streamlit as st

from config.settings import ALERTS_LIMIT
from core.overview import overview_stats
from db.db import SessionLocal
from tools.alerts_panel import alerts_panel
from tools.ui_tools import show_page_error, show_pending_toast

show_pending_toast()

try:
    with SessionLocal() as db:
        stats = overview_stats(db)

    # --- Headline Cards ---
    c1, c2, c3, c4 = st.columns(4)
    with c1.container(border=True):
        st.metric("Active Storage Units", stats.active_storage_units)
        st.caption(f"{stats.total_storage_units} registered in total")
    with c2.container(border=True):
        st.metric("Produce Batches", stats.total_batches)
        st.caption(f"{stats.batches_in_storage} in storage, {stats.batches_in_transit} in transit")
    with c3.container(border=True):
        st.metric("Expiring Soon", stats.batches_expiring_soon)
        st.caption(f"{stats.batches_expired} past shelf life")
    with c4.container(border=True):
        st.metric("Active Alerts", stats.unread_alerts)
        sev = stats.alerts_by_severity
        st.caption(f"{sev.get('critical', 0)} critical, {sev.get('warning', 0)} warnings, {sev.get('info', 0)} info")

    left, right = st.columns(2)

    # --- Recent Alerts ---
    with left.container(border=True):
        st.markdown("#### ⚠️ Recent Alerts")
        alerts_panel(limit=ALERTS_LIMIT)

    # --- Quick Actions ---
    with right.container(border=True):
        st.markdown("#### 📈 Quick Actions")
        if st.button("➕ Add Storage Unit", type="primary", use_container_width=True):
            st.switch_page("app/storage_ui.py")
        if st.button("➕ Register Produce Batch", use_container_width=True):
            st.switch_page("app/produce_ui.py")
        if st.button("➕ Request Transport", use_container_width=True):
            st.switch_page("app/transport_ui.py")

except Exception as e:
    show_page_error(e)
