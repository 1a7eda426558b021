"""
alerts_panel.py — Unread Alerts Component
------------------------------------------

Renders unread alerts newest first. Used by the overview (limited list) and by
the alerts page (full list with a mark-as-read button per alert).
"""

from typing import Optional

import streamlit as st

from config.settings import READ_ONLY
from core.alerts import list_alerts, mark_alert_read
from db.db import SessionLocal
from tools.ui_tools import SEVERITY_ICONS, STATUS_COLORS, format_timestamp, run_mutation


def alerts_panel(limit: Optional[int] = None, acknowledge: bool = False):
    with SessionLocal() as db:
        alerts = list_alerts(db, unread_only=True, limit=limit)

    if not alerts:
        st.markdown("ℹ️ *No active alerts*")
        return

    for alert in alerts:
        with st.container(border=True):
            icon = SEVERITY_ICONS.get(alert.severity, "ℹ️")
            color = STATUS_COLORS.get(alert.severity, "gray")
            st.markdown(f"{icon} **{alert.title}** :{color}-badge[{alert.severity}]")
            st.markdown(alert.message)
            if alert.created_at:
                st.caption(format_timestamp(alert.created_at))

            if acknowledge and not READ_ONLY:
                if st.button("Mark as read", key=f"ack_{alert.id}"):
                    run_mutation(
                        lambda db, alert_id=alert.id: mark_alert_read(db, alert_id),
                        success="Alert marked as read",
                        failure="Failed to update alert",
                        rerun=True,
                    )
