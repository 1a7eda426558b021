"""
alerts_ui.py — Alerts Inbox
----------------------------

Full list of unread alerts raised by storage units and produce batches, newest
first, with a "Mark as read" button per alert.

Dependencies:
- Streamlit for UI
- tools.alerts_panel for the shared alert list

"""

import streamlit as st

from tools.alerts_panel import alerts_panel
from tools.ui_tools import show_page_error, show_pending_toast

show_pending_toast()

st.subheader("Alerts")
st.caption("Unread notifications from storage units and produce batches")

try:
    alerts_panel(acknowledge=True)
except Exception as e:
    show_page_error(e)
