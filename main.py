"""
main.py — Streamlit Multi-Page Navigation Controller
-----------------------------------------------------

This script initializes the AgriLink farm-to-fork dashboard and provides
config-driven page navigation.

Features:
✅ Supports both flat and grouped navigation
✅ Loads pages from `.streamlit/pages.toml` (flat) or `pages_sections.toml` (grouped)
✅ Renders the views as tabs along the top of the page
✅ Configures logging and creates missing tables on start-up

Navigation and layout logic are driven by `st_pages` extension.

Dependencies:
- streamlit
- st_pages
"""

import logging

import streamlit as st
from st_pages import add_page_title, get_nav_from_toml

from config.settings import APP_MODE, ENVIRONMENT, LOG_LEVEL, PROJECT_ROOT
from db.db import init_db

logging.basicConfig(
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@st.cache_resource
def _init_db_once():
    init_db()
    logging.info("Database ready (env=%s, mode=%s)", ENVIRONMENT, APP_MODE)


# --- Configure the main Streamlit app window ---
st.set_page_config(
    page_title="AgriLink — Smart Farm-to-Fork Platform",
    page_icon="🌿",
    layout="wide",
)

_init_db_once()

# --- Header ---
title, badge = st.columns([5, 1], vertical_alignment="center")
with title:
    st.markdown("## 🌿 AgriLink")
    st.caption("Smart Farm-to-Fork Platform")
with badge:
    st.badge("Demo" if APP_MODE.lower() == "demo" else "Live Monitoring", color="green")

# --- Sidebar toggle to choose between flat pages or grouped sections ---
sections = st.sidebar.toggle(
    "Sections",
    value=False,
    key="use_sections"
)

# --- Load navigation config from the appropriate TOML file ---
nav = get_nav_from_toml(
    str(PROJECT_ROOT / ".streamlit" / ("pages_sections.toml" if sections else "pages.toml"))
)

# --- Create the tab bar ---
pg = st.navigation(nav, position="top")

# --- Automatically display page title from TOML definition ---
add_page_title(pg)

# --- Run the selected page ---
pg.run()
