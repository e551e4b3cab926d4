"""
OOP Practice Trainer - Main App

Streamlit UI for topic-based object-oriented programming practice.
"""

import logging

import streamlit as st

from app.router import PAGES
from app.state import ensure_session_state
from core.constants import LOG_FORMAT, LOG_LEVEL


# ---- Page Setup ----

st.set_page_config(
    page_title="OOP Practice Trainer",
    page_icon="☕",
    layout="centered"
)

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)


# ---- Session State Initialization ----

ensure_session_state()


# ---- Main App ----

def main():
    """Main app entry point."""
    tabs = st.tabs([page.title for page in PAGES])
    for tab, page in zip(tabs, PAGES):
        with tab:
            page.render()


if __name__ == "__main__":
    main()
