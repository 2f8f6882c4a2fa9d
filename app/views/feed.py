from __future__ import annotations

import asyncio

import streamlit as st

from components.event_table import render_feed, resolve_timezone
from components.narrative import render_tab_intro
from config import AppConfig
from data.connection import EventStore
from data.feed import EventFeed, Loading
from data.service import StoreResult

FEED_KEY = "event_feed"


def mount_feed(store: EventStore) -> EventFeed:
    """Return this session's feed, replacing it if the data source changed."""
    feed = st.session_state.get(FEED_KEY)
    if feed is not None and feed.store is store:
        return feed
    if feed is not None:
        feed.unmount()
    feed = EventFeed(store)
    st.session_state[FEED_KEY] = feed
    return feed


def remount_feed() -> None:
    feed = st.session_state.pop(FEED_KEY, None)
    if feed is not None:
        feed.unmount()


def render(cfg: AppConfig, opened: StoreResult, reload_requested: bool = False) -> None:
    render_tab_intro(
        persona="Persona: SOC analyst watching the honeypot fleet",
        question="Who is hitting our decoys right now, and which services are they going after?",
        context="A snapshot of every recorded event, in the order the store returns them. Use “Reload feed” to take a new snapshot.",
    )

    if opened.warning:
        st.warning(opened.warning)

    if reload_requested:
        remount_feed()

    feed = mount_feed(opened.store)
    if isinstance(feed.state, Loading):
        with st.spinner("Fetching attack feed…"):
            asyncio.run(feed.load())

    render_feed(feed.state, resolve_timezone(cfg.display_timezone))
    st.caption(f"Data source: **{opened.source}**")
