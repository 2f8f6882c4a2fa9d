from __future__ import annotations

import time

import streamlit as st

from components.narrative import render_callout, render_tab_intro
from config import AppConfig
from data.connection import DataSourceError
from data.mock_data import ACTIONS, SERVICES
from data.models import EventFields
from data.service import StoreResult, create_event
from views.feed import remount_feed


def render(cfg: AppConfig, opened: StoreResult) -> None:
    render_tab_intro(
        persona="Persona: Honeypot operator",
        question="Does a new event make it from the dashboard into the feed?",
        context=f"Writes one event to the <b>{opened.source}</b> store. The timestamp is set to now.",
    )

    if opened.warning:
        st.warning(opened.warning)

    with st.form("record_event", clear_on_submit=False):
        source_ip = st.text_input("Source IP", "203.0.113.5")
        c1, c2 = st.columns(2)
        service = c1.selectbox("Service", SERVICES, index=0)
        action = c2.selectbox("Action", sorted({a for acts in ACTIONS.values() for a in acts}))
        submitted = st.form_submit_button("Record event")

    if not submitted:
        render_callout(
            title="What happens",
            body="The event is appended to the collection and the feed is reloaded on its next view.",
        )
        return

    if not source_ip.strip():
        st.warning("Source IP is required.")
        return

    fields = EventFields(
        timestamp=int(time.time() * 1000),
        source_ip=source_ip.strip(),
        service=service,
        action=action,
    )
    try:
        event_id = create_event(opened.store, fields)
    except DataSourceError as e:
        st.error(f"Could not record event: {e}")
        return

    remount_feed()
    st.success(f"Recorded event `{event_id}`.")
