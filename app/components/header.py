from __future__ import annotations

import streamlit as st

SOURCE_LABELS = {"mock": "Mock data", "firestore": "Firestore"}


def render_header(title: str, subtitle: str, source: str) -> None:
    """Page title plus a pill naming the data source the feed is read from."""
    label = SOURCE_LABELS.get(source, source)
    st.markdown(
        f'<div class="app-header">'
        f'<div><div class="app-title">{title}</div><div class="app-subtitle">{subtitle}</div></div>'
        f'<div class="pill {source}"><span class="dot"></span>Data: {label}</div>'
        f"</div>",
        unsafe_allow_html=True,
    )
