from __future__ import annotations

from dataclasses import dataclass

import streamlit as st

from config import AppConfig


@dataclass(frozen=True)
class SidebarState:
    view: str
    use_mock: bool
    reload_requested: bool


NAV_ITEMS = [
    ("📡 Attack Feed", "feed"),
    ("📝 Record Event", "record"),
]


def render_sidebar(cfg: AppConfig) -> SidebarState:
    with st.sidebar:
        st.markdown("### 🍯 Honeypot Dashboard")
        st.caption("Attack events captured by deployed honeypots")

        labels = [l for l, _ in NAV_ITEMS]
        default_label = st.session_state.get("nav_label", labels[0])
        idx = labels.index(default_label) if default_label in labels else 0

        label = st.radio(
            "Nav",
            labels,
            index=idx,
            label_visibility="collapsed",
        )
        st.session_state["nav_label"] = label
        view = dict(NAV_ITEMS)[label]

        reload_requested = st.button("🔄 Reload feed", use_container_width=True)

        with st.expander("⚙️ Settings", expanded=False):
            use_mock = st.toggle(
                "Use mock data",
                value=st.session_state.get("use_mock", cfg.default_use_mock),
                help="When off, the app reads from Firestore. If the client can't be built, it falls back to mock data.",
            )
            st.session_state["use_mock"] = use_mock

            st.markdown("**Firestore target**")
            st.code(
                f"project:    {cfg.firebase_project_id or '(unset)'}\n"
                f"collection: {cfg.firestore_collection}\n"
                f"app id:     {cfg.firebase_app_id or '(unset)'}",
                language="text",
            )
    use_mock = st.session_state.get("use_mock", cfg.default_use_mock)

    return SidebarState(view=view, use_mock=use_mock, reload_requested=reload_requested)
