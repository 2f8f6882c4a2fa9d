"""
Routing only.

All view logic lives in app/views/.
All env reads happen ONLY in config.py.
"""

from __future__ import annotations

import os
import sys

# Make `app/` importable as a flat module path when running:
#   streamlit run app/app.py
APP_DIR = os.path.dirname(__file__)
REPO_ROOT = os.path.abspath(os.path.join(APP_DIR, ".."))
for p in [APP_DIR, REPO_ROOT]:
    if p not in sys.path:
        sys.path.insert(0, p)

import streamlit as st  # noqa: E402

from components.styles import apply_theme  # noqa: E402
from components.sidebar import render_sidebar  # noqa: E402
from components.header import render_header  # noqa: E402
from config import AppConfig, get_config  # noqa: E402
from data.service import StoreResult, open_event_store  # noqa: E402
from logging_config import setup_logging  # noqa: E402

from views import feed, record  # noqa: E402


@st.cache_resource(show_spinner=False)
def _event_store(_cfg: AppConfig, use_mock: bool) -> StoreResult:
    # One store (and Firestore client) per process and data source, shared across sessions.
    # Config is read from the environment once per process, so it is left out of the cache key.
    return open_event_store(_cfg, use_mock)


def main() -> None:
    apply_theme()
    cfg = get_config()
    setup_logging(cfg)
    state = render_sidebar(cfg)
    opened = _event_store(cfg, state.use_mock)

    render_header(
        title="ZecX Honeypot Dashboard",
        subtitle="Attack events captured by deployed honeypots",
        source=opened.source,
    )

    # Routing only
    if state.view == "feed":
        feed.render(cfg, opened, reload_requested=state.reload_requested)
    elif state.view == "record":
        record.render(cfg, opened)
    else:
        st.error("Unknown view")


if __name__ == "__main__":
    main()
