from __future__ import annotations

from typing import Optional

import streamlit as st


def _card(css_class: str, parts: list[tuple[str, Optional[str]]]) -> None:
    body = "".join(f'<div class="{cls}">{text}</div>' for cls, text in parts if text)
    st.markdown(f'<div class="{css_class}">{body}</div>', unsafe_allow_html=True)


def render_tab_intro(persona: str, question: str, context: Optional[str] = None) -> None:
    """Who the view is for, the question it answers, and optional context."""
    _card(
        "tab-intro",
        [("tab-intro-persona", persona), ("tab-intro-question", question), ("tab-intro-context", context)],
    )


def render_callout(title: str, body: str) -> None:
    _card("callout", [("callout-title", title), ("callout-body", body)])
