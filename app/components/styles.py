from __future__ import annotations

import streamlit as st

from config import THEME


APP_TITLE = "Honeypot Attack Feed"

# Only the classes emitted by components/ are styled; everything else is stock Streamlit.
_CSS = """
<style>
.block-container{ padding-top: 1rem !important; }

.app-header, .metric-card, .tab-intro, .callout{
  background: {bg_card};
  border: 1px solid {border};
  border-radius: {radius}px;
  box-shadow: {shadow};
}
.app-header{ display:flex; align-items:center; justify-content:space-between; padding: 10px 14px; margin-bottom: 14px; }
.app-title{ font-size: 20px; font-weight: 700; color: {navy}; }
.app-subtitle{ font-size: 14px; color: {text_muted}; }

.pill{ display:inline-flex; align-items:center; gap:6px; border: 1px solid {border}; border-radius: 999px; padding: 4px 10px; font-size: 13px; font-weight: 600; }
.pill .dot{ width:8px; height:8px; border-radius:50%; background: {accent}; }
.pill.mock .dot{ background: {warning}; }

.metric-card{ padding: 12px 14px; }
.metric-label{ font-size: 13px; color: {text_muted}; }
.metric-value{ font-size: 26px; font-weight: 700; color: {text}; }

.tab-intro{ padding: 14px; margin-bottom: 14px; }
.tab-intro-persona{ font-size: 13px; font-weight: 600; color: {text_muted}; }
.tab-intro-question{ font-size: 18px; font-weight: 700; color: {navy}; margin: 4px 0; }
.tab-intro-context{ font-size: 14px; color: {text_muted}; }

.callout{ padding: 12px 14px; margin: 10px 0; border-left: 4px solid {navy}; }
.callout-title{ font-size: 14px; font-weight: 700; color: {navy}; }
.callout-body{ font-size: 14px; color: {text_muted}; }
</style>
"""


def apply_theme() -> None:
    st.set_page_config(
        page_title=APP_TITLE,
        page_icon="🍯",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    tokens = {
        "bg_card": THEME["bg_card"],
        "border": THEME["border_color"],
        "radius": THEME["radius_px"],
        "shadow": THEME["shadow"],
        "navy": THEME["navy_900"],
        "text": THEME["text_primary"],
        "text_muted": THEME["text_secondary"],
        "accent": THEME["accent_primary"],
        "warning": THEME["warning"],
    }
    css = _CSS
    # CSS braces rule out str.format, so substitute the placeholders one by one
    for name, value in tokens.items():
        css = css.replace("{" + name + "}", str(value))
    st.markdown(css, unsafe_allow_html=True)
