from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any, Optional, Sequence
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import pandas as pd
import streamlit as st

from components.metrics import render_kpi_row, render_service_chart, summary_kpis
from data.feed import Failed, FeedState, Loaded
from data.models import HoneypotEvent

logger = logging.getLogger(__name__)

COLUMNS = ["ID", "Timestamp", "Source IP", "Service", "Action"]
MISSING = "—"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
# Shorter digit strings are more likely compact dates (20231114) than epoch milliseconds.
_EPOCH_MS_MIN_DIGITS = 10


def resolve_timezone(name: Optional[str]) -> Optional[tzinfo]:
    """None (or an unknown zone name) means the host's local zone."""
    if not name:
        return None
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("Unknown DISPLAY_TIMEZONE %r; showing timestamps in the host's local zone", name)
        return None


def _parse_string(s: str) -> Optional[datetime]:
    try:
        return datetime.fromisoformat(s.replace("Z", "+00:00"))
    except ValueError:
        pass
    digits = s[1:] if s.startswith("-") else s
    if not digits.isdigit():
        return None
    if len(digits) >= _EPOCH_MS_MIN_DIGITS:
        return _from_epoch_ms(int(s))
    try:
        return datetime.strptime(s, "%Y%m%d")
    except ValueError:
        return None


def _from_epoch_ms(value: float) -> Optional[datetime]:
    try:
        return _EPOCH + timedelta(milliseconds=value)
    except (OverflowError, ValueError):
        return None


def to_datetime(value: Any) -> Optional[datetime]:
    """
    Stored timestamp -> aware UTC datetime.
    Numbers are epoch milliseconds; naive datetimes and ISO strings without an offset are taken as UTC.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return _from_epoch_ms(value)
    if isinstance(value, str):
        value = _parse_string(value.strip()) if value.strip() else None
    if not isinstance(value, datetime):
        return None
    dt = value if value.tzinfo else value.replace(tzinfo=timezone.utc)
    try:
        return dt.astimezone(timezone.utc)
    except (OverflowError, ValueError):
        return None


def format_timestamp(value: Any, tz: Optional[tzinfo] = None) -> str:
    dt = to_datetime(value)
    if dt is None:
        return MISSING
    try:
        local = dt.astimezone(tz)
    except (OverflowError, ValueError):
        # instant is representable in UTC but not in the display zone
        return MISSING
    text = local.strftime("%Y-%m-%d %H:%M:%S")
    if local.microsecond:
        text += f".{local.microsecond // 1000:03d}"
    return f"{text} {local.strftime('%z')}"


def build_event_table(events: Sequence[HoneypotEvent], tz: Optional[tzinfo] = None) -> pd.DataFrame:
    """One row per event, in store order."""
    rows = [
        [e.id, format_timestamp(e.timestamp, tz), e.source_ip, e.service, e.action]
        for e in events
    ]
    return pd.DataFrame(rows, columns=COLUMNS)


def render_event_table(events: Sequence[HoneypotEvent], tz: Optional[tzinfo] = None) -> None:
    st.dataframe(build_event_table(events, tz), hide_index=True, use_container_width=True)


def render_feed(state: FeedState, tz: Optional[tzinfo] = None) -> None:
    if isinstance(state, Failed):
        st.error(f"Could not load the attack feed: {state.error}")
        render_event_table([], tz)
        return
    if not isinstance(state, Loaded):
        st.info("Loading attack feed…")
        return

    events = state.events
    render_kpi_row(summary_kpis(events))

    st.subheader("Live Attack Feed")
    render_event_table(events, tz)
    if not events:
        st.info("No honeypot events recorded yet.")
        return

    st.subheader("Events by service")
    render_service_chart(events)
