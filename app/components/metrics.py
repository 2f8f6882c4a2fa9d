from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import pandas as pd
import plotly.express as px
import streamlit as st

from config import THEME
from data.models import HoneypotEvent

# placeholder for events with no service recorded
UNKNOWN_SERVICE = "(unknown)"


@dataclass(frozen=True)
class Kpi:
    label: str
    value: str


def summary_kpis(events: Sequence[HoneypotEvent]) -> list[Kpi]:
    return [
        Kpi("Events", f"{len(events):,}"),
        Kpi("Unique source IPs", f"{len({e.source_ip for e in events}):,}"),
        Kpi("Services targeted", f"{len({e.service for e in events}):,}"),
    ]


def events_by_service(events: Sequence[HoneypotEvent]) -> pd.DataFrame:
    """Event count and distinct attacker count per service, busiest first."""
    df = pd.DataFrame(
        {
            "service": [e.service or UNKNOWN_SERVICE for e in events],
            "source_ip": [e.source_ip for e in events],
        }
    )
    if df.empty:
        return pd.DataFrame(columns=["service", "events", "attackers"])
    return (
        df.groupby("service", as_index=False)
        .agg(events=("source_ip", "size"), attackers=("source_ip", "nunique"))
        .sort_values(["events", "service"], ascending=[False, True])
        .reset_index(drop=True)
    )


def render_kpi_row(kpis: list[Kpi]) -> None:
    for col, kpi in zip(st.columns(len(kpis)), kpis):
        col.markdown(
            f'<div class="metric-card"><div class="metric-label">{kpi.label}</div>'
            f'<div class="metric-value">{kpi.value}</div></div>',
            unsafe_allow_html=True,
        )


def render_service_chart(events: Sequence[HoneypotEvent]) -> None:
    by_service = events_by_service(events)
    # horizontal bars read top-down, so the busiest service goes last
    fig = px.bar(
        by_service.iloc[::-1],
        x="events",
        y="service",
        orientation="h",
        hover_data={"attackers": True},
        labels={"events": "Events", "service": "Service", "attackers": "Distinct source IPs"},
        color_discrete_sequence=[THEME["accent_primary"]],
    )
    fig.update_layout(
        margin=dict(l=10, r=10, t=10, b=10),
        height=max(220, 36 * len(by_service)),
        paper_bgcolor=THEME["bg_card"],
        plot_bgcolor=THEME["bg_card"],
        font=dict(color=THEME["text_primary"]),
    )
    fig.update_xaxes(gridcolor=THEME["grid"], rangemode="tozero")
    st.plotly_chart(fig, use_container_width=True)
