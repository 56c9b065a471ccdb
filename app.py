"""
Manager Plan / Fact — Interactive Dashboard

Run with:  streamlit run app.py
"""

import html
import sys
from pathlib import Path

import streamlit as st
import plotly.graph_objects as go

sys.path.insert(0, str(Path(__file__).resolve().parent))

from plan_fact_dashboard.config import (
    API_URL,
    DASHBOARD_TITLE,
    EMPTY_CELL_LABEL,
    YEAR_OPTIONS,
)
from plan_fact_dashboard.loaders import load_payload, normalise_payload
from plan_fact_dashboard.simulator import generate_payload
from plan_fact_dashboard.state import (
    AppState,
    next_month,
    previous_month,
    select_year,
    with_payload,
)
from plan_fact_dashboard.dashboard import (
    Cell,
    Row,
    TableView,
    build_table_view,
    table_view_to_frame,
    window_income_series,
)

# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(
    page_title=DASHBOARD_TITLE,
    page_icon="📊",
    layout="wide",
    initial_sidebar_state="expanded",
)

PLAN_COLOR = "#3498db"
FACT_COLOR = "#2ecc71"
MUTED_COLOR = "#95a5a6"


# ---------------------------------------------------------------------------
# Data loading (cached: one fetch per application lifetime)
# ---------------------------------------------------------------------------
@st.cache_data
def load_feed(url: str):
    return load_payload(url)


@st.cache_data
def load_sample(year: int):
    return normalise_payload(generate_payload(year=year))


# ---------------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------------
st.sidebar.title(DASHBOARD_TITLE)
st.sidebar.markdown("Plan vs. fact by manager, six months at a time")
st.sidebar.divider()

use_sample = st.sidebar.toggle("Use sample data", value=False)

st.sidebar.divider()
st.sidebar.caption(f"Source: {'simulated payload' if use_sample else API_URL}")

source_key = "sample" if use_sample else "feed"
if st.session_state.get("source") != source_key:
    payload = load_sample(YEAR_OPTIONS[0]) if use_sample else load_feed(API_URL)
    st.session_state.app_state = with_payload(AppState(), payload)
    st.session_state.source = source_key


def apply(transition, *args) -> None:
    st.session_state.app_state = transition(st.session_state.app_state, *args)


# ---------------------------------------------------------------------------
# Helper: table HTML
# ---------------------------------------------------------------------------
_BORDER = "border:1px solid #e5e7eb; padding:6px 10px; text-align:left;"


def cell_html(cell: Cell) -> str:
    if cell.empty:
        return f"<td style='{_BORDER} color:{MUTED_COLOR};'>{EMPTY_CELL_LABEL}</td>"
    return (
        f"<td style='{_BORDER} font-size:12px;'>"
        f"<div style='display:grid; grid-template-columns:1fr 1fr; gap:12px;'>"
        f"<span>{cell.plan_income}</span><span>{cell.fact_income}</span>"
        f"<span>{cell.plan_partners}</span><span>{cell.fact_partners}</span>"
        f"</div></td>"
    )


def row_html(row: Row, first: str, second: str, bold: bool = False) -> str:
    weight = "700" if bold else "400"
    cells = "".join(cell_html(c) for c in row.cells)
    return (
        f"<tr><td style='{_BORDER} font-weight:{weight};'>{html.escape(row.label)}</td>"
        f"<td style='{_BORDER} font-size:12px; color:#666;'>{first}<br>{second}</td>"
        f"{cells}</tr>"
    )


def table_html(view: TableView) -> str:
    headers = "".join(
        f"<th style='{_BORDER} min-width:140px;'>{name}"
        f"<div style='display:grid; grid-template-columns:1fr 1fr; font-size:11px; color:#888;'>"
        f"<span>Plan</span><span>Fact</span></div></th>"
        for name in view.month_names
    )
    body = [row_html(view.total, "Total Income:", "Total Active Partners:", bold=True)]
    body += [row_html(r, "Income:", "Active partners:", bold=True) for r in view.managers]
    return (
        "<table style='width:100%; border-collapse:collapse; font-size:14px;'>"
        f"<thead><tr style='background:#eff6ff;'><th style='{_BORDER}'>Manager</th>"
        f"<th style='{_BORDER}'></th>{headers}</tr></thead>"
        f"<tbody>{''.join(body)}</tbody></table>"
    )


# ===========================================================================
# Controls
# ===========================================================================
state: AppState = st.session_state.app_state

col_year, _, col_prev, col_next, col_add = st.columns([2, 5, 1, 1, 2])

with col_year:
    selected_year = st.selectbox(
        "Year",
        YEAR_OPTIONS,
        index=YEAR_OPTIONS.index(state.year) if state.year in YEAR_OPTIONS else 0,
        format_func=lambda y: f"Year {y}",
        label_visibility="collapsed",
    )
    if selected_year != state.year:
        apply(select_year, selected_year)

with col_prev:
    st.button("<", on_click=apply, args=(previous_month,), use_container_width=True)
with col_next:
    st.button(">", on_click=apply, args=(next_month,), use_container_width=True)
with col_add:
    if st.button("+ Add plan", type="primary", use_container_width=True):
        st.toast("Adding plans is not available yet.")

# ===========================================================================
# Table
# ===========================================================================
view = build_table_view(st.session_state.app_state)

st.title(DASHBOARD_TITLE)
st.caption(f"{view.month_names[0]} – {view.month_names[-1]} · Year {view.year}")

if not view.managers:
    st.info("No manager data available.")

st.markdown(table_html(view), unsafe_allow_html=True)

st.download_button(
    "Download window (CSV)",
    data=table_view_to_frame(view).to_csv(index=False).encode("utf-8"),
    file_name=f"plan_fact_{view.year}_{view.month_names[0].lower()}.csv",
    mime="text/csv",
)

# ===========================================================================
# Aggregate income chart
# ===========================================================================
st.divider()
st.subheader("Total income — Plan vs Fact")

series = window_income_series(view)
if series[["plan_income", "fact_income"]].isna().all().all():
    st.info("No aggregate income in the visible months.")
else:
    fig = go.Figure()
    fig.add_trace(go.Bar(
        x=series["month"],
        y=series["plan_income"],
        name="Plan",
        marker_color=PLAN_COLOR,
        opacity=0.6,
    ))
    fig.add_trace(go.Bar(
        x=series["month"],
        y=series["fact_income"],
        name="Fact",
        marker_color=FACT_COLOR,
    ))
    fig.update_layout(
        barmode="group",
        height=350,
        yaxis_title="Income ($)",
        plot_bgcolor="rgba(0,0,0,0)",
        margin=dict(l=10, r=10, t=10, b=40),
    )
    st.plotly_chart(fig, use_container_width=True)
