"""
Manager Plan / Fact — rolling six-month performance dashboard

Fetches planned vs. actual income and active-partner counts per manager
from a JSON feed and projects them onto a six-month window that wraps
around the calendar year.

To connect to Streamlit/Dash:
    Keep an AppState, apply state.with_payload(state, loaders.load_payload())
    once, and call dashboard.build_table_view(state) on every rerun. Use
    state.next_month / state.previous_month for the navigation buttons.

To read from another feed:
    Point config.API_URL at it. Any endpoint returning
    {"data": {"table": [...], "total": [...]}} is accepted; for offline
    work, simulator.generate_payload() returns the same shape.
"""
