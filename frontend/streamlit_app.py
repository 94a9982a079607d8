"""
Streamlit frontend for the Advising Assistant.

Talks to the FastAPI service (ADVISING_API_URL, default http://localhost:8000):
loads a course file, shows the sorted course list, and looks up one course.
"""

import sys
from pathlib import Path

import requests
import streamlit as st

sys.path.insert(0, str(Path(__file__).parent.parent))

from catalog.config import SETTINGS

API_URL = SETTINGS.api_url

st.set_page_config(page_title="Advising Assistant", layout="centered")
st.title("ABCU Advising Assistance")

st.markdown(
    """
### Quick start
1. Start backend API in another terminal: `python app/app.py`
2. Load a course file (leave blank for the server default)
3. Browse the sorted list or look up a course number such as *CSCI200*
"""
)


def _call(method: str, path: str, **kwargs) -> dict | None:
    """Call the API; render the error and return None on failure."""
    try:
        resp = requests.request(method, f"{API_URL}{path}", timeout=10, **kwargs)
    except requests.exceptions.ConnectionError:
        st.error("Cannot reach the API. Start it with: python app/app.py")
        return None
    if not resp.ok:
        st.warning(resp.json().get("detail", f"API error {resp.status_code}"))
        return None
    return resp.json()


# ---------------------------------------------------------------------------
# Load
# ---------------------------------------------------------------------------

with st.form("load"):
    path = st.text_input("Course data file", placeholder=str(SETTINGS.courses_file))
    if st.form_submit_button("Load"):
        result = _call("POST", "/load", json={"path": path.strip() or None})
        if result:
            msg = f"Loaded {result['loaded']} course(s) from {result['source']}"
            if result["skipped"]:
                msg += f" ({result['skipped']} line(s) skipped)"
            st.success(msg)


# ---------------------------------------------------------------------------
# List
# ---------------------------------------------------------------------------

if st.button("Show all courses"):
    listing = _call("GET", "/courses")
    if listing:
        st.subheader(f"Course list ({listing['total']})")
        st.dataframe(
            [{"Number": c["number"], "Title": c["title"]} for c in listing["courses"]],
            use_container_width=True,
            hide_index=True,
        )


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------

number = st.text_input("Course number", placeholder="e.g. CSCI200")
if st.button("Look up"):
    detail = _call("GET", f"/courses/{requests.utils.quote(number.strip() or ' ')}")
    if detail:
        st.subheader(f"{detail['number']}: {detail['title']}")
        if not detail["has_prereqs"]:
            st.info("Prerequisites: None")
        for p in detail["prereqs"]:
            if p["resolved"]:
                st.markdown(f"- **{p['number']}**: {p['title']}")
            else:
                st.markdown(f"- **{p['number']}** (title not found in file)")
