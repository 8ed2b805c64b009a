"""Personality Test - dashboard.

Streamlit entry point: pick a user, start a new assessment or open one of
the previous results.
"""

import logging

import streamlit as st
from dotenv import load_dotenv

load_dotenv()

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

from lib_assessment.app_config import load_settings
from lib_assessment.engine.session import start_new_session
from lib_assessment.personality_types import type_color
from lib_assessment.report_export import format_date
from lib_assessment.result_repository import ResultRepository


# ---------------------------------------------------------------------------
# Page config
# ---------------------------------------------------------------------------
st.set_page_config(page_title="Personality Test", page_icon="🧠", layout="wide")
st.title("🧠 Personality Test Dashboard")

_SETTINGS = load_settings()
_REPO = ResultRepository(_SETTINGS.results_path)


# ---------------------------------------------------------------------------
# Sidebar - user
# ---------------------------------------------------------------------------
with st.sidebar:
    st.header("👤 User")
    user_name = st.text_input(
        "Your name",
        value=st.session_state.get("user_name", ""),
        max_chars=80,
        help="Results are stored under this name",
    ).strip()
    st.session_state.user_name = user_name
    st.divider()
    st.caption(f"Results store: `{_SETTINGS.results_path}`")
    st.caption("Email reports: " + ("✅ enabled" if _SETTINGS.email_enabled else "❌ RESEND_API_KEY not set"))

if not user_name:
    st.info("Enter your name in the sidebar to get started.")
    st.stop()


# ---------------------------------------------------------------------------
# New assessment
# ---------------------------------------------------------------------------
st.subheader(f"Welcome back, {user_name}!")
st.write("Ready to explore your personality? Take a new assessment or review your previous results.")
if st.button("➕ Take New Personality Test", type="primary"):
    start_new_session(st.session_state)
    st.switch_page("pages/1_📝_Test.py")

st.divider()


# ---------------------------------------------------------------------------
# Previous results
# ---------------------------------------------------------------------------
st.subheader("📄 Your Assessment History")
try:
    results = _REPO.list_results_for_user(user_name)
except ValueError as exc:
    logger.warning("Could not load results for %s: %s", user_name, exc)
    st.error(f"Failed to load your results: {exc}")
    results = []

if not results:
    st.info("No assessments yet. Take your first personality test to see results here.")
else:
    for result in results:
        report = result.report
        with st.container(border=True):
            c1, c2, c3 = st.columns([3, 1, 1])
            with c1:
                st.markdown(
                    f"""<span style="background:{type_color(report.personality_type)};color:white;
                    padding:4px 10px;border-radius:8px;font-weight:600;">{report.personality_type}</span>""",
                    unsafe_allow_html=True,
                )
                st.caption(report.description)
            with c2:
                st.metric("Score", f"{report.overall_score}%")
                st.caption(f"📅 {format_date(result.created_at)}")
            with c3:
                if st.button("View Details", key=f"view_{result.id}", use_container_width=True):
                    st.session_state.selected_result_id = result.id
                    st.switch_page("pages/2_📊_Results.py")
