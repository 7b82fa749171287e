import streamlit as st

st.set_page_config(page_title="CareerForge AI", page_icon="🧭", layout="wide")

from career_forge.graph.graph_pathfinder import build_chat_graph, build_report_graph
from career_forge.graph.pathfinder_agent import new_pathfinder_state, switch_language_node
from career_forge.graph.state import AppLanguage, SharedState
from career_forge.views import (
    dashboard_page,
    learning_hub_page,
    pathfinder_page,
    resume_page,
)

# ---------------------------------------------------------------------
# Session State Setup  (keep this as a SharedState object)
# ---------------------------------------------------------------------

if "app_state" not in st.session_state:
    # defaults are in graph/state.py
    st.session_state.app_state = SharedState()

if "chat_graph" not in st.session_state:
    st.session_state.chat_graph = build_chat_graph()

if "report_graph" not in st.session_state:
    st.session_state.report_graph = build_report_graph()

if "view" not in st.session_state:
    st.session_state.view = "Dashboard"

app_state: SharedState = st.session_state.app_state

if app_state.pathfinder is None:
    app_state.pathfinder = new_pathfinder_state(app_state.language)


# ---------------------------------------------------------------------
# Sidebar
# ---------------------------------------------------------------------

VIEWS = {
    "Dashboard": dashboard_page,
    "Pathfinder": pathfinder_page,
    "Resume": resume_page,
    "Learn": learning_hub_page,
}

st.sidebar.header("CareerForge")
st.sidebar.radio("Navigate", list(VIEWS.keys()), key="view")

st.sidebar.markdown("---")
selected = st.sidebar.radio(
    "🌐 Language",
    [lang.value for lang in AppLanguage],
    index=[lang.value for lang in AppLanguage].index(app_state.language.value),
)
language = AppLanguage(selected)

if language != app_state.language:
    app_state.language = language
    # The running interview is told to switch; it is not restarted.
    with st.spinner("Switching language..."):
        app_state.pathfinder = switch_language_node(app_state.pathfinder, language)

st.sidebar.markdown("---")
st.sidebar.caption("Powered by OpenAI-compatible chat models and Google Search grounding.")


# ---------------------------------------------------------------------
# Main content
# ---------------------------------------------------------------------

VIEWS[st.session_state.view](app_state)
