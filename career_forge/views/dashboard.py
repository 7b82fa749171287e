"""Landing page with shortcuts to the three tools."""
import streamlit as st

from career_forge.graph.state import SharedState

_TOOLS = [
    ("Pathfinder", "🧭 Career Pathfinder", "Deep AI analysis of your profile to find your ideal career."),
    ("Resume", "📄 Resume Architect", "Build ATS-optimized resumes with generative AI enhancements."),
    ("Learn", "🎓 Skill Nexus", "Find real-time courses and docs using AI search grounding."),
]


def _go(view: str) -> None:
    st.session_state.view = view


def dashboard_page(app_state: SharedState) -> None:
    st.title("CareerForge AI")
    st.write(
        "Unlock your potential with an AI career counselor. Discover your path, "
        "master the skills, and build the perfect resume in minutes."
    )

    cols = st.columns(len(_TOOLS))
    for col, (view, label, blurb) in zip(cols, _TOOLS):
        with col:
            st.subheader(label)
            st.caption(blurb)
            st.button("Open", key=f"open_{view}", on_click=_go, args=(view,))
