"""
Career Pathfinder: the chat interview and, once requested, the career report.
"""
import streamlit as st

from career_forge.graph.graph_pathfinder import run_graph
from career_forge.graph.pathfinder_agent import can_generate_report, reset_report
from career_forge.graph.report_agent import load_videos_node
from career_forge.graph.state import CareerSuggestion, PathfinderState, SharedState


def _go_learn() -> None:
    st.session_state.view = "Learn"


def _render_videos(state: PathfinderState, idx: int, career: CareerSuggestion) -> None:
    st.markdown("**▶️ Recommended Videos**")

    videos = state.video_resources.get(idx)
    if videos is None:
        if st.button(
            "Load Video Suggestions",
            key=f"videos_{idx}",
            disabled=state.loading_videos.get(idx, False),
        ):
            with st.spinner("Searching YouTube..."):
                load_videos_node(state, idx)
            st.rerun()
        return

    if not videos:
        st.caption("_No videos found._")
        return

    for vid in videos:
        st.markdown(f"- [{vid.title}]({vid.url})")


def _render_report(app_state: SharedState) -> None:
    state = app_state.pathfinder

    head, back = st.columns([4, 1])
    with head:
        st.subheader("✨ Your Recommended Career Paths")
    with back:
        if st.button("Back to Chat"):
            reset_report(state)
            st.rerun()

    cols = st.columns(len(state.suggestions))
    for idx, (col, career) in enumerate(zip(cols, state.suggestions)):
        with col:
            with st.container(border=True):
                st.markdown(f"### {career.title}")
                st.markdown(f"**{career.match_score:.0f}% Match**")
                st.write(career.reasoning)

                st.markdown("**Roadmap**")
                for step in career.display_roadmap():
                    st.markdown(f"- {step}")

                if career.key_skills:
                    st.caption("Key skills: " + ", ".join(career.key_skills))

                _render_videos(state, idx, career)

                st.button(
                    "Find Resources",
                    key=f"resources_{idx}",
                    on_click=_go_learn,
                )


def _render_chat(app_state: SharedState) -> None:
    state = app_state.pathfinder

    head, action = st.columns([4, 1])
    with head:
        st.subheader("🤖 Pathfinder AI")
        st.caption(f"Speaking: {app_state.language.value}")
    with action:
        if can_generate_report(state):
            if st.button("✨ Generate Career Report", type="primary"):
                with st.spinner("Deeply analyzing your profile with advanced reasoning..."):
                    app_state.pathfinder = run_graph(
                        st.session_state.report_graph, state
                    )
                if not app_state.pathfinder.suggestions:
                    st.error("Could not generate a career report. Please try again.")
                else:
                    st.rerun()

    for msg in state.messages:
        with st.chat_message(msg.role):
            st.markdown(msg.text)

    user_text = st.chat_input(
        f"Type your answer in {app_state.language.value}...",
        disabled=state.is_analyzing,
    )
    if user_text:
        with st.chat_message("user"):
            st.markdown(user_text)
        state.pending_input = user_text
        with st.spinner("Thinking..."):
            app_state.pathfinder = run_graph(st.session_state.chat_graph, state)
        st.rerun()


def pathfinder_page(app_state: SharedState) -> None:
    st.title("🧭 Career Pathfinder")

    if app_state.pathfinder.suggestions:
        _render_report(app_state)
    else:
        _render_chat(app_state)
