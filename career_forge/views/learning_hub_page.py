"""
Skill Nexus: search-grounded learning resources.
"""
import streamlit as st

from career_forge.graph.state import SharedState
from career_forge.rag.resources import search_node


def learning_hub_page(app_state: SharedState) -> None:
    finder = app_state.finder

    st.title("🎓 Skill Nexus")
    st.write("Discover top-rated courses and documentation tailored to your goal.")
    st.caption(f"Searching in: {app_state.language.value}")

    with st.form("resource_search"):
        query = st.text_input(
            f"What do you want to learn? (Type in {app_state.language.value})",
            value=finder.query,
        )
        submitted = st.form_submit_button("Search", disabled=finder.loading)

    if submitted:
        finder.query = query
        with st.spinner("Searching the web..."):
            search_node(finder, app_state.language)

    if not finder.resources:
        if finder.has_searched:
            st.info("No resources found. Try a different topic.")
        else:
            st.info("📚 Enter a topic above to start learning.")
        return

    cols = st.columns(2)
    for i, res in enumerate(finder.resources):
        with cols[i % 2]:
            with st.container(border=True):
                st.markdown(f"**[{res.title}]({res.url})**")
                st.caption(res.source)
                if res.description:
                    st.write(res.description)
