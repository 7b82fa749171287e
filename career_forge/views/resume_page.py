"""
Resume Architect: editor on the left, live preview on the right.

Widgets keep their own values in st.session_state, so every edit goes
through an on_change callback that copies the widget value into the
ResumeData model, and every AI rewrite writes the new text back into the
widget key before the next render.
"""
import streamlit as st

from career_forge.graph import resume_editor
from career_forge.graph.resume_agent import (
    enhance_experience_node,
    enhance_summary_node,
    suggest_skills_node,
)
from career_forge.graph.state import ResumeData, ResumeState, SharedState

_PERSONAL_LABELS = {
    "full_name": "Full Name",
    "email": "Email",
    "phone": "Phone",
}


def _bound_text(label, widget_key, value, setter, area=False):
    if widget_key not in st.session_state:
        st.session_state[widget_key] = value
    widget = st.text_area if area else st.text_input
    widget(
        label,
        key=widget_key,
        on_change=lambda: setter(st.session_state[widget_key]),
    )


# --- callbacks (run before the script, so they may touch widget keys) ---


def _enhance_summary(state: ResumeState, app_state: SharedState) -> None:
    enhance_summary_node(state, app_state.language)
    st.session_state["resume_summary"] = state.resume.summary


def _enhance_experience(state: ResumeState, app_state: SharedState, exp_id: str) -> None:
    enhance_experience_node(state, exp_id, app_state.language)
    for item in state.resume.experience:
        if item.id == exp_id:
            st.session_state[f"exp_{exp_id}_description"] = item.description


def _suggest_skills(state: ResumeState, app_state: SharedState) -> None:
    suggest_skills_node(state, app_state.language)


def _add_skill(resume: ResumeData) -> None:
    resume_editor.add_skill(resume, st.session_state.get("skill_input", ""))
    st.session_state["skill_input"] = ""


# --- editor sections ---


def _personal_section(state: ResumeState, app_state: SharedState) -> None:
    resume = state.resume
    st.subheader("👤 Personal Info")
    for field, label in _PERSONAL_LABELS.items():
        _bound_text(
            label,
            f"resume_{field}",
            getattr(resume, field),
            lambda v, f=field: resume_editor.update_field(resume, f, v),
        )

    _bound_text(
        "Professional Summary",
        "resume_summary",
        resume.summary,
        lambda v: resume_editor.update_field(resume, "summary", v),
        area=True,
    )
    st.button(
        "✨ Enhance with AI" if state.loading_field != "summary" else "Enhancing...",
        key="enhance_summary",
        disabled=state.loading_field is not None,
        on_click=_enhance_summary,
        args=(state, app_state),
    )


def _experience_section(state: ResumeState, app_state: SharedState) -> None:
    resume = state.resume
    st.subheader("💼 Experience")

    for item in list(resume.experience):
        with st.container(border=True):
            for field in ("role", "company", "duration"):
                _bound_text(
                    field.capitalize(),
                    f"exp_{item.id}_{field}",
                    getattr(item, field),
                    lambda v, i=item.id, f=field: resume_editor.update_experience(resume, i, f, v),
                )
            _bound_text(
                "Description",
                f"exp_{item.id}_description",
                item.description,
                lambda v, i=item.id: resume_editor.update_experience(resume, i, "description", v),
                area=True,
            )

            left, right = st.columns(2)
            with left:
                st.button(
                    "✨ Enhance",
                    key=f"enhance_{item.id}",
                    disabled=state.loading_field is not None,
                    on_click=_enhance_experience,
                    args=(state, app_state, item.id),
                )
            with right:
                st.button(
                    "🗑️ Remove",
                    key=f"remove_exp_{item.id}",
                    on_click=resume_editor.remove_experience,
                    args=(resume, item.id),
                )

    st.button("➕ Add Experience", on_click=resume_editor.add_experience, args=(resume,))


def _education_section(state: ResumeState) -> None:
    resume = state.resume
    st.subheader("🎓 Education")

    for item in list(resume.education):
        with st.container(border=True):
            for field in ("degree", "school", "year"):
                _bound_text(
                    field.capitalize(),
                    f"edu_{item.id}_{field}",
                    getattr(item, field),
                    lambda v, i=item.id, f=field: resume_editor.update_education(resume, i, f, v),
                )
            st.button(
                "🗑️ Remove",
                key=f"remove_edu_{item.id}",
                on_click=resume_editor.remove_education,
                args=(resume, item.id),
            )

    st.button("➕ Add Education", on_click=resume_editor.add_education, args=(resume,))


def _skills_section(state: ResumeState, app_state: SharedState) -> None:
    resume = state.resume
    st.subheader("🛠️ Skills")

    st.text_input("Add a skill", key="skill_input", on_change=_add_skill, args=(resume,))

    for skill in list(resume.skills):
        st.button(
            f"✕ {skill}",
            key=f"skill_{skill}",
            on_click=resume_editor.remove_skill,
            args=(resume, skill),
        )

    st.button(
        "✨ Suggest Skills" if not state.is_suggesting_skills else "Thinking...",
        disabled=state.is_suggesting_skills,
        on_click=_suggest_skills,
        args=(state, app_state),
    )


def _preview(resume: ResumeData) -> None:
    with st.container(border=True):
        st.markdown(f"## {resume.full_name or 'Your Name'}")
        st.caption(" | ".join(x for x in (resume.email, resume.phone) if x))

        if resume.summary:
            st.markdown("#### Professional Summary")
            st.write(resume.summary)

        if resume.experience:
            st.markdown("#### Experience")
            for item in resume.experience:
                st.markdown(f"**{item.role}**, {item.company}  \n_{item.duration}_")
                st.write(item.description)

        if resume.education:
            st.markdown("#### Education")
            for item in resume.education:
                st.markdown(f"**{item.degree}**, {item.school} ({item.year})")

        if resume.skills:
            st.markdown("#### Skills")
            st.write(" • ".join(resume.skills))


def resume_page(app_state: SharedState) -> None:
    state = app_state.resume

    st.title("📄 Resume Architect")

    editor, preview = st.columns(2)
    with editor:
        _personal_section(state, app_state)
        _experience_section(state, app_state)
        _education_section(state)
        _skills_section(state, app_state)
    with preview:
        _preview(state.resume)
