# career_forge/graph/resume_agent.py

import json
from typing import List, Literal

from . import llm
from .parsing import coerce_str_list, llm_text, parse_json_list
from .resume_editor import build_skill_context, merge_skills
from .state import AppLanguage, ResumeState

EnhanceKind = Literal["summary", "bullet"]

_INSTRUCTIONS = {
    "summary": (
        "Rewrite this professional summary to be impactful, concise, and "
        "keyword-rich for a resume."
    ),
    "bullet": (
        "Rewrite this experience description into strong, action-oriented "
        "bullet points quantifying achievements where possible."
    ),
}

_ENHANCE_PROMPT = llm.load_prompt("resume_enhance.md")
_SKILLS_PROMPT = llm.load_prompt("skill_suggestions.md")


def _get_llm():
    return llm.get_chat_model()


def _output_language(language: AppLanguage) -> str:
    # Resumes stay in English for Hinglish speakers too.
    if language == AppLanguage.HINDI:
        return "Output in formal Hindi."
    return "Output in Professional English."


def enhance_resume_text(text: str, kind: EnhanceKind, language: AppLanguage) -> str:
    """
    Rewrite one resume field. On an empty reply or any error the original
    text comes back unchanged.
    """
    payload = {
        "instruction": _INSTRUCTIONS[kind],
        "output_language": _output_language(language),
        "input_text": text,
    }

    messages = [
        {"role": "system", "content": _ENHANCE_PROMPT},
        {"role": "user", "content": json.dumps(payload, indent=2, ensure_ascii=False)},
    ]

    try:
        resp = _get_llm().invoke(messages)
        enhanced = llm_text(resp).strip()
    except Exception as e:
        print("[resume_agent] Resume enhancement failed:", e)
        return text

    return enhanced or text


def suggest_skills(context: str, language: AppLanguage) -> List[str]:
    """
    5-7 skills that would improve the resume, as plain strings.
    Malformed output or an error gives [].
    """
    messages = [
        {"role": "system", "content": _SKILLS_PROMPT},
        {"role": "user", "content": f"Context:\n{context}"},
    ]

    try:
        resp = _get_llm().invoke(messages)
        content = llm_text(resp)
    except Exception as e:
        print("[resume_agent] Skill suggestion failed:", e)
        return []

    items = parse_json_list(content, "resume_agent")
    if items is None:
        return []
    if not all(isinstance(x, str) for x in items):
        print("[resume_agent] Skill list contained non-string items:", items[:10])
        return []
    return coerce_str_list(items)


# ---------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------


def _claim_field(state: ResumeState, field_key: str) -> bool:
    if state.loading_field is not None:
        print(f"[resume_agent] '{state.loading_field}' is still being rewritten; ignoring '{field_key}'.")
        return False
    state.loading_field = field_key
    return True


def enhance_summary_node(state: ResumeState, language: AppLanguage) -> ResumeState:
    if not _claim_field(state, "summary"):
        return state
    try:
        state.resume.summary = enhance_resume_text(state.resume.summary, "summary", language)
    finally:
        state.loading_field = None
    return state


def enhance_experience_node(state: ResumeState, exp_id: str, language: AppLanguage) -> ResumeState:
    """Rewrite the description of one experience entry, looked up by id."""
    item = next((e for e in state.resume.experience if e.id == exp_id), None)
    if item is None:
        print(f"[resume_agent] No experience entry with id={exp_id}")
        return state

    if not _claim_field(state, f"exp-{exp_id}"):
        return state
    try:
        enhanced = enhance_resume_text(item.description, "bullet", language)
    finally:
        state.loading_field = None

    item.description = enhanced
    return state


def suggest_skills_node(state: ResumeState, language: AppLanguage) -> ResumeState:
    if state.is_suggesting_skills:
        print("[resume_agent] Skill suggestion already in flight; ignoring.")
        return state

    state.is_suggesting_skills = True
    try:
        suggestions = suggest_skills(build_skill_context(state.resume), language)
    finally:
        state.is_suggesting_skills = False

    if suggestions:
        state.resume.skills = merge_skills(state.resume.skills, suggestions)
    return state
