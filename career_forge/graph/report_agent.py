# career_forge/graph/report_agent.py

import json
from typing import List

from pydantic import ValidationError

from career_forge.rag.resources import find_video_resources
from . import llm
from .parsing import llm_text, parse_json_list
from .state import AppLanguage, CareerSuggestion, PathfinderState

# ---------------------------------------------------------------------
# Tunables
# ---------------------------------------------------------------------
SUGGESTION_COUNT = 3
VIDEO_QUERIES_PER_CAREER = 2

_REPORT_PROMPT = llm.load_prompt("career_report.md")


def _get_llm():
    return llm.get_report_model()


def _language_context(language: AppLanguage) -> str:
    if language == AppLanguage.HINGLISH:
        return "in Hinglish (or English where technical terms apply)"
    return f"in {language.value}"


def _build_suggestions(items: list) -> List[CareerSuggestion]:
    suggestions: List[CareerSuggestion] = []
    for item in items:
        if not isinstance(item, dict):
            raise ValueError(f"suggestion is not an object: {item!r}")
        suggestions.append(CareerSuggestion.model_validate(item))
    return suggestions


def generate_career_report(history: str, language: AppLanguage) -> List[CareerSuggestion]:
    """
    Ask the report model for career suggestions based on the flattened
    interview transcript.

    The reply must be a JSON array of complete suggestion objects. Invalid
    JSON, a missing field, or a transport error all give [].
    """
    payload = {
        "conversation_history": history,
        "suggestion_count": SUGGESTION_COUNT,
        "video_queries_per_career": VIDEO_QUERIES_PER_CAREER,
        "language_context": _language_context(language),
    }

    messages = [
        {"role": "system", "content": _REPORT_PROMPT},
        {"role": "user", "content": json.dumps(payload, indent=2, ensure_ascii=False)},
    ]

    try:
        resp = _get_llm().invoke(messages)
        content = llm_text(resp)
        print("[report_agent] Raw report LLM output (first 800 chars):")
        print(content[:800])
    except Exception as e:
        print("[report_agent] Error generating career report:", e)
        return []

    items = parse_json_list(content, "report_agent")
    if items is None:
        return []

    try:
        return _build_suggestions(items)
    except (ValidationError, ValueError) as e:
        print("[report_agent] Report did not match the suggestion schema:", e)
        return []


def load_videos_node(state: PathfinderState, index: int) -> PathfinderState:
    """
    Lazily fetch YouTube videos for suggestion `index` and cache them for the
    session. An empty result is cached too, so the panel shows "no videos".
    """
    if index < 0 or index >= len(state.suggestions):
        print(
            f"[report_agent] Invalid suggestion index={index}, "
            f"len(suggestions)={len(state.suggestions)}"
        )
        return state

    if state.loading_videos.get(index) or index in state.video_resources:
        return state

    career = state.suggestions[index]
    first_query = career.video_search_queries[0] if career.video_search_queries else ""
    query = first_query.strip() or career.title

    state.loading_videos[index] = True
    try:
        state.video_resources[index] = find_video_resources(query)
    finally:
        state.loading_videos[index] = False
    return state
