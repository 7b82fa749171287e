# career_forge/graph/pathfinder_agent.py

from typing import List

from . import llm
from .parsing import llm_text
from .report_agent import generate_career_report
from .state import AppLanguage, Message, PathfinderState

# ---------------------------------------------------------------------
# Tunables
# ---------------------------------------------------------------------
REPORT_MIN_MESSAGES = 4  # report button shows once the transcript is longer than this

GREETING = (
    "Hello! I'm your AI Career Architect. To find your perfect path, I need to "
    "know a bit about you. Shall we start with what subjects or activities you "
    "find most engaging?"
)
EMPTY_REPLY = "I didn't catch that."
APOLOGY = "I'm having trouble connecting right now."

_LANGUAGE_INSTRUCTIONS = {
    AppLanguage.ENGLISH: "Respond in English.",
    AppLanguage.HINGLISH: (
        "Respond in Hinglish (a natural, conversational blend of Hindi and "
        "English). Use Roman script for Hindi words. Keep the tone friendly "
        "and relatable."
    ),
    AppLanguage.HINDI: "Respond in Hindi (Devanagari script).",
}

_SWITCH_INSTRUCTIONS = {
    AppLanguage.ENGLISH: "Please switch to English for all future responses.",
    AppLanguage.HINGLISH: "Please switch to Hinglish (Hindi-English blend) for all future responses.",
    AppLanguage.HINDI: "Please switch to Hindi for all future responses.",
}

_COUNSELOR_PROMPT = llm.load_prompt("career_counselor.md")


def _get_llm():
    return llm.get_chat_model()


def build_system_prompt(language: AppLanguage) -> str:
    return _COUNSELOR_PROMPT.replace(
        "{language_instruction}", _LANGUAGE_INSTRUCTIONS[language]
    )


def new_pathfinder_state(language: AppLanguage) -> PathfinderState:
    """Fresh interview: greeting on screen, persona + language fixed for the session."""
    return PathfinderState(
        language=language,
        messages=[Message(role="assistant", text=GREETING)],
        llm_history=[
            {"role": "system", "content": build_system_prompt(language)},
            {"role": "assistant", "content": GREETING},
        ],
    )


def flatten_transcript(messages: List[Message]) -> str:
    return "\n".join(f"{m.role}: {m.text}" for m in messages)


def can_generate_report(state: PathfinderState) -> bool:
    return len(state.messages) > REPORT_MIN_MESSAGES and not state.is_analyzing


# ---------------------------------------------------------------------
# Nodes
# ---------------------------------------------------------------------


def chat_turn_node(state: PathfinderState) -> PathfinderState:
    """
    Send state.pending_input as the next user turn and append the reply.
    A failed call shows up as one apology turn; the chat simply continues.
    """
    text = (state.pending_input or "").strip()
    state.pending_input = None
    if not text:
        return state

    if state.is_typing or state.is_analyzing:
        print("[pathfinder_agent] Chat slot busy; dropping input.")
        return state

    state.messages.append(Message(role="user", text=text))
    state.llm_history.append({"role": "user", "content": text})
    state.is_typing = True

    try:
        resp = _get_llm().invoke(state.llm_history)
        reply = llm_text(resp).strip() or EMPTY_REPLY
        state.llm_history.append({"role": "assistant", "content": reply})
    except Exception as e:
        print("[pathfinder_agent] Chat error:", e)
        reply = APOLOGY
    finally:
        state.is_typing = False

    state.messages.append(Message(role="assistant", text=reply))
    return state


def switch_language_node(state: PathfinderState, language: AppLanguage) -> PathfinderState:
    """
    Tell the running chat to change language without restarting it.
    The instruction and its reply go to llm_history only.
    """
    if state.language == language:
        return state

    instruction = f"[System Instruction: {_SWITCH_INSTRUCTIONS[language]}]"
    state.llm_history.append({"role": "user", "content": instruction})
    state.language = language

    try:
        resp = _get_llm().invoke(state.llm_history)
        state.llm_history.append({"role": "assistant", "content": llm_text(resp)})
    except Exception as e:
        print("[pathfinder_agent] Failed to switch language:", e)

    return state


def career_report_node(state: PathfinderState) -> PathfinderState:
    """
    Synthesize the report from the whole transcript. New suggestions replace
    the old ones, and videos cached for the old ones are dropped.
    """
    if not can_generate_report(state):
        print(
            "[pathfinder_agent] Report not available yet "
            f"(messages={len(state.messages)}, analyzing={state.is_analyzing})"
        )
        return state

    state.is_analyzing = True
    try:
        history = flatten_transcript(state.messages)
        state.suggestions = generate_career_report(history, state.language)
    finally:
        state.is_analyzing = False

    state.video_resources = {}
    state.loading_videos = {}
    return state


def reset_report(state: PathfinderState) -> PathfinderState:
    """Back to the chat; the transcript is kept."""
    state.suggestions = []
    state.video_resources = {}
    state.loading_videos = {}
    return state
