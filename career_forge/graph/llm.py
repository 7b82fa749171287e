# career_forge/graph/llm.py

from pathlib import Path
from typing import Dict

from langchain_openai import ChatOpenAI

from career_forge import config

PROMPTS_DIR = Path(__file__).resolve().parent.parent / "prompts"  # graph/ -> career_forge/

# Built on first use so importing the app never needs an API key.
_MODELS: Dict[str, ChatOpenAI] = {}


def get_chat_model() -> ChatOpenAI:
    """Fast model: counselor chat, resume rewrites, skill lists."""
    if "chat" not in _MODELS:
        _MODELS["chat"] = ChatOpenAI(
            model=config.CHAT_MODEL,
            temperature=config.CHAT_TEMPERATURE,
        )
    return _MODELS["chat"]


def get_report_model() -> ChatOpenAI:
    """Stronger model used for the career report synthesis."""
    if "report" not in _MODELS:
        _MODELS["report"] = ChatOpenAI(
            model=config.REPORT_MODEL,
            temperature=config.REPORT_TEMPERATURE,
        )
    return _MODELS["report"]


def load_prompt(name: str) -> str:
    return (PROMPTS_DIR / name).read_text(encoding="utf-8")
