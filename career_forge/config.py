"""
Configuration for the CareerForge app.

Values come from .env (via python-dotenv) and then the environment.
Numeric values that fail to parse fall back to the defaults below.
"""

import os

from dotenv import load_dotenv

load_dotenv()


def _coerce_positive_int(value, default, minimum=1):
    try:
        if value is None:
            raise ValueError
        return max(minimum, int(value))
    except (ValueError, TypeError):
        return default


def _coerce_float(value, default, minimum=0.0, maximum=2.0):
    try:
        if value is None:
            raise ValueError
        return max(minimum, min(maximum, float(value)))
    except (ValueError, TypeError):
        return default


# Models (any OpenAI-compatible endpoint; OPENAI_BASE_URL is read by ChatOpenAI)
CHAT_MODEL = os.getenv("CAREER_FORGE_CHAT_MODEL", "gpt-4.1-mini")
REPORT_MODEL = os.getenv("CAREER_FORGE_REPORT_MODEL", "gpt-4.1")

CHAT_TEMPERATURE = _coerce_float(os.getenv("CAREER_FORGE_CHAT_TEMPERATURE"), 0.7)
REPORT_TEMPERATURE = _coerce_float(os.getenv("CAREER_FORGE_REPORT_TEMPERATURE"), 0.3)

# Grounded search (Serper.dev)
SERPER_API_KEY = os.getenv("SERPER_API_KEY")
SEARCH_RESULTS = _coerce_positive_int(os.getenv("CAREER_FORGE_SEARCH_RESULTS"), 10)
SEARCH_TIMEOUT = _coerce_positive_int(os.getenv("CAREER_FORGE_SEARCH_TIMEOUT"), 30)
