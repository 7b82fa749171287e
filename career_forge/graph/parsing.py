# career_forge/graph/parsing.py

import json
from typing import Any, List, Optional


def llm_text(resp: Any) -> str:
    """Pull the text out of a chat model response."""
    content = getattr(resp, "content", resp)
    if content is None:
        return ""
    return content if isinstance(content, str) else str(content)


def parse_json_list(content: str, tag: str) -> Optional[List[Any]]:
    """
    Parse model output as a JSON array.

    Tries the whole string first, then the slice between the first "[" and
    the last "]" (models like to wrap JSON in prose or code fences).
    Returns None when no list can be recovered.
    """
    content = (content or "").strip()
    if not content:
        print(f"[{tag}] Empty LLM response")
        return None

    # 1) Direct JSON
    try:
        data = json.loads(content)
        if isinstance(data, list):
            return data
    except json.JSONDecodeError:
        pass

    # 2) Slice [ ... ]
    start = content.find("[")
    end = content.rfind("]") + 1
    if 0 <= start < end:
        try:
            data = json.loads(content[start:end])
            if isinstance(data, list):
                return data
        except json.JSONDecodeError:
            pass

    print(f"[{tag}] Failed to parse JSON list from LLM output, raw content:")
    print(content[:800])
    return None


def coerce_str_list(x: Any) -> List[str]:
    if x is None:
        return []
    if isinstance(x, list):
        out: List[str] = []
        for item in x:
            s = str(item).strip()
            if s:
                out.append(s)
        return out
    s = str(x).strip()
    return [s] if s else []
