from typing import Any, Dict, List, Optional

import requests

from career_forge import config

SERPER_URL = "https://google.serper.dev/search"


def serper_search(query: str, k: Optional[int] = None) -> List[Dict[str, Any]]:
    """
    Web search via Serper.dev (Google Search API).
    Returns the grounding chunks for the query: a list of {title, link, snippet}.
    """
    if not config.SERPER_API_KEY:
        raise RuntimeError("SERPER_API_KEY is not set in .env")

    payload = {"q": query, "num": k or config.SEARCH_RESULTS}
    headers = {
        "X-API-KEY": config.SERPER_API_KEY,
        "Content-Type": "application/json",
    }

    resp = requests.post(
        SERPER_URL, headers=headers, json=payload, timeout=config.SEARCH_TIMEOUT
    )
    resp.raise_for_status()
    data = resp.json()

    results = []
    for item in (data.get("organic") or []):
        link = item.get("link")
        if not link:
            continue
        results.append(
            {
                "title": item.get("title", ""),
                "link": link,
                "snippet": item.get("snippet", ""),
            }
        )
    return results
