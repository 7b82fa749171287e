# career_forge/rag/resources.py

from typing import Any, Dict, Iterable, List, Optional
from urllib.parse import urlparse

from career_forge.graph.state import AppLanguage, FinderState, LearningResource
from .tools.web_search import serper_search

MAX_VIDEOS = 3


def source_from_url(url: str) -> Optional[str]:
    """Hostname of the URL, or None if it does not parse as an absolute URL."""
    try:
        return urlparse(url).hostname
    except ValueError:
        return None


def dedupe_by_url(resources: Iterable[LearningResource]) -> List[LearningResource]:
    """Drop repeated URLs, keeping the first occurrence and the original order."""
    seen = set()
    out: List[LearningResource] = []
    for res in resources:
        if res.url in seen:
            continue
        seen.add(res.url)
        out.append(res)
    return out


def _learning_query(query: str, language: AppLanguage) -> str:
    if language in (AppLanguage.HINGLISH, AppLanguage.HINDI):
        return f"{query} course tutorial in Hindi OR Hinglish"
    return f"best online course tutorial documentation to learn {query}"


def _chunk_title_and_url(chunk: Dict[str, Any]):
    title = str(chunk.get("title") or "").strip()
    url = str(chunk.get("link") or "").strip()
    return title, url


def find_learning_resources(query: str, language: AppLanguage) -> List[LearningResource]:
    """
    Grounded search for courses, tutorials and docs.
    Every hit with both a title and a URL becomes a resource; the result is
    deduplicated by URL. Any failure yields [].
    """
    try:
        chunks = serper_search(_learning_query(query, language))
    except Exception as e:
        print("[resources] Search grounding failed:", e)
        return []

    resources: List[LearningResource] = []
    for chunk in chunks:
        title, url = _chunk_title_and_url(chunk)
        if not title or not url:
            continue
        source = source_from_url(url)
        if not source:
            print(f"[resources] Skipping hit without hostname: {url}")
            continue
        resources.append(
            LearningResource(
                title=title,
                url=url,
                source=source,
                description="Found via Google Search Grounding",
            )
        )

    return dedupe_by_url(resources)


def find_video_resources(query: str) -> List[LearningResource]:
    """Grounded search restricted to YouTube; at most MAX_VIDEOS results."""
    try:
        chunks = serper_search(f"site:youtube.com {query}")
    except Exception as e:
        print("[resources] Video search failed:", e)
        return []

    resources: List[LearningResource] = []
    for chunk in chunks:
        title, url = _chunk_title_and_url(chunk)
        if not title or "youtube.com" not in url:
            continue
        resources.append(
            LearningResource(
                title=title.replace(" - YouTube", ""),
                url=url,
                source="YouTube",
                description="Recommended Video",
            )
        )

    return dedupe_by_url(resources)[:MAX_VIDEOS]


def search_node(state: FinderState, language: AppLanguage) -> FinderState:
    """
    Run the finder for state.query. Results replace the previous fetch
    wholesale; has_searched lets the view show its empty state.
    """
    query = (state.query or "").strip()
    if not query:
        return state
    if state.loading:
        print("[resources] Search already in flight; ignoring.")
        return state

    state.loading = True
    try:
        state.resources = find_learning_resources(query, language)
    finally:
        state.loading = False
    state.has_searched = True
    return state
