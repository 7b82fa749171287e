from types import SimpleNamespace

import pytest

from career_forge.graph import pathfinder_agent, report_agent, resume_agent


class FakeChatModel:
    """
    Stands in for ChatOpenAI. Each invoke() pops the next scripted reply;
    an Exception instance is raised instead of returned.
    """

    def __init__(self, replies=None):
        self.replies = list(replies or [])
        self.calls = []

    def queue(self, *replies):
        self.replies.extend(replies)

    def invoke(self, messages):
        self.calls.append([dict(m) for m in messages])
        reply = self.replies.pop(0) if self.replies else ""
        if isinstance(reply, Exception):
            raise reply
        return SimpleNamespace(content=reply)


@pytest.fixture
def fake_llm(monkeypatch):
    model = FakeChatModel()
    for module in (pathfinder_agent, report_agent, resume_agent):
        monkeypatch.setattr(module, "_get_llm", lambda: model)
    return model


@pytest.fixture
def fake_search(monkeypatch):
    """Replace the Serper call; tests set .hits or .error."""
    from career_forge.rag import resources

    stub = SimpleNamespace(hits=[], error=None, queries=[])

    def _search(query, k=None):
        stub.queries.append(query)
        if stub.error is not None:
            raise stub.error
        return list(stub.hits)

    monkeypatch.setattr(resources, "serper_search", _search)
    return stub
