import json

from career_forge.graph import report_agent
from career_forge.graph.report_agent import generate_career_report, load_videos_node
from career_forge.graph.state import (
    AppLanguage,
    CareerSuggestion,
    LearningResource,
    PathfinderState,
)


def _item(title, queries=None):
    return {
        "title": title,
        "matchScore": 80,
        "reasoning": f"{title} suits you.",
        "roadmap": ["Step 1", "Step 2", "Step 3", "Step 4", "Step 5"],
        "keySkills": ["Communication"],
        "videoSearchQueries": ["%s career overview" % title] if queries is None else queries,
    }


def test_three_well_formed_suggestions(fake_llm):
    fake_llm.queue(json.dumps([_item("UX Designer"), _item("Data Analyst"), _item("Teacher")]))

    result = generate_career_report("user: I like drawing", AppLanguage.ENGLISH)

    assert [s.title for s in result] == ["UX Designer", "Data Analyst", "Teacher"]
    assert all(isinstance(s, CareerSuggestion) for s in result)


def test_json_wrapped_in_prose_is_recovered(fake_llm):
    fake_llm.queue("Here you go:\n```json\n" + json.dumps([_item("Nurse")]) + "\n```")

    result = generate_career_report("history", AppLanguage.ENGLISH)

    assert len(result) == 1
    assert result[0].title == "Nurse"


def test_invalid_json_gives_empty_list(fake_llm):
    fake_llm.queue("[{not json")
    assert generate_career_report("history", AppLanguage.ENGLISH) == []


def test_missing_required_field_gives_empty_list(fake_llm):
    broken = _item("Chef")
    del broken["keySkills"]
    fake_llm.queue(json.dumps([_item("Baker"), broken]))

    assert generate_career_report("history", AppLanguage.ENGLISH) == []


def test_non_object_items_give_empty_list(fake_llm):
    fake_llm.queue(json.dumps(["Chef", "Baker"]))
    assert generate_career_report("history", AppLanguage.ENGLISH) == []


def test_object_instead_of_array_gives_empty_list(fake_llm):
    fake_llm.queue(json.dumps(_item("Pilot")))
    assert generate_career_report("history", AppLanguage.ENGLISH) == []


def test_empty_reply_gives_empty_list(fake_llm):
    fake_llm.queue("")
    assert generate_career_report("history", AppLanguage.ENGLISH) == []


def test_transport_error_gives_empty_list(fake_llm):
    fake_llm.queue(ConnectionError("boom"))
    assert generate_career_report("history", AppLanguage.ENGLISH) == []


def test_payload_carries_history_and_language(fake_llm):
    fake_llm.queue("[]")

    generate_career_report("user: hi\nassistant: hello", AppLanguage.HINGLISH)

    system, user = fake_llm.calls[0]
    assert system["role"] == "system"
    payload = json.loads(user["content"])
    assert payload["conversation_history"] == "user: hi\nassistant: hello"
    assert payload["language_context"] == "in Hinglish (or English where technical terms apply)"
    assert payload["suggestion_count"] == 3


def test_language_context_for_hindi():
    assert report_agent._language_context(AppLanguage.HINDI) == "in Hindi"


# --- videos ---


def _state_with(*suggestions):
    return PathfinderState(
        suggestions=[CareerSuggestion.model_validate(s) for s in suggestions]
    )


def test_videos_loaded_with_first_query_and_cached(monkeypatch):
    calls = []
    video = LearningResource(title="Intro", url="https://www.youtube.com/watch?v=1", source="YouTube")

    def fake_find(query):
        calls.append(query)
        return [video]

    monkeypatch.setattr(report_agent, "find_video_resources", fake_find)
    state = _state_with(_item("Architect", ["architect day in the life", "second"]))

    load_videos_node(state, 0)
    load_videos_node(state, 0)

    assert calls == ["architect day in the life"]
    assert state.video_resources[0] == [video]
    assert state.loading_videos[0] is False


def test_videos_fall_back_to_title(monkeypatch):
    calls = []
    monkeypatch.setattr(report_agent, "find_video_resources", lambda q: calls.append(q) or [])
    state = _state_with(_item("Geologist", []))

    load_videos_node(state, 0)

    assert calls == ["Geologist"]
    # an empty result is still cached
    assert state.video_resources == {0: []}


def test_videos_skip_while_loading(monkeypatch):
    monkeypatch.setattr(report_agent, "find_video_resources", lambda q: 1 / 0)
    state = _state_with(_item("Vet"))
    state.loading_videos[0] = True

    load_videos_node(state, 0)

    assert 0 not in state.video_resources


def test_videos_bad_index_is_noop(monkeypatch):
    monkeypatch.setattr(report_agent, "find_video_resources", lambda q: 1 / 0)
    state = _state_with(_item("Vet"))

    load_videos_node(state, 5)

    assert state.video_resources == {}
