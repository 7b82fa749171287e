import pytest
from pydantic import ValidationError

from career_forge.graph.state import (
    CareerSuggestion,
    EducationItem,
    ExperienceItem,
    SharedState,
    sample_resume,
)


def _suggestion(**overrides):
    data = {
        "title": "Data Analyst",
        "matchScore": 88,
        "reasoning": "You enjoy puzzles and numbers.",
        "roadmap": ["Learn SQL", "Learn Python", "Build a portfolio", "Apply"],
        "keySkills": ["SQL", "Python"],
        "videoSearchQueries": ["Day in the life of a Data Analyst"],
    }
    data.update(overrides)
    return data


def test_suggestion_reads_camel_case_wire_names():
    s = CareerSuggestion.model_validate(_suggestion())
    assert s.match_score == 88
    assert s.key_skills == ["SQL", "Python"]
    assert s.video_search_queries == ["Day in the life of a Data Analyst"]


def test_match_score_clamped_to_percent():
    assert CareerSuggestion.model_validate(_suggestion(matchScore=140)).match_score == 100
    assert CareerSuggestion.model_validate(_suggestion(matchScore=-3)).match_score == 0


def test_missing_field_is_rejected():
    data = _suggestion()
    del data["roadmap"]
    with pytest.raises(ValidationError):
        CareerSuggestion.model_validate(data)


def test_display_roadmap_keeps_full_list():
    s = CareerSuggestion.model_validate(_suggestion())
    assert s.display_roadmap() == ["Learn SQL", "Learn Python", "Build a portfolio"]
    assert len(s.roadmap) == 4


def test_suggestion_is_immutable():
    s = CareerSuggestion.model_validate(_suggestion())
    with pytest.raises(ValidationError):
        s.title = "Something else"


def test_list_entries_get_distinct_ids():
    ids = {ExperienceItem().id for _ in range(50)} | {EducationItem().id for _ in range(50)}
    assert len(ids) == 100


def test_shared_state_starts_with_sample_resume():
    state = SharedState()
    assert state.resume.resume.full_name == "Alex Rivera"
    assert state.pathfinder is None
    assert state.finder.resources == []
    # a fresh sample each time
    assert sample_resume().experience[0].id != sample_resume().experience[0].id
