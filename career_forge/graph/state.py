import uuid
from enum import Enum
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


def new_item_id() -> str:
    return uuid.uuid4().hex


class AppLanguage(str, Enum):
    ENGLISH = "English"
    HINGLISH = "Hinglish"
    HINDI = "Hindi"


class Message(BaseModel):
    role: Literal["user", "assistant"]
    text: str


class CareerSuggestion(BaseModel):
    """
    One career recommendation from the report. Field names on the wire are
    camelCase (matchScore, keySkills, videoSearchQueries).
    """
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    title: str
    match_score: float = Field(alias="matchScore")
    reasoning: str
    roadmap: List[str]
    key_skills: List[str] = Field(alias="keySkills")
    video_search_queries: List[str] = Field(alias="videoSearchQueries")

    @field_validator("match_score")
    @classmethod
    def _clamp_score(cls, v: float) -> float:
        return max(0.0, min(100.0, float(v)))

    def display_roadmap(self, limit: int = 3) -> List[str]:
        return self.roadmap[:limit]


class LearningResource(BaseModel):
    title: str
    url: str
    source: str
    description: Optional[str] = None


class ExperienceItem(BaseModel):
    id: str = Field(default_factory=new_item_id)
    role: str = ""
    company: str = ""
    duration: str = ""
    description: str = ""


class EducationItem(BaseModel):
    id: str = Field(default_factory=new_item_id)
    degree: str = ""
    school: str = ""
    year: str = ""


class ResumeData(BaseModel):
    full_name: str = ""
    email: str = ""
    phone: str = ""
    summary: str = ""
    skills: List[str] = []
    experience: List[ExperienceItem] = []
    education: List[EducationItem] = []


def sample_resume() -> ResumeData:
    """Starting document shown in the editor."""
    return ResumeData(
        full_name="Alex Rivera",
        email="alex.rivera@example.com",
        phone="(555) 123-4567",
        summary=(
            "Motivated professional looking for new opportunities to leverage "
            "skills in technology and problem solving."
        ),
        skills=["Communication", "Teamwork", "Project Management"],
        experience=[
            ExperienceItem(
                role="Junior Associate",
                company="TechCorp Inc.",
                duration="2021 - Present",
                description="Worked on various projects and helped the team achieve goals.",
            )
        ],
        education=[
            EducationItem(
                degree="B.S. Computer Science",
                school="University of Tech",
                year="2021",
            )
        ],
    )


class PathfinderState(BaseModel):
    """
    Chat interview + career report. `messages` is what the user sees,
    `llm_history` is what the model sees (it also carries the system prompt
    and out-of-band language instructions).
    """
    language: AppLanguage = AppLanguage.ENGLISH
    messages: List[Message] = []
    llm_history: List[Dict[str, str]] = []
    pending_input: Optional[str] = None
    is_typing: bool = False
    is_analyzing: bool = False
    suggestions: List[CareerSuggestion] = []
    video_resources: Dict[int, List[LearningResource]] = {}
    loading_videos: Dict[int, bool] = {}


class ResumeState(BaseModel):
    resume: ResumeData = Field(default_factory=sample_resume)
    # "summary" or "exp-<id>" while a rewrite is in flight
    loading_field: Optional[str] = None
    is_suggesting_skills: bool = False


class FinderState(BaseModel):
    query: str = ""
    resources: List[LearningResource] = []
    loading: bool = False
    has_searched: bool = False


class SharedState(BaseModel):
    """
    Everything the UI keeps for one browser session.
    """
    language: AppLanguage = AppLanguage.ENGLISH
    pathfinder: Optional[PathfinderState] = None
    resume: ResumeState = Field(default_factory=ResumeState)
    finder: FinderState = Field(default_factory=FinderState)
