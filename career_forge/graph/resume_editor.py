# career_forge/graph/resume_editor.py
#
# Local edits to the resume document. No model calls here.

from typing import Iterable, List

from .state import EducationItem, ExperienceItem, ResumeData

EXPERIENCE_FIELDS = ("role", "company", "duration", "description")
EDUCATION_FIELDS = ("degree", "school", "year")
PERSONAL_FIELDS = ("full_name", "email", "phone", "summary")


def update_field(resume: ResumeData, field: str, value: str) -> ResumeData:
    if field not in PERSONAL_FIELDS:
        raise ValueError(f"Unknown resume field: {field}")
    setattr(resume, field, value)
    return resume


# --- Experience ---


def add_experience(resume: ResumeData) -> ExperienceItem:
    item = ExperienceItem()
    resume.experience.append(item)
    return item


def update_experience(resume: ResumeData, exp_id: str, field: str, value: str) -> ResumeData:
    if field not in EXPERIENCE_FIELDS:
        raise ValueError(f"Unknown experience field: {field}")
    for item in resume.experience:
        if item.id == exp_id:
            setattr(item, field, value)
    return resume


def remove_experience(resume: ResumeData, exp_id: str) -> ResumeData:
    resume.experience = [e for e in resume.experience if e.id != exp_id]
    return resume


# --- Education ---


def add_education(resume: ResumeData) -> EducationItem:
    item = EducationItem()
    resume.education.append(item)
    return item


def update_education(resume: ResumeData, edu_id: str, field: str, value: str) -> ResumeData:
    if field not in EDUCATION_FIELDS:
        raise ValueError(f"Unknown education field: {field}")
    for item in resume.education:
        if item.id == edu_id:
            setattr(item, field, value)
    return resume


def remove_education(resume: ResumeData, edu_id: str) -> ResumeData:
    resume.education = [e for e in resume.education if e.id != edu_id]
    return resume


# --- Skills ---


def merge_skills(existing: List[str], incoming: Iterable[str]) -> List[str]:
    """
    Append incoming skills that are not already present. Matching is exact:
    "python" and "Python" are different skills.
    """
    merged = list(existing)
    seen = set(merged)
    for skill in incoming:
        if skill in seen:
            continue
        seen.add(skill)
        merged.append(skill)
    return merged


def add_skill(resume: ResumeData, skill: str) -> ResumeData:
    skill = (skill or "").strip()
    if skill:
        resume.skills = merge_skills(resume.skills, [skill])
    return resume


def remove_skill(resume: ResumeData, skill: str) -> ResumeData:
    resume.skills = [s for s in resume.skills if s != skill]
    return resume


def build_skill_context(resume: ResumeData) -> str:
    lines = [f"{e.role} at {e.company}: {e.description}" for e in resume.experience]
    return f"Summary: {resume.summary}\n\nExperience:\n" + "\n".join(lines)
