"""Skill gap analysis: importance tier and learning resources for unmatched job skills."""

from models.schemas.enums import SkillImportance
from models.schemas.job_posting import JobPosting
from models.schemas.match_result import SkillGap
from services.skill_taxonomy import (
    HIGH_IMPORTANCE_SKILLS,
    MEDIUM_IMPORTANCE_SKILLS,
    contains_term,
    learning_resources_for,
    matches_any,
)


def skill_importance(skill: str, job_title: str, job_skills: list[str]) -> SkillImportance:
    """Decide how much a missing skill matters for this job.

    `skill` and `job_skills` are expected normalized; `job_skills` keeps the
    posting's declared order.
    """
    if contains_term(job_title.lower(), skill):
        return SkillImportance.HIGH
    if matches_any(skill, HIGH_IMPORTANCE_SKILLS):
        return SkillImportance.HIGH
    if matches_any(skill, MEDIUM_IMPORTANCE_SKILLS):
        return SkillImportance.MEDIUM

    try:
        position = job_skills.index(skill)
    except ValueError:
        return SkillImportance.LOW
    if position < 3:
        return SkillImportance.HIGH
    if position < 6:
        return SkillImportance.MEDIUM
    return SkillImportance.LOW


def analyze_gaps(missing_skills: list[str], job: JobPosting, job_skills: list[str]) -> list[SkillGap]:
    """Build a SkillGap for every missing skill, in the order given."""
    return [
        SkillGap(
            skill=skill,
            importance=skill_importance(skill, job.title, job_skills),
            learning_resources=learning_resources_for(skill),
        )
        for skill in missing_skills
    ]
