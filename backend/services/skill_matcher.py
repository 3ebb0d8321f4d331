"""Resolve job skills against a candidate's skills.

Each job skill gets at most one match, picked by priority:
    1. exact     (case-insensitive equality)       similarity 1.0
    2. partial   (either string contains the other) similarity 0.7
    3. semantic  (shared curated synonym group)     similarity 0.6
Anything left over is a skill gap.
"""

import logging
import re
from typing import Iterable

from models.schemas.enums import MatchType
from models.schemas.match_result import MatchedSkill
from models.schemas.skills_comparison import SkillsComparison
from services.skill_taxonomy import skill_groups

logger = logging.getLogger(__name__)

SIMILARITY: dict[MatchType, float] = {
    MatchType.EXACT: 1.0,
    MatchType.PARTIAL: 0.7,
    MatchType.SEMANTIC: 0.6,
}


def normalize_skill(skill: str) -> str:
    """Normalize a skill string for comparison."""
    return re.sub(r"\s+", " ", skill.strip().lower())


def normalize_skills(skills: Iterable[str]) -> list[str]:
    """Lower-case, drop blanks, dedupe while keeping first-seen order."""
    seen: dict[str, None] = {}
    for skill in skills:
        norm = normalize_skill(skill)
        if norm:
            seen.setdefault(norm, None)
    return list(seen)


def _best_match(job_skill: str, candidate_skills: list[str]) -> MatchedSkill | None:
    if job_skill in candidate_skills:
        return MatchedSkill(
            skill=job_skill, candidate_skill=job_skill,
            match_type=MatchType.EXACT, similarity=SIMILARITY[MatchType.EXACT],
        )

    for cand in candidate_skills:
        if cand in job_skill or job_skill in cand:
            return MatchedSkill(
                skill=job_skill, candidate_skill=cand,
                match_type=MatchType.PARTIAL, similarity=SIMILARITY[MatchType.PARTIAL],
            )

    job_groups = skill_groups(job_skill)
    if job_groups:
        for cand in candidate_skills:
            if job_groups & skill_groups(cand):
                return MatchedSkill(
                    skill=job_skill, candidate_skill=cand,
                    match_type=MatchType.SEMANTIC, similarity=SIMILARITY[MatchType.SEMANTIC],
                )
    return None


def compare_skills(candidate_skills: Iterable[str], job_skills: Iterable[str]) -> SkillsComparison:
    """Match every job skill against the candidate's skills."""
    candidate = normalize_skills(candidate_skills)
    job = normalize_skills(job_skills)

    matched: list[MatchedSkill] = []
    missing: list[str] = []
    for job_skill in job:
        match = _best_match(job_skill, candidate)
        if match is None:
            missing.append(job_skill)
        else:
            matched.append(match)

    logger.debug(
        "Skills: %d job skills, %d matched, %d missing",
        len(job), len(matched), len(missing),
    )
    return SkillsComparison(job_skills=job, matched_skills=matched, missing_skills=missing)
