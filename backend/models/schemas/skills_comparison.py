"""Skill matcher output: how each job skill resolved against the candidate."""

from pydantic import BaseModel

from models.schemas.match_result import MatchedSkill


class SkillsComparison(BaseModel):
    """Structured output of the skill matcher.

    Every normalized job skill lands in exactly one of `matched_skills`
    or `missing_skills`.
    """
    job_skills: list[str] = []  # normalized, deduplicated, declared order
    matched_skills: list[MatchedSkill] = []
    missing_skills: list[str] = []  # declared order

    @property
    def weighted_coverage(self) -> float:
        """Similarity-weighted share of job skills covered, 0.0-1.0."""
        if not self.job_skills:
            return 0.0
        return sum(m.similarity for m in self.matched_skills) / len(self.job_skills)
