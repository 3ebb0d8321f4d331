"""Pydantic contracts for the matching engine."""

from models.schemas.candidate_profile import (
    CandidateProfile,
    Coordinates,
    Education,
    WorkExperience,
)
from models.schemas.enums import Availability, MatchQuality, MatchType, SkillImportance
from models.schemas.job_posting import JobPosting
from models.schemas.match_result import (
    CompatibilityFactors,
    MatchedSkill,
    MatchResult,
    SkillGap,
)
from models.schemas.rank_options import RankOptions

__all__ = [
    "Availability",
    "CandidateProfile",
    "CompatibilityFactors",
    "Coordinates",
    "Education",
    "JobPosting",
    "MatchQuality",
    "MatchResult",
    "MatchType",
    "MatchedSkill",
    "RankOptions",
    "SkillGap",
    "SkillImportance",
    "WorkExperience",
]
