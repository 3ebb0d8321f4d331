from pydantic import BaseModel

from models.schemas.enums import MatchQuality
from models.schemas.match_result import CompatibilityFactors, MatchedSkill, SkillGap


class MatchStats(BaseModel):
    excellent: int = 0
    good: int = 0
    fair: int = 0
    poor: int = 0
    average_score: int = 0


class MatchOut(BaseModel):
    job_id: str
    score: int
    match_quality: MatchQuality
    matched_skills: list[MatchedSkill] = []
    reasons: list[str] = []
    distance_km: float | None = None
    distance_label: str | None = None
    compatibility_factors: CompatibilityFactors = CompatibilityFactors()
    # None when the caller opted out
    skill_gaps: list[SkillGap] | None = None
    career_advice: str | None = None


class MatchResponse(BaseModel):
    matches: list[MatchOut] = []
    total_matches: int = 0
    total_jobs: int = 0
    weight_profile: str = ""
    summary: str = ""
    stats: MatchStats = MatchStats()
