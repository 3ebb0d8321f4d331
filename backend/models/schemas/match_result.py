"""Scoring output: one MatchResult per (profile, job) pair."""

from pydantic import BaseModel, Field, computed_field

from models.schemas.enums import MatchQuality, MatchType, SkillImportance
from services import quality


class MatchedSkill(BaseModel):
    """A job skill resolved against the candidate's skills."""
    skill: str  # normalized job skill
    candidate_skill: str
    match_type: MatchType
    similarity: float = Field(..., ge=0.0, le=1.0)


class SkillGap(BaseModel):
    """A job skill with no matching candidate skill."""
    skill: str
    importance: SkillImportance = SkillImportance.LOW
    current_level: int = 0
    required_level: int = 1
    learning_resources: list[str] = []


class CompatibilityFactors(BaseModel):
    """Per-factor points. Each value is bounded by the active weight profile's cap."""
    skills: int = Field(default=0, ge=0)
    experience: int = Field(default=0, ge=0)
    location: int = Field(default=0, ge=0)
    salary: int = Field(default=0, ge=0)
    education: int = Field(default=0, ge=0)
    availability: int = Field(default=0, ge=0)
    personality: int = Field(default=0, ge=0)
    career_progression: int = Field(default=0, ge=0)
    cultural_fit: int = Field(default=0, ge=0)

    def total(self) -> int:
        return sum(self.model_dump().values())


class MatchResult(BaseModel):
    job_id: str
    score: int = Field(..., ge=0, le=100)
    matched_skills: list[MatchedSkill] = []
    compatibility_factors: CompatibilityFactors = CompatibilityFactors()
    skill_gaps: list[SkillGap] = []
    distance_km: float | None = None  # set only when both sides have coordinates
    career_advice: str = ""
    reasons: list[str] = []

    @computed_field
    @property
    def match_quality(self) -> MatchQuality:
        return quality.classify_quality(self.score)
