from pydantic import BaseModel, Field

from config import settings
from models.schemas.candidate_profile import CandidateProfile
from models.schemas.job_posting import JobPosting


class MatchOptionsIn(BaseModel):
    min_score: int = Field(default=settings.default_min_score, ge=0, le=100)
    max_distance_km: float | None = Field(default=settings.default_max_distance_km, gt=0)
    sort_by_distance: bool = False
    limit: int | None = Field(default=settings.default_limit, ge=0)


class MatchRequest(BaseModel):
    profile: CandidateProfile
    jobs: list[JobPosting] = Field(..., max_length=settings.max_jobs_per_request)
    options: MatchOptionsIn = MatchOptionsIn()
    weight_profile: str | None = Field(default=None, description="enhanced | basic")
    include_skill_gaps: bool = True
    include_career_advice: bool = True


class ScoreRequest(BaseModel):
    profile: CandidateProfile
    job: JobPosting
    weight_profile: str | None = None
