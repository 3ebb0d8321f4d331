"""Score engine: one candidate profile against one job posting.

Flow:
    profile + job
      ├─ compare_skills()          → SkillsComparison
      │     └─ analyze_gaps()      → list[SkillGap]
      ├─ distance_km()             → km, when both sides have coordinates
      ├─ years_of_experience()     → total years
      ├─ nine factor scorers       → CompatibilityFactors (each capped)
      │     └─ sum, clamp [0, 100] → score
      └─ build_career_advice()     → advice text
                    ↓
                MatchResult (match_quality derived from score)
"""

import logging
from datetime import datetime

from config import settings
from models.schemas.candidate_profile import CandidateProfile
from models.schemas.job_posting import JobPosting
from models.schemas.match_result import CompatibilityFactors, MatchResult
from services.career_advisor import build_career_advice
from services.experience import years_of_experience
from services.geo import distance_km
from services.pipeline import factors
from services.pipeline.weights import WeightProfile, get_weight_profile
from services.skill_gap import analyze_gaps
from services.skill_matcher import compare_skills

logger = logging.getLogger(__name__)


def resolve_weights(weights: WeightProfile | str | None) -> WeightProfile:
    """Accept a profile, a profile name, or None for the configured default."""
    if weights is None:
        return get_weight_profile(settings.weight_profile)
    if isinstance(weights, str):
        return get_weight_profile(weights)
    return weights


def score_one(
    profile: CandidateProfile,
    job: JobPosting,
    *,
    weights: WeightProfile | str | None = None,
    now: datetime | None = None,
) -> MatchResult:
    """Score a single (profile, job) pair. Total over optional fields; never raises on missing data."""
    weights = resolve_weights(weights)
    now = now or datetime.now()

    # --- Skills and gaps ---
    comparison = compare_skills(profile.skills, job.skills)
    skill_gaps = analyze_gaps(comparison.missing_skills, job, comparison.job_skills)

    # --- Distance ---
    distance = None
    if profile.coordinates is not None and job.coordinates is not None:
        distance = distance_km(profile.coordinates, job.coordinates)

    years = years_of_experience(profile.work_experience, now)

    # --- Factors ---
    scored = {
        "skills": factors.skills_factor(comparison, weights.skills),
        "experience": factors.experience_factor(years, job.title, weights.experience),
        "location": factors.location_factor(profile, job, distance, weights.location),
        "salary": factors.salary_factor(profile, job, weights.salary),
        "education": factors.education_factor(profile, weights.education),
        "availability": factors.availability_factor(profile, weights.availability),
        "personality": factors.personality_factor(profile, weights.personality),
        "career_progression": factors.career_progression_factor(profile, job, weights.career_progression),
        "cultural_fit": factors.cultural_fit_factor(profile, weights.cultural_fit),
    }
    compatibility = CompatibilityFactors(**{name: fs.points for name, fs in scored.items()})
    reasons = [fs.reason for fs in scored.values() if fs.reason]

    score = max(0, min(100, compatibility.total()))
    advice = build_career_advice(score, skill_gaps, years)

    logger.debug("Scored job %s: %d (%s profile)", job.id, score, weights.name)

    return MatchResult(
        job_id=job.id,
        score=score,
        matched_skills=comparison.matched_skills,
        compatibility_factors=compatibility,
        skill_gaps=skill_gaps,
        distance_km=distance,
        career_advice=advice,
        reasons=reasons,
    )
